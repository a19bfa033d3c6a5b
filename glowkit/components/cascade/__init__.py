"""
Cascade component - Inherited configuration values (e.g. size) for subtrees.
"""

from .component import CascadeStore
from .models import CascadeScope, ScopeHandle

__all__ = [
    "CascadeScope",
    "CascadeStore",
    "ScopeHandle",
]
