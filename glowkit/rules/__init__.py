"""
Kit rules - YAML configuration validated with pydantic.
"""

from .diagnostics import configure_logging, dev_warn
from .environment import EnvironmentPort, OsEnvironmentAdapter, default_environment
from .loader import (
    DEFAULT_RULES_PATH,
    ENV_NAME_ENV,
    RULES_PATH_ENV,
    build_schemas,
    default_rules,
    load_kit_rules,
    parse_kit_rules,
    rules_from_environment,
)
from .models import (
    CascadeRules,
    CompoundRuleModel,
    DiagnosticsRules,
    KitRules,
    SchemaRule,
)

__all__ = [
    # Loading
    "load_kit_rules",
    "parse_kit_rules",
    "rules_from_environment",
    "default_rules",
    "build_schemas",
    # Diagnostics
    "configure_logging",
    "dev_warn",
    # Environment
    "EnvironmentPort",
    "OsEnvironmentAdapter",
    "default_environment",
    # Models
    "KitRules",
    "CascadeRules",
    "DiagnosticsRules",
    "SchemaRule",
    "CompoundRuleModel",
    # Constants
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
    "ENV_NAME_ENV",
]
