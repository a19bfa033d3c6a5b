from pathlib import Path

import pytest

from glowkit.components.adapter import RenderContext
from glowkit.rules import KitRules, load_kit_rules
from glowkit.ui import create_render_context

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules() -> KitRules:
    """
    Rules loaded from the real glowkit_rules.yaml at the project root.
    """
    rules_path = PROJECT_ROOT / "glowkit_rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_kit_rules(rules_path)


@pytest.fixture
def ctx(project_rules: KitRules) -> RenderContext:
    """Root render context with developer warnings on."""
    return create_render_context(project_rules)


@pytest.fixture
def quiet_ctx() -> RenderContext:
    """Root render context with developer warnings off."""
    rules = KitRules.model_validate({"diagnostics": {"dev_warnings": False}})
    return create_render_context(rules)
