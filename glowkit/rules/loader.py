"""
Kit rules loader - Load and validate glowkit_rules.yaml.

Fail-fast: a rules file that exists but does not parse or validate halts
startup with KitRulesError. A missing file is only tolerated when the path
was not requested explicitly (built-in defaults apply).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from glowkit.components.variants import VariantSchema, define_variants
from glowkit.domain.errors import KitRulesError

from .environment import EnvironmentPort, default_environment
from .models import KitRules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "glowkit_rules.yaml"
RULES_PATH_ENV = "GLOWKIT_RULES_PATH"
ENV_NAME_ENV = "GLOWKIT_ENV"


def _strip_markdown_fences(content: str) -> str:
    """Return the first ```yaml block if present, otherwise the whole content."""
    yaml_lines: list[str] = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def default_rules() -> KitRules:
    """Built-in rules used when no rules file is present."""
    return KitRules()


def parse_kit_rules(content: str) -> KitRules:
    """
    Parse and validate rules from YAML text.

    Raises:
        KitRulesError: If YAML is invalid or the schema check fails.
    """
    try:
        data: Any = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise KitRulesError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        return default_rules()

    try:
        return KitRules.model_validate(data)
    except ValidationError as e:
        raise KitRulesError(f"Rules validation failed:\n{e}") from e


def load_kit_rules(path: Path) -> KitRules:
    """
    Load and validate a rules file.

    Raises:
        FileNotFoundError: If the file is missing.
        KitRulesError: If YAML or schema validation fails.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    return parse_kit_rules(path.read_text())


def rules_from_environment(
    env: EnvironmentPort | None = None,
    base_dir: Path | None = None,
) -> KitRules:
    """
    Resolve kit rules using environment overrides.

    - GLOWKIT_RULES_PATH selects the file; it must exist when set.
    - Without it, glowkit_rules.yaml in ``base_dir`` (default: cwd) is used
      if present, else the built-in defaults.
    - GLOWKIT_ENV=production turns developer warnings off.
    """
    env = env or default_environment
    explicit = env.get(RULES_PATH_ENV)

    if explicit:
        rules = load_kit_rules(Path(explicit))
    else:
        candidate = (base_dir or Path.cwd()) / DEFAULT_RULES_PATH
        if candidate.exists():
            rules = load_kit_rules(candidate)
        else:
            logger.debug("No rules file at %s, using built-in defaults", candidate)
            rules = default_rules()

    if env.get(ENV_NAME_ENV) == "production" and rules.diagnostics.dev_warnings:
        diagnostics = rules.diagnostics.model_copy(update={"dev_warnings": False})
        rules = rules.model_copy(update={"diagnostics": diagnostics})

    return rules


def build_schemas(rules: KitRules) -> dict[str, VariantSchema]:
    """
    Build engine schemas from the YAML ``schemas`` section.

    Raises:
        InvalidVariantValue: If a declared default or compound predicate does
            not match the declared axes.
    """
    schemas: dict[str, VariantSchema] = {}
    for name, rule in rules.schemas.items():
        schemas[name] = define_variants(
            rule.base,
            variants=rule.variants,
            compound=[{**c.when, "class_name": c.class_name} for c in rule.compound],
            defaults=rule.defaults,
            name=name,
        )
    return schemas
