"""
Kit rules tests.

Loading, fail-fast validation, environment overrides and YAML-declared
variant schemas.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from glowkit.components.variants import resolve
from glowkit.domain.errors import ConfigurationError, InvalidVariantValue, KitRulesError
from glowkit.rules import (
    ENV_NAME_ENV,
    RULES_PATH_ENV,
    KitRules,
    build_schemas,
    configure_logging,
    default_rules,
    dev_warn,
    load_kit_rules,
    parse_kit_rules,
    rules_from_environment,
)


class FakeEnvironment:
    """In-memory environment for testing."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = values or {}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)


VALID_RULES = """
schema_version: "1.0"
cascade:
  defaults:
    size: sm
diagnostics:
  dev_warnings: false
  log_level: DEBUG
"""


class TestLoadKitRules:
    """Fail-fast loading."""

    def test_project_rules_file_is_valid(self, project_rules: KitRules) -> None:
        assert project_rules.schema_version == "1.0"
        assert project_rules.cascade.defaults == {}
        assert "Badge" in project_rules.schemas

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(VALID_RULES)
        rules = load_kit_rules(path)
        assert rules.cascade.defaults == {"size": "sm"}
        assert rules.diagnostics.dev_warnings is False
        assert rules.diagnostics.log_level == "DEBUG"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_kit_rules(tmp_path / "absent.yaml")

    def test_markdown_fenced_yaml(self) -> None:
        content = f"# Kit rules\n\nSome prose.\n\n```yaml{VALID_RULES}```\n\nMore prose.\n"
        assert parse_kit_rules(content).cascade.defaults == {"size": "sm"}

    def test_invalid_yaml(self) -> None:
        with pytest.raises(KitRulesError, match="Invalid YAML"):
            parse_kit_rules("cascade: [unclosed")

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(KitRulesError, match="validation failed"):
            parse_kit_rules('schema_version: "1.0"\nthemes: {}\n')

    def test_wrong_schema_version(self) -> None:
        with pytest.raises(KitRulesError):
            parse_kit_rules('schema_version: "2.0"\n')

    def test_rules_error_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_kit_rules("diagnostics: {log_level: LOUD}")

    def test_empty_content_gives_defaults(self) -> None:
        assert parse_kit_rules("") == default_rules()


class TestRulesFromEnvironment:
    """Environment overrides."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text(VALID_RULES)
        rules = rules_from_environment(FakeEnvironment({RULES_PATH_ENV: str(path)}))
        assert rules.cascade.defaults == {"size": "sm"}

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        env = FakeEnvironment({RULES_PATH_ENV: str(tmp_path / "nope.yaml")})
        with pytest.raises(FileNotFoundError):
            rules_from_environment(env)

    def test_defaults_when_no_file(self, tmp_path: Path) -> None:
        assert rules_from_environment(FakeEnvironment(), base_dir=tmp_path) == default_rules()

    def test_file_in_base_dir(self, tmp_path: Path) -> None:
        (tmp_path / "glowkit_rules.yaml").write_text(VALID_RULES)
        rules = rules_from_environment(FakeEnvironment(), base_dir=tmp_path)
        assert rules.diagnostics.log_level == "DEBUG"

    def test_production_disables_dev_warnings(self, tmp_path: Path) -> None:
        env = FakeEnvironment({ENV_NAME_ENV: "production"})
        rules = rules_from_environment(env, base_dir=tmp_path)
        assert rules.diagnostics.dev_warnings is False


class TestBuildSchemas:
    """YAML-declared schemas become engine schemas."""

    def test_badge_schema(self, project_rules: KitRules) -> None:
        badge = build_schemas(project_rules)["Badge"]
        assert badge.name == "Badge"
        assert badge.axes == ("size", "tone")
        assert resolve(badge).axes == {"size": "md", "tone": "neutral"}

    def test_compound_from_yaml(self, project_rules: KitRules) -> None:
        badge = build_schemas(project_rules)["Badge"]
        assert "font-semibold" in resolve(badge, {"size": "lg", "tone": "destructive"}).tokens
        assert "font-semibold" not in resolve(badge, {"size": "sm", "tone": "destructive"}).tokens

    def test_boolean_yaml_keys(self) -> None:
        rules = parse_kit_rules(
            """
schemas:
  Field:
    variants:
      error:
        true: border-destructive
        false: ""
    defaults:
      error: false
"""
        )
        field_schema = build_schemas(rules)["Field"]
        assert resolve(field_schema, {"error": True}).tokens == ("border-destructive",)

    def test_bad_default_in_yaml(self) -> None:
        rules = parse_kit_rules(
            """
schemas:
  Broken:
    variants:
      size: {sm: a, md: b}
    defaults:
      size: xl
"""
        )
        with pytest.raises(InvalidVariantValue):
            build_schemas(rules)


class TestDevWarn:
    """Developer diagnostics."""

    def test_warns_when_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("glowkit.test")
        with caplog.at_level(logging.WARNING, logger="glowkit.test"):
            dev_warn(default_rules(), logger, "missing %s", "label")
        assert "missing label" in caplog.text

    def test_silent_when_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        rules = KitRules.model_validate({"diagnostics": {"dev_warnings": False}})
        logger = logging.getLogger("glowkit.test")
        with caplog.at_level(logging.WARNING, logger="glowkit.test"):
            dev_warn(rules, logger, "missing label")
        assert caplog.text == ""


class TestConfigureLogging:
    """Logging setup from rules."""

    def test_applies_configured_level(self) -> None:
        rules = KitRules.model_validate({"diagnostics": {"log_level": "DEBUG"}})
        with patch("glowkit.rules.diagnostics.logging.basicConfig") as basic_config:
            configure_logging(rules)
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
