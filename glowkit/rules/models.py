"""
Kit rules models - pydantic schema for glowkit_rules.yaml.

Unknown top-level keys are rejected so typos fail at startup.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AxisKey = str | bool
TokenList = str | list[str]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CascadeRules(BaseModel):
    # Global defaults used when no scope has been established
    defaults: dict[str, AxisKey] = Field(default_factory=dict)


class DiagnosticsRules(BaseModel):
    dev_warnings: bool = True
    log_level: LogLevel = "WARNING"


class CompoundRuleModel(BaseModel):
    when: dict[str, AxisKey]
    class_name: TokenList = ""


class SchemaRule(BaseModel):
    base: TokenList = ""
    variants: dict[str, dict[AxisKey, TokenList]] = Field(default_factory=dict)
    compound: list[CompoundRuleModel] = Field(default_factory=list)
    defaults: dict[str, AxisKey] = Field(default_factory=dict)


class KitRules(BaseModel):
    schema_version: Literal["1.0"] = "1.0"
    cascade: CascadeRules = Field(default_factory=CascadeRules)
    diagnostics: DiagnosticsRules = Field(default_factory=DiagnosticsRules)
    schemas: dict[str, SchemaRule] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")
