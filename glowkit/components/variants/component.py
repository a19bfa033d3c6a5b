"""
Variants component - Variant schema definition and resolution.

No I/O - resolution is a pure function of (schema, axis values, explicit
tokens), so identical inputs always give an identical, order-stable list.

Invariants:
- I1: Every axis resolves to explicit value, else default, else fails.
- I2: Token order is base, axis rules (declaration order), compound rules
  (declaration order), explicit tokens.
- I3: Compound rules match against fully resolved values, defaults included.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from glowkit.components.class_merge import merge, split_tokens
from glowkit.domain.entities import AxisValue, TokenInput
from glowkit.domain.errors import InvalidVariantValue, MissingAxisResolution

from .models import CompoundRule, ResolvedStyle, VariantSchema

logger = logging.getLogger(__name__)

COMPOUND_TOKENS_KEY = "class_name"


def normalize_value(value: AxisValue) -> str:
    """Map an axis value onto its schema key (booleans become "true"/"false")."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    raise TypeError(f"Axis values must be str or bool, got {type(value).__name__}")


def _checked_key(schema_name: str, axis: str, value: Any, domain: Iterable[str]) -> str:
    allowed = tuple(domain)
    try:
        key = normalize_value(value)
    except TypeError:
        raise InvalidVariantValue(axis, value, allowed, schema=schema_name) from None
    if key not in allowed:
        raise InvalidVariantValue(axis, value, allowed, schema=schema_name)
    return key


def _compound_rule(
    schema_name: str,
    entry: CompoundRule | Mapping[str, Any],
    variants: Mapping[str, Mapping[str, tuple[str, ...]]],
) -> CompoundRule:
    if isinstance(entry, CompoundRule):
        conditions: Mapping[str, Any] = entry.when
        tokens: tuple[str, ...] = entry.tokens
    else:
        conditions = {k: v for k, v in entry.items() if k != COMPOUND_TOKENS_KEY}
        tokens = split_tokens(entry.get(COMPOUND_TOKENS_KEY))

    when: dict[str, str] = {}
    for axis, value in conditions.items():
        if axis not in variants:
            raise InvalidVariantValue(axis, value, schema=schema_name)
        when[axis] = _checked_key(schema_name, axis, value, variants[axis])
    return CompoundRule(when=MappingProxyType(when), tokens=tokens)


def define_variants(
    base: TokenInput = None,
    *,
    variants: Mapping[str, Mapping[Any, TokenInput]] | None = None,
    compound: Iterable[CompoundRule | Mapping[str, Any]] | None = None,
    defaults: Mapping[str, AxisValue] | None = None,
    name: str = "variants",
) -> VariantSchema:
    """
    Declare a variant schema.

    Args:
        base: Tokens always applied first.
        variants: axis -> (value -> tokens), in application order. Boolean
            keys are accepted and normalized.
        compound: Rules as ``CompoundRule`` or mappings of axis/value pairs
            plus a ``class_name`` entry holding the tokens.
        defaults: axis -> default value. Axes without a default are required.
        name: Element name used in error messages.

    Returns:
        A frozen, validated VariantSchema.

    Raises:
        InvalidVariantValue: If a default or compound predicate references an
            undeclared axis or value.
    """
    axis_rules: dict[str, Mapping[str, tuple[str, ...]]] = {}
    for axis, values in (variants or {}).items():
        rules: dict[str, tuple[str, ...]] = {}
        for value, tokens in values.items():
            rules[normalize_value(value)] = split_tokens(tokens)
        axis_rules[axis] = MappingProxyType(rules)

    default_keys: dict[str, str] = {}
    for axis, value in (defaults or {}).items():
        if axis not in axis_rules:
            raise InvalidVariantValue(axis, value, schema=name)
        default_keys[axis] = _checked_key(name, axis, value, axis_rules[axis])

    compound_rules = tuple(_compound_rule(name, entry, axis_rules) for entry in (compound or ()))

    return VariantSchema(
        name=name,
        base=split_tokens(base),
        variants=MappingProxyType(axis_rules),
        compound=compound_rules,
        defaults=MappingProxyType(default_keys),
    )


def resolve_axes(
    schema: VariantSchema,
    axis_values: Mapping[str, AxisValue | None] | None = None,
) -> dict[str, str]:
    """
    Resolve every schema axis to a declared value key.

    ``None`` entries count as missing and fall back to the schema default.

    Raises:
        InvalidVariantValue: Unknown axis, or value outside the axis domain.
        MissingAxisResolution: No value and no default for an axis.
    """
    values = dict(axis_values or {})
    for axis, value in values.items():
        if axis not in schema.variants:
            raise InvalidVariantValue(axis, value, schema=schema.name)

    resolved: dict[str, str] = {}
    for axis, rules in schema.variants.items():
        value = values.get(axis)
        if value is None:
            if axis not in schema.defaults:
                raise MissingAxisResolution(axis, schema=schema.name)
            resolved[axis] = schema.defaults[axis]
        else:
            resolved[axis] = _checked_key(schema.name, axis, value, rules)
    return resolved


def resolve(
    schema: VariantSchema,
    axis_values: Mapping[str, AxisValue | None] | None = None,
    explicit_tokens: TokenInput = (),
) -> ResolvedStyle:
    """
    Turn a schema and chosen axis values into an ordered token list.

    Args:
        schema: The element's variant schema.
        axis_values: Chosen values; missing or None axes use defaults.
        explicit_tokens: Caller override tokens, applied last.

    Returns:
        ResolvedStyle with the ordered tokens and the resolved axis keys.
    """
    resolved = resolve_axes(schema, axis_values)

    tokens: list[str] = list(schema.base)
    for axis, rules in schema.variants.items():
        tokens.extend(rules[resolved[axis]])
    for rule in schema.compound:
        if rule.matches(resolved):
            tokens.extend(rule.tokens)
    tokens.extend(merge(explicit_tokens))

    logger.debug("Resolved %s with %s", schema.name, resolved)
    return ResolvedStyle(tokens=tuple(tokens), axes=MappingProxyType(resolved))
