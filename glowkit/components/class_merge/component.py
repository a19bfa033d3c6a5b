"""
Class merge component - Ordered token list merging.

No I/O - all functions are pure and deterministic.

Invariants:
- Output order is call order, then left to right within each input.
- No structural deduplication or grouping by visual property.
"""

from __future__ import annotations

from collections.abc import Iterable

from glowkit.domain.entities import TokenInput


def split_tokens(value: TokenInput) -> tuple[str, ...]:
    """
    Flatten one token input into atomic tokens.

    Strings are split on whitespace. Iterables are flattened recursively.
    Falsy values (None, False, "") contribute nothing, which lets callers
    write conditional tokens such as ``disabled and "opacity-50"``.

    Raises:
        TypeError: If a value is neither a string, an iterable nor falsy.
    """
    if value is None or value is False or value is True:
        # True only shows up from ``cond or "token"`` expressions; drop it
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, Iterable):
        tokens: list[str] = []
        for item in value:
            tokens.extend(split_tokens(item))
        return tuple(tokens)
    raise TypeError(f"Unsupported token input: {value!r}")


def merge(*inputs: TokenInput) -> tuple[str, ...]:
    """
    Concatenate token inputs in call order.

    Override tokens must be passed after computed tokens to win under the
    environment's last-occurrence rule.
    """
    tokens: list[str] = []
    for value in inputs:
        tokens.extend(split_tokens(value))
    return tuple(tokens)


def cn(*inputs: TokenInput) -> str:
    """Merge inputs and join them into a single class string."""
    return " ".join(merge(*inputs))


def effective_tokens(tokens: Iterable[str]) -> tuple[str, ...]:
    """
    Return the active token set under last-occurrence-wins.

    Each distinct token is kept once, at the position of its last occurrence.
    Merging the same override list twice yields the same result as merging
    it once.
    """
    ordered = list(tokens)
    last_index = {token: i for i, token in enumerate(ordered)}
    return tuple(token for i, token in enumerate(ordered) if last_index[token] == i)
