"""Lookup helpers over the raw editor argument vector.

Keys are written as ``--<key>`` and compared case-insensitively. The value of
a key is whatever token follows its first occurrence, even when that token
looks like another flag.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def get_argument(args: Sequence[str], key: str) -> str | None:
    """Return the token following ``--<key>``, or None when absent."""

    name = f"--{key}".casefold()
    for index, token in enumerate(args):
        if token.casefold() != name:
            continue
        if index + 1 < len(args):
            return args[index + 1]
        return None
    return None


def has_argument(args: Sequence[str], key: str) -> bool:
    """Return True when ``--<key>`` appears anywhere in the vector."""

    name = f"--{key}".casefold()
    return any(token.casefold() == name for token in args)


def parse_enum(enum_type: type[E], token: str | None) -> E | None:
    """Resolve a token to a member of ``enum_type`` without raising.

    Member names match case-insensitively. Integer tokens resolve to the member
    with that value when one is defined.
    """

    if token is None:
        return None
    normalized = token.strip()
    if not normalized:
        return None

    folded = normalized.casefold()
    for member in enum_type:
        if member.name.casefold() == folded:
            return member

    try:
        numeric = int(normalized)
    except ValueError:
        return None
    try:
        return enum_type(numeric)
    except ValueError:
        return None


def get_enum_argument(args: Sequence[str], enum_type: type[E]) -> E | None:
    """Resolve ``--<EnumTypeName> <member>`` from the argument vector."""

    return parse_enum(enum_type, get_argument(args, enum_type.__name__))
