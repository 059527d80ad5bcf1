"""Map editor command-line arguments onto an allow-listed PlayerSettings surface.

PlayerSettings belongs to the Unity editor. This module only ever touches the
members declared in ``PLAYER_SETTINGS_PROPERTIES`` and
``PLAYER_SETTINGS_SETTERS``; anything else the object exposes is ignored.

Properties are keyed by their own name (``--stripEngineCode``). Per-platform
setters take ``(target_group, value)`` and are keyed by the method name without
its ``Set`` prefix (``SetScriptingBackend`` -> ``--ScriptingBackend``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from unics2cpp.editor.arguments import get_argument, has_argument, parse_enum
from unics2cpp.editor.enums import BuildTargetGroup, ScriptingImplementation

logger = logging.getLogger(__name__)

SETTER_PREFIX = "Set"


class PlayerSettingsApi(Protocol):
    """The allow-listed part of the editor's PlayerSettings."""

    strip_engine_code: bool

    def set_application_identifier(
        self,
        target_group: BuildTargetGroup,
        identifier: str,
    ) -> None: ...

    def set_scripting_backend(
        self,
        target_group: BuildTargetGroup,
        backend: ScriptingImplementation,
    ) -> None: ...


@dataclass(frozen=True, slots=True)
class PropertyMapping:
    """One settable PlayerSettings property."""

    member: str
    attribute: str
    value_type: type

    @property
    def key(self) -> str:
        return self.member


@dataclass(frozen=True, slots=True)
class SetterMapping:
    """One two-argument ``Set*(target_group, value)`` PlayerSettings method."""

    member: str
    attribute: str
    value_type: type

    def __post_init__(self) -> None:
        if not self.member.startswith(SETTER_PREFIX) or len(self.member) <= len(SETTER_PREFIX):
            raise ValueError(f"Setter member must start with {SETTER_PREFIX!r}: {self.member!r}")

    @property
    def key(self) -> str:
        return self.member[len(SETTER_PREFIX) :]


PLAYER_SETTINGS_PROPERTIES: tuple[PropertyMapping, ...] = (
    PropertyMapping(member="stripEngineCode", attribute="strip_engine_code", value_type=bool),
)

PLAYER_SETTINGS_SETTERS: tuple[SetterMapping, ...] = (
    SetterMapping(
        member="SetApplicationIdentifier",
        attribute="set_application_identifier",
        value_type=str,
    ),
    SetterMapping(
        member="SetScriptingBackend",
        attribute="set_scripting_backend",
        value_type=ScriptingImplementation,
    ),
)


def apply_player_settings(
    args: Sequence[str],
    settings: Any,
    target_group: BuildTargetGroup,
    *,
    properties: Sequence[PropertyMapping] = PLAYER_SETTINGS_PROPERTIES,
    setters: Sequence[SetterMapping] = PLAYER_SETTINGS_SETTERS,
) -> dict[str, object]:
    """Apply every resolvable allow-listed entry and return what was applied."""

    applied = apply_properties(args, settings, properties=properties)
    applied.update(apply_setters(args, settings, target_group, setters=setters))
    return applied


def apply_properties(
    args: Sequence[str],
    settings: Any,
    *,
    properties: Sequence[PropertyMapping] = PLAYER_SETTINGS_PROPERTIES,
) -> dict[str, object]:
    applied: dict[str, object] = {}
    for mapping in properties:
        if not hasattr(settings, mapping.attribute):
            logger.debug("PlayerSettings has no property %s; skipping", mapping.member)
            continue

        if mapping.value_type is bool:
            if not has_argument(args, mapping.key):
                continue
            value: object = True
        else:
            raw = get_argument(args, mapping.key)
            if not raw:
                continue
            value = coerce_value(mapping.value_type, raw)
            if value is None:
                logger.debug("Cannot coerce --%s %r to %s", mapping.key, raw, mapping.value_type)
                continue

        setattr(settings, mapping.attribute, value)
        applied[mapping.member] = value
    return applied


def apply_setters(
    args: Sequence[str],
    settings: Any,
    target_group: BuildTargetGroup,
    *,
    setters: Sequence[SetterMapping] = PLAYER_SETTINGS_SETTERS,
) -> dict[str, object]:
    applied: dict[str, object] = {}
    for mapping in setters:
        setter: Callable[[BuildTargetGroup, Any], None] | None = getattr(
            settings,
            mapping.attribute,
            None,
        )
        if setter is None or not callable(setter):
            logger.debug("PlayerSettings has no setter %s; skipping", mapping.member)
            continue

        value = resolve_setter_value(args, mapping)
        if value is None:
            logger.debug("No value for --%s; %s left untouched", mapping.key, mapping.member)
            continue

        setter(target_group, value)
        applied[mapping.member] = value
    return applied


def resolve_setter_value(args: Sequence[str], mapping: SetterMapping) -> object | None:
    """Resolve the second setter argument, or None when it should be skipped.

    Enum parameters without their own ``--<Key>`` token fall back to
    ``--<EnumTypeName>``.
    """

    raw = get_argument(args, mapping.key)
    if _is_enum_type(mapping.value_type):
        if raw is not None:
            return parse_enum(mapping.value_type, raw)
        return parse_enum(mapping.value_type, get_argument(args, mapping.value_type.__name__))
    if raw is None:
        return None
    return coerce_value(mapping.value_type, raw)


def coerce_value(value_type: type, raw: str) -> object | None:
    """Convert a raw token to ``value_type``; None when it does not convert."""

    if _is_enum_type(value_type):
        return parse_enum(value_type, raw)
    if value_type is bool:
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return None
    if value_type is str:
        return raw
    try:
        return value_type(raw)
    except (TypeError, ValueError):
        return None


def _is_enum_type(value_type: type) -> bool:
    return isinstance(value_type, type) and issubclass(value_type, Enum)
