from __future__ import annotations

from dataclasses import fields
from typing import Any, Mapping


def field_aliases(record_type: type, camel: Mapping[str, str]) -> dict[str, str]:
    """Map every accepted payload key (snake_case or camelCase) to a field name."""

    aliases = {f.name: f.name for f in fields(record_type)}
    aliases.update({wire: name for name, wire in camel.items()})
    return aliases


def pick_fields(data: Mapping[str, Any], aliases: Mapping[str, str], *, exclude: frozenset = frozenset()) -> dict:
    """Translate a payload into dataclass kwargs; unknown keys are dropped."""

    out: dict[str, Any] = {}
    for key, value in data.items():
        name = aliases.get(key)
        if name and name not in exclude:
            out[name] = value
    return out
