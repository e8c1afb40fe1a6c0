"""Formatting of optional values with prefix, suffix and fallback text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class _OptionalSpec:
    prefix: str = ""
    underlying: str = ""
    suffix: str = ""
    default: str = ""

    @classmethod
    def parse(cls, spec: str) -> _OptionalSpec:
        if not spec:
            return cls()
        if spec.startswith("?"):
            return cls(default=spec[1:])
        prefix, bracket, rest = spec.partition("[")
        if not bracket:
            raise ValueError(f"invalid optional format spec {spec!r}: missing '['")
        underlying, bracket, rest = rest.partition("]")
        if not bracket:
            raise ValueError(f"invalid optional format spec {spec!r}: missing ']'")
        suffix, _, default = rest.partition("?")
        return cls(prefix, underlying, suffix, default)


def format_optional(value: Optional[Any], spec: str = "") -> str:
    """Format an optional value using ``prefix[specs]suffix?default`` syntax.

    ``specs`` is handed to the value's own formatting; ``default`` is written
    when the value is None.
    """
    parsed = _OptionalSpec.parse(spec)
    if value is None:
        return parsed.default
    return f"{parsed.prefix}{format(value, parsed.underlying)}{parsed.suffix}"