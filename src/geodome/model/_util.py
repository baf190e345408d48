"""Shared helpers for the model layer."""

from __future__ import annotations

import dataclasses
from decimal import ROUND_HALF_UP, Decimal

from geodome._constants import FULL_DIGITS_MAX_FRACTION

_QUANTUM = Decimal(1).scaleb(-FULL_DIGITS_MAX_FRACTION)


def full_digits(number: float) -> str:
    """Format a number in fixed-point notation, never scientific.

    The shortest round-tripping representation of the float is used,
    limited to 20 fractional digits.  Trailing zeros (and a trailing
    decimal point) are trimmed, and negative zero is shown as ``0``.
    """
    d = Decimal(repr(float(number)))
    if not d.is_finite():
        return str(number)
    if d.as_tuple().exponent < -FULL_DIGITS_MAX_FRACTION:
        d = d.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    text = format(d, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


_field_defaults_cache: dict[type, dict] = {}


def _field_defaults(cls: type) -> dict:
    """Return ``{field_name: default}`` for a dataclass.

    Fields without a simple default are skipped.  Used by ``to_dict()``
    methods so that only non-default values are written out.  Results
    are cached per class.
    """
    if cls not in _field_defaults_cache:
        _field_defaults_cache[cls] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
        }
    return _field_defaults_cache[cls]
