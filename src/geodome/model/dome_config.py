from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import StrEnum

from geodome._constants import DEFAULT_PRECISION
from geodome.errors import InvalidFrequency, InvalidMode, UnknownPolyhedron
from geodome.model._util import _field_defaults


class SpherifyMode(StrEnum):
    """How the projection radius of :func:`~geodome.spherify` is chosen.

    Attributes:
        RADIUS: The value is the sphere radius.
        MIN_LENGTH: The value is the desired shortest edge length.
        MAX_LENGTH: The value is the desired longest edge length.
    """

    RADIUS = "radius"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"

    @classmethod
    def _missing_(cls, value: object) -> SpherifyMode | None:
        aliases = {"minLength": cls.MIN_LENGTH, "maxLength": cls.MAX_LENGTH}
        return aliases.get(value) if isinstance(value, str) else None

    @property
    def is_length(self) -> bool:
        """Whether the mode targets an edge length rather than a radius."""
        return self is not SpherifyMode.RADIUS


class PolyhedronId(StrEnum):
    """Base polyhedra available from :func:`~geodome.make_polyhedron`."""

    ICOSAHEDRON = "icosahedron"
    OCTAHEDRON = "octahedron"
    TETRAHEDRON = "tetrahedron"


def resolve_spherify_mode(mode: SpherifyMode | str) -> SpherifyMode:
    """Coerce *mode* to a :class:`SpherifyMode`.

    Raises:
        InvalidMode: If *mode* names no spherify mode.
    """
    try:
        return SpherifyMode(mode)
    except ValueError:
        raise InvalidMode(mode, tuple(m.value for m in SpherifyMode)) from None


def resolve_polyhedron_id(polyhedron_id: PolyhedronId | str) -> PolyhedronId:
    """Coerce *polyhedron_id* to a :class:`PolyhedronId`.

    Raises:
        UnknownPolyhedron: If the id names no known polyhedron.
    """
    try:
        return PolyhedronId(polyhedron_id)
    except ValueError:
        raise UnknownPolyhedron(
            polyhedron_id, tuple(p.value for p in PolyhedronId),
        ) from None


def check_frequency(frequency: object) -> int:
    """Return *frequency* as an ``int`` if it is a positive integer.

    Booleans and non-integral numbers (including ``1.5`` and ``2.0``)
    are rejected.

    Raises:
        InvalidFrequency: If *frequency* is not a positive integer.
    """
    if (
        isinstance(frequency, bool)
        or not isinstance(frequency, numbers.Integral)
        or frequency < 1
    ):
        raise InvalidFrequency(frequency)
    return int(frequency)


@dataclass
class DomeConfig:
    """Recipe for building a geodesic dome.

    Attributes:
        polyhedron: Base polyhedron to start from.
        frequency: Subdivision frequency (1 = no subdivision).
        size_mode: Whether *size_value* is a radius or a target
            shortest/longest edge length.
        size_value: The radius or edge length, must be positive.
        spherify: If ``True`` (default), subdivide the flat polyhedron
            and then project the result onto the sphere.  If
            ``False``, project only the base polyhedron and subdivide
            its faces flat; length targets are then scaled by the
            frequency so that the base edges come out *frequency*
            times longer.
        precision: Rounding place for reported edge lengths (negative
            = digits after the decimal point).
        full_output: Whether reports list every edge rather than a
            per-length summary.

    Raises:
        InvalidFrequency: If *frequency* is not a positive integer.
        InvalidMode: If *size_mode* names no spherify mode.
        UnknownPolyhedron: If *polyhedron* names no known polyhedron.
        ValueError: If *size_value* is not positive.
    """

    polyhedron: PolyhedronId = PolyhedronId.ICOSAHEDRON
    frequency: int = 1
    size_mode: SpherifyMode = SpherifyMode.RADIUS
    size_value: float = 1.0
    spherify: bool = True
    precision: int = DEFAULT_PRECISION
    full_output: bool = False

    def __post_init__(self) -> None:
        self.polyhedron = resolve_polyhedron_id(self.polyhedron)
        self.size_mode = resolve_spherify_mode(self.size_mode)
        self.frequency = check_frequency(self.frequency)
        if not self.size_value > 0:
            raise ValueError(
                f"size_value must be positive, got {self.size_value}"
            )
        self.size_value = float(self.size_value)
        self.precision = int(self.precision)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        d: dict = {}
        for field_name, default in _field_defaults(type(self)).items():
            val = getattr(self, field_name)
            if val != default:
                d[field_name] = val.value if isinstance(val, StrEnum) else val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> DomeConfig:
        """Deserialise from a dictionary.

        Missing fields use their defaults.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        defaults = _field_defaults(cls)
        unknown = set(d) - set(defaults)
        if unknown:
            raise ValueError(f"unknown config keys: {sorted(unknown)}")
        return cls(**d)
