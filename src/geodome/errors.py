"""Error kinds raised by geodome.

All errors are caller/input errors.  They subclass :class:`ValueError`
so that callers catching bad-argument errors generically still see
them, and each carries the offending input as :attr:`GeodomeError.value`.
"""

from __future__ import annotations

from typing import Any


class GeodomeError(ValueError):
    """Base class for geodome input errors.

    Attributes:
        value: The offending input value.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidMode(GeodomeError):
    """An unrecognised spherify or display mode string."""

    def __init__(self, mode: Any, valid: tuple[str, ...] = ()) -> None:
        message = f"Unknown mode {mode!r}"
        if valid:
            message += f"; expected one of {', '.join(valid)}"
        super().__init__(message, mode)


class InvalidFrequency(GeodomeError):
    """A subdivision frequency that is not a positive integer."""

    def __init__(self, frequency: Any) -> None:
        super().__init__(
            f"frequency must be a positive integer, got {frequency!r}",
            frequency,
        )


class DegenerateVector(GeodomeError):
    """A zero-magnitude vector where a direction is required."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message, value)


class UnknownPolyhedron(GeodomeError):
    """An unrecognised base polyhedron identifier."""

    def __init__(self, polyhedron_id: Any, valid: tuple[str, ...] = ()) -> None:
        message = f"Unknown polyhedron {polyhedron_id!r}"
        if valid:
            message += f"; expected one of {', '.join(valid)}"
        super().__init__(message, polyhedron_id)
