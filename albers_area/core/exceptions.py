"""Unified geometry exception taxonomy.

Projection and area computations are pure, so no error here is ever
worth retrying: a failure means either the caller handed over a bad
coordinate or polygon, or the projection was configured with
parameters the Albers formulas cannot use.  The two category classes
mirror that split.

Taxonomy categories
-------------------
- ``ValidationError``: a bad coordinate, pair or polygon from the caller.
- ``PermanentError``: an unusable projection setup (see
  ``albers_area.core.config.ConfigValidationError``).

``InvalidInputError`` is the concrete error raised for bad coordinates,
empty polygons and malformed point payloads.

Every exception exposes ``to_error_dict()`` so a caller feeding
projected rings into a larger job can log the failure as one record.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base exception for all projection and area errors.

    Attributes:
        message: Human-readable error description.
        stage: Operation that rejected the input: ``"projection"``,
            ``"area"`` or ``"config"``.
        code: Machine-readable error code (e.g. ``"INVALID_INPUT"``).
        retryable: ``False`` for every error this package raises; kept as
            a keyword so callers wrapping these errors can mark their own
            failures otherwise.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class, then ``retryable``."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return ``category``, ``code``, ``stage``, ``message`` and ``retryable``."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeometryError):
    """The caller passed a coordinate, pair or polygon that cannot be used."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(GeometryError):
    """The projection setup itself is unusable; every call would fail."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class InvalidInputError(ValidationError):
    """Raised when a coordinate or polygon violates an operation's preconditions."""

    default_code = "INVALID_INPUT"
