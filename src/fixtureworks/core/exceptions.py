"""fixtureworks exception hierarchy.

Every failure in fixtureworks is a programmer error in test code: a typo in
a factory name, an override for a field a record does not have, or using the
sequence store outside its lifecycle. None of them are retried.
"""

from collections.abc import Iterable
from typing import Any


class FixtureWorksError(Exception):
    """Base exception for all fixtureworks errors.

    Catch this to handle any library error in one place.
    """

    pass


class UndefinedFactoryError(FixtureWorksError):
    """Raised when building a factory name that has no definition.

    Attributes:
        factory_name: The name that was requested.

    Example:
        raise UndefinedFactoryError("foo")
    """

    def __init__(self, factory_name: Any) -> None:
        self.factory_name = factory_name
        super().__init__(
            f"No factory defined for {factory_name!r}.\n"
            "\n"
            "Please check for typos or define your factory:\n"
            "\n"
            f"    def {factory_name}_factory(self):\n"
            "        ...\n"
        )


class UnknownFieldError(FixtureWorksError, KeyError):
    """Raised when overrides name fields a fixed-shape record does not have.

    Also a KeyError, since the override key is missing from the record.

    Attributes:
        fields: The unknown field names, sorted.
        record_type: Name of the record type being built.
    """

    def __init__(self, fields: Iterable[str], record_type: str) -> None:
        self.fields = sorted(str(f) for f in fields)
        self.record_type = record_type
        self.message = (
            f"{record_type} has no field(s) {', '.join(self.fields)}; "
            "fixed-shape records cannot gain new fields"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidAttrsError(FixtureWorksError, TypeError):
    """Raised when override attrs are neither a mapping nor key/value pairs.

    Example:
        raise InvalidAttrsError("attrs must be a mapping or (key, value) pairs, got str")
    """

    pass


class InvalidTemplateError(FixtureWorksError, TypeError):
    """Raised when a factory returns a value that overrides cannot be merged into."""

    pass


class SequenceNotStartedError(FixtureWorksError):
    """Raised when the sequence store is used before start() or after stop()."""

    pass


class SequenceAlreadyStartedError(FixtureWorksError):
    """Raised by start() on a live store when strict start is enabled."""

    pass


class InvalidSequenceError(FixtureWorksError, ValueError):
    """Raised when a sequence cannot produce values, e.g. an empty cycle list."""

    pass


class UndefinedSaveError(FixtureWorksError):
    """Raised when create() is called on a factory without save_record().

    Example:
        raise UndefinedSaveError()
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Define save_record(self, record) on your factory to use create(). "
            "See fixtureworks.Factory.save_record."
        )
