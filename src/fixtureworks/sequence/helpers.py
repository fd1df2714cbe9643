"""sequence() helper used inside factory definitions."""

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from fixtureworks.config.settings import get_settings
from fixtureworks.core.exceptions import InvalidSequenceError
from fixtureworks.sequence.store import next_value


def sequence(
    name: Hashable,
    formatter: Callable[[int], Any] | Sequence[Any] | None = None,
) -> Any:
    """Generate a unique value from the process-wide sequence `name`.

    Args:
        name: Sequence key. A string name without a formatter doubles as the
            value prefix.
        formatter: A callable receiving the counter, or a non-empty list/tuple
            to cycle through.

    Returns:
        - `sequence("Post Title")` -> "Post Title 0", "Post Title 1", ...
        - `sequence("email", lambda n: f"me-{n}@foo.com")` -> "me-0@foo.com", ...
        - `sequence("role", ["admin", "user"])` -> "admin", "user", "admin", ...
        - `sequence(SomeEnum.KEY)` -> 0, 1, 2, ...

    Raises:
        InvalidSequenceError: formatter is an empty list or tuple.
    """
    if formatter is None:
        if isinstance(name, str):
            separator = get_settings().sequence_separator
            return next_value(name, lambda n: f"{name}{separator}{n}")
        return next_value(name)

    if isinstance(formatter, (list, tuple)):
        if not formatter:
            raise InvalidSequenceError(f"Sequence {name!r} needs at least one value to cycle through")
        values = tuple(formatter)
        return next_value(name, lambda n: values[n % len(values)])

    if not callable(formatter):
        raise InvalidSequenceError(
            f"Sequence {name!r} formatter must be callable or a list, got {type(formatter).__name__}"
        )
    return next_value(name, formatter)
