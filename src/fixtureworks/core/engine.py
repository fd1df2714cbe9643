"""Factory engine: build records from a resolver and optional overrides.

The engine holds no state. A resolver maps a factory name to a fresh
template; every build calls it again, so sequence-backed fields differ
from one record to the next.

Example:
    ```python
    def resolver(name):
        if name == "user":
            return {"id": 3, "name": "John Doe", "admin": False}
        raise UndefinedFactoryError(name)

    build(resolver, "user", {"admin": True})
    # {"id": 3, "name": "John Doe", "admin": True}
    ```
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeAlias

import structlog

from fixtureworks.constants.sequence import PAIR_SIZE
from fixtureworks.core.exceptions import UndefinedFactoryError
from fixtureworks.core.merge import merge, normalize_attrs
from fixtureworks.models.template import Record, Template

log = structlog.get_logger(__name__)

Resolver: TypeAlias = Callable[[str], Template]
SaveRecord: TypeAlias = Callable[[Record], Any]
Attrs: TypeAlias = Mapping[str, Any] | Iterable[tuple[str, Any]] | None


def build(resolver: Resolver, factory_name: str, attrs: Attrs = None) -> Record:
    """Build one record.

    Args:
        resolver: Maps a factory name to a template; raises
            UndefinedFactoryError for unknown names.
        factory_name: Factory to build.
        attrs: Overrides, as a mapping or (key, value) pairs.

    Returns:
        A new record with overrides applied.

    Raises:
        InvalidAttrsError: attrs has an unsupported shape.
        UndefinedFactoryError: The resolver has no such factory.
        UnknownFieldError: A fixed-shape template lacks an override key.
    """
    overrides = normalize_attrs(attrs)

    try:
        template = resolver(factory_name)
    except UndefinedFactoryError:
        log.debug("undefined_factory_requested", factory=factory_name)
        raise

    record = merge(template, overrides)
    log.debug("factory_built", factory=factory_name, overrides=list(overrides))
    return record


def build_pair(resolver: Resolver, factory_name: str, attrs: Attrs = None) -> list[Record]:
    """Build two independent records."""
    return build_list(resolver, PAIR_SIZE, factory_name, attrs)


def build_list(
    resolver: Resolver, number: int, factory_name: str, attrs: Attrs = None
) -> list[Record]:
    """Build `number` independent records, in call order.

    Raises:
        ValueError: number is negative.
    """
    if number < 0:
        raise ValueError(f"number must be >= 0, got {number}")

    # Association lists may be one-shot iterators; normalize once for the batch
    overrides = normalize_attrs(attrs)
    return [build(resolver, factory_name, overrides) for _ in range(number)]


def create(
    resolver: Resolver, save_record: SaveRecord, factory_name: str, attrs: Attrs = None
) -> Any:
    """Build a record and hand it to `save_record`.

    Returns:
        Whatever save_record returns, usually the persisted record.
    """
    record = build(resolver, factory_name, attrs)
    saved = save_record(record)
    log.debug("factory_created", factory=factory_name)
    return saved


def create_pair(
    resolver: Resolver, save_record: SaveRecord, factory_name: str, attrs: Attrs = None
) -> list[Any]:
    """Build and save two records."""
    return create_list(resolver, save_record, PAIR_SIZE, factory_name, attrs)


def create_list(
    resolver: Resolver,
    save_record: SaveRecord,
    number: int,
    factory_name: str,
    attrs: Attrs = None,
) -> list[Any]:
    """Build and save `number` records, one at a time, in call order."""
    if number < 0:
        raise ValueError(f"number must be >= 0, got {number}")

    overrides = normalize_attrs(attrs)
    return [create(resolver, save_record, factory_name, overrides) for _ in range(number)]
