"""Override normalization and the merge policy.

Merges are shallow: an override replaces the whole value of a field, nested
mappings included. The template object is never modified.
"""

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from fixtureworks.core.exceptions import (
    InvalidAttrsError,
    InvalidTemplateError,
    UnknownFieldError,
)
from fixtureworks.models.template import FixedShape, Record, Template


def normalize_attrs(attrs: Mapping[str, Any] | Iterable[tuple[str, Any]] | None) -> dict[str, Any]:
    """Turn override attrs into a fresh dict.

    Args:
        attrs: A mapping, an association list of (key, value) pairs, or None.

    Returns:
        A new dict; later pairs win when an association list repeats a key.

    Raises:
        InvalidAttrsError: attrs has any other shape.
    """
    if attrs is None:
        return {}
    if isinstance(attrs, Mapping):
        return dict(attrs)
    if isinstance(attrs, (str, bytes)) or not isinstance(attrs, Iterable):
        raise InvalidAttrsError(
            f"attrs must be a mapping or (key, value) pairs, got {type(attrs).__name__}"
        )

    normalized: dict[str, Any] = {}
    for item in attrs:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise InvalidAttrsError(f"attrs pairs must be (key, value), got {item!r}")
        key, value = item
        normalized[key] = value
    return normalized


def merge(template: Template, attrs: Mapping[str, Any]) -> Record:
    """Apply overrides to a factory template.

    Fixed-shape records (FixedShape, pydantic models, dataclasses) only accept
    overrides for fields they already have. Open mappings accept any key.

    Raises:
        UnknownFieldError: A fixed-shape record does not have an override key,
            or the key is a dataclass field with init=False.
        InvalidTemplateError: The template is neither kind of record, or is a
            dataclass that dataclasses.replace() cannot copy.
    """
    if isinstance(template, FixedShape):
        _check_fields(attrs, template.field_names, template.type_tag)
        return template.replace(**attrs)

    if isinstance(template, BaseModel):
        model_type = type(template)
        _check_fields(attrs, model_type.model_fields.keys(), model_type.__name__)
        return template.model_copy(update=attrs)

    if dataclasses.is_dataclass(template) and not isinstance(template, type):
        # init=False fields cannot be passed to replace()
        names = {f.name for f in dataclasses.fields(template) if f.init}
        _check_fields(attrs, names, type(template).__name__)
        try:
            return dataclasses.replace(template, **attrs)
        except ValueError as exc:
            # InitVar without a default: replace() cannot rebuild the instance
            raise InvalidTemplateError(
                f"{type(template).__name__} cannot be copied with overrides: {exc}"
            ) from exc

    if isinstance(template, Mapping):
        return {**template, **attrs}

    raise InvalidTemplateError(
        f"Factories must return a mapping, a FixedShape, a pydantic model or a "
        f"dataclass instance, got {type(template).__name__}"
    )


def _check_fields(attrs: Mapping[str, Any], allowed: Iterable[str], record_type: str) -> None:
    unknown = set(attrs) - set(allowed)
    if unknown:
        raise UnknownFieldError(unknown, record_type)
