"""Record template models.

A factory returns one of two kinds of template:

- an open mapping (any Mapping): overrides may add keys freely;
- a fixed-shape record: a FixedShape, a pydantic model instance or a
  dataclass instance. Its field set is fixed when the type is defined, and
  overrides may only replace existing fields.
"""

from collections.abc import Iterator, Mapping
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


class FixedShape(BaseModel):
    """Fixed-shape record without a dedicated Python class.

    Use it when a factory needs struct semantics (unknown overrides are
    rejected) but the record type lives elsewhere, e.g. a table row keyed by
    a type name.

    Attributes:
        type_tag: Name of the record type, used in error messages.
        data: Field values. The key set is the record's shape.

    Example:
        record = FixedShape(type_tag="Foo.Bar", data={"name": "x"})
        record["name"]  # "x"
    """

    model_config = ConfigDict(frozen=True)

    type_tag: str = Field(description="Record type name")
    data: dict[str, Any] = Field(default_factory=dict, description="Field values")

    @property
    def field_names(self) -> frozenset[str]:
        """Names of the fields this record may carry."""
        return frozenset(self.data)

    def replace(self, **changes: Any) -> "FixedShape":
        """Return a copy with existing fields replaced.

        Field validation is the merge policy's job; this only copies.
        """
        return FixedShape(type_tag=self.type_tag, data={**self.data, **changes})

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __len__(self) -> int:
        return len(self.data)

    def keys(self) -> Iterator[str]:
        return iter(self.data)


# Dataclass instances are accepted too; typing has no spelling for "any dataclass"
Template: TypeAlias = Mapping[str, Any] | BaseModel
Record: TypeAlias = dict[str, Any] | BaseModel
