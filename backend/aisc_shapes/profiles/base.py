"""Common base for family records and the builder-to-record conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from ..errors import MissingPropertyError
from ..families import SCHEMAS, FamilySchema, ShapeFamily

if TYPE_CHECKING:
    from ..builder import ShapeBuilder

S = TypeVar("S", bound="AISCShape")


@dataclass(frozen=True)
class AISCShape:
    """A fully populated shape of one family.

    Subclasses declare one field per property of their family, named after
    ``Prop.value``.  Required properties are typed plainly, family-optional
    ones as ``X | None``.
    """

    family: ClassVar[ShapeFamily]

    edi_std_nomenclature: str  # AISC EDI naming convention designation
    aisc_manual_label: str     # designation as printed in the Steel Construction Manual

    @classmethod
    def schema(cls) -> FamilySchema:
        return SCHEMAS[cls.family]

    @classmethod
    def from_builder(cls: type[S], builder: ShapeBuilder) -> S:
        return convert(builder, cls)

    def to_row(self) -> dict[str, Any]:
        """Property values keyed by column name, in schema order."""
        return {p.value: getattr(self, p.value) for p in self.schema().properties}


def convert(builder: ShapeBuilder, shape_type: type[S]) -> S:
    """Validate ``builder`` against ``shape_type``'s schema and build it.

    Required properties are checked in declared order; the first unset one
    raises ``MissingPropertyError`` with its display symbol.  Optional slots
    are copied as they are.
    """
    schema = shape_type.schema()
    values: dict[str, Any] = {}
    for prop in schema.required:
        value = builder.get(prop)
        if value is None:
            raise MissingPropertyError(schema.symbol(prop))
        values[prop.value] = value
    for prop in schema.optional:
        values[prop.value] = builder.get(prop)
    return shape_type(**values)
