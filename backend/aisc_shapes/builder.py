"""Superset record builder shared by every shape family."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .properties import Prop, PropKind

if TYPE_CHECKING:
    from .profiles.base import AISCShape

S = TypeVar("S", bound="AISCShape")

Value = str | bool | float


class ShapeBuilder:
    """Accumulates property values before conversion to a family record.

    Every ``with_*`` call returns a new builder; the receiver is left
    untouched, so a partially filled builder can be reused as a template.
    One ``with_<property>`` method exists per ``Prop`` member, e.g.
    ``ShapeBuilder().with_w_upper(9.0).with_j_upper(0.0405)``.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[Prop, Value] = {}

    def with_property(self, prop: Prop, value: Value | None) -> ShapeBuilder:
        """Return a copy with ``prop`` set to ``value``.

        ``None`` leaves the slot unset.
        """
        clone = ShapeBuilder()
        clone._values = dict(self._values)
        if value is None:
            clone._values.pop(prop, None)
        else:
            clone._values[prop] = _checked(prop, value)
        return clone

    def get(self, prop: Prop) -> Value | None:
        return self._values.get(prop)

    def is_set(self, prop: Prop) -> bool:
        return prop in self._values

    def build(self, shape_type: type[S]) -> S:
        """Convert into ``shape_type``; raises ``MissingPropertyError``."""
        from .profiles.base import convert

        return convert(self, shape_type)

    def __repr__(self) -> str:
        filled = ", ".join(f"{p.value}={v!r}" for p, v in self._values.items())
        return f"ShapeBuilder({filled})"

    if TYPE_CHECKING:
        # Lets checkers accept the with_<prop> methods attached below.
        def __getattr__(self, name: str) -> Any: ...


def _checked(prop: Prop, value: Value) -> Value:
    kind = prop.kind
    if kind is PropKind.TEXT:
        if not isinstance(value, str):
            raise TypeError(f"{prop.value} expects str, got {type(value).__name__}")
        return value
    if kind is PropKind.FLAG:
        if not isinstance(value, bool):
            raise TypeError(f"{prop.value} expects bool, got {type(value).__name__}")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{prop.value} expects float, got {type(value).__name__}")
    return float(value)


def _setter(prop: Prop):
    def with_prop(self: ShapeBuilder, value: Value | None) -> ShapeBuilder:
        return self.with_property(prop, value)

    with_prop.__name__ = f"with_{prop.value}"
    with_prop.__qualname__ = f"ShapeBuilder.with_{prop.value}"
    with_prop.__doc__ = f"Set ``{prop.value}`` ({prop.symbol})."
    return with_prop


for _prop in Prop:
    setattr(ShapeBuilder, f"with_{_prop.value}", _setter(_prop))
del _prop
