"""
test_builder.py: the superset record builder.

Tests cover:
  - Copy-on-write ``with_*`` calls
  - ``None`` leaving a slot unset
  - Per-kind type checks on stored values
  - One generated ``with_<property>`` method per superset property
"""

import pytest

from aisc_shapes import Prop, ShapeBuilder


class TestShapeBuilder:

    def test_fresh_builder_is_empty(self):
        builder = ShapeBuilder()
        assert all(not builder.is_set(p) for p in Prop)

    def test_with_returns_new_builder(self):
        empty = ShapeBuilder()
        filled = empty.with_w_upper(9.0)
        assert filled is not empty
        assert filled.get(Prop.W_UPPER) == 9.0
        assert not empty.is_set(Prop.W_UPPER)

    def test_partial_builder_reused_as_template(self):
        base = ShapeBuilder().with_edi_std_nomenclature("W6X9")
        a = base.with_w_upper(9.0)
        b = base.with_w_upper(12.0)
        assert a.get(Prop.W_UPPER) == 9.0
        assert b.get(Prop.W_UPPER) == 12.0
        assert a.get(Prop.EDI_STD_NOMENCLATURE) == b.get(Prop.EDI_STD_NOMENCLATURE) == "W6X9"

    def test_none_leaves_slot_unset(self):
        builder = ShapeBuilder().with_kdes(0.465).with_kdes(None)
        assert not builder.is_set(Prop.KDES)
        assert builder.get(Prop.KDES) is None

    def test_last_write_wins(self):
        builder = ShapeBuilder().with_j_upper(1.0).with_j_upper(0.0405)
        assert builder.get(Prop.J_UPPER) == 0.0405

    def test_int_stored_as_float(self):
        value = ShapeBuilder().with_bfdet(4).get(Prop.BFDET)
        assert value == 4.0
        assert isinstance(value, float)

    def test_flag_stored(self):
        assert ShapeBuilder().with_t_f(False).get(Prop.T_F) is False

    def test_with_property_matches_named_method(self):
        a = ShapeBuilder().with_property(Prop.TAN_A, 1.0)
        b = ShapeBuilder().with_tan_a(1.0)
        assert a.get(Prop.TAN_A) == b.get(Prop.TAN_A)

    def test_every_property_has_a_method(self):
        for prop in Prop:
            method = getattr(ShapeBuilder, f"with_{prop.value}")
            assert method.__name__ == f"with_{prop.value}"

    def test_unknown_method_raises_attribute_error(self):
        with pytest.raises(AttributeError):
            ShapeBuilder().with_flange_colour("red")

    def test_no_runtime_attribute_fallback(self):
        assert "__getattr__" not in vars(ShapeBuilder)
        with pytest.raises(AttributeError):
            ShapeBuilder().colour

    def test_repr_lists_filled_slots(self):
        text = repr(ShapeBuilder().with_aisc_manual_label("W6X9"))
        assert "aisc_manual_label='W6X9'" in text


class TestValueTypes:

    def test_text_rejects_number(self):
        with pytest.raises(TypeError):
            ShapeBuilder().with_edi_std_nomenclature(6.9)

    def test_flag_rejects_text(self):
        with pytest.raises(TypeError):
            ShapeBuilder().with_t_f("T")

    def test_number_rejects_text(self):
        with pytest.raises(TypeError):
            ShapeBuilder().with_w_upper("9.0")

    def test_number_rejects_bool(self):
        with pytest.raises(TypeError):
            ShapeBuilder().with_w_upper(True)
