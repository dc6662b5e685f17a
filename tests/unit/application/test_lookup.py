"""Tests for application/lookup.py against live sample classes."""

from types import NoneType
from typing import Any

import pytest

from declcheck.application import lookup
from declcheck.domain.exceptions import MissingMemberDeclarationError
from declcheck.domain.model.details import FieldDetails, MemberDetails, PropertyDetails
from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.visibility import MemberVisibility
from tests.samples.members import (
    Account,
    Button,
    Circle,
    ClickHandler,
    CreatedHandler,
    DerivedSettings,
    InheritedConstructor,
    NoConstructor,
    OverloadedConstructor,
    ParameterizedConstructor,
    Point,
    Settings,
    Shape,
    Slotted,
)

V = MemberVisibility


class TestFindConstructor:
    """Tests for find_constructor and constructor_count."""

    def test_exact_parameters(self) -> None:
        info = lookup.find_constructor(ParameterizedConstructor, V.PUBLIC, (str, int))
        assert info is not None
        assert info.kind is MemberKind.CONSTRUCTOR
        assert info.parameter_types == (str, int)

    def test_wrong_order_not_found(self) -> None:
        assert lookup.find_constructor(ParameterizedConstructor, V.PUBLIC, (int, str)) is None

    def test_inherited_constructor(self) -> None:
        info = lookup.find_constructor(InheritedConstructor, V.PUBLIC, (str, int))
        assert info is not None
        assert info.declaring_type is ParameterizedConstructor

    def test_overloads_are_separate_constructors(self) -> None:
        assert lookup.constructor_count(OverloadedConstructor) == 2
        assert lookup.find_constructor(OverloadedConstructor, V.PUBLIC) is not None
        assert lookup.find_constructor(OverloadedConstructor, V.PUBLIC, (int,)) is not None

    def test_no_constructor_count_is_zero(self) -> None:
        assert lookup.constructor_count(NoConstructor) == 0

    def test_none_type_raises(self) -> None:
        with pytest.raises(TypeError, match="type_"):
            lookup.find_constructor(None, V.PUBLIC)

    def test_none_in_parameter_types_raises(self) -> None:
        with pytest.raises(ValueError, match="NoneType"):
            lookup.find_constructor(NoConstructor, V.PUBLIC, (None,))


class TestFindField:
    """Tests for find_field."""

    def test_instance_field(self) -> None:
        info = lookup.find_field(Settings, FieldDetails.DEFAULT, "name", str)
        assert info is not None
        assert info.declaring_type is Settings

    def test_const_field(self) -> None:
        info = lookup.find_field(Settings, FieldDetails.CONST, "VERSION", int)
        assert info is not None
        assert info.is_static and info.is_const

    def test_class_var_is_static(self) -> None:
        assert lookup.find_field(Settings, FieldDetails.STATIC, "registry", dict[str, int]) is not None
        assert lookup.find_field(Settings, FieldDetails.DEFAULT, "registry", dict[str, int]) is None

    def test_unannotated_class_data_is_static(self) -> None:
        assert lookup.find_field(Settings, FieldDetails.STATIC, "default_port", int) is not None

    def test_final_without_value_is_read_only(self) -> None:
        assert lookup.find_field(Settings, FieldDetails.READ_ONLY, "limit", int) is not None
        assert lookup.find_field(Settings, FieldDetails.DEFAULT, "limit", int) is None

    def test_annotated_visibility(self) -> None:
        assert lookup.find_field(Settings, FieldDetails.DEFAULT, "internal", int) is None
        assert lookup.find_field(Settings, FieldDetails.DEFAULT, "internal", int, V.ASSEMBLY) is not None

    def test_naming_convention_visibility(self) -> None:
        assert lookup.find_field(Settings, FieldDetails.DEFAULT, "_secret", int, V.FAMILY) is not None
        assert lookup.find_field(Settings, FieldDetails.DEFAULT, "__token", str, V.PRIVATE) is not None

    def test_inherited_field_is_not_declared(self) -> None:
        assert lookup.find_field(DerivedSettings, FieldDetails.DEFAULT, "name", str) is not None
        assert lookup.find_field(DerivedSettings, FieldDetails.DECLARED, "name", str) is None
        assert lookup.find_field(DerivedSettings, FieldDetails.DECLARED, "extra", bytes) is not None

    def test_base_private_field_not_visible(self) -> None:
        assert lookup.find_field(DerivedSettings, FieldDetails.DEFAULT, "__token", str, V.PRIVATE) is None

    def test_frozen_dataclass_fields_are_read_only(self) -> None:
        assert lookup.find_field(Point, FieldDetails.READ_ONLY, "x", int) is not None
        assert lookup.find_field(Point, FieldDetails.DEFAULT, "x", int) is None

    def test_slots(self) -> None:
        assert lookup.find_field(Slotted, FieldDetails.DEFAULT, "left", Any) is not None
        assert lookup.find_field(Slotted, FieldDetails.DEFAULT, "_right", Any, V.FAMILY) is not None

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            lookup.find_field(Settings, FieldDetails.DEFAULT, " ", int)

    def test_none_field_type_raises(self) -> None:
        with pytest.raises(TypeError, match="NoneType"):
            lookup.find_field(Settings, FieldDetails.DEFAULT, "name", None)


class TestFindEvent:
    """Tests for find_event."""

    def test_instance_event(self) -> None:
        assert lookup.find_event(Button, MemberDetails.DEFAULT, "clicked", ClickHandler) is not None

    def test_handler_type_must_match(self) -> None:
        assert lookup.find_event(Button, MemberDetails.DEFAULT, "clicked", CreatedHandler) is None

    def test_static_event(self) -> None:
        assert lookup.find_event(Button, MemberDetails.STATIC, "created", CreatedHandler) is not None
        assert lookup.find_event(Button, MemberDetails.DEFAULT, "created", CreatedHandler) is None


class TestFindProperty:
    """Tests for find_property."""

    def test_read_write(self) -> None:
        assert lookup.find_property(Account, PropertyDetails.DEFAULT, "nickname", str) is not None

    def test_protected_setter(self) -> None:
        details = PropertyDetails.PUBLIC_GETTER | PropertyDetails.PROTECTED_SETTER
        info = lookup.find_property(Account, details, "balance", int)
        assert info is not None
        assert info.setter is not None and info.setter.visibility is V.FAMILY

    def test_conflicting_states_raise(self) -> None:
        with pytest.raises(ValueError, match="setter states"):
            lookup.find_property(Account, PropertyDetails.NO_SETTER | PropertyDetails.PUBLIC_SETTER, "owner", str)


class TestFindMethod:
    """Tests for find_method."""

    def test_parameters_exclude_self(self) -> None:
        info = lookup.find_method(Circle, MemberDetails.DEFAULT, "render", str, (float, str))
        assert info is not None
        assert info.parameter_types == (float, str)

    def test_none_return_is_none_type(self) -> None:
        assert lookup.find_method(Shape, MemberDetails.DEFAULT, "scale", NoneType, (float,)) is not None

    def test_inherited_method(self) -> None:
        info = lookup.find_method(Circle, MemberDetails.DEFAULT, "scale", NoneType, (float,))
        assert info is not None
        assert info.declaring_type is Shape

    def test_override_hides_base(self) -> None:
        # Circle.describe is final: the virtual base declaration is hidden
        assert lookup.find_method(Circle, MemberDetails.VIRTUAL, "describe", str) is None
        assert lookup.find_method(Circle, MemberDetails.DEFAULT, "describe", str) is not None

    def test_classmethod_is_static(self) -> None:
        assert lookup.find_method(Shape, MemberDetails.STATIC, "kinds", list[str]) is not None


class TestGetters:
    """get_* raise MissingMemberDeclarationError instead of returning None."""

    def test_get_method_found(self) -> None:
        info = lookup.get_method(Circle, MemberDetails.DEFAULT, "render", str, (float, str))
        assert info.name == "render"

    def test_get_method_missing(self) -> None:
        with pytest.raises(MissingMemberDeclarationError, match=r"render\(float\) -> str"):
            lookup.get_method(Circle, MemberDetails.DEFAULT, "render", str, (float,))

    def test_get_constructor_missing(self) -> None:
        with pytest.raises(MissingMemberDeclarationError, match=r"__init__\(int\)"):
            lookup.get_constructor(NoConstructor, V.PUBLIC, (int,))

    def test_get_field_missing(self) -> None:
        with pytest.raises(MissingMemberDeclarationError, match="missing: int"):
            lookup.get_field(Settings, FieldDetails.DEFAULT, "missing", int)

    def test_get_event_missing(self) -> None:
        with pytest.raises(MissingMemberDeclarationError, match="event missing"):
            lookup.get_event(Button, MemberDetails.DEFAULT, "missing", ClickHandler)

    def test_get_property_missing(self) -> None:
        with pytest.raises(MissingMemberDeclarationError, match="property owner"):
            lookup.get_property(Account, PropertyDetails.DEFAULT, "owner", str)


class TestTypeHierarchy:
    """Tests for type_hierarchy and labels."""

    def test_most_derived_first(self) -> None:
        hierarchy = lookup.type_hierarchy(Circle)
        assert hierarchy[0] is Circle
        assert hierarchy[1] is Shape

    def test_type_label(self) -> None:
        assert lookup.type_label(NoneType) == "None"
        assert lookup.type_label(int) == "int"
        assert lookup.type_label(list[int]) == "list[int]"

    def test_flag_label(self) -> None:
        assert lookup.flag_label(V.PUBLIC) == "PUBLIC"
