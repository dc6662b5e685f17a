"""Tests for infrastructure/python_introspector.py."""

from types import NoneType

import pytest

from declcheck.domain.exceptions import IntrospectionError
from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.query import InstanceScope, MemberQuery, SearchScope
from declcheck.domain.model.visibility import MemberVisibility
from declcheck.infrastructure import PythonIntrospector
from tests.samples.deferred import DiscountedPriced, Priced
from tests.samples.extensions import TextExtensions
from tests.samples.members import (
    Account,
    AnimatedSprite,
    Box,
    Button,
    Circle,
    Document,
    Drawable,
    Money,
    NamedSprite,
    OverloadedConstructor,
    Plain,
    Sealed,
    Settings,
    Shape,
    Sprite,
    _Hidden,
)

EVERYTHING = MemberQuery.everything()
DECLARED = MemberQuery.everything(declared_only=True)


class Broken:
    def run(self) -> "Undefined":  # noqa: F821
        raise NotImplementedError


class Outer:
    class _Inner:
        pass


@pytest.fixture
def introspector() -> PythonIntrospector:
    return PythonIntrospector()


def names(infos: tuple) -> list[str]:
    return [info.name for info in infos]


class TestDescribe:
    """Tests for PythonIntrospector.describe."""

    def test_plain_class(self, introspector: PythonIntrospector) -> None:
        info = introspector.describe(Plain)
        assert info.is_class and info.is_public
        assert not info.is_sealed and not info.is_abstract

    def test_final_class_is_sealed(self, introspector: PythonIntrospector) -> None:
        assert introspector.describe(Sealed).is_sealed

    def test_abstract_class(self, introspector: PythonIntrospector) -> None:
        assert introspector.describe(Shape).is_abstract
        assert not introspector.describe(Circle).is_abstract

    def test_static_class(self, introspector: PythonIntrospector) -> None:
        info = introspector.describe(TextExtensions)
        assert info.is_sealed and info.is_abstract

    @pytest.mark.parametrize("type_", [_Hidden, Outer._Inner])
    def test_underscore_is_not_public(self, introspector: PythonIntrospector, type_: type) -> None:
        assert not introspector.describe(type_).is_public

    def test_non_class(self, introspector: PythonIntrospector) -> None:
        info = introspector.describe(len)
        assert not info.is_class
        assert info.name == "len"


class TestMembers:
    """Tests for PythonIntrospector.members."""

    def test_private_name_is_demangled(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Settings, MemberKind.FIELD, EVERYTHING, "__token")
        assert info.visibility is MemberVisibility.PRIVATE

    def test_dunder_methods_are_public(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Money, MemberKind.METHOD, EVERYTHING, "__eq__")
        assert info.visibility is MemberVisibility.PUBLIC
        assert info.parameter_types == (object,)
        assert info.value_type is bool

    def test_constructor_not_reported_as_method(self, introspector: PythonIntrospector) -> None:
        assert "__init__" not in names(introspector.members(Money, MemberKind.METHOD, EVERYTHING))

    def test_overloads(self, introspector: PythonIntrospector) -> None:
        constructors = introspector.members(OverloadedConstructor, MemberKind.CONSTRUCTOR, EVERYTHING)
        assert [c.parameter_types for c in constructors] == [(), (int,)]

    def test_derived_declaration_hides_base(self, introspector: PythonIntrospector) -> None:
        infos = introspector.members(Circle, MemberKind.METHOD, EVERYTHING, "describe")
        assert [i.declaring_type for i in infos] == [Circle]
        assert not infos[0].is_virtual

    def test_override_decorator_is_virtual(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Circle, MemberKind.METHOD, EVERYTHING, "area")
        assert info.is_virtual and not info.is_abstract

    def test_declared_only(self, introspector: PythonIntrospector) -> None:
        declared = names(introspector.members(Circle, MemberKind.METHOD, DECLARED))
        assert sorted(declared) == ["area", "describe", "render"]

    def test_scope_filters(self, introspector: PythonIntrospector) -> None:
        query = MemberQuery(visibility=SearchScope.PUBLIC, instance=InstanceScope.STATIC)
        assert sorted(names(introspector.members(Shape, MemberKind.METHOD, query))) == ["kinds", "unit_sides"]

    def test_none_return_is_none_type(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Shape, MemberKind.METHOD, EVERYTHING, "scale")
        assert info.value_type is NoneType

    def test_property_visibility_is_widest_accessor(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Account, MemberKind.PROPERTY, EVERYTHING, "balance")
        assert info.visibility is MemberVisibility.PUBLIC
        assert info.search_scope == SearchScope.PUBLIC | SearchScope.NON_PUBLIC

    def test_abstract_property(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Document, MemberKind.PROPERTY, EVERYTHING, "title")
        assert info.is_abstract and info.is_virtual
        assert info.value_type is str

    def test_event_members(self, introspector: PythonIntrospector) -> None:
        events = introspector.members(Button, MemberKind.EVENT, EVERYTHING)
        assert sorted(names(events)) == ["_hovered", "clicked", "created", "pressed", "released"]

    def test_events_are_not_fields(self, introspector: PythonIntrospector) -> None:
        assert introspector.members(Button, MemberKind.FIELD, EVERYTHING) == ()

    def test_extension_method(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(TextExtensions, MemberKind.METHOD, EVERYTHING, "repeat")
        assert info.is_static and info.is_extension
        assert info.extended_type is str

    def test_unresolvable_annotation_raises(self, introspector: PythonIntrospector) -> None:
        with pytest.raises(IntrospectionError, match="Undefined"):
            introspector.members(Broken, MemberKind.METHOD, EVERYTHING)

    def test_non_class_raises(self, introspector: PythonIntrospector) -> None:
        with pytest.raises(TypeError, match="class"):
            introspector.members(len, MemberKind.METHOD, EVERYTHING)


class TestInterfaces:
    """Tests for interfaces, is_interface, and hierarchy."""

    def test_direct_bases_only(self, introspector: PythonIntrospector) -> None:
        assert introspector.interfaces(Sprite) == (Drawable,)
        assert Drawable not in introspector.interfaces(AnimatedSprite)

    def test_is_interface(self, introspector: PythonIntrospector) -> None:
        assert introspector.is_interface(Drawable)
        assert introspector.is_interface(Shape)
        assert not introspector.is_interface(Plain)

    def test_hierarchy_is_mro(self, introspector: PythonIntrospector) -> None:
        assert introspector.hierarchy(AnimatedSprite) == AnimatedSprite.__mro__


class TestUnresolvableSiblings:
    """Annotations naming imports made only for type checking."""

    def test_method_lookup_by_name(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Priced, MemberKind.METHOD, EVERYTHING, "total")
        assert info.value_type is int

    def test_inherited_method_lookup_by_name(self, introspector: PythonIntrospector) -> None:
        assert names(introspector.members(DiscountedPriced, MemberKind.METHOD, EVERYTHING, "total")) == ["total"]

    def test_property_lookup_by_name(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Priced, MemberKind.PROPERTY, EVERYTHING, "currency")
        assert info.value_type is str

    def test_field_lookup_by_name(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Priced, MemberKind.FIELD, EVERYTHING, "label")
        assert info.value_type is str

    def test_constructor(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(Priced, MemberKind.CONSTRUCTOR, EVERYTHING)
        assert info.parameter_types == (str,)

    def test_unresolvable_member_itself_raises(self, introspector: PythonIntrospector) -> None:
        with pytest.raises(IntrospectionError, match="Decimal"):
            introspector.members(Priced, MemberKind.METHOD, EVERYTHING, "convert")

    def test_unresolvable_field_itself_raises(self, introspector: PythonIntrospector) -> None:
        with pytest.raises(IntrospectionError, match="rate"):
            introspector.members(Priced, MemberKind.FIELD, EVERYTHING, "rate")

    def test_full_listing_raises(self, introspector: PythonIntrospector) -> None:
        with pytest.raises(IntrospectionError, match="Decimal"):
            introspector.members(Priced, MemberKind.METHOD, EVERYTHING)


class TestImplicitConstructors:
    """Constructors typing installs are not declarations."""

    def test_protocol_subclass_has_no_constructor(self, introspector: PythonIntrospector) -> None:
        assert introspector.members(Sprite, MemberKind.CONSTRUCTOR, EVERYTHING) == ()

    def test_protocol_subclass_after_instantiation(self, introspector: PythonIntrospector) -> None:
        Sprite()
        AnimatedSprite()
        assert introspector.members(Sprite, MemberKind.CONSTRUCTOR, EVERYTHING) == ()
        assert introspector.members(AnimatedSprite, MemberKind.CONSTRUCTOR, EVERYTHING) == ()

    def test_protocol_itself_has_no_constructor(self, introspector: PythonIntrospector) -> None:
        assert introspector.members(Drawable, MemberKind.CONSTRUCTOR, EVERYTHING) == ()

    def test_constructor_behind_protocol_base(self, introspector: PythonIntrospector) -> None:
        (info,) = introspector.members(NamedSprite, MemberKind.CONSTRUCTOR, EVERYTHING)
        assert info.parameter_types == (str, int)

    def test_generic_class_has_no_constructor(self, introspector: PythonIntrospector) -> None:
        assert introspector.members(Box, MemberKind.CONSTRUCTOR, EVERYTHING) == ()
