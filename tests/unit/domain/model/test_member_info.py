"""Tests for domain/model/member_info.py."""

import pytest

from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.member_info import AccessorInfo, MemberInfo, TypeInfo
from declcheck.domain.model.query import SearchScope
from declcheck.domain.model.visibility import MemberVisibility
from tests.factories import Owner, make_method, make_property


class TestAccessorInfo:
    """Tests for AccessorInfo."""

    def test_composite_visibility_raises(self) -> None:
        with pytest.raises(ValueError, match="single primitive"):
            AccessorInfo(MemberVisibility.ANY_FAMILY)

    @pytest.mark.parametrize(
        ("visibility", "expected"),
        [
            (MemberVisibility.FAMILY, True),
            (MemberVisibility.FAMILY_OR_ASSEMBLY, True),
            (MemberVisibility.FAMILY_AND_ASSEMBLY, False),
            (MemberVisibility.PUBLIC, False),
            (MemberVisibility.PRIVATE, False),
        ],
    )
    def test_is_protected(self, visibility: MemberVisibility, expected: bool) -> None:
        assert AccessorInfo(visibility).is_protected is expected


class TestMemberInfo:
    """FAIL-FIRST validation and derived views of MemberInfo."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            MemberInfo(kind=MemberKind.FIELD, name="", declaring_type=Owner, visibility=MemberVisibility.PUBLIC)

    def test_composite_visibility_raises(self) -> None:
        with pytest.raises(ValueError, match="single primitive"):
            MemberInfo(kind=MemberKind.FIELD, name="x", declaring_type=Owner, visibility=MemberVisibility.ALL)

    def test_accessor_on_method_raises(self) -> None:
        with pytest.raises(ValueError, match="only properties"):
            MemberInfo(
                kind=MemberKind.METHOD,
                name="run",
                declaring_type=Owner,
                visibility=MemberVisibility.PUBLIC,
                getter=AccessorInfo(MemberVisibility.PUBLIC),
            )

    def test_read_only_method_raises(self) -> None:
        with pytest.raises(ValueError, match="only fields"):
            MemberInfo(
                kind=MemberKind.METHOD,
                name="run",
                declaring_type=Owner,
                visibility=MemberVisibility.PUBLIC,
                is_read_only=True,
            )

    def test_instance_extension_raises(self) -> None:
        with pytest.raises(ValueError, match="static methods"):
            make_method(is_extension=True, is_static=False, parameter_types=(str,))

    def test_accessors_skip_absent(self) -> None:
        member = make_property(getter=MemberVisibility.PUBLIC, setter=None)
        assert member.accessors == (AccessorInfo(MemberVisibility.PUBLIC),)

    def test_search_scope_of_method(self) -> None:
        assert make_method(visibility=MemberVisibility.ASSEMBLY).search_scope == SearchScope.NON_PUBLIC

    def test_search_scope_of_mixed_property(self) -> None:
        member = make_property(getter=MemberVisibility.PUBLIC, setter=MemberVisibility.FAMILY)
        assert member.search_scope == SearchScope.PUBLIC | SearchScope.NON_PUBLIC


class TestTypeInfo:
    """Tests for TypeInfo."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="type name"):
            TypeInfo(name="", is_class=True, is_public=True)

    def test_defaults(self) -> None:
        info = TypeInfo(name="T", is_class=True, is_public=True)
        assert info.is_sealed is False
        assert info.is_abstract is False
