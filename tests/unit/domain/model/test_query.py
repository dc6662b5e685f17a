"""Tests for domain/model/query.py."""

import pytest

from declcheck.domain.model.query import InstanceScope, MemberQuery, SearchScope
from declcheck.domain.model.visibility import MemberVisibility
from tests.factories import make_field, make_property


class TestMemberQueryValidation:
    """FAIL-FIRST validation of MemberQuery."""

    def test_empty_visibility_raises(self) -> None:
        with pytest.raises(ValueError, match="visibility scope"):
            MemberQuery(visibility=SearchScope(0), instance=InstanceScope.INSTANCE)

    def test_empty_instance_raises(self) -> None:
        with pytest.raises(ValueError, match="static or instance"):
            MemberQuery(visibility=SearchScope.PUBLIC, instance=InstanceScope(0))

    def test_wrong_visibility_type_raises(self) -> None:
        with pytest.raises(TypeError, match="SearchScope"):
            MemberQuery(visibility=MemberVisibility.PUBLIC, instance=InstanceScope.INSTANCE)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        query = MemberQuery.everything()
        with pytest.raises(AttributeError):
            query.declared_only = True  # type: ignore[misc]


class TestEverything:
    """Tests for MemberQuery.everything."""

    def test_all_scopes(self) -> None:
        query = MemberQuery.everything()
        assert query.visibility == SearchScope.PUBLIC | SearchScope.NON_PUBLIC
        assert query.instance == InstanceScope.STATIC | InstanceScope.INSTANCE
        assert query.declared_only is False

    def test_declared_only(self) -> None:
        assert MemberQuery.everything(declared_only=True).declared_only is True


class TestAdmits:
    """Tests for MemberQuery.admits."""

    def test_declared_only_rejects_inherited(self) -> None:
        query = MemberQuery.everything(declared_only=True)
        assert not query.admits(make_field(), declared_here=False)
        assert query.admits(make_field(), declared_here=True)

    def test_static_scope_rejects_instance_member(self) -> None:
        query = MemberQuery(visibility=SearchScope.PUBLIC, instance=InstanceScope.STATIC)
        assert not query.admits(make_field(is_static=False), declared_here=True)
        assert query.admits(make_field(is_static=True), declared_here=True)

    def test_public_scope_rejects_non_public_member(self) -> None:
        query = MemberQuery(visibility=SearchScope.PUBLIC, instance=InstanceScope.INSTANCE)
        assert not query.admits(make_field("_x", visibility=MemberVisibility.FAMILY), declared_here=True)

    def test_non_public_scope_admits_private(self) -> None:
        query = MemberQuery(visibility=SearchScope.NON_PUBLIC, instance=InstanceScope.INSTANCE)
        assert query.admits(make_field("__x", visibility=MemberVisibility.PRIVATE), declared_here=True)

    def test_property_visible_through_any_accessor(self) -> None:
        member = make_property(getter=MemberVisibility.FAMILY, setter=MemberVisibility.PUBLIC)
        public = MemberQuery(visibility=SearchScope.PUBLIC, instance=InstanceScope.INSTANCE)
        non_public = MemberQuery(visibility=SearchScope.NON_PUBLIC, instance=InstanceScope.INSTANCE)
        assert public.admits(member, declared_here=True)
        assert non_public.admits(member, declared_here=True)
