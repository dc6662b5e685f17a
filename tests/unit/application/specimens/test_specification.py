"""Tests for application/specimens/specification.py."""

import gc
import weakref

import pytest

from declcheck.application.specimens import (
    FixtureOverride,
    InstanceSpecification,
    Specification,
    fixture_override,
    sut_type_of,
)
from declcheck.application.specimens.specification import find_instance_method, override_factories
from tests.samples.single.model import Customer, Order
from tests.samples.single.specs import (
    CustomerOverrideSpecification,
    DerivedOrderOverride,
    HookSpecification,
    InheritedHookSpecification,
    OrderOverrideSpecification,
    PlainSpecification,
    PrivateHookSpecification,
)


class TestOverrideFactories:
    """Tests for override_factories."""

    def test_fixture_override_base(self) -> None:
        assert set(override_factories(OrderOverrideSpecification)) == {Order}

    def test_fixture_override_method(self) -> None:
        assert set(override_factories(CustomerOverrideSpecification)) == {Customer}

    def test_no_overrides(self) -> None:
        assert dict(override_factories(HookSpecification)) == {}

    def test_derived_replaces_base(self) -> None:
        factory = override_factories(DerivedOrderOverride)[Order]
        assert factory(DerivedOrderOverride()).note == "derived"

    def test_cached_per_class(self) -> None:
        assert override_factories(OrderOverrideSpecification) is override_factories(OrderOverrideSpecification)

    def test_cache_does_not_keep_classes_alive(self) -> None:
        class Temporary(Specification):
            @fixture_override(Customer)
            def customer(self) -> Customer:
                raise NotImplementedError

        assert Customer in override_factories(Temporary)
        ref = weakref.ref(Temporary)

        del Temporary
        gc.collect()

        assert ref() is None

    def test_map_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            override_factories(OrderOverrideSpecification)[Customer] = lambda spec: None  # type: ignore[index]

    def test_duplicate_in_one_class_raises(self) -> None:
        class Duplicate(InstanceSpecification[Order], FixtureOverride[Order]):
            def create(self) -> Order:
                raise NotImplementedError

            @fixture_override(Order)
            def other(self) -> Order:
                raise NotImplementedError

        with pytest.raises(ValueError, match="more than one fixture override"):
            override_factories(Duplicate)

    def test_fixture_override_none_raises(self) -> None:
        with pytest.raises(TypeError, match="sut_type"):
            fixture_override(None)


class TestSutTypeOf:
    """Tests for sut_type_of."""

    def test_direct(self) -> None:
        assert sut_type_of(HookSpecification) is Order

    def test_inherited(self) -> None:
        assert sut_type_of(InheritedHookSpecification) is Order

    def test_not_an_instance_specification(self) -> None:
        assert sut_type_of(PlainSpecification) is None

    def test_unbound_type_parameter(self) -> None:
        class Unbound[T](InstanceSpecification[T]):
            pass

        assert sut_type_of(Unbound) is None


class TestFindInstanceMethod:
    """Tests for find_instance_method."""

    def test_protected(self) -> None:
        assert find_instance_method(HookSpecification, "_stamp") is HookSpecification.__dict__["_stamp"]

    def test_private_is_demangled(self) -> None:
        assert find_instance_method(PrivateHookSpecification, "__seal") is not None

    def test_inherited(self) -> None:
        assert find_instance_method(InheritedHookSpecification, "_stamp") is not None

    def test_missing(self) -> None:
        assert find_instance_method(HookSpecification, "_missing") is None


class TestModifySut:
    """Tests for InstanceSpecification.modify_sut."""

    def test_pass_through_without_hook(self) -> None:
        order = object()
        assert OrderOverrideSpecification().modify_sut(order) is order
