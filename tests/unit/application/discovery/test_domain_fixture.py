"""Tests for application/discovery/domain_fixture.py."""

import pytest

from declcheck.application.discovery import DomainFixture
from declcheck.application.specimens import SutInjectionRelay
from declcheck.domain.exceptions import (
    DomainFixtureConfigurationError,
    MultipleDomainCustomizationsError,
    NoDomainCustomizationError,
)
from declcheck.domain.model.configuration import DeclCheckConfig
from tests.samples.single.customization import FIXED_AMOUNT, MoneyBuilder
from tests.samples.single.model import Money, Order, OrderService
from tests.samples.single.specs import HOOK_NOTE, HookSpecification, OrderOverrideSpecification


class TestLoadFrom:
    """Tests for DomainFixture.load_from."""

    def test_applies_the_single_customization(self) -> None:
        fixture = DomainFixture.load_from("tests.samples.single")
        assert fixture.create(Money) == Money(FIXED_AMOUNT)

    def test_config_is_used(self) -> None:
        config = DeclCheckConfig(repeat_count=1)
        assert DomainFixture.load_from("tests.samples.single", config).config is config

    def test_no_customization_raises(self) -> None:
        with pytest.raises(NoDomainCustomizationError, match="tests.samples.empty"):
            DomainFixture.load_from("tests.samples.empty")

    def test_multiple_customizations_raise(self) -> None:
        with pytest.raises(MultipleDomainCustomizationsError) as excinfo:
            DomainFixture.load_from("tests.samples.multiple")
        assert excinfo.value.candidates == ("FirstCustomization", "SecondCustomization")
        assert isinstance(excinfo.value, DomainFixtureConfigurationError)

    def test_none_customization_raises(self) -> None:
        with pytest.raises(TypeError, match="customization"):
            DomainFixture(None)  # type: ignore[arg-type]


class TestCreateFor:
    """Tests for DomainFixture.create_for."""

    def test_domain_customization_and_hook(self) -> None:
        sut = DomainFixture.create_for(HookSpecification()).create_sut(Order)
        assert sut.total == Money(FIXED_AMOUNT)
        assert sut.note == HOOK_NOTE

    def test_override_for_sut_parameter(self) -> None:
        specification = OrderOverrideSpecification()
        service = DomainFixture.create_for(specification).create(OrderService)
        assert service.sut is specification.created[0]

    def test_domain_customization_comes_first(self) -> None:
        fixture = DomainFixture.create_for(HookSpecification())
        first, last = fixture.customizations
        assert isinstance(first, MoneyBuilder)
        assert isinstance(last, SutInjectionRelay)

    def test_none_specification_raises(self) -> None:
        with pytest.raises(TypeError, match="specification"):
            DomainFixture.create_for(None)
