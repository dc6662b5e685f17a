"""Tests for application/specimens/customizations.py."""

import pytest

from declcheck.application.specimens import (
    CompositeCustomization,
    DomainCustomization,
    Fixture,
    SpecimenBuilderCustomization,
)
from tests.factories import FixedBuilder
from tests.samples.single.customization import FIXED_AMOUNT, ShopCustomization
from tests.samples.single.model import Money, Order


class RecordingCustomization:
    """Customization remembering the order it was applied in."""

    def __init__(self, log: list[str], label: str) -> None:
        self.log = log
        self.label = label

    def customize(self, fixture: object) -> None:
        self.log.append(self.label)


class TestSpecimenBuilderCustomization:
    """Tests for SpecimenBuilderCustomization."""

    def test_appends_builder(self) -> None:
        builder = FixedBuilder(int, 1)
        fixture = Fixture()
        SpecimenBuilderCustomization(builder).customize(fixture)
        assert fixture.customizations == [builder]

    def test_none_builder_raises(self) -> None:
        with pytest.raises(TypeError, match="builder"):
            SpecimenBuilderCustomization(None)  # type: ignore[arg-type]

    def test_none_fixture_raises(self) -> None:
        with pytest.raises(TypeError, match="fixture"):
            SpecimenBuilderCustomization(FixedBuilder(int, 1)).customize(None)  # type: ignore[arg-type]


class TestCompositeCustomization:
    """Tests for CompositeCustomization."""

    def test_applies_in_order(self) -> None:
        log: list[str] = []
        composite = CompositeCustomization(RecordingCustomization(log, "a"), RecordingCustomization(log, "b"))
        composite.customize(Fixture())
        assert log == ["a", "b"]

    def test_empty_composite(self) -> None:
        fixture = Fixture()
        CompositeCustomization().customize(fixture)
        assert fixture.customizations == []

    def test_none_member_raises(self) -> None:
        with pytest.raises(TypeError, match="None"):
            CompositeCustomization(None)  # type: ignore[arg-type]


class TestDomainCustomization:
    """Tests for DomainCustomization subclasses."""

    def test_is_composite(self) -> None:
        assert isinstance(ShopCustomization(), CompositeCustomization)
        assert issubclass(ShopCustomization, DomainCustomization)

    def test_customizes_nested_values(self) -> None:
        fixture = Fixture().customize(ShopCustomization())
        assert fixture.create(Money) == Money(FIXED_AMOUNT)
        assert fixture.create(Order).total == Money(FIXED_AMOUNT)
