"""Tests for the public API surface."""

import declcheck
from declcheck.application.discovery import DomainFixture
from declcheck.domain.model.visibility import MemberVisibility
from declcheck.presentation import api


class TestApiExports:
    """Every name in __all__ resolves."""

    def test_all_names_resolve(self) -> None:
        missing = [name for name in api.__all__ if not hasattr(api, name)]
        assert missing == []

    def test_no_duplicates(self) -> None:
        assert len(api.__all__) == len(set(api.__all__))

    def test_top_level_package(self) -> None:
        assert declcheck.__version__ == "0.1.0"
        for name in declcheck.__all__:
            assert hasattr(declcheck, name)

    def test_same_objects_as_layers(self) -> None:
        assert api.DomainFixture is DomainFixture
        assert api.MemberVisibility is MemberVisibility
