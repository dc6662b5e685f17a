"""declcheck - declarative structural conformance checks and SUT specimens for pytest."""

__version__ = "0.1.0"

from declcheck.application import assert_type
from declcheck.application.discovery import DomainFixture
from declcheck.domain.model import FieldDetails, MemberDetails, MemberVisibility, PropertyDetails

__all__ = [
    "DomainFixture",
    "FieldDetails",
    "MemberDetails",
    "MemberVisibility",
    "PropertyDetails",
    "__version__",
    "assert_type",
]
