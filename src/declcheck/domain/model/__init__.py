"""Domain model: value objects and flag algebra."""

from declcheck.domain.model.configuration import DeclCheckConfig
from declcheck.domain.model.details import FieldDetails, MemberDetails, PropertyDetails
from declcheck.domain.model.enums import AccessorState, MemberKind
from declcheck.domain.model.member_info import AccessorInfo, MemberInfo, TypeInfo
from declcheck.domain.model.query import InstanceScope, MemberQuery, SearchScope
from declcheck.domain.model.requests import MultipleRequest, ParameterRequest, SequenceRequest, SutRequest
from declcheck.domain.model.visibility import MemberVisibility

__all__ = [
    "AccessorInfo",
    "AccessorState",
    "DeclCheckConfig",
    "FieldDetails",
    "InstanceScope",
    "MemberDetails",
    "MemberInfo",
    "MemberKind",
    "MemberQuery",
    "MemberVisibility",
    "MultipleRequest",
    "ParameterRequest",
    "PropertyDetails",
    "SearchScope",
    "SequenceRequest",
    "SutRequest",
    "TypeInfo",
]
