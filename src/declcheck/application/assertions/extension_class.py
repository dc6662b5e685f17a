"""Extension class shape assertion.

An extension class is a public, sealed, non-instantiable class holding only
static members; every public method extends the type of its first parameter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.application import lookup
from declcheck.application._validation import require_target
from declcheck.application.assertions._base import IdiomaticAssertion
from declcheck.domain.exceptions import InvalidExtensionClassImplementationError
from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.query import InstanceScope, MemberQuery, SearchScope
from declcheck.domain.model.visibility import MemberVisibility

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import MemberInfo
    from declcheck.domain.ports.introspector import TypeIntrospector

_PUBLIC_MEMBERS = MemberQuery(
    visibility=SearchScope.PUBLIC,
    instance=InstanceScope.STATIC | InstanceScope.INSTANCE,
)
_DECLARED_MEMBERS = MemberQuery.everything(declared_only=True)


class IsExtensionClassAssertion(IdiomaticAssertion):
    """Type is a valid extension class.

    All categories are inspected. Violations are reported together, in
    order: type shape, fields, constructors, events, properties, methods.
    """

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise InvalidExtensionClassImplementationError listing every violation."""
        violations = self.violations(type_, introspector)
        if violations:
            raise InvalidExtensionClassImplementationError(type_, violations)

    def violations(self, type_: object, introspector: TypeIntrospector | None = None) -> tuple[str, ...]:
        """Collect violations without raising.

        Args:
            type_: Type to inspect
            introspector: Introspection port, PythonIntrospector if None

        Returns:
            Violations in category order, empty if the type qualifies
        """
        port = lookup.resolve_introspector(introspector)
        info = port.describe(require_target(type_))

        result: list[str] = []
        if not info.is_class:
            result.append("type is not a class")
            return tuple(result)
        if not info.is_public:
            result.append("type is not public")
        if not info.is_sealed:
            result.append("type is not sealed")
        if not info.is_abstract:
            result.append("type can be instantiated")

        result.extend(
            f"instance field '{m.name}'"
            for m in port.members(type_, MemberKind.FIELD, _PUBLIC_MEMBERS)
            if not m.is_static
        )
        result.extend(
            f"instance constructor '{_signature(m)}'"
            for m in port.members(type_, MemberKind.CONSTRUCTOR, _PUBLIC_MEMBERS)
            if not m.is_static
        )
        result.extend(
            f"instance event '{m.name}'"
            for m in port.members(type_, MemberKind.EVENT, _PUBLIC_MEMBERS)
            if not m.is_static
        )
        result.extend(
            f"property '{m.name}' with instance accessor"
            for m in port.members(type_, MemberKind.PROPERTY, _PUBLIC_MEMBERS)
            if any(not a.is_static for a in m.accessors)
        )
        for method in port.members(type_, MemberKind.METHOD, _DECLARED_MEMBERS):
            if not method.is_static:
                result.append(f"instance method '{_signature(method)}'")
            elif method.visibility is MemberVisibility.PUBLIC and not _extends_first_parameter(method):
                result.append(f"public method '{_signature(method)}' is not an extension method")
        return tuple(result)


def _extends_first_parameter(method: MemberInfo) -> bool:
    return method.is_extension and bool(method.parameter_types)


def _signature(member: MemberInfo) -> str:
    params = ", ".join(lookup.type_label(p) for p in member.parameter_types)
    return f"{member.name}({params})"
