"""Declaration query builder: detail flags -> MemberQuery.

Pure functions. Same flags always give the same query.
"""

from __future__ import annotations

from declcheck.domain.model.details import FieldDetails, MemberDetails, PropertyDetails
from declcheck.domain.model.enums import AccessorState
from declcheck.domain.model.query import InstanceScope, MemberQuery, SearchScope
from declcheck.domain.model.visibility import MemberVisibility


def search_scope(visibility: MemberVisibility) -> SearchScope:
    """Translate visibility mask to search scope.

    No primitive in mask means public only. Otherwise PUBLIC if the mask
    contains PUBLIC, NON_PUBLIC if it contains any other primitive.

    Args:
        visibility: Requested visibility mask

    Returns:
        Search scope (never empty)
    """
    mask = _require_visibility(visibility)
    if not mask & MemberVisibility.ALL:
        return SearchScope.PUBLIC

    scope = SearchScope(0)
    if mask & MemberVisibility.PUBLIC:
        scope |= SearchScope.PUBLIC
    if mask & (MemberVisibility.ALL & ~MemberVisibility.PUBLIC):
        scope |= SearchScope.NON_PUBLIC
    return scope


def instance_scope(*, static: bool) -> InstanceScope:
    """Static flag present -> static only, absent -> instance only."""
    return InstanceScope.STATIC if static else InstanceScope.INSTANCE


def visibility_query(visibility: MemberVisibility, *, static: bool = False) -> MemberQuery:
    """Build query from visibility mask alone (constructors).

    Args:
        visibility: Requested visibility mask
        static: Search static members instead of instance ones

    Returns:
        MemberQuery
    """
    return MemberQuery(
        visibility=search_scope(visibility),
        instance=instance_scope(static=static),
    )


def member_query(
    details: MemberDetails,
    visibility: MemberVisibility = MemberVisibility.NONE,
) -> MemberQuery:
    """Build query for methods and events.

    Args:
        details: Declaration details
        visibility: Requested visibility mask

    Returns:
        MemberQuery
    """
    flags = _require_flags(details, MemberDetails, "details")
    return MemberQuery(
        visibility=search_scope(visibility),
        instance=instance_scope(static=bool(flags & MemberDetails.STATIC)),
        declared_only=bool(flags & MemberDetails.DECLARED),
    )


def field_query(
    details: FieldDetails,
    visibility: MemberVisibility = MemberVisibility.NONE,
) -> MemberQuery:
    """Build query for fields.

    CONST fields are static by nature: CONST implies static scope.

    Args:
        details: Declaration details
        visibility: Requested visibility mask

    Returns:
        MemberQuery
    """
    flags = _require_flags(details, FieldDetails, "details")
    static = bool(flags & (FieldDetails.STATIC | FieldDetails.CONST))
    return MemberQuery(
        visibility=search_scope(visibility),
        instance=instance_scope(static=static),
        declared_only=bool(flags & FieldDetails.DECLARED),
    )


def getter_state(details: PropertyDetails) -> AccessorState:
    """Requested getter state.

    Raises:
        ValueError: If more than one getter state is selected
    """
    flags = _require_flags(details, PropertyDetails, "details")
    return _accessor_state(
        flags,
        public=PropertyDetails.PUBLIC_GETTER,
        protected=PropertyDetails.PROTECTED_GETTER,
        absent=PropertyDetails.NO_GETTER,
        group="getter",
    )


def setter_state(details: PropertyDetails) -> AccessorState:
    """Requested setter state.

    Raises:
        ValueError: If more than one setter state is selected
    """
    flags = _require_flags(details, PropertyDetails, "details")
    return _accessor_state(
        flags,
        public=PropertyDetails.PUBLIC_SETTER,
        protected=PropertyDetails.PROTECTED_SETTER,
        absent=PropertyDetails.NO_SETTER,
        group="setter",
    )


def property_query(details: PropertyDetails) -> MemberQuery:
    """Build query for properties.

    Getter and setter contribute their scopes independently: a protected
    getter with a public setter searches both scopes. NO_GETTER with
    NO_SETTER searches both scopes (absence assertions).

    Args:
        details: Declaration details including accessor states

    Returns:
        MemberQuery
    """
    flags = _require_flags(details, PropertyDetails, "details")
    states = (getter_state(flags), setter_state(flags))

    scope = SearchScope(0)
    for state in states:
        if state is AccessorState.PUBLIC:
            scope |= SearchScope.PUBLIC
        elif state is AccessorState.PROTECTED:
            scope |= SearchScope.NON_PUBLIC
    if not scope:
        scope = SearchScope.PUBLIC | SearchScope.NON_PUBLIC

    return MemberQuery(
        visibility=scope,
        instance=instance_scope(static=bool(flags & PropertyDetails.STATIC)),
        declared_only=bool(flags & PropertyDetails.DECLARED),
    )


def _accessor_state(
    flags: PropertyDetails,
    *,
    public: PropertyDetails,
    protected: PropertyDetails,
    absent: PropertyDetails,
    group: str,
) -> AccessorState:
    selected = [
        state
        for flag, state in (
            (public, AccessorState.PUBLIC),
            (protected, AccessorState.PROTECTED),
            (absent, AccessorState.ABSENT),
        )
        if flags & flag
    ]
    if len(selected) > 1:
        raise ValueError(f"{group} states are mutually exclusive, got {flags!r}")
    return selected[0] if selected else AccessorState.PUBLIC


def _require_visibility(visibility: MemberVisibility) -> MemberVisibility:
    if not isinstance(visibility, MemberVisibility):
        raise TypeError(f"visibility must be MemberVisibility, got {type(visibility).__name__}")
    return visibility


def _require_flags[F: (MemberDetails, FieldDetails, PropertyDetails)](
    flags: F,
    flag_type: type[F],
    what: str,
) -> F:
    if not isinstance(flags, flag_type):
        raise TypeError(f"{what} must be {flag_type.__name__}, got {type(flags).__name__}")
    return flags
