"""Declaration detail flags per member kind."""

from __future__ import annotations

from enum import IntFlag

from declcheck.domain.model.visibility import MemberVisibility


class MemberDetails(IntFlag):
    """Declaration details of methods and events."""

    DEFAULT = 0x00
    DECLARED = 0x01  # introduced on the queried type, not inherited
    STATIC = 0x02
    ABSTRACT = 0x04
    VIRTUAL = 0x08


class FieldDetails(IntFlag):
    """Declaration details of fields."""

    DEFAULT = 0x00
    DECLARED = 0x01
    STATIC = 0x02
    READ_ONLY = 0x04
    CONST = 0x08


class PropertyDetails(IntFlag):
    """Declaration details of properties.

    Getter and setter are independent tri-state groups. Each group selects
    at most one state; no explicit state means a public accessor.
    """

    DEFAULT = 0x0000
    DECLARED = 0x0001
    STATIC = 0x0002
    ABSTRACT = 0x0004
    VIRTUAL = 0x0008
    PUBLIC_GETTER = 0x0010
    PROTECTED_GETTER = 0x0020
    NO_GETTER = 0x0040
    PUBLIC_SETTER = 0x0080
    PROTECTED_SETTER = 0x0100
    NO_SETTER = 0x0200

    GETTER = PUBLIC_GETTER | PROTECTED_GETTER | NO_GETTER
    SETTER = PUBLIC_SETTER | PROTECTED_SETTER | NO_SETTER
    ALL = DECLARED | STATIC | ABSTRACT | VIRTUAL | GETTER | SETTER

    def with_getter_visibility(self, visibility: MemberVisibility) -> PropertyDetails:
        """Replace getter state with one derived from a visibility mask.

        PUBLIC gives a public getter, otherwise FAMILY or FAMILY_OR_ASSEMBLY
        a protected one, NONE no getter. Other masks clear the group.

        Args:
            visibility: Getter visibility mask

        Returns:
            New details with updated getter group
        """
        return _with_accessor(
            self,
            visibility,
            group=PropertyDetails.GETTER,
            public=PropertyDetails.PUBLIC_GETTER,
            protected=PropertyDetails.PROTECTED_GETTER,
            absent=PropertyDetails.NO_GETTER,
        )

    def with_setter_visibility(self, visibility: MemberVisibility) -> PropertyDetails:
        """Replace setter state with one derived from a visibility mask.

        Args:
            visibility: Setter visibility mask

        Returns:
            New details with updated setter group
        """
        return _with_accessor(
            self,
            visibility,
            group=PropertyDetails.SETTER,
            public=PropertyDetails.PUBLIC_SETTER,
            protected=PropertyDetails.PROTECTED_SETTER,
            absent=PropertyDetails.NO_SETTER,
        )


def _with_accessor(
    details: PropertyDetails,
    visibility: MemberVisibility,
    *,
    group: PropertyDetails,
    public: PropertyDetails,
    protected: PropertyDetails,
    absent: PropertyDetails,
) -> PropertyDetails:
    result = details & ~group
    if visibility & MemberVisibility.PUBLIC:
        result |= public
    elif visibility & MemberVisibility.PUBLIC_FAMILY:
        result |= protected
    elif visibility == MemberVisibility.NONE:
        result |= absent
    return PropertyDetails(result)
