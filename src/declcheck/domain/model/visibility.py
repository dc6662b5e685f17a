"""Member visibility mask."""

from __future__ import annotations

from enum import IntFlag


class MemberVisibility(IntFlag):
    """Accessibility levels of a member.

    Six mutually exclusive primitives plus named unions.
    Python has no access modifiers: PUBLIC/FAMILY/PRIVATE follow naming
    convention (name, _name, __name), the assembly levels are declared
    explicitly with markers.
    """

    NONE = 0x00
    PUBLIC = 0x01
    FAMILY = 0x02  # protected
    ASSEMBLY = 0x04  # internal
    FAMILY_AND_ASSEMBLY = 0x08  # private protected
    FAMILY_OR_ASSEMBLY = 0x10  # protected internal
    PRIVATE = 0x20

    ANY_FAMILY = FAMILY | FAMILY_AND_ASSEMBLY | FAMILY_OR_ASSEMBLY
    ANY_ASSEMBLY = ASSEMBLY | FAMILY_AND_ASSEMBLY | FAMILY_OR_ASSEMBLY
    PUBLIC_FAMILY = FAMILY | FAMILY_OR_ASSEMBLY
    ONLY_ASSEMBLY = ASSEMBLY | FAMILY_AND_ASSEMBLY
    ALL = PUBLIC | FAMILY | ASSEMBLY | FAMILY_AND_ASSEMBLY | FAMILY_OR_ASSEMBLY | PRIVATE

    @property
    def is_composite(self) -> bool:
        """More than one primitive level set."""
        return self.value.bit_count() > 1

    @property
    def is_primitive(self) -> bool:
        """Exactly one primitive level set."""
        return self.value.bit_count() == 1

    def primitives(self) -> tuple[MemberVisibility, ...]:
        """Primitive levels contained in this mask, in bit order."""
        return tuple(level for level in PRIMITIVE_VISIBILITIES if level & self)

    def is_match(self, visibility: MemberVisibility) -> bool:
        """Check whether mask admits a member of given primitive visibility.

        Args:
            visibility: Primitive visibility of an introspected member

        Returns:
            True if the primitive is part of this mask

        Raises:
            ValueError: If visibility is not a single primitive level
        """
        if not MemberVisibility(visibility).is_primitive:
            raise ValueError(f"member visibility must be a single primitive level, got {visibility!r}")
        return bool(self & visibility)


PRIMITIVE_VISIBILITIES: tuple[MemberVisibility, ...] = (
    MemberVisibility.PUBLIC,
    MemberVisibility.FAMILY,
    MemberVisibility.ASSEMBLY,
    MemberVisibility.FAMILY_AND_ASSEMBLY,
    MemberVisibility.FAMILY_OR_ASSEMBLY,
    MemberVisibility.PRIVATE,
)

# Documented components of each named union. Tests verify the invariant.
UNION_COMPONENTS: dict[MemberVisibility, tuple[MemberVisibility, ...]] = {
    MemberVisibility.ANY_FAMILY: (
        MemberVisibility.FAMILY,
        MemberVisibility.FAMILY_AND_ASSEMBLY,
        MemberVisibility.FAMILY_OR_ASSEMBLY,
    ),
    MemberVisibility.ANY_ASSEMBLY: (
        MemberVisibility.FAMILY_AND_ASSEMBLY,
        MemberVisibility.FAMILY_OR_ASSEMBLY,
        MemberVisibility.ASSEMBLY,
    ),
    MemberVisibility.PUBLIC_FAMILY: (
        MemberVisibility.FAMILY,
        MemberVisibility.FAMILY_OR_ASSEMBLY,
    ),
    MemberVisibility.ONLY_ASSEMBLY: (
        MemberVisibility.FAMILY_AND_ASSEMBLY,
        MemberVisibility.ASSEMBLY,
    ),
    MemberVisibility.ALL: PRIMITIVE_VISIBILITIES,
}
