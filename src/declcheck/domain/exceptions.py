"""Domain exceptions: all public errors of declcheck.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure raise these, never define their own public errors.
Argument validation uses builtin TypeError/ValueError directly (FAIL-FIRST).
"""

from __future__ import annotations


class DeclCheckError(Exception):
    """Base for all declcheck errors.

    Allows: except DeclCheckError to catch all library errors.
    """


class MemberDeclarationError(DeclCheckError, AttributeError):
    """Structural expectation about a member declaration failed.

    Inherits AttributeError: a member is (or is not) present on a type.

    Attributes:
        type_: Type that was checked.
        member: Description of the expected member.
    """

    default_message = "Member declaration check failed."

    def __init__(self, type_: object = None, member: str | None = None) -> None:
        """Initialize with checked type and member description."""
        self.type_ = type_
        self.member = member
        super().__init__(self._format())

    def _format(self) -> str:
        if self.type_ is None or self.member is None:
            return self.default_message
        return f"{self.default_message} type: {_type_name(self.type_)}, member: {self.member}"


class MissingMemberDeclarationError(MemberDeclarationError):
    """Expected member is not declared by the type."""

    default_message = "Member declaration is missing."


class MemberDeclarationNotExpectedError(MemberDeclarationError):
    """Member that must be absent is declared by the type."""

    default_message = "Member declaration is not expected."


class MissingInterfaceDeclarationError(DeclCheckError, TypeError):
    """Type does not declare the expected interface.

    Attributes:
        type_: Type that was checked.
        interface: Expected interface (abstract base or Protocol).
    """

    def __init__(self, type_: object, interface: object) -> None:
        """Initialize with checked type and expected interface."""
        self.type_ = type_
        self.interface = interface
        super().__init__(
            f"Interface declaration is missing. "
            f"type: {_type_name(type_)}, interface: {_type_name(interface)}"
        )


class InvalidExtensionClassImplementationError(DeclCheckError, TypeError):
    """Type is not a valid static extension class.

    All rule categories are inspected; violations keep category order
    (type shape, fields, constructors, events, properties, methods).

    Attributes:
        type_: Type that was checked.
        violations: Every violation found, first one is the earliest by order.
    """

    def __init__(self, type_: object, violations: tuple[str, ...]) -> None:
        """Initialize with checked type and its violations."""
        if not violations:
            raise ValueError("InvalidExtensionClassImplementationError requires at least one violation")

        self.type_ = type_
        self.violations = violations

        lines = [f"'{_type_name(type_)}' is not a valid extension class:"]
        lines.extend(f"  - {v}" for v in violations)
        super().__init__("\n".join(lines))

    @property
    def first_violation(self) -> str:
        """Earliest violation by category order."""
        return self.violations[0]


class DomainFixtureConfigurationError(DeclCheckError, ValueError):
    """Test package has no usable domain customization setup.

    Attributes:
        package: Name of the scanned package (or module).
        reason: Why the configuration is invalid.
    """

    def __init__(self, package: str, reason: str) -> None:
        """Initialize with package name and reason."""
        if not package:
            raise ValueError("package must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.package = package
        self.reason = reason
        super().__init__(f"Invalid domain fixture configuration in '{package}': {reason}")


class NoDomainCustomizationError(DomainFixtureConfigurationError):
    """Package declares no domain customization."""

    def __init__(self, package: str) -> None:
        """Initialize with package name."""
        super().__init__(package, "no concrete DomainCustomization with a parameterless constructor found")


class MultipleDomainCustomizationsError(DomainFixtureConfigurationError):
    """Package declares more than one domain customization.

    Attributes:
        candidates: Qualified names of all found customizations.
    """

    def __init__(self, package: str, candidates: tuple[str, ...]) -> None:
        """Initialize with package name and found candidates."""
        self.candidates = candidates
        super().__init__(
            package,
            f"multiple DomainCustomization classes found: {', '.join(candidates)}",
        )


class MutationHookNotFoundError(DeclCheckError, AttributeError):
    """Configured SUT modification method does not exist on the specification.

    Attributes:
        specification_type: Specification class that was searched.
        method_name: Configured hook name.
    """

    def __init__(self, specification_type: type, method_name: str) -> None:
        """Initialize with specification class and hook name."""
        self.specification_type = specification_type
        self.method_name = method_name
        super().__init__(
            f"SUT modification method '{method_name}' not found on '{specification_type.__qualname__}'"
        )


class SpecimenCreationError(DeclCheckError, RuntimeError):
    """Fixture cannot create a specimen for a request.

    Attributes:
        request: Request that could not be satisfied.
        reason: Error description.
    """

    def __init__(self, request: object, reason: str) -> None:
        """Initialize with failed request and reason."""
        self.request = request
        self.reason = reason
        super().__init__(f"Cannot create specimen for {request!r}: {reason}")


class IntrospectionError(DeclCheckError, TypeError):
    """Type cannot be introspected.

    Raised when annotations of a class cannot be resolved.

    Attributes:
        type_: Type being introspected.
        reason: Error description.
    """

    def __init__(self, type_: object, reason: str) -> None:
        """Initialize with type and reason."""
        self.type_ = type_
        self.reason = reason
        super().__init__(f"Cannot introspect '{_type_name(type_)}': {reason}")


def _type_name(type_: object) -> str:
    return getattr(type_, "__qualname__", None) or repr(type_)
