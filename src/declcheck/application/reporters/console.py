"""Console reporter: declared members of a type -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from declcheck.application.lookup import resolve_introspector, type_label
from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.query import MemberQuery

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import AccessorInfo, MemberInfo
    from declcheck.domain.ports.introspector import TypeIntrospector


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        declared_only: Only members introduced on the reported type.
        kinds: Member kinds to include, in display order.
        width: Console width in characters.
        color: Emit ANSI styles.
    """

    declared_only: bool = False
    kinds: tuple[MemberKind, ...] = tuple(MemberKind)
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.kinds:
            raise ValueError("kinds must not be empty")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders member declarations as a table.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None, introspector: TypeIntrospector | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            introspector: Introspection port. PythonIntrospector if None.
        """
        self._config = config or ConsoleConfig()
        self._introspector = resolve_introspector(introspector)

    def report(self, type_: object) -> str:
        """Format all members of type_ visible through the introspection port.

        Args:
            type_: Class to describe.

        Returns:
            Formatted string with a header and one table row per member.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=self._config.color, width=self._config.width)

        info = self._introspector.describe(type_)
        members = self._collect(type_)

        console.rule(f"[bold]{info.name}[/bold]")
        console.print(self._type_line(info.is_public, info.is_sealed, info.is_abstract, len(members)))

        if members:
            console.print(self._table(members))

        return output.getvalue()

    def _collect(self, type_: object) -> tuple[MemberInfo, ...]:
        query = MemberQuery.everything(declared_only=self._config.declared_only)
        collected: list[MemberInfo] = []
        for kind in self._config.kinds:
            collected.extend(self._introspector.members(type_, kind, query))
        return tuple(collected)

    @staticmethod
    def _type_line(is_public: bool, is_sealed: bool, is_abstract: bool, count: int) -> str:
        traits = [
            "public" if is_public else "non-public",
            *(["sealed"] if is_sealed else []),
            *(["abstract"] if is_abstract else []),
        ]
        return f"[bold]Type:[/bold] {' '.join(traits)}  [bold]Members:[/bold] {count}"

    @staticmethod
    def _table(members: tuple[MemberInfo, ...]) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Kind")
        table.add_column("Name")
        table.add_column("Visibility")
        table.add_column("Modifiers")
        table.add_column("Type")
        table.add_column("Parameters")
        table.add_column("Declared by", style="dim")

        for member in members:
            table.add_row(
                member.kind.name.lower(),
                member.name,
                _visibility_cell(member),
                ", ".join(_modifiers(member)),
                "" if member.kind is MemberKind.CONSTRUCTOR else type_label(member.value_type),
                ", ".join(type_label(p) for p in member.parameter_types),
                type_label(member.declaring_type),
            )
        return table


def _visibility_cell(member: MemberInfo) -> str:
    if member.kind is not MemberKind.PROPERTY:
        return member.visibility.name or ""
    return f"get: {_accessor_cell(member.getter)}, set: {_accessor_cell(member.setter)}"


def _accessor_cell(accessor: AccessorInfo | None) -> str:
    if accessor is None:
        return "-"
    return accessor.visibility.name or ""


def _modifiers(member: MemberInfo) -> list[str]:
    flags = {
        "static": member.is_static,
        "abstract": member.is_abstract,
        "virtual": member.is_virtual,
        "readonly": member.is_read_only,
        "const": member.is_const,
        "extension": member.is_extension,
    }
    return [name for name, present in flags.items() if present]
