"""Domain fixture loading: one DomainCustomization per test package.

Components:
- discover_domain_customizations: scan a package and its submodules
- assembly_of: package a specification class belongs to
- DomainFixture: fixture customized with the package's DomainCustomization
"""

from declcheck.application.discovery.customizations import (
    assembly_of,
    discover_domain_customizations,
    discover_modules,
    import_package,
)
from declcheck.application.discovery.domain_fixture import DomainFixture

__all__ = [
    "DomainFixture",
    "assembly_of",
    "discover_domain_customizations",
    "discover_modules",
    "import_package",
]
