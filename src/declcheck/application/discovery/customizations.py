"""Domain customization discovery in test packages."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
import sys
from types import ModuleType

from declcheck.application.specimens.customizations import DomainCustomization

logger = logging.getLogger(__name__)


def import_package(package: ModuleType | str) -> ModuleType:
    """Import package (given as module or dotted name).

    Raises:
        TypeError: If package is None or has the wrong type
        ValueError: If package is an empty name
        ModuleNotFoundError: If the name cannot be imported
    """
    if package is None:
        raise TypeError("package must not be None")
    if isinstance(package, ModuleType):
        return package
    if not isinstance(package, str):
        raise TypeError(f"package must be module or str, got {type(package).__name__}")
    if not package.strip():
        raise ValueError("package must not be empty")
    return importlib.import_module(package)


def discover_modules(package: ModuleType) -> tuple[ModuleType, ...]:
    """Package followed by all its submodules (imported).

    A plain module yields only itself.
    """
    modules = [package]
    path = getattr(package, "__path__", None)
    if path is None:
        return tuple(modules)

    for info in pkgutil.walk_packages(path, prefix=f"{package.__name__}."):
        modules.append(importlib.import_module(info.name))
    return tuple(modules)


def discover_domain_customizations(package: ModuleType | str) -> tuple[type[DomainCustomization], ...]:
    """Concrete DomainCustomization subclasses defined in package.

    A class qualifies when it is not abstract and its constructor accepts
    no arguments. Classes imported from elsewhere count only where defined.

    Args:
        package: Package (scanned with all submodules) or module

    Returns:
        Qualifying classes in discovery order, without duplicates
    """
    root = import_package(package)
    found: list[type[DomainCustomization]] = []
    seen: set[type] = set()

    for module in discover_modules(root):
        for _, candidate in inspect.getmembers(module, inspect.isclass):
            if candidate in seen or candidate is DomainCustomization:
                continue
            if not issubclass(candidate, DomainCustomization):
                continue
            if not _defined_in(candidate, root):
                continue
            seen.add(candidate)
            if inspect.isabstract(candidate) or not _parameterless(candidate):
                logger.debug("skipping %s: not constructible without arguments", candidate.__qualname__)
                continue
            found.append(candidate)

    logger.debug(
        "found %d domain customization(s) in %s: %s",
        len(found),
        root.__name__,
        ", ".join(c.__qualname__ for c in found),
    )
    return tuple(found)


def assembly_of(specification: object) -> ModuleType:
    """Outermost regular package containing the specification's module.

    A module outside any regular package is returned as is. A module passed
    as specification stands for itself.

    Raises:
        TypeError: If specification is None
    """
    if specification is None:
        raise TypeError("specification must not be None")

    if isinstance(specification, ModuleType):
        module = specification
    else:
        cls = specification if isinstance(specification, type) else type(specification)
        module = sys.modules[cls.__module__]

    parts = module.__name__.split(".")
    for depth in range(1, len(parts)):
        candidate = sys.modules.get(".".join(parts[:depth]))
        if candidate is not None and _is_regular_package(candidate):
            return candidate
    return module


def _is_regular_package(module: ModuleType) -> bool:
    return getattr(module, "__path__", None) is not None and getattr(module, "__file__", None) is not None


def _defined_in(cls: type, root: ModuleType) -> bool:
    return cls.__module__ == root.__name__ or cls.__module__.startswith(f"{root.__name__}.")


def _parameterless(cls: type) -> bool:
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        return False
    return all(
        p.default is not p.empty or p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
        for p in signature.parameters.values()
    )
