"""Infrastructure layer: introspection of live Python classes.

Components:
- PythonIntrospector: TypeIntrospector over classes, functions, descriptors
- markers: declarations Python has no syntax for (visibility, events, ...)
"""

from declcheck.infrastructure.markers import (
    BoundEvent,
    event,
    extension_method,
    static_class,
    virtual,
    visibility,
)
from declcheck.infrastructure.python_introspector import PythonIntrospector

__all__ = [
    "BoundEvent",
    "PythonIntrospector",
    "event",
    "extension_method",
    "static_class",
    "virtual",
    "visibility",
]
