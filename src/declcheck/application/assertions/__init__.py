"""Structural assertion objects.

One family per member kind, each exposing verify(type_):
- Constructors: HasConstructorAssertion, HasNoConstructorAssertion,
  HasParameterlessConstructorAssertion, HasNoParameterlessConstructorAssertion
- Fields, events, properties, methods: Has*/HasNo* pairs
- IsExtensionClassAssertion: static extension class shape
"""

from declcheck.application.assertions._base import IdiomaticAssertion
from declcheck.application.assertions.constructors import (
    ConstructorAssertion,
    HasConstructorAssertion,
    HasNoConstructorAssertion,
    HasNoParameterlessConstructorAssertion,
    HasParameterlessConstructorAssertion,
)
from declcheck.application.assertions.events import EventAssertion, HasEventAssertion, HasNoEventAssertion
from declcheck.application.assertions.extension_class import IsExtensionClassAssertion
from declcheck.application.assertions.fields import FieldAssertion, HasFieldAssertion, HasNoFieldAssertion
from declcheck.application.assertions.methods import HasMethodAssertion, HasNoMethodAssertion, MethodAssertion
from declcheck.application.assertions.properties import (
    HasNoPropertyAssertion,
    HasPropertyAssertion,
    PropertyAssertion,
)

__all__ = [
    # Base
    "IdiomaticAssertion",
    # Constructors
    "ConstructorAssertion",
    "HasConstructorAssertion",
    "HasNoConstructorAssertion",
    "HasParameterlessConstructorAssertion",
    "HasNoParameterlessConstructorAssertion",
    # Fields
    "FieldAssertion",
    "HasFieldAssertion",
    "HasNoFieldAssertion",
    # Events
    "EventAssertion",
    "HasEventAssertion",
    "HasNoEventAssertion",
    # Properties
    "PropertyAssertion",
    "HasPropertyAssertion",
    "HasNoPropertyAssertion",
    # Methods
    "MethodAssertion",
    "HasMethodAssertion",
    "HasNoMethodAssertion",
    # Types
    "IsExtensionClassAssertion",
]
