"""SUT injection relay.

Intercepts requests for the system under test:
    SutRequest(T)                 -> T
    ParameterRequest named "sut"  -> its annotation
Everything else is declined with NO_SPECIMEN.

For an intercepted type the specification's override factory for exactly
that type wins; otherwise the context generates it. An InstanceSpecification
then applies its modification hook to the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from declcheck.application.specimens.specification import InstanceSpecification, override_factories
from declcheck.domain.model.requests import ParameterRequest, SutRequest
from declcheck.domain.ports.specimen_builder import NO_SPECIMEN

if TYPE_CHECKING:
    from declcheck.domain.ports.specimen_builder import SpecimenContext

logger = logging.getLogger(__name__)

SUT_PARAMETER_NAME = "sut"


class SutInjectionRelay:
    """Specimen builder routing SUT requests through a specification."""

    def __init__(self, specification: object) -> None:
        """Bind relay to a specification instance.

        Raises:
            TypeError: If specification is None
        """
        if specification is None:
            raise TypeError("specification must not be None")
        self._specification = specification

    @property
    def specification(self) -> object:
        """Specification consulted for overrides and the modification hook."""
        return self._specification

    def create(self, request: object, context: SpecimenContext) -> object:
        """Create the SUT, or NO_SPECIMEN for requests that are not SUT requests.

        Raises:
            TypeError: If context is None
            MutationHookNotFoundError: If the configured hook does not exist

        Exceptions raised by override factories propagate unchanged.
        """
        if context is None:
            raise TypeError("context must not be None")

        sut_type = requested_sut_type(request)
        if sut_type is None:
            return NO_SPECIMEN

        specification = self._specification
        factory = override_factories(type(specification)).get(sut_type)
        if factory is not None:
            logger.debug("%s overrides SUT %r", type(specification).__qualname__, sut_type)
            sut = factory(specification)
        else:
            logger.debug("SUT %r generated by fixture", sut_type)
            sut = context.resolve(sut_type)

        if isinstance(specification, InstanceSpecification):
            sut = specification.modify_sut(sut)
        return sut


def requested_sut_type(request: object) -> object | None:
    """SUT type carried by request, None if request is not a SUT request."""
    match request:
        case SutRequest(sut_type=sut_type):
            return sut_type
        case ParameterRequest(name=name, annotation=annotation) if name == SUT_PARAMETER_NAME:
            return annotation
        case _:
            return None
