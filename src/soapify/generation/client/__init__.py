"""Client class generation module.

This module provides the generate_client() function that builds a client
class from the operations of a remote service.

For every operation a ClientMethodContext is created and handed to the first
assembler whose capability check accepts it. The default assembler adds:
- A public method named after the normalized operation name
- At most one parameter (several parameters collapse into a multi-argument request)
- A docstring with @param, @return and @throws tags
- The imports needed by every type mentioned
"""

from __future__ import annotations

import logging
from typing import Sequence

from ...descriptor import ServiceDescription
from ...errors import AssemblyError
from ..class_model import ClassModel
from ..emitter import ClassEmitter
from ..profile import AssemblyProfile
from .context import Assembler, AssemblyContext, ClientMethodContext, ClientOutput
from .methods import ClientMethodAssembler

__all__ = [
    "generate_client",
    "dispatch",
    "Assembler",
    "AssemblyContext",
    "ClientMethodAssembler",
    "ClientMethodContext",
    "ClientOutput",
]

logger = logging.getLogger(__name__)


def dispatch(context: AssemblyContext, assemblers: Sequence[Assembler]) -> None:
    """Assemble a context with the first assembler that supports it.

    Raises:
        AssemblyError: If no assembler supports the context, or assembly fails
    """
    for assembler in assemblers:
        if assembler.can_assemble(context):
            assembler.assemble(context)
            return
    raise AssemblyError(f"No assembler supports context of kind {context.kind!r}")


def generate_client(
    service: ServiceDescription,
    profile: AssemblyProfile,
    assemblers: Sequence[Assembler] | None = None,
) -> ClientOutput:
    """Generate a client class from a service description.

    Args:
        service: The class to generate and its remote operations
        profile: Fixed identifiers and switches for the generated code
        assemblers: Assemblers to dispatch to, defaults to ClientMethodAssembler

    Returns:
        ClientOutput containing the generated module source and the class model
    """
    if assemblers is None:
        assemblers = [ClientMethodAssembler(profile)]
    class_model = ClassModel(name=service.class_name, namespace=service.namespace)
    for descriptor in service.methods:
        dispatch(ClientMethodContext(descriptor=descriptor, class_model=class_model), assemblers)
    logger.info(
        "Generated %s with %d method(s) and %d import(s)",
        service.class_name,
        len(class_model.methods),
        len(class_model.imports),
    )
    code = ClassEmitter(profile).emit(class_model)
    return ClientOutput(code=code, class_model=class_model)
