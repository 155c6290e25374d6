from __future__ import annotations

import keyword
import logging
from dataclasses import dataclass, field

from ...errors import AssemblyError
from ..class_model import DocBlock, MethodModel, ParameterModel
from ..imports import resolve_reference, split_qualified_name
from ..profile import AssemblyProfile
from .context import AssemblyContext, ClientMethodContext
from .docblocks import (
    generate_multi_argument_docblock,
    generate_no_argument_docblock,
    generate_single_argument_docblock,
)
from .helpers import normalize_method_name

logger = logging.getLogger(__name__)


@dataclass
class ClientMethodAssembler:
    """Adds one generated method per remote operation to a client class.

    The generated method declares at most one parameter. Operations with
    several parameters take a single multi-argument request instead, and the
    original parameters are only documented.
    """

    profile: AssemblyProfile = field(default_factory=AssemblyProfile)

    def can_assemble(self, context: AssemblyContext) -> bool:
        return context.kind == ClientMethodContext.kind

    def assemble(self, context: ClientMethodContext) -> None:
        """Build the method for ``context.descriptor`` and install it.

        Raises:
            AssemblyError: If the member cannot be built. The class model is
                left as it was before the call.
        """
        class_model = context.class_model
        descriptor = context.descriptor
        try:
            with class_model.transaction():
                class_model.set_extends(self.profile.client_base)
                resolve_reference(self.profile.client_base, class_model)

                name = normalize_method_name(
                    descriptor.wire_name,
                    style=self.profile.method_case,
                    reserved=(self.profile.transport_method,),
                )
                if class_model.has_method(name):
                    logger.debug("Replacing %s.%s", class_model.name, name)
                    class_model.remove_method(name)

                method = MethodModel(
                    name=name,
                    body=self._build_body(context),
                    return_type=descriptor.return_type,
                    parameters=self._build_parameters(context),
                    docblock=self._build_docblock(context),
                )
                class_model.add_method(method)
        except Exception as exc:
            logger.warning("Failed to assemble %r on %s: %s", descriptor.wire_name, class_model.name, exc)
            raise AssemblyError.from_exception(exc, descriptor.wire_name) from exc
        logger.debug("Assembled %s.%s from %r", class_model.name, name, descriptor.wire_name)

    def _build_parameters(self, context: ClientMethodContext) -> tuple[ParameterModel, ...]:
        if not context.has_arguments:
            return ()
        if context.is_multi_argument:
            return (ParameterModel(self.profile.multi_argument_name, self.profile.multi_argument_type),)
        param = context.descriptor.parameters[0]
        if not param.name.isidentifier() or keyword.iskeyword(param.name) or param.name == "self":
            raise ValueError(f"Invalid parameter name: {param.name!r}")
        split_qualified_name(param.type)
        return (ParameterModel(param.name, param.type),)

    def _build_body(self, context: ClientMethodContext) -> str:
        wire_name = context.descriptor.wire_name
        transport = self.profile.transport_method
        if not context.has_arguments:
            return f"return self.{transport}({wire_name!r})"
        if context.is_multi_argument:
            argument = self.profile.multi_argument_name
        else:
            argument = context.descriptor.parameters[0].name
        return f"return self.{transport}({wire_name!r}, {argument})"

    def _build_docblock(self, context: ClientMethodContext) -> DocBlock:
        if not context.has_arguments:
            return generate_no_argument_docblock(context, self.profile)
        if context.is_multi_argument:
            return generate_multi_argument_docblock(context, self.profile)
        return generate_single_argument_docblock(context, self.profile)
