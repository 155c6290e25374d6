"""Documentation for generated client methods.

Each generator matches one parameter shape of the assembled method. Every
type mentioned is resolved through resolve_reference() so that docstrings use
the same short names as the rest of the generated module.
"""

from __future__ import annotations

from ..class_model import DocBlock, DocTag
from ..imports import resolve_reference
from ..profile import AssemblyProfile
from .context import ClientMethodContext

MULTI_ARGUMENT_DESCRIPTION = "MultiArgumentRequest with following params:"


def generate_no_argument_docblock(context: ClientMethodContext, profile: AssemblyProfile) -> DocBlock:
    return DocBlock(
        tags=(
            _return_tag(context, profile),
            _throws_tag(context, profile),
        ),
    )


def generate_single_argument_docblock(context: ClientMethodContext, profile: AssemblyProfile) -> DocBlock:
    class_model = context.class_model
    param = context.descriptor.parameters[0]
    description = "{}|{} {}".format(
        resolve_reference(profile.request_interface, class_model),
        resolve_reference(param.type, class_model, prefixed=True),
        param.name,
    )
    return DocBlock(
        tags=(
            DocTag("param", description),
            _return_tag(context, profile),
            _throws_tag(context, profile),
        ),
    )


def generate_multi_argument_docblock(context: ClientMethodContext, profile: AssemblyProfile) -> DocBlock:
    """Document a method whose parameters are packed into one request value.

    The original parameters are listed in the long description since the
    signature only declares the multi-argument request.

    Note:
        Unlike the other variants this docblock carries no ``throws`` tag.
    """
    class_model = context.class_model
    lines = [MULTI_ARGUMENT_DESCRIPTION, ""]
    for parameter in context.descriptor.parameters:
        lines.append(f"{resolve_reference(parameter.type, class_model, prefixed=True)} {parameter.name}")
    return DocBlock(
        long_description="\n".join(lines),
        tags=(
            DocTag("param", resolve_reference(profile.multi_argument_type, class_model)),
            _return_tag(context, profile),
        ),
    )


def _return_tag(context: ClientMethodContext, profile: AssemblyProfile) -> DocTag:
    class_model = context.class_model
    description = "{}|{}".format(
        resolve_reference(profile.result_interface, class_model),
        resolve_reference(context.descriptor.return_type, class_model, prefixed=True),
    )
    return DocTag("return", description)


def _throws_tag(context: ClientMethodContext, profile: AssemblyProfile) -> DocTag:
    return DocTag("throws", resolve_reference(profile.fault_type, context.class_model))
