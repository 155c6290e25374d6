from .descriptor import MethodDescriptor, Parameter, ServiceDescription
from .errors import AssemblyError, DescriptorError, SoapifyError
from .generation import (
    AssemblyProfile,
    ClassEmitter,
    ClassModel,
    ClientMethodAssembler,
    ClientMethodContext,
    generate_client,
    resolve_reference,
)
from .generator import generate_source
from .loader import ServiceDocument, load_service

__all__ = [
    "AssemblyError",
    "DescriptorError",
    "SoapifyError",
    "AssemblyProfile",
    "ClassEmitter",
    "ClassModel",
    "ClientMethodAssembler",
    "ClientMethodContext",
    "MethodDescriptor",
    "Parameter",
    "ServiceDescription",
    "ServiceDocument",
    "generate_client",
    "generate_source",
    "load_service",
    "resolve_reference",
]
