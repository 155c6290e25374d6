from .class_model import ClassModel, DocBlock, DocTag, ImportTable, MethodModel, ParameterModel
from .client import ClientMethodAssembler, ClientMethodContext, generate_client
from .emitter import ClassEmitter
from .imports import local_reference, resolve_reference
from .profile import AssemblyProfile

__all__ = [
    "AssemblyProfile",
    "ClassEmitter",
    "ClassModel",
    "ClientMethodAssembler",
    "ClientMethodContext",
    "DocBlock",
    "DocTag",
    "ImportTable",
    "MethodModel",
    "ParameterModel",
    "generate_client",
    "local_reference",
    "resolve_reference",
]
