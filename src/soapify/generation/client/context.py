from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol

from ...descriptor import MethodDescriptor
from ..class_model import ClassModel


class AssemblyContext(Protocol):
    """Anything an assembler can be asked to handle.

    Contexts are tagged with ``kind`` so that the orchestrator can pick an
    assembler with a single capability check.
    """

    kind: ClassVar[str]
    class_model: ClassModel


class Assembler(Protocol):
    def can_assemble(self, context: AssemblyContext) -> bool: ...

    def assemble(self, context: AssemblyContext) -> None: ...


@dataclass
class ClientOutput:
    """Output of client code generation."""

    code: str
    class_model: ClassModel


@dataclass
class ClientMethodContext:
    """Context for assembling one client method.

    Attributes:
        descriptor: The remote operation to assemble
        class_model: The class receiving the generated member

    Note:
        class_model is mutated by the assembler; descriptor is read-only.
    """

    kind: ClassVar[str] = "client_method"

    descriptor: MethodDescriptor
    class_model: ClassModel

    @property
    def has_arguments(self) -> bool:
        return len(self.descriptor.parameters) > 0

    @property
    def is_multi_argument(self) -> bool:
        return len(self.descriptor.parameters) > 1
