"""Descriptors of remote operations consumed by the code generator.

The descriptors are produced by an extraction phase (for example from a WSDL
document) and are read-only inputs to code generation.

Key classes:
- Parameter: One typed parameter of a remote operation
- MethodDescriptor: One remote operation
- ServiceDescription: A client class and the operations it exposes
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import DescriptorError


@dataclass(frozen=True)
class Parameter:
    """A typed parameter of a remote operation.

    Attributes:
        name: Parameter name, used verbatim as the generated argument name
        type: Qualified type name (e.g., "app.types.GetUser")
        position: Ordinal of the parameter in the remote operation
    """

    name: str
    type: str
    position: int = 0


@dataclass(frozen=True)
class MethodDescriptor:
    """Description of one remote operation.

    Attributes:
        wire_name: Operation name as exposed by the remote service
        parameters: Parameters in the order the operation declares them
        return_type: Qualified name of the operation's result type
    """

    wire_name: str
    parameters: tuple[Parameter, ...] = ()
    return_type: str = "object"

    def __post_init__(self) -> None:
        if not self.wire_name:
            raise DescriptorError("Method descriptor requires a non-empty wire name")
        # Lists are accepted for convenience but stored as tuples.
        object.__setattr__(self, "parameters", tuple(self.parameters))


@dataclass(frozen=True)
class ServiceDescription:
    """A client class to generate and the operations it exposes.

    Attributes:
        class_name: Name of the generated client class
        namespace: Dotted module path the generated class lives in
        methods: Operations in the order they should be assembled
    """

    class_name: str
    namespace: str = ""
    methods: tuple[MethodDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.class_name.isidentifier():
            raise DescriptorError(f"Invalid client class name: {self.class_name!r}")
        object.__setattr__(self, "methods", tuple(self.methods))
