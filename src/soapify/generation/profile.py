from __future__ import annotations

import keyword
from dataclasses import dataclass, fields
from typing import Mapping

from ..errors import DescriptorError

METHOD_CASES = ("camel", "snake")


@dataclass(frozen=True)
class AssemblyProfile:
    """Fixed identifiers and switches used while assembling a client class."""

    client_base: str = "soapify.client.Client"
    transport_method: str = "call"
    multi_argument_type: str = "soapify.types.MultiArgumentRequest"
    multi_argument_name: str = "multiArgumentRequest"
    request_interface: str = "soapify.types.RequestInterface"
    result_interface: str = "soapify.types.ResultInterface"
    fault_type: str = "soapify.exceptions.SoapException"
    method_case: str = "camel"
    use_future_annotations: bool = True

    def __post_init__(self) -> None:
        if self.method_case not in METHOD_CASES:
            raise DescriptorError(
                f"Unsupported method case {self.method_case!r}, expected one of {', '.join(METHOD_CASES)}"
            )
        if not self.transport_method.isidentifier():
            raise DescriptorError(f"Invalid transport method name: {self.transport_method!r}")
        if (
            not self.multi_argument_name.isidentifier()
            or keyword.iskeyword(self.multi_argument_name)
            or self.multi_argument_name == "self"
        ):
            raise DescriptorError(f"Invalid multi-argument parameter name: {self.multi_argument_name!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "AssemblyProfile":
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise DescriptorError(f"Unknown profile option(s): {', '.join(unknown)}")
        options: dict[str, object] = {}
        for key, value in data.items():
            if key == "use_future_annotations":
                if not isinstance(value, bool):
                    raise DescriptorError("Profile option 'use_future_annotations' must be a boolean")
            elif not isinstance(value, str):
                raise DescriptorError(f"Profile option {key!r} must be a string")
            options[key] = value
        return cls(**options)  # type: ignore[arg-type]
