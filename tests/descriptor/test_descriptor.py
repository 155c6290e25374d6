from __future__ import annotations

import pytest

from soapify.descriptor import MethodDescriptor, Parameter, ServiceDescription
from soapify.errors import DescriptorError


class TestMethodDescriptor:
    def test_requires_wire_name(self) -> None:
        with pytest.raises(DescriptorError):
            MethodDescriptor(wire_name="")

    def test_parameters_are_stored_as_tuple(self) -> None:
        descriptor = MethodDescriptor(wire_name="Ping", parameters=[Parameter("a", "int")])  # type: ignore[arg-type]
        assert descriptor.parameters == (Parameter("a", "int"),)


class TestServiceDescription:
    def test_requires_identifier_class_name(self) -> None:
        with pytest.raises(DescriptorError):
            ServiceDescription(class_name="user-client")
