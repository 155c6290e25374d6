from __future__ import annotations

import pytest

from soapify.descriptor import MethodDescriptor, Parameter
from soapify.generation.class_model import ClassModel
from soapify.generation.client.context import ClientMethodContext


@pytest.fixture()
def class_model() -> ClassModel:
    return ClassModel(name="UserClient", namespace="app.client")


@pytest.fixture()
def no_argument_context(class_model: ClassModel) -> ClientMethodContext:
    descriptor = MethodDescriptor(wire_name="Ping", return_type="app.types.PingResponse")
    return ClientMethodContext(descriptor=descriptor, class_model=class_model)


@pytest.fixture()
def single_argument_context(class_model: ClassModel) -> ClientMethodContext:
    descriptor = MethodDescriptor(
        wire_name="GetUser",
        parameters=(Parameter(name="request", type="app.types.GetUser"),),
        return_type="app.types.GetUserResponse",
    )
    return ClientMethodContext(descriptor=descriptor, class_model=class_model)


@pytest.fixture()
def multi_argument_context(class_model: ClassModel) -> ClientMethodContext:
    descriptor = MethodDescriptor(
        wire_name="DoThing",
        parameters=(
            Parameter(name="first", type="app.types.First", position=0),
            Parameter(name="count", type="int", position=1),
        ),
        return_type="app.types.DoThingResponse",
    )
    return ClientMethodContext(descriptor=descriptor, class_model=class_model)
