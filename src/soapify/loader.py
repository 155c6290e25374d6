from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Mapping, cast

from .descriptor import MethodDescriptor, Parameter, ServiceDescription
from .errors import DescriptorError
from .generation.profile import AssemblyProfile

DescriptorSource = str | PathLike[str] | Mapping[str, object]


@dataclass(frozen=True)
class ServiceDocument:
    """A loaded descriptor document.

    Attributes:
        service: The client class and its operations
        profile: Generation profile from the document's ``profile`` section
    """

    service: ServiceDescription
    profile: AssemblyProfile


def load_service(source: DescriptorSource) -> ServiceDocument:
    """Load a service description from a file path or a dict-like object.

    Args:
        source: Path to a JSON or YAML document, or an already parsed mapping

    Returns:
        The service description and the generation profile it declares

    Raises:
        DescriptorError: If the document is structurally invalid
    """
    document = _read_source(source)
    profile_data = document.get("profile", {})
    if not isinstance(profile_data, Mapping):
        raise DescriptorError("'profile' must be an object")
    return ServiceDocument(
        service=build_service(document),
        profile=AssemblyProfile.from_mapping(cast(Mapping[str, object], profile_data)),
    )


def build_service(document: Mapping[str, object]) -> ServiceDescription:
    """Build a ServiceDescription from a parsed descriptor document."""
    class_name = document.get("class_name")
    if not isinstance(class_name, str) or not class_name:
        raise DescriptorError("Missing or invalid 'class_name' field in document")
    namespace = document.get("namespace", "")
    if not isinstance(namespace, str):
        raise DescriptorError("'namespace' must be a string")
    methods = document.get("methods", [])
    if not isinstance(methods, list):
        raise DescriptorError("'methods' must be a list")
    return ServiceDescription(
        class_name=class_name,
        namespace=namespace,
        methods=tuple(_build_method(item, index) for index, item in enumerate(methods)),
    )


def _build_method(item: object, index: int) -> MethodDescriptor:
    """Build a MethodDescriptor from one entry of the ``methods`` list."""
    if not isinstance(item, dict):
        raise DescriptorError(f"Method #{index} must be an object")
    wire_name = item.get("wire_name")
    if not isinstance(wire_name, str):
        raise DescriptorError(f"Method #{index} is missing 'wire_name'")
    return_type = item.get("return_type", "object")
    if not isinstance(return_type, str):
        raise DescriptorError(f"Method {wire_name!r} has an invalid 'return_type'")
    parameters = item.get("parameters", [])
    if not isinstance(parameters, list):
        raise DescriptorError(f"Method {wire_name!r} 'parameters' must be a list")
    return MethodDescriptor(
        wire_name=wire_name,
        parameters=tuple(_build_parameter(param, wire_name, position) for position, param in enumerate(parameters)),
        return_type=return_type,
    )


def _build_parameter(param: object, wire_name: str, position: int) -> Parameter:
    if not isinstance(param, dict):
        raise DescriptorError(f"Parameter #{position} of {wire_name!r} must be an object")
    name = param.get("name")
    type_name = param.get("type")
    if not isinstance(name, str) or not isinstance(type_name, str):
        raise DescriptorError(f"Parameter #{position} of {wire_name!r} requires 'name' and 'type' strings")
    return Parameter(name=name, type=type_name, position=position)


def _read_source(source: DescriptorSource) -> Mapping[str, object]:
    """Read a descriptor document from a mapping or a file path."""
    if isinstance(source, Mapping):
        return source
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorError(f"Cannot read descriptor {path}: {exc}") from exc
    if path.suffix in {".yaml", ".yml"}:
        data = _load_yaml(text)
    else:
        data = _load_json(text)
    if not isinstance(data, dict):
        raise DescriptorError("Descriptor document must be an object")
    return cast(Mapping[str, object], data)


def _load_json(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DescriptorError(f"Invalid JSON descriptor: {exc}") from exc


def _load_yaml(text: str) -> object:
    """Load YAML text, requiring PyYAML to be installed."""
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise DescriptorError("PyYAML is required to load YAML descriptors") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DescriptorError(f"Invalid YAML descriptor: {exc}") from exc
