"""Type reference resolution for generated client classes.

resolve_reference() turns a qualified type name into the short name used in
generated text and registers the import the short name needs on the class
model. local_reference() performs the same spelling without touching the
import table and is used by the emitter for annotations.
"""

from __future__ import annotations

from .class_model import ClassModel


def split_qualified_name(qualified_name: str) -> list[str]:
    """Split a dotted type name into its segments.

    Raises:
        ValueError: If the name is empty or a segment is not an identifier
    """
    name = qualified_name.lstrip(".")
    parts = name.split(".")
    if not name or not all(part.isidentifier() for part in parts):
        raise ValueError(f"Malformed qualified type name: {qualified_name!r}")
    return parts


def resolve_reference(qualified_name: str, class_model: ClassModel, prefixed: bool = False) -> str:
    """Return the short name for a type and register its import if needed.

    With ``prefixed`` the short name keeps the parent segment
    (``app.types.GetUser`` becomes ``types.GetUser``) and the parent is
    imported instead of the leaf.

    Example:
        >>> model = ClassModel(name="Client", namespace="app.client")
        >>> resolve_reference("ns.Wrapper.Leaf", model, prefixed=True)
        'Wrapper.Leaf'
        >>> list(model.imports)
        ['ns.Wrapper']
    """
    parts = split_qualified_name(qualified_name)
    leaf = parts.pop()
    if ".".join(parts) == class_model.namespace:
        return leaf
    if prefixed and parts:
        parent = parts.pop()
        short_name = f"{parent}.{leaf}"
        import_name = ".".join([*parts, parent])
    else:
        short_name = leaf
        import_name = ".".join([*parts, leaf])
    namespace = ".".join(parts)
    if not namespace and short_name == import_name:
        # Bare names are builtins or already in scope.
        return short_name
    # Top-level modules are never in scope without an import.
    if (not namespace or namespace != class_model.namespace) and import_name not in class_model.imports:
        class_model.imports.add(import_name)
    return short_name


def local_reference(qualified_name: str, class_model: ClassModel) -> str:
    """Spell a qualified type name using what the class model already imports."""
    parts = split_qualified_name(qualified_name)
    if len(parts) == 1:
        return parts[0]
    name = ".".join(parts)
    namespace = ".".join(parts[:-1])
    if namespace == class_model.namespace or name in class_model.imports:
        return parts[-1]
    if namespace in class_model.imports or ".".join(parts[:-2]) == class_model.namespace:
        return ".".join(parts[-2:])
    return name
