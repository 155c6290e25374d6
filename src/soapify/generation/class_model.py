"""In-memory model of a generated client class.

A ClassModel is created once per generated class and mutated by the
assemblers, one operation at a time. It is rendered to source text by
ClassEmitter once every operation has been assembled.

Note:
    A ClassModel has a single writer. Assemblies of the same model must be
    serialized by the caller.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class DocTag:
    """A documentation tag such as ``@param`` or ``@return``."""

    name: str
    description: str


@dataclass(frozen=True)
class DocBlock:
    """Documentation attached to a generated member.

    Attributes:
        short_description: First line of the docstring
        long_description: Free text rendered ahead of the tags
        tags: Tags in render order
        word_wrap: Whether the emitter may wrap long lines
    """

    short_description: str | None = None
    long_description: str | None = None
    tags: tuple[DocTag, ...] = ()
    word_wrap: bool = False


@dataclass(frozen=True)
class ParameterModel:
    name: str
    type: str


@dataclass(frozen=True)
class MethodModel:
    """A generated method member.

    Attributes:
        name: Member name in the generated class
        body: Method body, one statement per line
        return_type: Qualified return type name, as given by the descriptor
        parameters: Declared parameters (at most one for client methods)
        docblock: Documentation for the member
        visibility: Member visibility, generated client methods are public
    """

    name: str
    body: str
    return_type: str
    parameters: tuple[ParameterModel, ...] = ()
    docblock: DocBlock | None = None
    visibility: str = "public"


class ImportTable:
    """Qualified names imported by a generated module.

    Entries map a qualified name to its in-use flag. A qualified name is
    stored at most once.
    """

    def __init__(self, entries: dict[str, bool] | None = None) -> None:
        self._entries: dict[str, bool] = dict(entries or {})

    def add(self, qualified_name: str) -> None:
        self._entries[qualified_name] = True

    def copy(self) -> "ImportTable":
        return ImportTable(self._entries)

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImportTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"ImportTable({sorted(self._entries)!r})"


@dataclass
class ClassModel:
    """A client class under construction.

    Attributes:
        name: Class name
        namespace: Dotted module path of the generated module
        extends: Qualified name of the base class, if any
        methods: Members keyed by name
        imports: Qualified names the generated module imports
    """

    name: str
    namespace: str = ""
    extends: str | None = None
    methods: dict[str, MethodModel] = field(default_factory=dict)
    imports: ImportTable = field(default_factory=ImportTable)

    def set_extends(self, qualified_name: str) -> None:
        self.extends = qualified_name

    def has_method(self, name: str) -> bool:
        return name in self.methods

    def get_method(self, name: str) -> MethodModel:
        return self.methods[name]

    def remove_method(self, name: str) -> None:
        self.methods.pop(name, None)

    def add_method(self, method: MethodModel) -> None:
        self.methods[method.name] = method

    @contextmanager
    def transaction(self) -> Iterator["ClassModel"]:
        """Restore the model to its current state if the block raises."""
        extends = self.extends
        methods = dict(self.methods)
        imports = self.imports.copy()
        try:
            yield self
        except BaseException:
            self.extends = extends
            self.methods = methods
            self.imports = imports
            raise
