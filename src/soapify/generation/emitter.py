"""Source emission for generated client classes.

This module provides the ClassEmitter class which renders a finished
ClassModel into the text of a Python module. It performs no file I/O.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

from .class_model import ClassModel, DocBlock, ImportTable, MethodModel
from .imports import local_reference
from .profile import AssemblyProfile

INDENT = "    "
WRAP_WIDTH = 88


@dataclass
class ClassEmitter:
    """Renders a ClassModel as Python source.

    Annotations are spelled with local_reference(), so a type shows up in the
    signature under the same short name the docstring uses whenever its
    import was registered during assembly.

    Example:
        >>> model = ClassModel(name="Empty")
        >>> print(ClassEmitter(AssemblyProfile(use_future_annotations=False)).emit(model))
        class Empty:
            pass
        <BLANKLINE>
    """

    profile: AssemblyProfile

    def emit(self, class_model: ClassModel) -> str:
        lines: list[str] = []
        if self.profile.use_future_annotations:
            lines.append("from __future__ import annotations")
            lines.append("")
        import_lines = self.emit_imports(class_model.imports)
        if import_lines:
            lines.extend(import_lines)
            lines.extend(["", ""])

        if class_model.extends:
            lines.append(f"class {class_model.name}({local_reference(class_model.extends, class_model)}):")
        else:
            lines.append(f"class {class_model.name}:")
        if not class_model.methods:
            lines.append(f"{INDENT}pass")
        for index, method in enumerate(class_model.methods.values()):
            if index:
                lines.append("")
            lines.extend(self.emit_method(method, class_model))
        return "\n".join(lines).rstrip() + "\n"

    def emit_imports(self, imports: ImportTable) -> list[str]:
        """Render import statements grouped by module.

        Dotted names become ``from <module> import <name>``; top-level names
        become plain ``import <name>`` statements.
        """
        modules: list[str] = []
        from_imports: dict[str, list[str]] = {}
        for qualified_name in imports:
            module, _, name = qualified_name.rpartition(".")
            if module:
                from_imports.setdefault(module, []).append(name)
            else:
                modules.append(name)
        lines = [f"import {module}" for module in sorted(modules)]
        for module in sorted(from_imports):
            lines.append(f"from {module} import {', '.join(sorted(from_imports[module]))}")
        return lines

    def emit_method(self, method: MethodModel, class_model: ClassModel) -> list[str]:
        params = ["self"]
        for param in method.parameters:
            params.append(f"{param.name}: {local_reference(param.type, class_model)}")
        return_type = local_reference(method.return_type, class_model)
        lines = [f"{INDENT}def {method.name}({', '.join(params)}) -> {return_type}:"]
        body_indent = INDENT * 2
        if method.docblock is not None:
            lines.extend(self.emit_docblock(method.docblock, body_indent))
        lines.extend(f"{body_indent}{line}" if line else "" for line in method.body.splitlines())
        return lines

    def emit_docblock(self, docblock: DocBlock, indent: str) -> list[str]:
        """Render a docblock as a docstring with ``@tag`` lines."""
        content: list[str] = []
        if docblock.short_description:
            content.append(docblock.short_description)
            content.append("")
        if docblock.long_description:
            content.extend(docblock.long_description.splitlines())
            content.append("")
        for tag in docblock.tags:
            content.append(f"@{tag.name} {tag.description}".rstrip())
        while content and not content[-1]:
            content.pop()

        if docblock.word_wrap:
            width = WRAP_WIDTH - len(indent)
            wrapped: list[str] = []
            for line in content:
                wrapped.extend(textwrap.wrap(line, width=width) or [""])
            content = wrapped

        lines = [f'{indent}"""']
        for line in content:
            lines.append(f"{indent}{_escape_docstring(line)}" if line else "")
        lines.append(f'{indent}"""')
        return lines


def _escape_docstring(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
