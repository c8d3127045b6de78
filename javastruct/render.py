"""
Human-readable debug rendering of a compilation unit.
"""

from typing import Optional

from . import ast

INDENT = "  "


def render_type(field_type: ast.FieldType) -> str:
    if isinstance(field_type, ast.BuiltinType):
        return field_type.kind.value
    return field_type.name


def render_annotation(annotation: ast.Annotation) -> str:
    return f"@{annotation.name}({annotation.options})"


def _modifier_prefix(modifier: Optional[ast.AccessModifier]) -> str:
    return f"{modifier.value} " if modifier is not None else ""


def render_field(field: ast.Field) -> str:
    return f"{_modifier_prefix(field.access_modifier)}{render_type(field.field_type)} {field.name}"


def render_method(method: ast.Method) -> str:
    return (f"{_modifier_prefix(method.access_modifier)}{render_type(method.return_type)} "
            f"{method.name}({method.arguments})")


def _section(lines: list, title: str, entries: list, depth: int):
    """Append a titled list; empty lists are omitted."""
    if not entries:
        return
    lines.append(f"{INDENT * depth}{title}:")
    for entry in entries:
        lines.append(f"{INDENT * (depth + 1)}{entry}")


def render_class(cls: ast.Class, depth: int = 0) -> list:
    lines = [f"{INDENT * depth}{_modifier_prefix(cls.access_modifier)}class {cls.name}"]
    _section(lines, "annotations", [render_annotation(a) for a in cls.annotations], depth + 1)
    _section(lines, "fields", [render_field(f) for f in cls.fields], depth + 1)
    _section(lines, "methods", [render_method(m) for m in cls.methods], depth + 1)
    return lines


def render_tree(unit: ast.CompilationUnit) -> str:
    """Render a compilation unit as an indented tree, one declaration per line."""
    lines = ["CompilationUnit"]
    package = unit.package if unit.package is not None else "<default>"
    lines.append(f"{INDENT}package: {package}")
    _section(lines, "imports", [imp.path for imp in unit.imports], 1)
    _section(lines, "annotations", [render_annotation(a) for a in unit.annotations], 1)
    if unit.classes:
        lines.append(f"{INDENT}classes:")
        for cls in unit.classes:
            lines.extend(render_class(cls, depth=2))
    return "\n".join(lines)
