"""javastruct - Structural parser for simplified Java-like sources."""

from .ast import *
from .errors import IncompleteInputError, InvalidSyntaxError, ParseError, SourceLoadError
from .parser import JavaParser, parse, parse_file

__version__ = "0.1.0"
__all__ = [
    "JavaParser",
    "parse",
    "parse_file",
    "ParseError",
    "IncompleteInputError",
    "InvalidSyntaxError",
    "SourceLoadError",
    "CompilationUnit",
    "Import",
    "Class",
    "Field",
    "Method",
    "Annotation",
    "AccessModifier",
    "FieldType",
    "BuiltinType",
    "NamedType",
    "Builtin",
]
