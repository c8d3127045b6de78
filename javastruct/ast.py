"""
Immutable AST representation for simplified Java-like sources.
All nodes are frozen dataclasses for immutability.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from abc import ABC
import json


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def to_dict(self) -> dict:
        """Convert node to dictionary for JSON serialization."""
        result = {"_type": self.__class__.__name__}
        for key, value in self.__dict__.items():
            if key.startswith("_"):
                continue
            result[key] = _serialize_value(value)
        return result

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def _serialize_value(value):
    """Helper to serialize a value for JSON."""
    if value is None:
        return None
    if isinstance(value, ASTNode):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, str)):
        return value
    return str(value)


class AccessModifier(Enum):
    """Access modifier keyword. Package-private is the absence of one."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class Builtin(Enum):
    """Built-in primitive and boxed types recognized by keyword."""
    STRING = "String"
    BOOLEAN = "Boolean"
    LONG = "Long"
    INT = "Int"
    SHORT = "Short"


class FieldType(ASTNode):
    """Base class for field and return types."""
    pass


@dataclass(frozen=True)
class BuiltinType(FieldType):
    """Keyword type: String, boolean/Boolean, long/Long, int/Integer, short"""
    kind: Builtin


@dataclass(frozen=True)
class NamedType(FieldType):
    """Any other type, kept as the bare word it was written as."""
    name: str


@dataclass(frozen=True)
class Import(ASTNode):
    """Import declaration: import java.util.List;"""
    path: str


@dataclass(frozen=True)
class Annotation(ASTNode):
    """Annotation: @Name(options), options kept as raw text."""
    name: str
    options: str


@dataclass(frozen=True)
class Field(ASTNode):
    """Field declaration: private int x;"""
    name: str
    field_type: FieldType
    access_modifier: Optional[AccessModifier] = None


@dataclass(frozen=True)
class Method(ASTNode):
    """Method declaration. The argument list is raw text; the body is dropped."""
    name: str
    return_type: FieldType
    arguments: str
    access_modifier: Optional[AccessModifier] = None


@dataclass(frozen=True)
class Class(ASTNode):
    """Class declaration with the members found between its own braces."""
    name: str
    access_modifier: Optional[AccessModifier] = None
    fields: tuple[Field, ...] = ()
    methods: tuple[Method, ...] = ()
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True)
class CompilationUnit(ASTNode):
    """Top-level compilation unit (one source file)."""
    package: Optional[str] = None
    imports: tuple[Import, ...] = ()
    classes: tuple[Class, ...] = ()
    annotations: tuple[Annotation, ...] = ()

    @classmethod
    def parse(cls, source: Union[str, bytes]) -> "CompilationUnit":
        """Parse source text into a compilation unit."""
        from .parser import parse
        return parse(source)
