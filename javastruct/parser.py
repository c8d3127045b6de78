"""
Parser for simplified Java-like sources using Lark.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple, Union

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedEOF, UnexpectedInput, VisitError

from . import ast
from .errors import IncompleteInputError, InvalidSyntaxError, ParseError, SourceLoadError
from .scanner import ScannerLexer, as_byte_text, describe_expected, describe_terminal, end_position

logger = logging.getLogger(__name__)


GRAMMAR_FILE = Path(__file__).parent / "javastruct.lark"


class _PackageDeclaration(NamedTuple):
    name: str
    token: Token


class JavaTransformer(Transformer):
    """Folds the parse tree into AST nodes.

    Top-level and class-level declarations arrive as an ordered list of
    events; each one is sorted into the field of the owning node it belongs to.
    """

    def __init__(self, strict: bool = False):
        super().__init__()
        self.strict = strict

    # ==================== COMPILATION UNIT ====================

    def start(self, items):
        package = None
        imports = []
        classes = []
        annotations = []
        for item in items:
            if isinstance(item, _PackageDeclaration):
                if package is not None:
                    self._duplicate_package(package, item)
                package = item.name
            elif isinstance(item, ast.Import):
                imports.append(item)
            elif isinstance(item, ast.Class):
                classes.append(item)
            elif isinstance(item, ast.Annotation):
                annotations.append(item)
        return ast.CompilationUnit(
            package=package,
            imports=tuple(imports),
            classes=tuple(classes),
            annotations=tuple(annotations),
        )

    def _duplicate_package(self, previous: str, declaration: _PackageDeclaration):
        token = declaration.token
        if self.strict:
            raise InvalidSyntaxError(
                f"duplicate package declaration {declaration.name!r} (already in package {previous!r})",
                token.start_pos, token.line, token.column,
                found=declaration.name,
            )
        logger.warning(
            "package %s at line %d replaces earlier package %s",
            declaration.name, token.line, previous,
        )

    def package_declaration(self, items):
        (name,) = items
        return _PackageDeclaration(str(name), name)

    def import_declaration(self, items):
        (path,) = items
        return ast.Import(path=str(path))

    def annotation(self, items):
        name, options = items
        return ast.Annotation(name=name, options=str(options))

    # ==================== CLASS DECLARATION ====================

    def class_declaration(self, items):
        access_modifier, name, *events = items
        fields = []
        methods = []
        annotations = []
        for event in events:
            if isinstance(event, ast.Field):
                fields.append(event)
            elif isinstance(event, ast.Method):
                methods.append(event)
            elif isinstance(event, ast.Annotation):
                annotations.append(event)
        return ast.Class(
            name=name,
            access_modifier=access_modifier,
            fields=tuple(fields),
            methods=tuple(methods),
            annotations=tuple(annotations),
        )

    # ==================== FIELDS AND METHODS ====================

    def field_declaration(self, items):
        access_modifier, field_type, name = items
        return ast.Field(name=name, field_type=field_type, access_modifier=access_modifier)

    def method_declaration(self, items):
        access_modifier, return_type, name, arguments = items
        return ast.Method(
            name=name,
            return_type=return_type,
            arguments=str(arguments),
            access_modifier=access_modifier,
        )

    # ==================== TYPES AND NAMES ====================

    def access_modifier(self, items):
        (token,) = items
        return ast.AccessModifier[token.type]

    def field_type(self, items):
        (token,) = items
        if token.type == "WORD":
            return ast.NamedType(name=str(token))
        return ast.BuiltinType(kind=ast.Builtin[token.type])

    def name(self, items):
        (token,) = items
        return str(token)


def _translate(error: UnexpectedInput, text: str) -> ParseError:
    """Turn a Lark parse failure into a ParseError."""
    expected = describe_expected(getattr(error, "expected", None) or ())
    token = getattr(error, "token", None)
    if isinstance(error, UnexpectedEOF) or token is None or token.type == "$END":
        line, column = end_position(text)
        return IncompleteInputError("unexpected end of input", len(text), line, column, expected)
    if token.type in ("WORD", "SPAN"):
        shown = f"{describe_terminal(token.type)} {str(token)!r}"
    else:
        shown = describe_terminal(token.type)
    return InvalidSyntaxError(
        f"unexpected {shown}", token.start_pos, token.line, token.column,
        expected, found=str(token),
    )


class JavaParser:
    """Parser for simplified Java-like compilation units.

    With ``strict`` set, a second package declaration is a syntax error;
    otherwise the last one wins and a warning is logged.
    """

    def __init__(self, strict: bool = False):
        with open(GRAMMAR_FILE, "r") as f:
            grammar = f.read()

        self._parser = Lark(
            grammar,
            parser="lalr",
            lexer=ScannerLexer,
            propagate_positions=True,
            maybe_placeholders=True,
        )
        self._transformer = JavaTransformer(strict=strict)

    def parse(self, source: Union[str, bytes]) -> ast.CompilationUnit:
        """Parse source text and return AST."""
        text = as_byte_text(source)
        try:
            tree = self._parser.parse(text)
            unit = self._transformer.transform(tree)
        except UnexpectedInput as e:
            raise _translate(e, text) from e
        except VisitError as e:
            if isinstance(e.orig_exc, ParseError):
                raise e.orig_exc from None
            raise
        logger.debug(
            "parsed %d bytes: %d import(s), %d class(es), %d annotation(s)",
            len(text), len(unit.imports), len(unit.classes), len(unit.annotations),
        )
        return unit

    def parse_file(self, path: Union[str, Path]) -> ast.CompilationUnit:
        """Read a source file and return AST."""
        try:
            with open(path, "rb") as f:
                source = f.read()
        except OSError as e:
            raise SourceLoadError(str(path), e.strerror or str(e)) from e
        logger.debug("loaded %s (%d bytes)", path, len(source))
        return self.parse(source)


@lru_cache(maxsize=None)
def _shared_parser(strict: bool) -> JavaParser:
    return JavaParser(strict=strict)


def parse(source: Union[str, bytes], strict: bool = False) -> ast.CompilationUnit:
    """Parse source text with a shared parser instance."""
    return _shared_parser(strict).parse(source)


def parse_file(path: Union[str, Path], strict: bool = False) -> ast.CompilationUnit:
    """Parse a source file with a shared parser instance."""
    return _shared_parser(strict).parse_file(path)
