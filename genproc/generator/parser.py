"""Go source parser using Lark."""

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from lark import Lark, Token, Tree, v_args
from lark.exceptions import UnexpectedInput
from lark.lark import PostLex
from lark.visitors import Transformer

from .types import GoField, GoSourceFile, GoTypeDecl, GoTypeSpec

_g_parser: Lark | None = None


class SourceError(RuntimeError):
    """Raised when a source file cannot be read or parsed."""


class GoSemicolons(PostLex):
    """Insert semicolons the way the Go lexer does and collect comments.

    A newline becomes a semicolon when the last token on the line is an
    identifier, a literal, ``++``/``--`` or a closing bracket. A general
    comment spanning lines counts as a newline. Comments never reach the
    parser; they are kept in ``comments`` for the last parsed text.
    """

    always_accept = ("NEWLINE", "COMMENT")

    def __init__(self) -> None:
        self.comments: list[Token] = []

    def process(self, stream: Iterator[Token]) -> Iterator[Token]:
        self.comments = []
        last: Token | None = None

        for token in stream:
            if token.type == "COMMENT":
                self.comments.append(token)
                if "\n" not in token.value:
                    continue
            elif token.type != "NEWLINE":
                last = token
                yield token
                continue

            if last is not None and _ends_statement(last):
                last = Token.new_borrow_pos("_SEMI", ";", token)
                yield last

        if last is not None and _ends_statement(last):
            yield Token.new_borrow_pos("_SEMI", ";", last)


def _ends_statement(token: Token) -> bool:
    if token.type in ("NAME", "STRING", "RUNE", "NUMBER"):
        return True
    return token.value in (")", "]", "}", "++", "--")


@dataclass
class _Node:
    value: Any
    line: int
    end_line: int


@dataclass
class _Field:
    field: GoField
    start_pos: int
    end_pos: int
    end_line: int


@dataclass
class _Ident:
    value: str


class _Composite:
    pass


class _Embedded:
    pass


class _NotStruct:
    pass


TFilter = TypeVar("TFilter", bound=object)


def _filter(args: list[Any], class_type: type[TFilter]) -> list[TFilter]:
    return [v for v in args if isinstance(v, class_type)]


def _node(meta: Any, value: Any) -> _Node:
    return _Node(value=value, line=meta.line, end_line=meta.end_line)


class TreeTransformer(Transformer):
    """Transform a parse tree into source file types.

    Needs the comments collected while lexing the same text, so doc comments
    and trailing field comments can be attached by position.
    """

    def __init__(self, comments: list[Token]) -> None:
        super().__init__()
        self._comments = comments

    def source_file(self, args: list[Any]) -> GoSourceFile:
        nodes = _filter(args, _Node)
        imports: list[str] = []
        types: list[GoTypeDecl] = []

        for prev, node in zip(nodes, nodes[1:]):
            if isinstance(node.value, list):
                imports.extend(node.value)
            elif isinstance(node.value, GoTypeDecl):
                node.value.doc = self._doc(prev.end_line, node.line)
                types.append(node.value)

        return GoSourceFile(package=nodes[0].value, imports=imports, types=types)

    def import_section(self, args: list[Any]) -> list[str]:
        imports: list[str] = []
        for node in _filter(args, _Node):
            if isinstance(node.value, list):
                imports.extend(node.value)
        return imports

    @v_args(meta=True)
    def package_clause(self, meta: Any, args: list[Any]) -> _Node:
        return _node(meta, str(args[0]))

    @v_args(meta=True)
    def import_decl(self, meta: Any, args: list[Any]) -> _Node:
        return _node(meta, [v for v in args if isinstance(v, str)])

    def import_spec(self, args: list[Any]) -> str:
        return str(args[-1])

    @v_args(meta=True)
    def other_decl(self, meta: Any, _args: list[Any]) -> _Node:
        return _node(meta, None)

    @v_args(meta=True)
    def type_decl(self, meta: Any, args: list[Any]) -> _Node:
        return _node(meta, GoTypeDecl(specs=_filter(args, GoTypeSpec), doc=[]))

    def type_spec(self, args: list[Any]) -> GoTypeSpec:
        body = args[-1]
        fields = None if isinstance(body, _NotStruct) else body
        return GoTypeSpec(name=str(args[0]), fields=fields)

    @v_args(meta=True)
    def struct_type(self, meta: Any, args: list[Any]) -> list[GoField]:
        fields = _filter(args, _Field)
        result: list[GoField] = []

        for i, item in enumerate(fields):
            limit = meta.end_pos
            if i + 1 < len(fields):
                limit = min(limit, fields[i + 1].start_pos)
            item.field.comments = [
                c.value
                for c in self._comments
                if c.line == item.end_line and item.end_pos <= c.start_pos < limit
            ]
            result.append(item.field)

        return result

    def other_type(self, _args: list[Any]) -> _NotStruct:
        return _NotStruct()

    @v_args(meta=True)
    def field_decl(self, meta: Any, args: list[Any]) -> _Field:
        names = [str(v) for v in args if isinstance(v, Token) and v.type == "NAME"]
        ident = _filter(args, _Ident)
        field = GoField(
            names=names,
            type_name=ident[0].value if ident else None,
            comments=[],
        )
        return _Field(
            field=field,
            start_pos=meta.start_pos,
            end_pos=meta.end_pos,
            end_line=meta.end_line,
        )

    def ident_type(self, args: list[Any]) -> _Ident:
        return _Ident(value=str(args[0]))

    def composite_type(self, _args: list[Any]) -> _Composite:
        return _Composite()

    def embedded_field(self, _args: list[Any]) -> _Embedded:
        return _Embedded()

    def tag(self, args: list[Any]) -> str:
        return str(args[0])

    def _doc(self, prev_end_line: int, line: int) -> list[str]:
        """Return the comment group ending on the line before ``line``."""
        doc: list[Token] = []
        boundary = line

        candidates = [c for c in self._comments if prev_end_line < c.line and c.end_line < line]
        for comment in reversed(candidates):
            if comment.end_line < boundary - 1:
                break
            doc.append(comment)
            boundary = comment.line

        return [c.value for c in reversed(doc)]


def _get_parser() -> Lark:
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/golang.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(
            grammar,
            parser="lalr",
            lexer="basic",
            start=["source_file", "import_section"],
            postlex=GoSemicolons(),
            propagate_positions=True,
            maybe_placeholders=False,
        )

    return _g_parser


def _read(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"{path}: cannot read source: {e}") from e


def _parse(text: str, start: str, path: str | Path) -> tuple[Tree, list[Token]]:
    parser = _get_parser()
    try:
        tree = parser.parse(text, start=start)
    except UnexpectedInput as e:
        raise SourceError(f"{path}:{e.line}:{e.column}: cannot parse source") from e

    # The cached parser shares one post-lexer, so copy its comments before the
    # next parse replaces them. Lexing is driven by the parse, so the list is
    # complete here.
    return tree, list(parser.options.postlex.comments)


def parse_imports_text(text: str, path: str | Path = "<string>") -> list[str]:
    """Return the import path literals of a Go source text, quotes included."""
    tree, comments = _parse(text, "import_section", path)
    return TreeTransformer(comments).transform(tree)


def parse_source_text(text: str, path: str | Path = "<string>") -> GoSourceFile:
    """Parse a Go source text into its package name and type declarations."""
    tree, comments = _parse(text, "source_file", path)
    return TreeTransformer(comments).transform(tree)


def parse_imports(path: str | Path) -> list[str]:
    """Parse only the import section of a Go source file."""
    return parse_imports_text(_read(path), path)


def parse_source(path: str | Path) -> GoSourceFile:
    """Parse a Go source file, comments included."""
    return parse_source_text(_read(path), path)
