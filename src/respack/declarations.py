"""Module-level constant declarations extracted from Python source.

The identifier module written by respack-genids is plain Python, and may be
edited, extended or merged with unrelated code by its owners. This module
reduces such source to a flat sequence of declarations, one per module-level
assignment target:

    (name, declared type tag, value)

without importing or executing it. Interpretation of the declarations
(which of them are resource identifiers, which is the version hash) is left
to respack.resid.

Type tags are derived from annotations:
    int, Final[int], typing.Final[int]  -> TypeTag.INT
    str, Final[str], typing.Final[str]  -> TypeTag.STR
    no annotation, bare Final           -> TypeTag.UNTYPED
    anything else                       -> TypeTag.OTHER

Values are computed by a restricted constant evaluator that understands
literals, references to constants declared earlier in the same source set,
unary plus/minus, and the binary operators + - * // %, nested at most
MAX_EXPRESSION_DEPTH levels. Any other expression (calls, attribute access,
unknown names) leaves the declaration without a value rather than failing:
whether a missing value matters depends on the declaration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import ast
import logging
import operator
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from respack.constants import HIDDEN_PREFIX, MAX_EXPRESSION_DEPTH, PYTHON_EXTENSION
from respack.diagnostics import DeclarationSyntaxError
from respack.enums import TypeTag
from respack.loading import StrPath

__all__ = [
    "Declaration",
    "parse_declaration_path",
    "parse_declarations",
]

logger = logging.getLogger(__name__)

_FINAL = "Final"

_TAGS_BY_NAME: dict[str, TypeTag] = {
    "int": TypeTag.INT,
    "str": TypeTag.STR,
}

_BINARY_OPS: dict[type[ast.operator], Callable[[object, object], object]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
}


@dataclass(frozen=True, slots=True)
class Declaration:
    """One module-level constant.

    Attributes:
        name: Declared name
        type_tag: Declared type, see TypeTag
        value: Evaluated value (None when has_value is False)
        has_value: Whether a value could be determined
        lineno: Source line of the declaration
        path: Source file (optional)
    """

    name: str
    type_tag: TypeTag
    value: object = None
    has_value: bool = False
    lineno: int = 0
    path: str | None = None


class _Unavailable(Exception):
    """Expression has no value computable without executing code."""


def _is_final(node: ast.expr) -> bool:
    match node:
        case ast.Name(id=name) | ast.Attribute(attr=name):
            return name == _FINAL
        case _:
            return False


def _classify(annotation: ast.expr | None) -> TypeTag:
    """Derive the type tag of an annotation node."""
    match annotation:
        case None:
            return TypeTag.UNTYPED
        case ast.Constant(value=str() as text):
            # String annotation, e.g. under "from __future__ import annotations" style
            try:
                parsed = ast.parse(text, mode="eval")
            except SyntaxError:
                return TypeTag.OTHER
            return _classify(parsed.body)
        case ast.Subscript(value=outer, slice=inner) if _is_final(outer):
            return _classify(inner)
        case ast.Name(id=name) | ast.Attribute(attr=name):
            if name == _FINAL:
                return TypeTag.UNTYPED
            return _TAGS_BY_NAME.get(name, TypeTag.OTHER)
        case _:
            return TypeTag.OTHER


def _evaluate(node: ast.expr, env: dict[str, object], depth: int = 0) -> object:
    """Evaluate a constant expression.

    Raises:
        _Unavailable: If the expression is not a supported constant expression
            or nests deeper than MAX_EXPRESSION_DEPTH
    """
    if depth > MAX_EXPRESSION_DEPTH:
        raise _Unavailable(f"nesting exceeds {MAX_EXPRESSION_DEPTH}")
    match node:
        case ast.Constant(value=value) if not isinstance(value, (complex, type(...))):
            return value
        case ast.Name(id=name):
            if name in env:
                return env[name]
            raise _Unavailable(name)
        case ast.UnaryOp(op=ast.USub() | ast.UAdd() as op, operand=operand):
            value = _evaluate(operand, env, depth + 1)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise _Unavailable(ast.dump(node))
            return -value if isinstance(op, ast.USub) else +value
        case ast.BinOp(left=left, op=op, right=right) if type(op) in _BINARY_OPS:
            lhs = _evaluate(left, env, depth + 1)
            rhs = _evaluate(right, env, depth + 1)
            # Only number arithmetic and string concatenation; never str * int
            if isinstance(lhs, str) or isinstance(rhs, str):
                if not (isinstance(op, ast.Add) and isinstance(lhs, str) and isinstance(rhs, str)):
                    raise _Unavailable(ast.dump(node))
            elif not all(isinstance(v, (int, float)) for v in (lhs, rhs)):
                raise _Unavailable(ast.dump(node))
            try:
                return _BINARY_OPS[type(op)](lhs, rhs)
            except ArithmeticError as e:
                raise _Unavailable(ast.dump(node)) from e
        case _:
            raise _Unavailable(ast.dump(node))


def _targets(stmt: ast.stmt) -> tuple[list[str], ast.expr | None, ast.expr | None]:
    """Return (names, annotation, value) for an assignment statement."""
    match stmt:
        case ast.AnnAssign(target=ast.Name(id=name), annotation=annotation, value=value):
            return [name], annotation, value
        case ast.Assign(targets=targets, value=value):
            names = [t.id for t in targets if isinstance(t, ast.Name)]
            # Unpacking and attribute targets are not constant declarations
            if len(names) != len(targets):
                return [], None, None
            return names, None, value
        case _:
            return [], None, None


def _collect(
    module: ast.Module, env: dict[str, object], path: str | None
) -> list[Declaration]:
    declarations: list[Declaration] = []
    for stmt in module.body:
        names, annotation, value_node = _targets(stmt)
        if not names:
            continue
        tag = _classify(annotation)
        has_value = False
        value: object = None
        if value_node is not None:
            try:
                value = _evaluate(value_node, env)
                has_value = True
            except _Unavailable:
                logger.debug("No constant value for %s at line %d", names, stmt.lineno)
        for name in names:
            if has_value:
                env[name] = value
            else:
                env.pop(name, None)
            declarations.append(
                Declaration(
                    name=name,
                    type_tag=tag,
                    value=value,
                    has_value=has_value,
                    lineno=stmt.lineno,
                    path=path,
                )
            )
    return declarations


def _parse_module(source: str, filename: str) -> ast.Module:
    try:
        return ast.parse(source, filename=filename)
    except SyntaxError as e:
        msg = f"{filename}:{e.lineno}: {e.msg}"
        raise DeclarationSyntaxError(msg, path=filename, lineno=e.lineno) from e
    except RecursionError as e:
        msg = f"{filename}: source nested too deeply to parse"
        raise DeclarationSyntaxError(msg, path=filename) from e


def parse_declarations(source: str, filename: str = "<string>") -> list[Declaration]:
    """Extract module-level declarations from Python source.

    Args:
        source: Python source text
        filename: Name used in error messages

    Returns:
        Declarations in source order

    Raises:
        DeclarationSyntaxError: If source is not valid Python

    Example:
        >>> [(d.name, d.type_tag, d.value) for d in parse_declarations("A: int = 0")]
        [('A', <TypeTag.INT: 'int'>, 0)]
    """
    module = _parse_module(source, filename)
    return _collect(module, {}, filename)


def _source_files(path: Path) -> Iterable[Path]:
    if not path.is_dir():
        return [path]
    return [
        entry
        for entry in sorted(path.iterdir(), key=lambda p: p.name)
        if entry.is_file()
        and entry.suffix == PYTHON_EXTENSION
        and not entry.name.startswith(HIDDEN_PREFIX)
    ]


def parse_declaration_path(path: StrPath) -> list[Declaration]:
    """Extract declarations from a Python file or from a package directory.

    A directory is treated as one unit: its non-hidden .py files (not
    subdirectories) are parsed in sorted order, and constants declared in an
    earlier file may be referenced by later ones.

    Raises:
        OSError: If a file cannot be read
        DeclarationSyntaxError: If a file is not UTF-8 or not valid Python
    """
    env: dict[str, object] = {}
    declarations: list[Declaration] = []
    for file in _source_files(Path(path)):
        filename = os.fspath(file)
        try:
            source = file.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            msg = f"{filename}: invalid UTF-8 at byte {e.start}: {e.reason}"
            raise DeclarationSyntaxError(msg, path=filename) from e
        module = _parse_module(source, filename)
        declarations.extend(_collect(module, env, filename))
    logger.debug("Parsed %d declarations from %s", len(declarations), os.fspath(path))
    return declarations
