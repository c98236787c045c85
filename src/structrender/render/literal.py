"""Literal serialization and restricted evaluation.

to_literal() writes a value as a Python expression; evaluate() reads such an
expression back without handing it to eval(). Together they round-trip any
acyclic value built from bool, None, int, float and str nested in mappings:

    >>> text = to_literal({1: "a", "b": True, "c": {2: float("inf")}})
    >>> text
    "{1: 'a', 'b': True, 'c': {2: inf}}"
    >>> evaluate(text) == {1: "a", "b": True, "c": {2: float("inf")}}
    True

Values of other types need a __pickle__() method returning literal text.
evaluate() resolves names in that text through an explicit namespace:

    >>> class Point:
    ...     def __init__(self, x, y): self.x, self.y = x, y
    ...     def __pickle__(self): return f"Point({self.x}, {self.y})"
    >>> evaluate(to_literal({1: Point(1, 2)}), {"Point": Point})[1].y
    2

Python 3.13+.
"""

from __future__ import annotations

import ast
import logging
import math
from collections.abc import Callable, Hashable, Mapping
from typing import Any

from structrender.capabilities import SupportsLiteral
from structrender.constants import LITERAL_INFINITY, LITERAL_NAN, LITERAL_SEPARATOR
from structrender.diagnostics import (
    ErrorTemplate,
    LiteralEvaluationError,
    UnpicklableValueError,
)
from structrender.sequence import is_container, is_number
from structrender.text import scalar_text

from .engine import Renderer
from .hooks import MISSING, FormatHooks

__all__ = ["PickleHooks", "evaluate", "to_literal"]

logger = logging.getLogger(__name__)

_SPECIAL_NAMES: dict[str, float] = {
    LITERAL_NAN: math.nan,
    LITERAL_INFINITY: math.inf,
}


class PickleHooks(FormatHooks):
    """Hooks emitting evaluate()-compatible literal text."""

    __slots__ = ()

    def term(self, x: Any) -> bool:
        if x is None or isinstance(x, (bool, str)) or is_number(x):
            return True
        if isinstance(x, SupportsLiteral):
            return True
        if is_container(x):
            return False
        raise UnpicklableValueError(ErrorTemplate.unpicklable_value(x), value=x)

    def elem(self, x: Any) -> str:
        # Base-class reprs: subclasses such as IntEnum override __repr__
        # with text that does not evaluate.
        match x:
            case None | bool():
                return repr(x)
            case float():
                if math.isnan(x):
                    return LITERAL_NAN
                if math.isinf(x):
                    return LITERAL_INFINITY if x > 0 else f"-{LITERAL_INFINITY}"
                return float.__repr__(x)
            case int():
                return _int_literal(x)
            case str():
                return str.__repr__(x)
        if isinstance(x, SupportsLiteral):
            return x.__pickle__()
        # Placeholder for a container reached again through a cycle.
        return scalar_text(x)

    def pair(
        self,
        x: Any,
        prev_key: Any,
        prev_value: Any,
        key: Hashable,
        value: Any,
        key_text: str,
        value_text: str,
    ) -> str:
        return f"{key_text}: {value_text}"

    def sep(
        self,
        x: Any,
        prev_key: Any,
        prev_value: Any,
        next_key: Any,
        next_value: Any,
    ) -> str:
        if prev_key is not MISSING and next_key is not MISSING:
            return LITERAL_SEPARATOR
        return ""


def _int_literal(x: int) -> str:
    try:
        return int.__repr__(x)
    except ValueError:
        # Past sys.get_int_max_str_digits(); hex conversion has no limit.
        logger.debug("Writing %d-bit int as hex", x.bit_length())
        return hex(x)


_PICKLE = Renderer(PickleHooks())


def to_literal(x: Any) -> str:
    """Serialize x as literal text.

    Args:
        x: bool, None, int, float, str, a value with __pickle__(), or a
           mapping nesting any of these

    Returns:
        Python expression text accepted by evaluate()

    Raises:
        UnpicklableValueError: If x contains any other kind of value
    """
    return _PICKLE.render(x)


def evaluate(text: str, namespace: Mapping[str, Any] | None = None) -> Any:
    """Evaluate literal text produced by to_literal().

    Accepted expressions:
        - constants, and dict/list/tuple/set displays of accepted expressions
        - unary + and - on accepted expressions
        - the names nan and inf, plus any name bound in namespace
        - calls whose callee is a name bound in namespace

    Args:
        text: Literal text
        namespace: Extra names (typically classes with __pickle__())

    Returns:
        The reconstructed value

    Raises:
        LiteralEvaluationError: On syntax errors or rejected expressions
    """
    try:
        tree = ast.parse(text.strip(), mode="eval")
    except SyntaxError as e:
        raise LiteralEvaluationError(
            ErrorTemplate.literal_syntax_invalid(text, str(e.msg)), text=text
        ) from e
    names = {**_SPECIAL_NAMES, **(namespace or {})}
    try:
        return _LiteralReader(names).read(tree.body)
    except LiteralEvaluationError as e:
        logger.debug("Rejected literal %r: %s", text, e)
        e.text = text
        raise


class _LiteralReader:
    """Walks an expression tree, building values for the accepted subset."""

    __slots__ = ("_names",)

    def __init__(self, names: Mapping[str, Any]) -> None:
        self._names = names

    def read(self, node: ast.expr) -> Any:
        match node:
            case ast.Constant(value=value):
                return value
            case ast.Dict(keys=keys, values=values):
                return self._read_dict(keys, values)
            case ast.List(elts=elts):
                return [self.read(elt) for elt in elts]
            case ast.Tuple(elts=elts):
                return tuple(self.read(elt) for elt in elts)
            case ast.Set(elts=elts):
                return self._read_set(elts)
            case ast.UnaryOp(op=ast.USub(), operand=operand):
                return -self._read_number(operand)
            case ast.UnaryOp(op=ast.UAdd(), operand=operand):
                return +self._read_number(operand)
            case ast.Name(id=name):
                return self._lookup(name)
            case ast.Call(func=ast.Name(id=name), args=args, keywords=keywords):
                return self._call(name, args, keywords)
            case ast.Call():
                raise LiteralEvaluationError(
                    ErrorTemplate.literal_call_rejected(ast.unparse(node.func))
                )
            case _:
                raise LiteralEvaluationError(
                    ErrorTemplate.literal_node_unsupported(type(node).__name__)
                )

    def _read_dict(self, keys: list[ast.expr | None], values: list[ast.expr]) -> dict[Any, Any]:
        result: dict[Any, Any] = {}
        for key, value in zip(keys, values):
            if key is None:
                # {**other} unpacking
                raise LiteralEvaluationError(ErrorTemplate.literal_node_unsupported("DictUnpack"))
            hashed = self._read_key(key)
            result[hashed] = self.read(value)
        return result

    def _read_set(self, elts: list[ast.expr]) -> set[Any]:
        return {self._read_key(elt) for elt in elts}

    def _read_key(self, node: ast.expr) -> Hashable:
        value = self.read(node)
        if not isinstance(value, Hashable):
            raise LiteralEvaluationError(
                ErrorTemplate.literal_node_unsupported(f"unhashable {type(value).__name__}")
            )
        return value

    def _read_number(self, node: ast.expr) -> Any:
        value = self.read(node)
        if not is_number(value) and not isinstance(value, complex):
            raise LiteralEvaluationError(
                ErrorTemplate.literal_node_unsupported(f"sign on {type(value).__name__}")
            )
        return value

    def _lookup(self, name: str) -> Any:
        try:
            return self._names[name]
        except KeyError:
            raise LiteralEvaluationError(ErrorTemplate.literal_name_unknown(name)) from None

    def _call(self, name: str, args: list[ast.expr], keywords: list[ast.keyword]) -> Any:
        func = self._names.get(name)
        if func is None or not callable(func):
            raise LiteralEvaluationError(ErrorTemplate.literal_call_rejected(name))
        call: Callable[..., Any] = func
        positional = [self.read(arg) for arg in args]
        named = {}
        for keyword in keywords:
            if keyword.arg is None:
                # f(**other) unpacking
                raise LiteralEvaluationError(ErrorTemplate.literal_node_unsupported("CallUnpack"))
            named[keyword.arg] = self.read(keyword.value)
        return call(*positional, **named)
