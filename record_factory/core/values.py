"""Raw parameter values: literals and value suppliers.

A raw value is either used as-is or, when it is a supplier, invoked to
produce the value. Suppliers are invoked on every resolution; results are
never cached, so each built instance gets its own value.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import SupplierShapeError

_NO_VALUE_RETURNS = (type(None), typing.NoReturn, getattr(typing, "Never", typing.NoReturn))


def _return_hint(target: Any, sig: inspect.Signature) -> Any:
    hint_target = target if inspect.isroutine(target) else getattr(type(target), "__call__", None)
    try:
        hints = typing.get_type_hints(hint_target)
    except (NameError, TypeError, AttributeError):
        return sig.return_annotation
    ret = hints.get("return", sig.return_annotation)
    return type(None) if ret is None else ret


@dataclass(frozen=True)
class Supplier:
    """Explicit value supplier: `fn` is called with no arguments per resolution."""

    fn: Callable[[], Any]

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError(f"Supplier expects a callable, got {type(self.fn).__name__}")

    def __call__(self) -> Any:
        return self.fn()


@dataclass(frozen=True)
class Fixed:
    """Explicit literal: assigned verbatim even when the value is callable."""

    value: Any


def is_supplier(raw: Any, *, bare_callables: bool = True) -> bool:
    if isinstance(raw, Supplier):
        return True
    if isinstance(raw, (Fixed, type)):
        return False
    return bare_callables and callable(raw)


def check_supplier(fn: Any, *, field: Optional[str] = None) -> None:
    target = fn.fn if isinstance(fn, Supplier) else fn
    try:
        sig = inspect.signature(target)
    except (TypeError, ValueError):
        # builtins without signature metadata are taken on trust
        return

    for p in sig.parameters.values():
        if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
            continue
        if p.default is p.empty:
            raise SupplierShapeError(field=field, fn=fn)

    if any(_return_hint(target, sig) is r for r in _NO_VALUE_RETURNS):
        raise SupplierShapeError(field=field, fn=fn)


def resolve_value(raw: Any, *, bare_callables: bool = True) -> Any:
    if isinstance(raw, Fixed):
        return raw.value
    if is_supplier(raw, bare_callables=bare_callables):
        return raw()
    return raw
