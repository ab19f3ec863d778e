from __future__ import annotations

from typing import Any, Mapping, Optional

from .errors import FactoryError, InvalidFieldError, InvalidValueError
from .fields import match_field
from .typecheck import is_assignable
from .values import check_supplier, is_supplier, resolve_value


def check_params(record_type: type, params: Mapping[Any, Any], *, bare_callables: bool = True) -> None:
    """
    Validate a parameter mapping against the fields of `record_type`.

    Suppliers are invoked here to obtain a value whose type can be checked;
    that value is discarded. Raises the first error found.
    """
    for field, raw in params.items():
        handle = match_field(record_type, field)
        if handle is None:
            raise InvalidFieldError(field=field, record_type=record_type)

        if is_supplier(raw, bare_callables=bare_callables):
            check_supplier(raw, field=field)

        value = resolve_value(raw, bare_callables=bare_callables)
        if not is_assignable(value, handle.annotation):
            raise InvalidValueError(field=field, value=value, expected=handle.annotation)


def validate_params(
    record_type: type, params: Mapping[Any, Any], *, bare_callables: bool = True
) -> Optional[FactoryError]:
    try:
        check_params(record_type, params, bare_callables=bare_callables)
    except FactoryError as e:
        return e
    return None
