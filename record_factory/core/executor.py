from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from pydantic import BaseModel, ValidationError

from .errors import InvalidValueError
from .values import resolve_value

_UNSET = object()


def _restore(target: Any, previous: List[Tuple[str, Any]], fields_set: Any) -> None:
    # bypasses assignment validation; these values were on the target before
    for field, old in reversed(previous):
        if old is _UNSET:
            try:
                object.__delattr__(target, field)
            except AttributeError:
                pass
        else:
            object.__setattr__(target, field, old)
    if fields_set is not None:
        object.__setattr__(target, "__pydantic_fields_set__", fields_set)


def apply_params(target: Any, params: Mapping[str, Any], *, bare_callables: bool = True) -> None:
    """
    Assign every parameter onto `target`. The mapping must already have passed
    check_params for type(target).

    All values are resolved before the first assignment, so a supplier that
    raises leaves the target untouched. A pydantic model with
    validate_assignment that rejects a value is rolled back to its previous
    state and InvalidValueError is raised.
    """
    resolved: Dict[str, Any] = {
        field: resolve_value(raw, bare_callables=bare_callables) for field, raw in params.items()
    }

    fields_set = set(target.model_fields_set) if isinstance(target, BaseModel) else None
    previous: List[Tuple[str, Any]] = []
    for field, value in resolved.items():
        old = getattr(target, field, _UNSET)
        try:
            setattr(target, field, value)
        except ValidationError as e:
            _restore(target, previous, fields_set)
            raise InvalidValueError(field=field, value=value) from e
        previous.append((field, old))
