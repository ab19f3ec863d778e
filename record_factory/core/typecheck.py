from __future__ import annotations

import logging
import typing
from functools import lru_cache
from typing import Any, Optional

from pydantic import ConfigDict, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError, PydanticUserError

log = logging.getLogger("record_factory.typecheck")

# numeric tower: an int may be stored where a float or complex is declared
_WIDENING = {
    float: (int,),
    complex: (int, float),
}


def _build_adapter(annotation: Any) -> Optional[TypeAdapter]:
    try:
        return TypeAdapter(annotation, config=ConfigDict(arbitrary_types_allowed=True))
    except PydanticSchemaGenerationError as e:
        log.debug("no schema for %r, falling back to origin check: %s", annotation, e)
        return None
    except PydanticUserError:
        # config is rejected for BaseModel / dataclass / TypedDict annotations
        pass
    try:
        return TypeAdapter(annotation)
    except PydanticUserError as e:
        log.debug("no schema for %r, falling back to origin check: %s", annotation, e)
        return None


@lru_cache(maxsize=512)
def _cached_adapter(annotation: Any) -> Optional[TypeAdapter]:
    return _build_adapter(annotation)


def _adapter(annotation: Any) -> Optional[TypeAdapter]:
    try:
        return _cached_adapter(annotation)
    except TypeError:
        # unhashable annotation (e.g. Annotated with dict metadata)
        return _build_adapter(annotation)


def _is_plain_class(annotation: Any) -> bool:
    return isinstance(annotation, type) and typing.get_origin(annotation) is None


def is_assignable(value: Any, annotation: Any) -> bool:
    """
    True if `value` may be stored in a field declared as `annotation`.

    Plain classes use isinstance (plus int -> float/complex widening); every
    other annotation is checked with pydantic in strict mode so nothing is
    coerced (e.g. "1" is not an int).
    """
    if annotation is Any or annotation is object:
        return True

    if _is_plain_class(annotation):
        try:
            if isinstance(value, annotation):
                return True
            return any(isinstance(value, t) for t in _WIDENING.get(annotation, ()))
        except TypeError:
            # TypedDict and non-runtime Protocol classes refuse isinstance
            pass

    adapter = _adapter(annotation)
    if adapter is None:
        origin = typing.get_origin(annotation)
        return isinstance(value, origin) if isinstance(origin, type) else True

    try:
        adapter.validate_python(value, strict=True)
    except ValidationError:
        return False
    return True
