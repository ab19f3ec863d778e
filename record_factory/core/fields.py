from __future__ import annotations

import dataclasses
import inspect
import logging
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel

log = logging.getLogger("record_factory.fields")


@dataclass(frozen=True)
class FieldHandle:
    name: str
    annotation: Any
    owner: type
    assignable: bool = True


def record_kind(cls: Any) -> Optional[str]:
    """
    Classify a record class:
      - "dataclass": a dataclasses dataclass
      - "pydantic": a pydantic BaseModel subclass
      - "annotated": a plain class declaring annotated attributes
    Returns None for anything else (builtins, enums, tuples, TypedDicts ...).
    """
    if not isinstance(cls, type):
        return None
    if dataclasses.is_dataclass(cls):
        return "dataclass"
    if issubclass(cls, BaseModel):
        return "pydantic"
    if issubclass(cls, (tuple, dict, Enum)) or cls.__module__ == "builtins":
        return None
    for klass in cls.__mro__[:-1]:
        if _own_annotations(klass):
            return "annotated"
    return None


def is_record_type(cls: Any) -> bool:
    return record_kind(cls) is not None


def _type_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as e:
        # unresolvable forward references; raw annotations are used instead
        log.debug("type hints unavailable for %s: %s", cls.__qualname__, e)
        return {}


def _own_annotations(klass: type) -> Dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError as e:
        log.debug("annotations of %s reference undefined names: %s", klass.__qualname__, e)
        return {}


def _raw_annotations(cls: type) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for klass in reversed(cls.__mro__[:-1]):
        out.update(_own_annotations(klass))
    return out


def _normalize(annotation: Any) -> Any:
    if annotation is None or isinstance(annotation, str):
        return Any
    return annotation


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _read_only_attr(cls: type, name: str) -> bool:
    attr = inspect.getattr_static(cls, name, None)
    return isinstance(attr, property) and attr.fset is None


def _dataclass_fields(cls: type) -> Dict[str, FieldHandle]:
    hints = _type_hints(cls)
    frozen = bool(cls.__dataclass_params__.frozen)
    out: Dict[str, FieldHandle] = {}
    for f in dataclasses.fields(cls):
        out[f.name] = FieldHandle(
            name=f.name,
            annotation=_normalize(hints.get(f.name, f.type)),
            owner=cls,
            assignable=not frozen and not f.name.startswith("_"),
        )
    return out


def _pydantic_fields(cls: type) -> Dict[str, FieldHandle]:
    frozen_model = bool(cls.model_config.get("frozen", False))
    out: Dict[str, FieldHandle] = {}
    for name, info in cls.model_fields.items():
        out[name] = FieldHandle(
            name=name,
            # Field(ge=..., max_length=...) constraints travel as Annotated metadata
            annotation=_normalize(info.rebuild_annotation()),
            owner=cls,
            assignable=not (frozen_model or info.frozen) and not name.startswith("_"),
        )
    return out


def _annotated_fields(cls: type) -> Dict[str, FieldHandle]:
    raw = _raw_annotations(cls)
    hints = _type_hints(cls)
    out: Dict[str, FieldHandle] = {}
    for name, ann in raw.items():
        ann = hints.get(name, ann)
        if _is_classvar(ann):
            continue
        out[name] = FieldHandle(
            name=name,
            annotation=_normalize(ann),
            owner=cls,
            assignable=not name.startswith("_") and not _read_only_attr(cls, name),
        )
    return out


_ENUMERATORS = {
    "dataclass": _dataclass_fields,
    "pydantic": _pydantic_fields,
    "annotated": _annotated_fields,
}


def record_fields(cls: type) -> Dict[str, FieldHandle]:
    """All declared fields of a record class, including non-assignable ones."""
    kind = record_kind(cls)
    if kind is None:
        return {}
    return _ENUMERATORS[kind](cls)


def match_field(cls: type, name: Any) -> Optional[FieldHandle]:
    """Exact-name lookup; None unless the field exists and can be set."""
    if not isinstance(name, str):
        return None
    handle = record_fields(cls).get(name)
    if handle is None or not handle.assignable:
        return None
    return handle
