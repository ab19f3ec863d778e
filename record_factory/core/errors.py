"""Factory exceptions.

Every error is raised before any field of a target is assigned.
"""

from __future__ import annotations

from typing import Any, Optional


class FactoryError(Exception):
    pass


class ShapeError(FactoryError):
    """The arguments of a factory call have the wrong shape."""


class NotAnInstanceError(ShapeError):
    def __init__(self, *, target: Any):
        self.target = target
        super().__init__(
            f"target must be a record instance, not the class {getattr(target, '__name__', target)!r}"
        )


class NotARecordError(ShapeError):
    def __init__(self, *, target: Any):
        self.target = target
        super().__init__(f"{type(target).__name__} does not reference a record")


class TooManyOptionsError(ShapeError):
    def __init__(self, *, count: int):
        self.count = count
        super().__init__(f"too many options: expected at most 1, got {count}")


class InvalidOptionsError(ShapeError):
    def __init__(self, *, options: Any):
        self.options = options
        super().__init__(
            f"options must be a mapping of field names to values, got {type(options).__name__}"
        )


class InvalidCountError(ShapeError):
    def __init__(self, *, count: Any):
        self.count = count
        super().__init__(f"count must be a non-negative integer, got {count!r}")


class AllocationError(ShapeError):
    def __init__(self, *, record_type: type, reason: str):
        self.record_type = record_type
        self.reason = reason
        super().__init__(f"cannot allocate instances of {record_type.__qualname__}: {reason}")


class InvalidFieldError(FactoryError):
    def __init__(self, *, field: Any, record_type: Optional[type] = None):
        self.field = field
        self.record_type = record_type
        super().__init__(f"invalid field `{field}`")


class InvalidValueError(FactoryError):
    def __init__(self, *, field: str, value: Any, expected: Any = None):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"value `{value!r}` for field `{field}` is invalid")


class SupplierShapeError(FactoryError):
    def __init__(self, *, field: Optional[str], fn: Any):
        self.field = field
        self.fn = fn
        where = f" (field `{field}`)" if field else ""
        super().__init__(f"function must take no arguments and return exactly one value{where}")
