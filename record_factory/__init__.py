"""Populate record instances (dataclasses, pydantic models, annotated classes)
from registered defaults and per-call overrides, for test fixtures and
sample data."""

from .core import (
    AllocationError,
    Factory,
    FactoryError,
    FactorySettings,
    Fixed,
    InvalidCountError,
    InvalidFieldError,
    InvalidOptionsError,
    InvalidValueError,
    NotAnInstanceError,
    NotARecordError,
    ShapeError,
    Supplier,
    SupplierShapeError,
    TooManyOptionsError,
    TypeRegistry,
    default_factory,
    reset_default_factory,
)
from .core.builder import (
    build,
    build_many,
    defaults_for,
    must_build,
    must_build_many,
    register,
)
from .core.suppliers import choice, cycle, factory_of, sequence, uuid4_str

__all__ = [
    "Factory",
    "FactorySettings",
    "TypeRegistry",
    "Supplier",
    "Fixed",
    "default_factory",
    "reset_default_factory",
    "register",
    "defaults_for",
    "build",
    "build_many",
    "must_build",
    "must_build_many",
    "sequence",
    "cycle",
    "choice",
    "uuid4_str",
    "factory_of",
    "FactoryError",
    "AllocationError",
    "ShapeError",
    "NotAnInstanceError",
    "NotARecordError",
    "TooManyOptionsError",
    "InvalidOptionsError",
    "InvalidCountError",
    "InvalidFieldError",
    "InvalidValueError",
    "SupplierShapeError",
]
