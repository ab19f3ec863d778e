from .builder import Factory, default_factory, reset_default_factory
from .errors import (
    AllocationError,
    FactoryError,
    InvalidCountError,
    InvalidFieldError,
    InvalidOptionsError,
    InvalidValueError,
    NotAnInstanceError,
    NotARecordError,
    ShapeError,
    SupplierShapeError,
    TooManyOptionsError,
)
from .registry import TypeRegistry
from .settings import FactorySettings
from .values import Fixed, Supplier

__all__ = [
    "Factory",
    "FactorySettings",
    "TypeRegistry",
    "Supplier",
    "Fixed",
    "default_factory",
    "reset_default_factory",
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
