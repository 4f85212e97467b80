"""Typed Reflection - typed access to private fields, properties and methods."""

__version__ = "0.1.0"

from .domain.models.reflection import (
    AccessFailure,
    InvalidArgument,
    MemberDescriptor,
    MemberKind,
    MemberNotFound,
    ModInfoModel,
    ReflectionError,
    TypeMismatch,
)
from .domain.services.reflection import (
    AccessorResolver,
    FieldAccessor,
    MemberIntrospector,
    MethodAccessor,
    PropertyAccessor,
    Reflector,
)
from .infrastructure.config import Config
from .main import main

__all__ = [
    "AccessFailure",
    "AccessorResolver",
    "Config",
    "FieldAccessor",
    "InvalidArgument",
    "MemberDescriptor",
    "MemberIntrospector",
    "MemberKind",
    "MemberNotFound",
    "MethodAccessor",
    "ModInfoModel",
    "PropertyAccessor",
    "ReflectionError",
    "Reflector",
    "TypeMismatch",
    "__version__",
    "main",
]
