#!/usr/bin/env python3

"""Reflection services: member lookup, accessor resolution and typed access."""

from .accessor_resolver import AccessorResolver
from .base_accessor import BaseAccessor, ValueAccessor
from .field_accessor import FieldAccessor
from .member_introspector import BoundHandles, MemberIntrospector
from .method_accessor import MethodAccessor
from .property_accessor import PropertyAccessor
from .reflector import Reflector
from .type_compatibility import is_assignable, is_compatible_either_way, is_instance_of

__all__ = [
    "AccessorResolver",
    "BaseAccessor",
    "BoundHandles",
    "FieldAccessor",
    "MemberIntrospector",
    "MethodAccessor",
    "PropertyAccessor",
    "Reflector",
    "ValueAccessor",
    "is_assignable",
    "is_compatible_either_way",
    "is_instance_of",
]
