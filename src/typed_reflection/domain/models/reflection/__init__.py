#!/usr/bin/env python3

"""Reflection domain models."""

from .binding import Binding
from .errors import (
    AccessFailure,
    InvalidArgument,
    MemberNotFound,
    ReflectionError,
    TypeMismatch,
)
from .member_descriptor import MemberDescriptor
from .member_kind import MemberKind
from .mod_info import ModInfoModel
from .naming import (
    mangle_private_name,
    member_display_name,
    qualified_type_name,
    type_display_name,
)

__all__ = [
    "AccessFailure",
    "Binding",
    "InvalidArgument",
    "MemberDescriptor",
    "MemberKind",
    "MemberNotFound",
    "ModInfoModel",
    "ReflectionError",
    "TypeMismatch",
    "mangle_private_name",
    "member_display_name",
    "qualified_type_name",
    "type_display_name",
]
