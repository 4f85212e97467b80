#!/usr/bin/env python3

"""Naming helpers used in diagnostics."""

import builtins
from typing import Any


def qualified_type_name(cls: type) -> str:
    """Get the fully qualified name of a class (e.g. "bank.models.Account").

    Builtin types are returned without their module prefix.
    """
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", repr(cls))
    if module in (None, builtins.__name__):
        return qualname
    return f"{module}.{qualname}"


def type_display_name(annotation: Any) -> str:
    """Format a type or typing annotation for an error message.

    Args:
        annotation: A class, typing construct (list[int], Optional[str], ...) or None

    Returns:
        Readable representation of the annotation
    """
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, type) and not getattr(annotation, "__args__", None):
        return qualified_type_name(annotation)
    return repr(annotation).replace("typing.", "")


def member_display_name(declaring_type: type, member_name: str) -> str:
    """Get the "<type>::<member>" name shown in error messages."""
    return f"{qualified_type_name(declaring_type)}::{member_name}"


def mangle_private_name(declaring_type: type, member_name: str) -> str:
    """Apply Python's private-name mangling to a member name.

    ``__balance`` declared on ``Account`` is stored as ``_Account__balance``. Dunder
    names and names that aren't private are returned unchanged.
    """
    if not member_name.startswith("__") or member_name.endswith("__"):
        return member_name
    class_name = declaring_type.__name__.lstrip("_")
    if not class_name:
        return member_name
    return f"_{class_name}{member_name}"
