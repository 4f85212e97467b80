#!/usr/bin/env python3

"""Exception hierarchy for reflected member access.

Three failure families are kept distinct so callers can tell them apart:

- InvalidArgument: the API was used incorrectly (missing arguments, static/instance mismatch)
- TypeMismatch: the requested value type doesn't match the member's actual type
- AccessFailure: the underlying member itself failed while being read, written or invoked
"""

from typing import Any


class ReflectionError(Exception):
    """Base class for all reflection access errors."""

    def __init__(self, message: str, display_name: str | None = None):
        super().__init__(message)
        self.display_name = display_name


class InvalidArgument(ReflectionError, ValueError):
    """Raised when an accessor is requested with invalid arguments."""


class MemberNotFound(InvalidArgument, LookupError):
    """Raised when a required member doesn't exist on the declaring type."""

    def __init__(self, type_name: str, member_name: str, kind: str = "member"):
        super().__init__(
            f"The {type_name} type has no {kind} named '{member_name}'.",
            display_name=f"{type_name}::{member_name}",
        )
        self.type_name = type_name
        self.member_name = member_name
        self.kind = kind


class TypeMismatch(ReflectionError, TypeError):
    """Raised when a value can't be bridged between the member type and the requested type."""

    def __init__(
        self,
        message: str,
        display_name: str,
        expected_type: Any,
        actual_type: Any,
    ):
        super().__init__(message, display_name=display_name)
        self.expected_type = expected_type
        self.actual_type = actual_type


class AccessFailure(ReflectionError, RuntimeError):
    """Raised when the underlying member fails during get, set or invoke.

    The original exception is chained as ``__cause__`` and also exposed as ``cause``.
    """

    def __init__(self, message: str, display_name: str, cause: BaseException | None = None):
        super().__init__(message, display_name=display_name)
        self.cause = cause
