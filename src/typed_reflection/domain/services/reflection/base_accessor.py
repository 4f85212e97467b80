#!/usr/bin/env python3

"""Shared behaviour for typed member accessors."""

from typing import Any, Generic, NoReturn, TypeVar

from ...models.reflection import (
    AccessFailure,
    Binding,
    MemberDescriptor,
    TypeMismatch,
    qualified_type_name,
    type_display_name,
)
from ....infrastructure.logging import get_logger
from .member_introspector import BoundHandles
from .type_compatibility import is_assignable, is_instance_of

logger = get_logger(__name__)

V = TypeVar("V")


class BaseAccessor(Generic[V]):
    """A bound handle to a member, typed by the value type the caller expects.

    The binding and handles are fixed at construction; no values are cached
    between calls. Accessors don't synchronize access to the target object, so
    callers sharing a mutable target across threads must provide their own locking.

    Attributes:
        binding: The member descriptor and (for instance members) the target object
        value_type: The value type requested by the caller
    """

    def __init__(self, binding: Binding, value_type: Any, handles: BoundHandles):
        self.binding = binding
        self.value_type = value_type
        self._reader = handles.reader
        self._writer = handles.writer

    @property
    def descriptor(self) -> MemberDescriptor:
        """The reflection metadata."""
        return self.binding.descriptor

    @property
    def display_name(self) -> str:
        """The "<type>::<member>" name shown in error messages."""
        return self.binding.display_name

    @property
    def _kind(self) -> str:
        return self.descriptor.kind.label

    def _declared_type_name(self, value: Any = None, has_value: bool = False) -> str:
        """Get the declared member type, or the runtime type when the value doesn't honour it."""
        declared = self.descriptor.value_type
        if has_value and (declared is Any or not is_instance_of(value, declared)):
            return qualified_type_name(type(value))
        return type_display_name(declared)

    def _fail_access(self, message: str, error: BaseException) -> NoReturn:
        logger.debug(f"{message}: {error!r}")
        raise AccessFailure(message, self.display_name, error) from error

    def _fail_type(self, message: str, expected: Any, actual: Any) -> NoReturn:
        logger.debug(message)
        raise TypeMismatch(message, self.display_name, expected, actual)

    def _check_result(self, value: Any, subject: str) -> V:
        """Bridge a value read from the member to the requested type."""
        if not is_instance_of(value, self.value_type):
            self._fail_type(
                f"Can't convert {subject} from "
                f"{self._declared_type_name(value, has_value=True)} "
                f"to {type_display_name(self.value_type)}.",
                expected=self.value_type,
                actual=type(value),
            )
        return value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.display_name}, "
            f"value_type={type_display_name(self.value_type)})"
        )


class ValueAccessor(BaseAccessor[V]):
    """Accessor exposing get/set over a field-like member."""

    def get(self) -> V:
        """Get the member value.

        Raises:
            TypeMismatch: The current value isn't an instance of the requested type
            AccessFailure: The member couldn't be read
        """
        if self._reader is None:
            self._fail_access(
                f"Couldn't get the value of the private {self.display_name} {self._kind}",
                AttributeError(f"The {self.display_name} {self._kind} has no getter"),
            )
        try:
            value = self._reader()
        except Exception as e:
            self._fail_access(
                f"Couldn't get the value of the private {self.display_name} {self._kind}", e
            )
        return self._check_result(value, f"the private {self.display_name} {self._kind}")

    def set(self, value: V) -> None:
        """Set the member value.

        Args:
            value: The value to set

        Raises:
            TypeMismatch: The requested type or the value isn't compatible with the member type
            AccessFailure: The member couldn't be written
        """
        declared = self.descriptor.value_type
        if not is_assignable(self.value_type, declared) or not is_instance_of(value, self.value_type):
            self._fail_type(
                f"Can't assign the private {self.display_name} {self._kind} a "
                f"{type_display_name(self.value_type)} value, must be compatible with "
                f"{self._declared_type_name()}.",
                expected=declared,
                actual=self.value_type,
            )
        # An untyped accessor (V=Any) still can't write a value the member doesn't accept
        if not is_instance_of(value, declared):
            self._fail_type(
                f"Can't assign the private {self.display_name} {self._kind} a "
                f"{qualified_type_name(type(value))} value, must be compatible with "
                f"{self._declared_type_name()}.",
                expected=declared,
                actual=type(value),
            )
        if self._writer is None:
            self._fail_access(
                f"Couldn't set the value of the private {self.display_name} {self._kind}",
                AttributeError(f"The {self.display_name} {self._kind} is read-only"),
            )
        try:
            self._writer(value)
        except Exception as e:
            self._fail_access(
                f"Couldn't set the value of the private {self.display_name} {self._kind}", e
            )
