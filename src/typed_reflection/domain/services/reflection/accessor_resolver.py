#!/usr/bin/env python3

"""Accessor resolution: validate a member binding and produce a typed accessor.

Resolution runs once per access request; the returned accessor can then be used
any number of times without touching reflection metadata again.
"""

from typing import Any

from ...models.reflection import (
    Binding,
    InvalidArgument,
    MemberDescriptor,
    MemberKind,
    TypeMismatch,
    qualified_type_name,
    type_display_name,
)
from ....infrastructure.logging import get_logger
from .base_accessor import BaseAccessor
from .field_accessor import FieldAccessor
from .member_introspector import MemberIntrospector
from .method_accessor import MethodAccessor
from .property_accessor import PropertyAccessor
from .type_compatibility import is_compatible_either_way

logger = get_logger(__name__)

ACCESSOR_TYPES: dict[MemberKind, type[BaseAccessor]] = {
    MemberKind.FIELD: FieldAccessor,
    MemberKind.PROPERTY: PropertyAccessor,
    MemberKind.METHOD: MethodAccessor,
}


class AccessorResolver:
    """Validates the static/instance contract and binds typed accessors.

    Attributes:
        introspector: Used to bind read/write handles for a member
        eager_type_check: If True, reject at resolution time a requested value type
            that can never be compatible with the member's declared type
    """

    def __init__(
        self,
        introspector: MemberIntrospector | None = None,
        eager_type_check: bool = False,
    ):
        self.introspector = introspector or MemberIntrospector()
        self.eager_type_check = eager_type_check

    def resolve(
        self,
        declaring_type: type,
        instance: Any,
        descriptor: MemberDescriptor,
        is_static: bool,
        value_type: Any = Any,
    ) -> BaseAccessor[Any]:
        """Produce a typed accessor for a member.

        Args:
            declaring_type: The type that has the member
            instance: The object that has the instance member, or None for a static member
            descriptor: The member metadata
            is_static: Whether the member is static
            value_type: The value type the caller expects

        Returns:
            A FieldAccessor, PropertyAccessor or MethodAccessor depending on the member kind

        Raises:
            InvalidArgument: A required argument is missing or the static/instance contract is violated
            TypeMismatch: Eager type checking is enabled and the value type can't match the member
        """
        try:
            binding = self.bind(declaring_type, instance, descriptor, is_static)
        except InvalidArgument as e:
            logger.debug(f"Rejected accessor for {e.display_name or '<unknown member>'}: {e}")
            raise

        if self.eager_type_check and not is_compatible_either_way(descriptor.value_type, value_type):
            message = (
                f"Can't access the private {descriptor.display_name} {descriptor.kind.label} as "
                f"{type_display_name(value_type)}, must be compatible with "
                f"{type_display_name(descriptor.value_type)}."
            )
            logger.debug(message)
            raise TypeMismatch(message, descriptor.display_name, descriptor.value_type, value_type)

        handles = self.introspector.bind(binding)
        accessor_type = ACCESSOR_TYPES[descriptor.kind]
        logger.debug(
            f"Resolved {accessor_type.__name__} for {descriptor.display_name} "
            f"as {type_display_name(value_type)}"
        )
        return accessor_type(binding, value_type, handles)

    def bind(
        self,
        declaring_type: type,
        instance: Any,
        descriptor: MemberDescriptor,
        is_static: bool,
    ) -> Binding:
        """Validate the static/instance contract and pair a descriptor with its instance.

        Raises:
            InvalidArgument: The arguments violate the binding contract
        """
        if declaring_type is None:
            raise InvalidArgument("The declaring type can't be None.")
        if descriptor is None:
            raise InvalidArgument("The member descriptor can't be None.")
        if not isinstance(declaring_type, type):
            raise InvalidArgument(f"The declaring type must be a type, not {declaring_type!r}.")

        kind = descriptor.kind.label
        display_name = descriptor.display_name

        if is_static and instance is not None:
            raise InvalidArgument(f"A static {kind} cannot have an object instance.", display_name)
        if not is_static and instance is None:
            raise InvalidArgument(f"A non-static {kind} must have an object instance.", display_name)
        if is_static != descriptor.is_static:
            actual = "static" if descriptor.is_static else "non-static"
            raise InvalidArgument(f"The {display_name} {kind} is {actual}.", display_name)

        if not issubclass(declaring_type, descriptor.declaring_type):
            raise InvalidArgument(
                f"The {display_name} {kind} isn't declared on "
                f"{qualified_type_name(declaring_type)} or its base types.",
                display_name,
            )
        if instance is not None and not isinstance(instance, declaring_type):
            raise InvalidArgument(
                f"The object instance must be a {qualified_type_name(declaring_type)}, "
                f"not {qualified_type_name(type(instance))}.",
                display_name,
            )

        return Binding(descriptor, instance, declaring_type)
