#!/usr/bin/env python3

"""Reflection helper for reading and writing private members by name."""

from typing import Any

from ...models.reflection import (
    InvalidArgument,
    MemberDescriptor,
    MemberKind,
    MemberNotFound,
    qualified_type_name,
)
from ...repositories.cache import LookupCache
from ....infrastructure.config import get_config
from ....infrastructure.logging import get_logger
from .accessor_resolver import AccessorResolver
from .field_accessor import FieldAccessor
from .member_introspector import MemberIntrospector
from .method_accessor import MethodAccessor
from .property_accessor import PropertyAccessor

logger = get_logger(__name__)


class Reflector:
    """Looks up private members by name and returns typed accessors for them.

    Passing a type as the target gets a static member; passing any other object
    gets an instance member of that object. Member lookups are cached per
    (type, name), so repeated requests skip the MRO walk. The cache isn't
    thread-safe.

    Example:
        >>> reflector = Reflector()
        >>> balance = reflector.get_field(account, "__balance", int)
        >>> balance.set(100)
        >>> balance.get()
        100
    """

    def __init__(
        self,
        resolver: AccessorResolver | None = None,
        cache_size: int | None = None,
    ):
        """Initialize the reflector.

        Args:
            resolver: Resolver used to bind accessors (defaults to one built from config)
            cache_size: Maximum member lookups to cache (defaults to LOOKUP_CACHE_SIZE)
        """
        config = get_config()
        if resolver is None:
            resolver = AccessorResolver(
                MemberIntrospector(search_metaclass=config["SEARCH_METACLASS"]),
                eager_type_check=config["EAGER_TYPE_CHECK"],
            )
        self.resolver = resolver
        self.introspector = resolver.introspector
        self.lookup_cache = LookupCache(cache_size or config["LOOKUP_CACHE_SIZE"])

    def get_field(
        self, target: Any, name: str, value_type: Any = Any, required: bool = True
    ) -> FieldAccessor[Any] | None:
        """Get a private field.

        Args:
            target: The type (for a static field) or object (for an instance field)
            name: The field name, as declared (e.g. "__balance")
            value_type: The value type expected by the caller
            required: Whether to raise MemberNotFound if the field doesn't exist

        Returns:
            The field accessor, or None if not required and not found
        """
        return self._get_accessor(MemberKind.FIELD, target, name, value_type, required)

    def get_property(
        self, target: Any, name: str, value_type: Any = Any, required: bool = True
    ) -> PropertyAccessor[Any] | None:
        """Get a private property. See get_field for arguments."""
        return self._get_accessor(MemberKind.PROPERTY, target, name, value_type, required)

    def get_method(
        self, target: Any, name: str, return_type: Any = Any, required: bool = True
    ) -> MethodAccessor[Any] | None:
        """Get a private method, typed by its return value. See get_field for arguments."""
        return self._get_accessor(MemberKind.METHOD, target, name, return_type, required)

    def get_value(self, target: Any, name: str, value_type: Any = Any) -> Any:
        """Get the value of a private field or property in one call."""
        kind = self._value_kind(target, name)
        return self._get_accessor(kind, target, name, value_type, True).get()

    def set_value(self, target: Any, name: str, value: Any, value_type: Any = Any) -> None:
        """Set the value of a private field or property in one call."""
        kind = self._value_kind(target, name)
        self._get_accessor(kind, target, name, value_type, True).set(value)

    def clear_cache(self) -> None:
        """Forget cached member lookups (e.g. after patching a type at runtime)."""
        self.lookup_cache.clear()

    def _get_accessor(
        self,
        kind: MemberKind,
        target: Any,
        name: str,
        value_type: Any,
        required: bool,
    ) -> Any:
        if target is None:
            raise InvalidArgument(f"Can't get a private {kind.label} from a None target.")
        if not name:
            raise InvalidArgument(f"The {kind.label} name can't be empty.")

        is_static = isinstance(target, type)
        declaring_type = target if is_static else type(target)
        instance = None if is_static else target

        descriptor = self._find(target, name)
        if descriptor is None or descriptor.kind is not kind or descriptor.is_static != is_static:
            label = f"{'static' if is_static else 'instance'} {kind.label}"
            if not required:
                logger.debug(
                    f"Optional {label} {name} not found on {qualified_type_name(declaring_type)}"
                )
                return None
            raise MemberNotFound(qualified_type_name(declaring_type), name, label)

        return self.resolver.resolve(declaring_type, instance, descriptor, is_static, value_type)

    def _value_kind(self, target: Any, name: str) -> MemberKind:
        descriptor = self._find(target, name)
        if descriptor is not None and descriptor.kind is MemberKind.PROPERTY:
            return MemberKind.PROPERTY
        return MemberKind.FIELD

    def _find(self, target: Any, name: str) -> MemberDescriptor | None:
        """Find a member on a target, caching lookups that don't depend on the instance."""
        declaring_type = target if isinstance(target, type) else type(target)
        descriptor = self.lookup_cache.get_or_load(
            (declaring_type, name),
            lambda: self.introspector.find_member(declaring_type, name),
        )

        if isinstance(target, type):
            return descriptor

        # Attributes set on the instance can't be cached per type
        if descriptor is None:
            return self.introspector.find_member(declaring_type, name, instance=target)
        return self.introspector.prefer_instance_attribute(descriptor, target)
