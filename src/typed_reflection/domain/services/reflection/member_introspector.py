#!/usr/bin/env python3

"""Member lookup and handle binding on top of Python's data model.

This module locates members that aren't part of a type's public contract, handling:
- Private-name mangling (``__balance`` declared on ``Account`` is ``_Account__balance``)
- Lookup along the MRO, so members declared on base classes are found
- Properties, functions, staticmethods, classmethods and __slots__ entries
- Annotated instance fields that only exist in the instance __dict__
- Class-level properties declared on the metaclass (treated as static properties)

It also binds callable read/write handles for a member once, so accessors never
re-resolve metadata on each access.
"""

import functools
import inspect
import types
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, get_args, get_origin

from ...models.reflection import (
    Binding,
    MemberDescriptor,
    MemberKind,
    mangle_private_name,
    qualified_type_name,
)
from ....infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BoundHandles:
    """Callable handles bound to a member and its owner."""

    reader: Callable[..., Any] | None
    writer: Callable[[Any], None] | None = None


def _type_hints(obj: Any) -> dict[str, Any]:
    """Get resolved type hints, falling back to raw annotations when they can't be resolved."""
    try:
        return typing.get_type_hints(obj, include_extras=True)
    except Exception as e:  # unresolvable forward refs, odd namespaces
        logger.debug(f"Could not resolve type hints for {obj!r}: {e}")
        try:
            return dict(inspect.get_annotations(obj))
        except TypeError:
            return {}


def _own_annotations(cls: type) -> dict[str, Any]:
    """Get the annotations declared directly on a class (not inherited)."""
    try:
        raw = inspect.get_annotations(cls)
    except TypeError:
        return {}
    if not raw:
        return {}
    resolved = _type_hints(cls)
    return {name: resolved.get(name, value) for name, value in raw.items()}


def _return_type(func: Any) -> Any:
    if func is None:
        return Any
    return _type_hints(func).get("return", Any)


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _field_type(annotation: Any) -> Any:
    """Get the value type of a field annotation (ClassVar[int] becomes int)."""
    if annotation is None or annotation is ClassVar:
        return Any
    if get_origin(annotation) is ClassVar:
        args = get_args(annotation)
        return args[0] if args else Any
    return annotation


class MemberIntrospector:
    """Finds member descriptors on types and binds handles to them.

    Attributes:
        search_metaclass: Whether class-level properties declared on a metaclass are considered
    """

    def __init__(self, search_metaclass: bool = True):
        self.search_metaclass = search_metaclass

    def find_member(
        self,
        declaring_type: type,
        name: str,
        instance: Any = None,
    ) -> MemberDescriptor | None:
        """Find the member a name resolves to on a type.

        Follows Python's attribute resolution order: the first class in the MRO that
        defines the name wins, even if a base class defines a different kind of member
        with the same name.

        Args:
            declaring_type: Type to search (its bases are searched too)
            name: Member name as written in the declaring class (e.g. "__balance" or "_cache")
            instance: Optional instance, used to find undeclared instance attributes

        Returns:
            The member descriptor, or None if no member has this name
        """
        for cls in inspect.getmro(declaring_type):
            attribute_name = mangle_private_name(cls, name)
            descriptor = self._describe(cls, name, attribute_name)
            if descriptor is not None:
                logger.debug(f"Found {descriptor.kind.label} {descriptor.display_name}")
                if instance is not None:
                    return self.prefer_instance_attribute(descriptor, instance)
                return descriptor

        if instance is not None:
            descriptor = self._describe_instance_attribute(declaring_type, instance, name)
            if descriptor is not None:
                return descriptor

        if self.search_metaclass:
            descriptor = self._describe_class_property(declaring_type, name)
            if descriptor is not None:
                return descriptor

        logger.debug(f"No member named '{name}' on {qualified_type_name(declaring_type)}")
        return None

    def prefer_instance_attribute(
        self, descriptor: MemberDescriptor, instance: Any
    ) -> MemberDescriptor:
        """Swap a class-level default for the instance attribute that shadows it.

        A class attribute such as ``_cache = None`` that ``__init__`` overwrites is an
        instance field for that object, so it's described as one, keeping the class
        attribute's annotation as the value type.

        Args:
            descriptor: Descriptor found on the instance's type
            instance: Object whose __dict__ may shadow the class attribute

        Returns:
            An instance field descriptor if the instance shadows a static field, else the
            original descriptor
        """
        if descriptor.kind is not MemberKind.FIELD or not descriptor.is_static:
            return descriptor

        instance_dict = getattr(instance, "__dict__", None)
        if not instance_dict or descriptor.attribute_name not in instance_dict:
            return descriptor

        logger.debug(f"Instance attribute shadows static field {descriptor.display_name}")
        return MemberDescriptor(
            descriptor.declaring_type, descriptor.name, MemberKind.FIELD, descriptor.value_type,
            is_static=False, attribute_name=descriptor.attribute_name,
        )

    def iter_members(self, declaring_type: type) -> Iterator[MemberDescriptor]:
        """Iterate over every member declared on a type and its bases.

        Members shadowed by a subclass are reported once, for the class that wins
        attribute resolution. Dunder members and members inherited from ``object``
        are skipped.

        Args:
            declaring_type: Type to inspect

        Yields:
            Member descriptors ordered by declaring class (most derived first), then name
        """
        seen: set[str] = set()
        for cls in inspect.getmro(declaring_type):
            if cls is object:
                continue
            names = set(vars(cls)) | set(_own_annotations(cls))
            for attribute_name in sorted(names):
                if attribute_name in seen or self._is_dunder(attribute_name):
                    continue
                seen.add(attribute_name)
                name = self._unmangle(cls, attribute_name)
                descriptor = self._describe(cls, name, attribute_name)
                if descriptor is not None:
                    yield descriptor

    def bind(self, binding: Binding) -> BoundHandles:
        """Bind read/write handles for a member and its owner.

        Args:
            binding: Validated member binding

        Returns:
            Handles for reading and writing the member (the reader of a method is
            the bound method itself)
        """
        descriptor = binding.descriptor
        owner = binding.owner

        if descriptor.kind is MemberKind.PROPERTY:
            prop: property = descriptor.raw
            reader = functools.partial(prop.fget, owner) if prop.fget is not None else None
            writer = functools.partial(prop.fset, owner) if prop.fset is not None else None
            return BoundHandles(reader, writer)

        if descriptor.kind is MemberKind.METHOD:
            owner_type = binding.target_type if binding.instance is None else type(binding.instance)
            return BoundHandles(descriptor.raw.__get__(binding.instance, owner_type))

        return BoundHandles(
            functools.partial(getattr, owner, descriptor.attribute_name),
            functools.partial(setattr, owner, descriptor.attribute_name),
        )

    def _describe(self, cls: type, name: str, attribute_name: str) -> MemberDescriptor | None:
        """Describe a member declared directly on a class, if present."""
        namespace = vars(cls)
        annotations = _own_annotations(cls)

        if attribute_name in namespace:
            raw = namespace[attribute_name]

            if isinstance(raw, property):
                return MemberDescriptor(
                    cls, name, MemberKind.PROPERTY, _return_type(raw.fget),
                    is_static=False, attribute_name=attribute_name, raw=raw,
                )
            if isinstance(raw, (staticmethod, classmethod)):
                return MemberDescriptor(
                    cls, name, MemberKind.METHOD, _return_type(raw.__func__),
                    is_static=True, attribute_name=attribute_name, raw=raw,
                )
            if isinstance(raw, (types.FunctionType, functools.partialmethod)):
                func = raw.func if isinstance(raw, functools.partialmethod) else raw
                return MemberDescriptor(
                    cls, name, MemberKind.METHOD, _return_type(func),
                    is_static=False, attribute_name=attribute_name, raw=raw,
                )
            if isinstance(raw, (types.MethodDescriptorType, types.WrapperDescriptorType)):
                return MemberDescriptor(
                    cls, name, MemberKind.METHOD, Any,
                    is_static=False, attribute_name=attribute_name, raw=raw,
                )
            if isinstance(raw, (types.MemberDescriptorType, types.GetSetDescriptorType)):
                return MemberDescriptor(
                    cls, name, MemberKind.FIELD, annotations.get(attribute_name, Any),
                    is_static=False, attribute_name=attribute_name, raw=raw,
                )

            # A plain class attribute is static unless it's annotated as an instance field
            # (class-level defaults such as `balance: int = 0`)
            annotation = annotations.get(attribute_name)
            is_static = annotation is None or _is_class_var(annotation)
            return MemberDescriptor(
                cls, name, MemberKind.FIELD, _field_type(annotation),
                is_static=is_static, attribute_name=attribute_name, raw=raw,
            )

        if attribute_name in annotations:
            annotation = annotations[attribute_name]
            return MemberDescriptor(
                cls, name, MemberKind.FIELD, _field_type(annotation),
                is_static=_is_class_var(annotation), attribute_name=attribute_name,
            )

        return None

    def _describe_instance_attribute(
        self, declaring_type: type, instance: Any, name: str
    ) -> MemberDescriptor | None:
        """Describe an attribute that only exists in an instance's __dict__."""
        instance_dict = getattr(instance, "__dict__", None)
        if not instance_dict:
            return None

        for cls in inspect.getmro(type(instance)):
            candidate = mangle_private_name(cls, name)
            if candidate in instance_dict:
                return MemberDescriptor(
                    declaring_type, name, MemberKind.FIELD, Any,
                    is_static=False, attribute_name=candidate,
                )
        return None

    def _describe_class_property(self, declaring_type: type, name: str) -> MemberDescriptor | None:
        """Describe a property declared on the metaclass, which reads like a static property."""
        metaclass = type(declaring_type)
        if metaclass is type:
            return None

        for meta in inspect.getmro(metaclass):
            if meta is type or meta is object:
                continue
            attribute_name = mangle_private_name(meta, name)
            raw = vars(meta).get(attribute_name)
            if isinstance(raw, property):
                return MemberDescriptor(
                    declaring_type, name, MemberKind.PROPERTY, _return_type(raw.fget),
                    is_static=True, attribute_name=attribute_name, raw=raw,
                )
        return None

    @staticmethod
    def _is_dunder(attribute_name: str) -> bool:
        return attribute_name.startswith("__") and attribute_name.endswith("__")

    @staticmethod
    def _unmangle(cls: type, attribute_name: str) -> str:
        prefix = f"_{cls.__name__.lstrip('_')}__"
        if attribute_name.startswith(prefix) and len(attribute_name) > len(prefix):
            return attribute_name[len(prefix) - 2:]
        return attribute_name
