#!/usr/bin/env python3

"""Runtime compatibility checks between values, classes and typing annotations.

This module provides the type bridge between a member's declared annotation and
the value type requested by the caller, handling:
- Plain classes, using Python subclassing rules plus the int -> float -> complex promotion
- Optional/Union (including X | Y) and Literal
- Parametrised generics such as list[int], dict[str, int] and tuple[int, ...]
- ClassVar, Final and Annotated wrappers, and TypeVar bounds

Values are never converted, only checked. Annotation forms that can't be checked at
runtime (unresolved forward references, Protocol internals, ...) are treated as compatible.
"""

import types
import typing
from collections.abc import Collection, Mapping
from typing import Any, ClassVar, Literal, Union, get_args, get_origin

_UNION_ORIGINS = (Union, types.UnionType)
_WRAPPER_ORIGINS = (ClassVar, typing.Final, typing.Annotated)

# Implicit promotions allowed by PEP 484 (an int is acceptable where a float is expected)
_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def unwrap_annotation(annotation: Any) -> Any:
    """Strip wrappers that don't affect the value type.

    Args:
        annotation: Annotation as found in __annotations__ or returned by get_type_hints

    Returns:
        The underlying value annotation (None becomes NoneType, unbound TypeVars become Any)
    """
    while get_origin(annotation) in _WRAPPER_ORIGINS:
        args = get_args(annotation)
        annotation = args[0] if args else Any

    if isinstance(annotation, typing.TypeVar):
        if annotation.__bound__ is not None:
            return unwrap_annotation(annotation.__bound__)
        if annotation.__constraints__:
            return Union[annotation.__constraints__]
        return Any

    if annotation is None:
        return type(None)

    return annotation


def _is_unchecked(annotation: Any) -> bool:
    return (
        annotation is Any
        or annotation is object
        or isinstance(annotation, (str, typing.ForwardRef))
    )


def is_instance_of(value: Any, annotation: Any) -> bool:
    """Check whether a runtime value satisfies a type annotation.

    Args:
        value: Value to check
        annotation: Class or typing annotation

    Returns:
        True if the value is compatible with the annotation
    """
    annotation = unwrap_annotation(annotation)
    if _is_unchecked(annotation):
        return True

    origin = get_origin(annotation)
    if origin is None:
        if not isinstance(annotation, type):
            return True
        if isinstance(value, annotation):
            return True
        return any(isinstance(value, t) for t in _NUMERIC_PROMOTIONS.get(annotation, ()))

    args = get_args(annotation)

    if origin in _UNION_ORIGINS:
        return any(is_instance_of(value, arg) for arg in args)

    if origin is Literal:
        return any(value == arg and type(value) is type(arg) for arg in args)

    if origin is type:
        if not isinstance(value, type):
            return False
        return not args or is_assignable(value, args[0])

    if not isinstance(origin, type):
        return True
    if not isinstance(value, origin):
        return False
    if not args:
        return True

    return _elements_match(value, origin, args)


def _elements_match(value: Any, origin: type, args: tuple[Any, ...]) -> bool:
    """Check the items of a concrete container against its type arguments."""
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return all(is_instance_of(item, args[0]) for item in value)
        if args == ((),):
            return len(value) == 0
        return len(value) == len(args) and all(
            is_instance_of(item, arg) for item, arg in zip(value, args)
        )

    if isinstance(value, Mapping) and len(args) == 2:
        key_type, value_type = args
        return all(
            is_instance_of(k, key_type) and is_instance_of(v, value_type)
            for k, v in value.items()
        )

    if issubclass(origin, Collection) and isinstance(value, Collection) and len(args) == 1:
        return all(is_instance_of(item, args[0]) for item in value)

    return True


def is_assignable(source: Any, target: Any) -> bool:
    """Check whether values declared as ``source`` can be used where ``target`` is expected.

    Args:
        source: Annotation of the value being provided
        target: Annotation of the slot receiving the value

    Returns:
        True if every value of the source type is (as far as can be told) a valid target value
    """
    source = unwrap_annotation(source)
    target = unwrap_annotation(target)
    if _is_unchecked(target) or source is Any or isinstance(source, (str, typing.ForwardRef)):
        return True

    source_origin = get_origin(source)
    target_origin = get_origin(target)

    if source_origin in _UNION_ORIGINS:
        return all(is_assignable(arg, target) for arg in get_args(source))
    if target_origin in _UNION_ORIGINS:
        return any(is_assignable(source, arg) for arg in get_args(target))

    if source_origin is Literal:
        return all(is_instance_of(arg, target) for arg in get_args(source))
    if target_origin is Literal:
        return False

    source_class = source_origin or source
    target_class = target_origin or target
    if not (isinstance(source_class, type) and isinstance(target_class, type)):
        return True

    try:
        if not issubclass(source_class, target_class) and source_class not in _NUMERIC_PROMOTIONS.get(
            target_class, ()
        ):
            return False
    except TypeError:
        # issubclass() rejects some special forms (e.g. non-runtime protocols)
        return True

    source_args = get_args(source)
    target_args = get_args(target)
    if not source_args or not target_args or len(source_args) != len(target_args):
        return True

    return all(
        arg is Ellipsis or is_assignable(s_arg, arg)
        for s_arg, arg in zip(source_args, target_args)
    )


def is_compatible_either_way(declared: Any, requested: Any) -> bool:
    """Check whether two annotations overlap in at least one direction."""
    return is_assignable(declared, requested) or is_assignable(requested, declared)
