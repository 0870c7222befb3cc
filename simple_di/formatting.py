from collections.abc import Iterable
from typing import Any


def describe_type(value: Any) -> str:
    """
    Returns the name of the runtime type of a value.

    Args:
        value (Any): The value to describe.
    Returns:
        str: e.g. ``"int"``, ``"str"``, ``"function"``, ``"NoneType"``.
    """
    return type(value).__name__


def describe_type_signature(values: Iterable[Any]) -> str:
    """
    Renders the element-wise types of a sequence in brackets.

    Args:
        values (Iterable[Any]): The sequence to describe.
    Returns:
        str: e.g. ``"[int, int]"`` or ``"[str, int]"``.
    """
    return "[" + ", ".join(describe_type(v) for v in values) + "]"


def describe_dependencies(dependencies: Any) -> str:
    if is_dependency_sequence(dependencies):
        return describe_type_signature(dependencies)
    return describe_type(dependencies)


def is_dependency_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def describe_entry(entry: Any) -> str:
    """
    Describes a bulk or constant entry by its element-wise types when it is a list or tuple.

    Args:
        entry (Any): The entry to describe.
    Returns:
        str: e.g. ``"[str]"`` for a one-item tuple, or ``"NoneType"``.
    """
    return describe_dependencies(entry)
