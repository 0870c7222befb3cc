import inspect
from collections.abc import Iterable, Mapping
from typing import Any

from theutilitybelt.functional.predicate import predicate

from .errors import InvalidArgumentError
from .formatting import describe_dependencies, describe_entry, describe_type, is_dependency_sequence

is_string = predicate(lambda value: isinstance(value, str))
is_nullish_or_string = predicate(lambda value: value is None or isinstance(value, str))


def validate_name(name: Any) -> str:
    if not is_string(name):
        raise InvalidArgumentError(f"Expected dependency name to be string, but got: {describe_type(name)}")
    return name


def validate_factory(factory: Any):
    if not callable(factory):
        raise InvalidArgumentError(f"Expected a factory function, but got: {describe_type(factory)}")
    return factory


def validate_constructor(constructor: Any):
    if not inspect.isclass(constructor):
        raise InvalidArgumentError(f"Expected a constructor function, but got: {describe_type(constructor)}")
    return constructor


def validate_dependencies(name: str, dependencies: Any) -> tuple[str, ...]:
    if dependencies is None:
        return ()

    if not is_dependency_sequence(dependencies) or not all(is_string(d) for d in dependencies):
        raise InvalidArgumentError(
            f'Expected dependencies for "{name}" to be a sequence of str, '
            f"but got: {describe_dependencies(dependencies)}"
        )
    return tuple(dependencies)


def validate_prefix(prefix: Any) -> str:
    if not is_nullish_or_string(prefix):
        raise InvalidArgumentError("Prefix must be nullish or string")
    return prefix or ""


def validate_bulk_entry(entry: Any) -> tuple[Any, ...]:
    if not is_dependency_sequence(entry) or not 2 <= len(entry) <= 4:
        raise InvalidArgumentError(
            f"Expected bulk entry to be a sequence of 2 to 4 items, but got: {describe_entry(entry)}"
        )
    return tuple(entry)


def validate_constants_source(source: Any) -> list[tuple[str, Any]]:
    if isinstance(source, Mapping):
        items = list(source.items())
    elif isinstance(source, Iterable) and not isinstance(source, (str, bytes)):
        items = list(source)
    else:
        raise InvalidArgumentError(
            f"Expected constants to be a mapping or a sequence of pairs, but got: {describe_type(source)}"
        )

    for item in items:
        if not is_dependency_sequence(item) or len(item) != 2:
            raise InvalidArgumentError(f"Expected constant entry to be a pair, but got: {describe_entry(item)}")
    return [(validate_name(name), value) for name, value in items]
