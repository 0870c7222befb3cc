from dataclasses import dataclass
from typing import Any, Callable

from theutilitybelt.functional.utils import constant


@dataclass(frozen=True)
class WithNew:
    constructor: type


def always(value: Any) -> Callable[..., Any]:
    """
    Creates a factory that ignores any arguments and returns the value provided.

    Args:
        value (Any): The pre-built value.

    Returns:
        Callable[..., Any]: The factory.
    """
    return constant(value)


def with_new(constructor: type) -> WithNew:
    """
    Marks a class so that Container.register instantiates it instead of calling it as a factory.
    """
    return WithNew(constructor)
