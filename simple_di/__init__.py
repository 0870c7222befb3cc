"""Simple named dependency injection."""

from .core import (
    Activator,
    ConstructorActivator,
    Container,
    FactoryActivator,
    Registration,
    Strategy,
)
from .errors import (
    ArgumentsIgnoredError,
    CircularDependencyError,
    DuplicateRegistrationError,
    InvalidArgumentError,
    SimpleDiError,
    UnknownDependencyError,
)
from .producers import WithNew, always, with_new

__all__ = [
    "Activator",
    "ArgumentsIgnoredError",
    "CircularDependencyError",
    "ConstructorActivator",
    "Container",
    "DuplicateRegistrationError",
    "FactoryActivator",
    "InvalidArgumentError",
    "Registration",
    "SimpleDiError",
    "Strategy",
    "UnknownDependencyError",
    "WithNew",
    "always",
    "with_new",
]
