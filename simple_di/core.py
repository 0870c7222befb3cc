"""Simple named dependency container."""

from __future__ import annotations

import abc
import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from .errors import (
    ArgumentsIgnoredError,
    CircularDependencyError,
    DuplicateRegistrationError,
    UnknownDependencyError,
)
from .producers import WithNew
from .validation import (
    validate_bulk_entry,
    validate_constants_source,
    validate_constructor,
    validate_dependencies,
    validate_factory,
    validate_name,
    validate_prefix,
)

logger = logging.getLogger(__name__)


class Strategy(Enum):
    FACTORY = "factory"
    FACTORY_ONCE = "factory_once"
    CONSTRUCTOR = "constructor"
    CONSTRUCTOR_ONCE = "constructor_once"
    CONSTANT = "constant"

    @property
    def is_once(self) -> bool:
        return self in (Strategy.FACTORY_ONCE, Strategy.CONSTRUCTOR_ONCE)


class Activator(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def activate(cls, producer: Callable, resolved_dependencies: Sequence[Any], args: Sequence[Any]) -> Any: ...


class FactoryActivator(Activator):
    @classmethod
    def activate(cls, producer: Callable, resolved_dependencies: Sequence[Any], args: Sequence[Any]):
        return producer(*resolved_dependencies, *args)


class ConstructorActivator(Activator):
    @classmethod
    def activate(cls, producer: Callable, resolved_dependencies: Sequence[Any], args: Sequence[Any]):
        instance = producer(*resolved_dependencies, *args)
        logger.debug("Instantiated %s", producer)
        return instance


_ACTIVATORS: dict[Strategy, type[Activator]] = {
    Strategy.FACTORY: FactoryActivator,
    Strategy.FACTORY_ONCE: FactoryActivator,
    Strategy.CONSTRUCTOR: ConstructorActivator,
    Strategy.CONSTRUCTOR_ONCE: ConstructorActivator,
}


class Registration:
    __slots__ = (
        "cached_value",
        "created_with_args",
        "dependencies",
        "has_cached_value",
        "name",
        "producer",
        "strategy",
    )

    def __init__(
        self,
        *,
        name: str,
        strategy: Strategy,
        producer: Callable | None = None,
        dependencies: Iterable[str] = (),
    ):
        self.name = name
        self.strategy = strategy
        self.producer = producer
        self.dependencies = tuple(dependencies)
        self.cached_value: Any = None
        self.has_cached_value = False
        self.created_with_args = False

    @classmethod
    def constant(cls, name: str, value: Any) -> Registration:
        registration = cls(name=name, strategy=Strategy.CONSTANT)
        registration.cache(value, created_with_args=False)
        return registration

    def cache(self, value: Any, created_with_args: bool):
        self.cached_value = value
        self.has_cached_value = True
        self.created_with_args = created_with_args

    def activate(self, resolved_dependencies: Sequence[Any], args: Sequence[Any]) -> Any:
        activator_class = _ACTIVATORS[self.strategy]
        return activator_class.activate(self.producer, resolved_dependencies, args)

    def __repr__(self):
        return f"Registration(name={self.name!r}, strategy={self.strategy.name}, dependencies={list(self.dependencies)})"


class _Registry:
    def __init__(self):
        self._registrations: dict[str, Registration] = {}

    def add_registration(self, registration: Registration, overwrite: bool):
        if registration.name in self._registrations:
            if overwrite is not True:
                raise DuplicateRegistrationError(registration.name)
            logger.debug("Overwriting registration for %s", registration.name)

        self._registrations[registration.name] = registration
        logger.debug("Registered %s", registration)

    def add_registrations(self, registrations: Sequence[Registration]):
        seen: set[str] = set()
        for registration in registrations:
            if registration.name in self._registrations or registration.name in seen:
                raise DuplicateRegistrationError(registration.name)
            seen.add(registration.name)

        for registration in registrations:
            self.add_registration(registration, overwrite=False)

    def get_registration(self, name: str) -> Registration | None:
        return self._registrations.get(name)

    def __contains__(self, name: str):
        return name in self._registrations

    def __len__(self):
        return len(self._registrations)


class Container:
    def __init__(self, *, ignore_args_passed_to_final_value: bool = False):
        self._registry = _Registry()
        self._resolution_counts: dict[str, int] = defaultdict(int)
        self._ignore_args_passed_to_final_value = ignore_args_passed_to_final_value

    @property
    def ignore_args_passed_to_final_value(self) -> bool:
        return self._ignore_args_passed_to_final_value

    def set_ignore_args_passed_to_final_value(self, flag: bool) -> Container:
        self._ignore_args_passed_to_final_value = bool(flag)
        return self

    def _register_producer(
        self,
        strategy: Strategy,
        name: Any,
        producer: Any,
        dependencies: Any,
        overwrite: bool,
    ) -> Container:
        name = validate_name(name)
        if strategy in (Strategy.CONSTRUCTOR, Strategy.CONSTRUCTOR_ONCE):
            validate_constructor(producer)
        else:
            validate_factory(producer)

        registration = Registration(
            name=name,
            strategy=strategy,
            producer=producer,
            dependencies=validate_dependencies(name, dependencies),
        )
        self._registry.add_registration(registration, overwrite=overwrite)
        return self

    def register_factory(
        self,
        name: str,
        factory: Callable,
        dependencies: Sequence[str] | None = None,
        overwrite: bool = False,
    ) -> Container:
        return self._register_producer(Strategy.FACTORY, name, factory, dependencies, overwrite)

    def register_factory_once(
        self,
        name: str,
        factory: Callable,
        dependencies: Sequence[str] | None = None,
        overwrite: bool = False,
    ) -> Container:
        return self._register_producer(Strategy.FACTORY_ONCE, name, factory, dependencies, overwrite)

    def register_constructor(
        self,
        name: str,
        constructor: type,
        dependencies: Sequence[str] | None = None,
        overwrite: bool = False,
    ) -> Container:
        return self._register_producer(Strategy.CONSTRUCTOR, name, constructor, dependencies, overwrite)

    def register_constructor_once(
        self,
        name: str,
        constructor: type,
        dependencies: Sequence[str] | None = None,
        overwrite: bool = False,
    ) -> Container:
        return self._register_producer(Strategy.CONSTRUCTOR_ONCE, name, constructor, dependencies, overwrite)

    def register_constant(self, name: str, value: Any, overwrite: bool = False) -> Container:
        registration = Registration.constant(validate_name(name), value)
        self._registry.add_registration(registration, overwrite=overwrite)
        return self

    def register_constants(
        self,
        source: Mapping[str, Any] | Iterable[tuple[str, Any]],
        prefix: str | None = None,
    ) -> Container:
        """
        Registers every entry of a mapping (or of an iterable of name/value pairs) as a constant.

        Args:
            source: The constants to register.
            prefix (str | None): Prepended to every registered name.
        """
        prefix = validate_prefix(prefix)
        registrations = [
            Registration.constant(prefix + name, value) for name, value in validate_constants_source(source)
        ]
        self._registry.add_registrations(registrations)
        return self

    def register(
        self,
        name: str,
        producer: Callable | WithNew,
        dependencies: Sequence[str] | None = None,
        overwrite: bool = False,
    ) -> Container:
        if isinstance(producer, WithNew):
            return self.register_constructor(name, producer.constructor, dependencies, overwrite)
        return self.register_factory(name, producer, dependencies, overwrite)

    def register_bulk(self, entries: Iterable[Sequence[Any]]) -> Container:
        for entry in entries:
            self.register(*validate_bulk_entry(entry))
        return self

    def has_registration(self, name: str) -> bool:
        return name in self._registry

    def get_registration(self, name: str) -> Registration | None:
        return self._registry.get_registration(name)

    def __len__(self):
        return len(self._registry)

    def get(self, name: str, *args: Any) -> Any:
        """
        Resolves the value registered under name, building its dependencies first.

        Extra positional args are passed to the producer after the resolved dependencies.
        For once and constant registrations they are only accepted on the call that creates the value.
        """
        return self._resolve(name, args, path=())

    def _resolve(self, name: str, args: Sequence[Any], path: tuple[str, ...]) -> Any:
        registration = self._registry.get_registration(name)
        if registration is None:
            raise UnknownDependencyError(name, path)

        if name in path:
            raise CircularDependencyError(path, name)

        if registration.has_cached_value:
            value = self._use_cached_value(registration, args)
        else:
            value = self._build(registration, args, (*path, name))

        self._resolution_counts[name] += 1
        return value

    def _use_cached_value(self, registration: Registration, args: Sequence[Any]) -> Any:
        if args:
            if not self._ignore_args_passed_to_final_value:
                raise ArgumentsIgnoredError(registration.name)
            logger.debug("Ignoring %d argument(s) passed to cached dependency %s", len(args), registration.name)

        return registration.cached_value

    def _build(self, registration: Registration, args: Sequence[Any], path: tuple[str, ...]) -> Any:
        resolved_dependencies = [self._resolve(d, (), path) for d in registration.dependencies]
        instance = registration.activate(resolved_dependencies, args)

        if registration.strategy.is_once:
            registration.cache(instance, created_with_args=bool(args))
            logger.debug("Cached %s (created with args: %s)", registration.name, registration.created_with_args)

        return instance

    def get_resolved_dependency_count(self) -> dict[str, int]:
        return dict(self._resolution_counts)
