from collections.abc import Sequence


class SimpleDiError(Exception):
    pass


class InvalidArgumentError(SimpleDiError, TypeError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class DuplicateRegistrationError(SimpleDiError):
    def __init__(self, name: str):
        self.name = name

    def __str__(self):
        return f'Dependency "{self.name}" is already registered'


class UnknownDependencyError(SimpleDiError):
    def __init__(self, name: str, path: Sequence[str] = ()):
        self.name = name
        self.path = tuple(path)

    def __str__(self):
        return f"Unknown dependency: {self.name}"


class CircularDependencyError(SimpleDiError):
    def __init__(self, path: Sequence[str], name: str):
        self.path = (*path, name)
        self.name = name

    @property
    def chain(self):
        return " => ".join(self.path)

    def __str__(self):
        return f"Circular Dependency detected: {self.chain}"


class ArgumentsIgnoredError(SimpleDiError):
    def __init__(self, name: str):
        self.name = name

    def __str__(self):
        return (
            f'container.get("{self.name}", *args) with non-empty args is only allowed as the first '
            "container.get() call for this once-dependency. "
            "You can use container.set_ignore_args_passed_to_final_value(True) to suppress this error."
        )
