"""Error taxonomy shared by the walker and the support helpers."""


class TreewalkError(Exception):
    """Base class for all errors raised by treewalk."""


class InvalidInput(TreewalkError, ValueError):
    """Malformed or impossible input, detected before any traversal step."""


class IOFailure(TreewalkError, OSError):
    """A filesystem operation failed.

    Carries the failing operation name and the resource it was applied to.
    The underlying ``OSError`` is always available as ``__cause__``.
    """

    def __init__(self, operation: str, resource: str = "") -> None:
        self.operation = operation
        self.resource = resource
        suffix = f" on resource '{resource}'" if resource else ""
        super().__init__(f"I/O operation '{operation}' failed{suffix}.")

    def __str__(self) -> str:
        return self.args[0]

    @classmethod
    def for_read(cls, resource: str = "") -> "IOFailure":
        return cls("read", resource)

    @classmethod
    def for_write(cls, resource: str = "") -> "IOFailure":
        return cls("write", resource)


class KeyNotFound(TreewalkError, LookupError):
    """A required key was missing from a mapping-like source."""

    def __init__(self, key: str, context: str = "mapping") -> None:
        self.key = key
        self.context = context
        super().__init__(f"Key '{key}' not found in {context}.")

    def __str__(self) -> str:
        return self.args[0]


class OutOfRange(TreewalkError, ValueError):
    """A numeric argument fell outside the domain it can be evaluated on."""
