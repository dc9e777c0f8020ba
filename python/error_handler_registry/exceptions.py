"""Exceptions raised by the error handler registry itself."""


class HandlerRegistryError(Exception):
    """Base class for errors raised by the registry."""

    pass


class InvalidCategoryError(HandlerRegistryError, ValueError):
    """Raised when a handler category is not one of error, exception, shutdown."""

    def __init__(self, category: object) -> None:
        self.category = category
        super().__init__(f"Unrecognized handler category: {category!r}")


class NotInvocableError(HandlerRegistryError, TypeError):
    """Raised when registering something that cannot be called."""

    def __init__(self, callback: object) -> None:
        self.callback = callback
        super().__init__(
            f"Cannot register a non-callable handler: {type(callback).__name__}"
        )


class ConfigurationError(HandlerRegistryError):
    """Exception raised for configuration validation errors."""

    pass
