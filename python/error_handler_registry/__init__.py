"""Error handler registry.

Stacks multiple handlers on the interpreter's single-slot error (warnings),
uncaught exception and shutdown hooks:

    from error_handler_registry import ErrorResult, register

    register("error", log_warning)
    register("shutdown", close_pool, pool, timeout=5)
"""

from .config import RegistryConfig
from .constants import Category, ErrorResult
from .exceptions import (
    ConfigurationError,
    HandlerRegistryError,
    InvalidCategoryError,
    NotInvocableError,
)
from .handler import (
    HandlerRegistry,
    HookInstaller,
    PythonHookInstaller,
    handler_registry,
    on_error,
    on_exception,
    on_shutdown,
)

__version__ = "0.1.0"

register = handler_registry.register
unregister = handler_registry.unregister

__all__ = [
    "Category",
    "ConfigurationError",
    "ErrorResult",
    "HandlerRegistry",
    "HandlerRegistryError",
    "HookInstaller",
    "InvalidCategoryError",
    "NotInvocableError",
    "PythonHookInstaller",
    "RegistryConfig",
    "handler_registry",
    "on_error",
    "on_exception",
    "on_shutdown",
    "register",
    "unregister",
]
