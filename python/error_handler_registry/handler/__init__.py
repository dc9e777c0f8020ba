"""Handler registry system."""

from .decorators import create_register_decorator, on_error, on_exception, on_shutdown
from .installer import HookInstaller, PythonHookInstaller
from .models import ErrorHandler, ExceptionHandler, RegisteredHandler, ShutdownHandler
from .registry import HandlerRegistry, handler_registry

__all__ = [
    "ErrorHandler",
    "ExceptionHandler",
    "HandlerRegistry",
    "HookInstaller",
    "PythonHookInstaller",
    "RegisteredHandler",
    "ShutdownHandler",
    "create_register_decorator",
    "handler_registry",
    "on_error",
    "on_exception",
    "on_shutdown",
]
