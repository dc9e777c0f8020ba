"""Utility functions for creating handler decorators."""

from typing import Any, Callable, Optional, Union

from ..constants import Category
from ..logging_config import logger
from .registry import HandlerRegistry, _resolve_category, handler_registry


def create_register_decorator(
    category: Union[Category, str], handler_registry: HandlerRegistry
) -> Callable:
    """Create a decorator that registers functions as handlers for a category.

    Supports @decorator and @decorator() syntax. Arguments for a shutdown
    handler are captured with @decorator.with_args(*args, **kwargs), so a
    callable argument is never mistaken for the decorated function.

    Args:
        category: The category to register for ('error', 'exception', 'shutdown').
        handler_registry: Registry instance the decorated functions are added to.

    Returns:
        A decorator that registers the function and returns it unchanged.

    Raises:
        InvalidCategoryError: If the category is not recognized
    """
    category = _resolve_category(category)

    def register_decorator(
        func: Optional[Callable[..., Any]] = None,
    ) -> Callable[..., Any]:
        """Register the decorated function."""
        # Handle both @decorator and @decorator() syntax
        if func is None:
            return register_decorator

        logger.debug(
            "[%s] @on_%s decorator called on function: %s",
            category.value.upper(),
            category.value,
            getattr(func, "__name__", repr(func)),
        )
        return handler_registry.register(category, func)

    def with_args(*args: Any, **kwargs: Any) -> Callable[..., Any]:
        """Register the decorated function with captured arguments."""

        def wrapper(f: Callable[..., Any]) -> Callable[..., Any]:
            return handler_registry.register(category, f, *args, **kwargs)

        return wrapper

    register_decorator.with_args = with_args  # type: ignore[attr-defined]
    return register_decorator


on_error = create_register_decorator(Category.ERROR, handler_registry)
on_exception = create_register_decorator(Category.EXCEPTION, handler_registry)
on_shutdown = create_register_decorator(Category.SHUTDOWN, handler_registry)
