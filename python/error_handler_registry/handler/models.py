"""Typed entries held by the handler registry, one kind per category."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

from ..constants import Category, ErrorResult

ErrorHandlerFn = Callable[[Type[Warning], str, str, int], Optional[ErrorResult]]
ExceptionHandlerFn = Callable[[BaseException], Any]


@dataclass(frozen=True)
class ErrorHandler:
    """Handler for runtime warning conditions.

    Attributes:
        callback: Called with (category, message, filename, lineno)
    """

    callback: ErrorHandlerFn
    category: Category = field(default=Category.ERROR, init=False)

    def __call__(
        self, category: Type[Warning], message: str, filename: str, lineno: int
    ) -> Optional[ErrorResult]:
        return self.callback(category, message, filename, lineno)


@dataclass(frozen=True)
class ExceptionHandler:
    """Handler for exceptions that propagate uncaught."""

    callback: ExceptionHandlerFn
    category: Category = field(default=Category.EXCEPTION, init=False)

    def __call__(self, exc_value: BaseException) -> Any:
        return self.callback(exc_value)


@dataclass(frozen=True)
class ShutdownHandler:
    """Zero-argument thunk run at interpreter shutdown.

    Attributes:
        callback: The registered function
        args: Positional arguments captured at registration time
        kwargs: Keyword arguments captured at registration time
    """

    callback: Callable[..., Any]
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)
    category: Category = field(default=Category.SHUTDOWN, init=False)

    def __call__(self) -> Any:
        return self.callback(*self.args, **self.kwargs)


RegisteredHandler = Union[ErrorHandler, ExceptionHandler, ShutdownHandler]


def matches(handler: RegisteredHandler, callback: Callable[..., Any]) -> bool:
    """Check whether a registered handler wraps the given callback.

    Equality is needed on top of identity because every attribute access of a
    bound method creates a new object.
    """
    return handler.callback is callback or handler.callback == callback
