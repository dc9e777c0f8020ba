"""Handler registry for stacking error, exception and shutdown handlers."""

import threading
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from ..constants import Category, ErrorResult
from ..exceptions import InvalidCategoryError, NotInvocableError
from ..logging_config import logger
from .installer import HookInstaller, PythonHookInstaller
from .models import (
    ErrorHandler,
    ExceptionHandler,
    RegisteredHandler,
    ShutdownHandler,
    matches,
)


def _resolve_category(category: Union[Category, str]) -> Category:
    try:
        return Category(category)
    except ValueError:
        raise InvalidCategoryError(category) from None


def _callback_name(callback: Any) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class HandlerRegistry:
    """Registry holding a newest-first stack of handlers per category.

    The registry installs itself as the native error, exception and shutdown
    handler on the first successful registration and stays installed for the
    lifetime of the process.
    """

    def __init__(self, installer: Optional[HookInstaller] = None) -> None:
        self._installer = installer
        self._install_lock = threading.Lock()
        self._installed = False
        self._stacks: Dict[Category, List[RegisteredHandler]] = {
            category: [] for category in Category
        }

    @property
    def installed(self) -> bool:
        """Whether the native hooks have been installed."""
        return self._installed

    def register(
        self,
        category: Union[Category, str],
        callback: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> Callable[..., Any]:
        """Register a callable as the newest handler for a category.

        Args:
            category: One of 'error', 'exception', 'shutdown'
            callback: The handler function
            *args: Extra positional arguments passed to a shutdown handler
            **kwargs: Extra keyword arguments passed to a shutdown handler

        Returns:
            The callback, unchanged

        Raises:
            InvalidCategoryError: If the category is not recognized
            NotInvocableError: If the callback is not callable
        """
        category = _resolve_category(category)
        if not callable(callback):
            raise NotInvocableError(callback)

        handler: RegisteredHandler
        if category is Category.SHUTDOWN:
            handler = ShutdownHandler(callback, args, kwargs)
        else:
            if args or kwargs:
                logger.warning(
                    "[%s] Extra arguments are only used by shutdown handlers, ignoring them for %s",
                    category.value.upper(),
                    _callback_name(callback),
                )
            if category is Category.ERROR:
                handler = ErrorHandler(callback)
            else:
                handler = ExceptionHandler(callback)

        self.ensure_installed()
        self._stacks[category].insert(0, handler)
        logger.debug(
            "[%s] Handler registered: %s",
            category.value.upper(),
            _callback_name(callback),
        )
        return callback

    def unregister(
        self, category: Union[Category, str], callback: Callable[..., Any]
    ) -> None:
        """Remove the newest handler registered with this callback, if any.

        Raises:
            InvalidCategoryError: If the category is not recognized
        """
        category = _resolve_category(category)
        stack = self._stacks[category]
        for index, handler in enumerate(stack):
            if matches(handler, callback):
                del stack[index]
                logger.debug(
                    "[%s] Handler unregistered: %s",
                    category.value.upper(),
                    _callback_name(callback),
                )
                return

    def handlers(
        self, category: Union[Category, str]
    ) -> Tuple[RegisteredHandler, ...]:
        """Get the handlers of a category, newest first."""
        return tuple(self._stacks[_resolve_category(category)])

    def ensure_installed(self) -> bool:
        """Install the dispatch entry points as the native hooks, at most once.

        Returns:
            True if this call performed the installation, False otherwise
        """
        if self._installed:
            return False
        with self._install_lock:
            if self._installed:
                return False
            # _installed flips only after install returns
            if self._installer is None:
                self._installer = PythonHookInstaller()
            self._installer.install(
                self.dispatch_error, self.dispatch_exception, self.dispatch_shutdown
            )
            self._installed = True
        logger.info("Native error, exception and shutdown hooks installed")
        return True

    def dispatch_exception(self, exc_value: BaseException) -> None:
        """Pass an uncaught exception to the most recently registered handler only."""
        stack = self._stacks[Category.EXCEPTION]
        if stack:
            stack[0](exc_value)

    def dispatch_error(
        self, category: Type[Warning], message: str, filename: str, lineno: int
    ) -> None:
        """Call error handlers newest to oldest until one does not return NOT_HANDLED."""
        for handler in list(self._stacks[Category.ERROR]):
            result = handler(category, message, filename, lineno)
            if result is not ErrorResult.NOT_HANDLED:
                break

    def dispatch_shutdown(self) -> None:
        """Call every shutdown handler, newest to oldest."""
        for handler in list(self._stacks[Category.SHUTDOWN]):
            handler()


# Global registry instance
handler_registry = HandlerRegistry()
