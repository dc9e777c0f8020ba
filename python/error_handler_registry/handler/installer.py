"""Installers that wire a registry into the interpreter's native hook points."""

import atexit
import sys
import threading
import warnings
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Callable, Optional, TextIO, Type

from ..config import RegistryConfig
from ..logging_config import get_logger

logger = get_logger(__name__)

ErrorDispatch = Callable[[Type[Warning], str, str, int], None]
ExceptionDispatch = Callable[[BaseException], None]
ShutdownDispatch = Callable[[], None]


class HookInstaller(ABC):
    """Installs dispatch entry points as the process's native handlers."""

    @abstractmethod
    def install(
        self,
        on_error: ErrorDispatch,
        on_exception: ExceptionDispatch,
        on_shutdown: ShutdownDispatch,
    ) -> None:
        """Install the three dispatch entry points.

        The registry counts as installed only once this returns. If it raises,
        hooks set before the failure stay in place and the next registration
        calls install again, so implementations should tolerate being re-run.

        Args:
            on_error: Receives (category, message, filename, lineno) for warnings
            on_exception: Receives the exception value of an uncaught exception
            on_shutdown: Called once when the interpreter exits
        """
        raise NotImplementedError()


class PythonHookInstaller(HookInstaller):
    """Replaces warnings.showwarning and sys.excepthook, and registers with atexit."""

    def __init__(self, config: Optional[RegistryConfig] = None) -> None:
        self.config = config or RegistryConfig.from_env()

    def install(
        self,
        on_error: ErrorDispatch,
        on_exception: ExceptionDispatch,
        on_shutdown: ShutdownDispatch,
    ) -> None:
        if self.config.capture_warnings:

            def showwarning(
                message: Any,
                category: Type[Warning],
                filename: str,
                lineno: int,
                file: Optional[TextIO] = None,
                line: Optional[str] = None,
            ) -> None:
                on_error(category, str(message), filename, lineno)

            warnings.showwarning = showwarning
            logger.debug("Installed warnings.showwarning hook")

        def excepthook(
            exc_type: Type[BaseException],
            exc_value: BaseException,
            exc_tb: Optional[TracebackType],
        ) -> None:
            on_exception(exc_value)

        sys.excepthook = excepthook
        logger.debug("Installed sys.excepthook hook")

        if self.config.capture_thread_exceptions:

            def thread_excepthook(args: Any) -> None:
                if args.exc_value is not None:
                    on_exception(args.exc_value)

            threading.excepthook = thread_excepthook
            logger.debug("Installed threading.excepthook hook")

        atexit.register(on_shutdown)
        logger.debug("Registered atexit shutdown hook")
