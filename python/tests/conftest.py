"""Shared fixtures for registry tests."""

from typing import List, Tuple

import pytest

from error_handler_registry.handler.installer import (
    ErrorDispatch,
    ExceptionDispatch,
    HookInstaller,
    ShutdownDispatch,
)
from error_handler_registry.handler.registry import HandlerRegistry


class RecordingInstaller(HookInstaller):
    """Installer that records the dispatch entry points it is given."""

    def __init__(self) -> None:
        self.installs: List[
            Tuple[ErrorDispatch, ExceptionDispatch, ShutdownDispatch]
        ] = []

    def install(self, on_error, on_exception, on_shutdown) -> None:
        self.installs.append((on_error, on_exception, on_shutdown))


@pytest.fixture
def installer():
    """Create a recording installer."""
    return RecordingInstaller()


@pytest.fixture
def registry(installer):
    """Create an isolated registry wired to the recording installer."""
    return HandlerRegistry(installer=installer)
