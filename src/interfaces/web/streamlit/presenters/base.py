"""Base class for Streamlit presenters."""

from __future__ import annotations

import asyncio
import threading

from abc import ABC, abstractmethod
from collections.abc import Coroutine
from typing import Any, Generic, TypeVar

from src.common.logging import get_logger
from src.infrastructure.di.container import Container


T = TypeVar("T")
R = TypeVar("R")

_dedicated_loop: asyncio.AbstractEventLoop | None = None
_dedicated_loop_lock = threading.Lock()


def _get_dedicated_loop() -> asyncio.AbstractEventLoop:
    """Return the background event loop, starting it on first use."""
    global _dedicated_loop
    with _dedicated_loop_lock:
        if _dedicated_loop is None or _dedicated_loop.is_closed():
            _dedicated_loop = asyncio.new_event_loop()
            thread = threading.Thread(
                target=_dedicated_loop.run_forever,
                daemon=True,
                name="presenter-async",
            )
            thread.start()
        return _dedicated_loop


class BasePresenter(ABC, Generic[T]):
    """Presenter base.

    Presenters sit between the Streamlit views and the use cases. Views call
    plain synchronous methods; presenters run the async use cases on a
    dedicated event loop so Streamlit's own loop is never touched.

    The loop thread has no Streamlit script context, so session state is
    only read and written in the synchronous methods, around ``_run_async``.
    """

    def __init__(self, container: Container | None = None):
        self.container = container or Container.create_for_environment()
        self.logger = get_logger(self.__class__.__module__)

    def _run_async(self, coro: Coroutine[Any, Any, R]) -> R:
        """Run a coroutine from sync code and wait for its result."""
        try:
            loop = _get_dedicated_loop()
            future = asyncio.run_coroutine_threadsafe(coro, loop)
            return future.result()
        except Exception as e:
            self.logger.error(f"Failed to run async operation: {e}")
            raise

    @abstractmethod
    def load_data(self) -> T:
        """Load the data the view renders."""

    @abstractmethod
    def handle_action(self, action: str, **kwargs: Any) -> Any:
        """Dispatch a user action coming from the view."""
