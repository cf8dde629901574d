"""Per-session controller, event loop and catalog client for the Streamlit app.

Streamlit reruns the script on every interaction, so the controller and the
event loop its HTTP client is bound to live in session state. Widget
callbacks run controller coroutines to completion on that loop.

Each session owns exactly one SessionRuntime (loop plus client). Replacing
it, or dropping the session, closes the client's connection pool and then
the loop.
"""

import asyncio
import weakref
from typing import Any, Coroutine

import streamlit as st

from config.logging_config import get_logger
from src.browser import FilterStateController, StreamlitQueryParams
from src.catalog import CatalogClient

logger = get_logger("app.session")

# Session state keys
CONTROLLER_KEY = "stackshop_controller"
RUNTIME_KEY = "stackshop_runtime"


def _shutdown(loop: asyncio.AbstractEventLoop, client: CatalogClient) -> None:
    """Close the client on its own loop, then the loop."""
    if loop.is_closed():
        return
    try:
        loop.run_until_complete(client.close())
    finally:
        loop.close()
        logger.debug("Closed session event loop and catalog client")


class SessionRuntime:
    """Event loop and catalog client owned by one browser session."""

    def __init__(self):
        self.loop = asyncio.new_event_loop()
        self.client = CatalogClient()
        # Runs on close() or when the session state is garbage collected
        self._finalizer = weakref.finalize(self, _shutdown, self.loop, self.client)

    @property
    def closed(self) -> bool:
        return self.loop.is_closed()

    def run(self, coro: Coroutine[Any, Any, Any]) -> Any:
        return self.loop.run_until_complete(coro)

    def close(self) -> None:
        self._finalizer()


def get_runtime() -> SessionRuntime:
    """Get this session's runtime, replacing it if its loop was closed."""
    runtime = st.session_state.get(RUNTIME_KEY)
    if runtime is None or runtime.closed:
        if runtime is not None:
            runtime.close()
        runtime = SessionRuntime()
        st.session_state[RUNTIME_KEY] = runtime
    return runtime


def run_async(coro: Coroutine[Any, Any, Any]) -> Any:
    """Run a controller coroutine to completion on the session's loop."""
    return get_runtime().run(coro)


def get_controller() -> FilterStateController:
    """
    Get the session's controller, initializing it from the URL on first use.

    A controller built on a runtime that has since been replaced is rebuilt
    from the (canonical) URL, so it never holds a client whose loop is gone.

    Returns:
        The FilterStateController owning this session's filter state.
    """
    runtime = get_runtime()
    controller = st.session_state.get(CONTROLLER_KEY)

    if controller is None or controller.client is not runtime.client:
        controller = FilterStateController(runtime.client, StreamlitQueryParams())
        st.session_state[CONTROLLER_KEY] = controller
        logger.info("New browser session; initializing from URL")
        runtime.run(controller.initialize())

    return controller
