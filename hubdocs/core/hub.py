"""Hub base class and framework types recognised by the inspector."""

import asyncio
from typing import Optional

# Lifecycle and disposal hooks that are never documented as hub methods
FRAMEWORK_METHODS = frozenset(
    {
        "on_connected",
        "on_disconnected",
        "dispose",
        "dispose_async",
    }
)


class CancellationToken:
    """Cooperative cancellation signal passed to long running hub methods.

    Parameters of this type are supplied by the hosting framework and are not
    part of a method's documented signature.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()


class Hub:
    """Base class for message-handler endpoints.

    Public methods declared on a subclass are remotely invocable and are
    documented by :class:`hubdocs.core.inspector.HubInspector`.
    """

    async def on_connected(self) -> None:
        """Called when a client connects."""

    async def on_disconnected(self, exception: Optional[BaseException] = None) -> None:
        """Called when a client disconnects."""

    def dispose(self) -> None:
        """Release resources held by the hub instance."""

    async def dispose_async(self) -> None:
        self.dispose()


__all__ = ["FRAMEWORK_METHODS", "CancellationToken", "Hub"]
