"""Hub registry used to discover documented endpoints.

Hubs are mapped to routes either on an explicit :class:`HubRegistry` or on the
module level default registry through the :func:`hub` decorator, which works
regardless of whether the application has been created yet.
"""

import inspect
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Type, TypeVar

from hubdocs.exceptions import HubRegistrationError

_logger = logging.getLogger(__name__)

UNKNOWN_ROUTE = "Unknown"

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class HubEndpoint:
    """A hub class mapped to a route.

    Attributes:
        hub_type: Hub class
        route: Route the hub is reachable at
        infrastructure: Whether the endpoint belongs to the hosting framework
            and is hidden from documentation
    """

    hub_type: Type
    route: str
    infrastructure: bool = False


class HubRegistry:
    """Thread-safe collection of hub endpoints in registration order."""

    def __init__(self) -> None:
        self._endpoints: List[HubEndpoint] = []
        self._lock = threading.Lock()

    def map_hub(self, route: Optional[str], hub_type: Type, infrastructure: bool = False) -> HubEndpoint:
        """Map a hub class to a route.

        Args:
            route: Route of the hub; blank routes are recorded as "Unknown"
            hub_type: Hub class
            infrastructure: Hide the endpoint from discovery

        Returns:
            The recorded endpoint

        Raises:
            HubRegistrationError: If ``hub_type`` is not a class
        """
        if not inspect.isclass(hub_type):
            raise HubRegistrationError(
                f"Cannot register {hub_type!r} as a hub: expected a class",
                details={"route": route},
            )

        endpoint = HubEndpoint(
            hub_type=hub_type,
            route=(route or "").strip() or UNKNOWN_ROUTE,
            infrastructure=infrastructure,
        )
        with self._lock:
            self._endpoints.append(endpoint)
        _logger.debug(f"Mapped hub {hub_type.__name__} to {endpoint.route}")
        return endpoint

    def hub(self, route: str) -> Callable[[T], T]:
        """Decorator form of :meth:`map_hub`."""

        def decorator(hub_type: T) -> T:
            self.map_hub(route, hub_type)
            return hub_type

        return decorator

    def endpoints(self) -> List[HubEndpoint]:
        with self._lock:
            return list(self._endpoints)

    def discover(self) -> Iterator[Tuple[Type, str]]:
        """Yield ``(hub_type, route)`` for every documentable endpoint."""
        for endpoint in self.endpoints():
            if endpoint.infrastructure:
                continue
            yield endpoint.hub_type, endpoint.route

    def clear(self) -> None:
        with self._lock:
            self._endpoints.clear()

    def __len__(self) -> int:
        return len(self._endpoints)


_default_registry = HubRegistry()


def get_default_registry() -> HubRegistry:
    """Return the process wide registry used by :func:`hub`."""
    return _default_registry


def hub(route: str) -> Callable[[T], T]:
    """Register a hub class on the default registry.

    Examples:
        @hub("/chat")
        class ChatHub(Hub):
            async def send_message(self, user: str, message: str) -> None:
                ...
    """
    return _default_registry.hub(route)


__all__ = [
    "UNKNOWN_ROUTE",
    "HubEndpoint",
    "HubRegistry",
    "get_default_registry",
    "hub",
]
