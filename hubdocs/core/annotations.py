"""Documentation and authorization annotations for hubs.

Decorators attach small metadata records to hub classes and methods; the
inspector reads them back when building descriptors.

Examples:
    @hub_documentation("Chat", "Real-time chat rooms")
    @authorize()
    class ChatHub(Hub):
        @hub_method_documentation("Send a message", "Broadcasts to the room", "messaging")
        async def send_message(self, user: str, message: str) -> None:
            ...

        @authorize(roles="Admin, Support")
        async def kick(self, user: str) -> None:
            ...
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

_HUB_DOCUMENTATION_ATTR = "_hubdocs_documentation"
_METHOD_DOCUMENTATION_ATTR = "_hubdocs_method_documentation"
_AUTHORIZE_ATTR = "_hubdocs_authorize"


@dataclass(frozen=True)
class HubMetadata:
    """Type-level documentation record."""

    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class MethodMetadata:
    """Method-level documentation record."""

    summary: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Authorization:
    """Declared authorization requirement.

    Attributes:
        roles: Role names, any of which grants access
        policy: Named policy, if any
    """

    roles: Tuple[str, ...] = ()
    policy: Optional[str] = None

    @property
    def policies(self) -> Tuple[str, ...]:
        return (self.policy,) if self.policy else ()


def hub_documentation(
    name: Optional[str] = None, description: Optional[str] = None
) -> Callable[[T], T]:
    """Set the display name and description of a hub class."""

    def decorator(target: T) -> T:
        setattr(target, _HUB_DOCUMENTATION_ATTR, HubMetadata(name, description))  # noqa: B010
        return target

    return decorator


def hub_method_documentation(
    summary: Optional[str] = None, description: Optional[str] = None, *tags: str
) -> Callable[[T], T]:
    """Set the summary, description and tags of a hub method."""

    def decorator(target: T) -> T:
        setattr(  # noqa: B010
            target,
            _METHOD_DOCUMENTATION_ATTR,
            MethodMetadata(summary, description, tuple(tags)),
        )
        return target

    return decorator


def authorize(
    roles: Union[str, Sequence[str], None] = None, policy: Optional[str] = None
) -> Callable[[T], T]:
    """Declare that a hub or hub method requires an authenticated caller.

    Args:
        roles: Comma separated role names, or a sequence of names
        policy: Name of an authorization policy

    Returns:
        Decorator storing the requirement on the target
    """
    if isinstance(roles, str):
        roles = roles.split(",")
    parsed = tuple(role.strip() for role in roles or () if role.strip())

    def decorator(target: T) -> T:
        setattr(target, _AUTHORIZE_ATTR, Authorization(parsed, policy))  # noqa: B010
        return target

    return decorator


def get_hub_documentation(target: Any) -> Optional[HubMetadata]:
    return getattr(target, _HUB_DOCUMENTATION_ATTR, None)


def get_method_documentation(target: Any) -> Optional[MethodMetadata]:
    return getattr(target, _METHOD_DOCUMENTATION_ATTR, None)


def get_authorization(target: Any) -> Optional[Authorization]:
    """Return the authorization requirement declared on a class or function."""
    return getattr(target, _AUTHORIZE_ATTR, None)


__all__ = [
    "HubMetadata",
    "MethodMetadata",
    "Authorization",
    "hub_documentation",
    "hub_method_documentation",
    "authorize",
    "get_hub_documentation",
    "get_method_documentation",
    "get_authorization",
]
