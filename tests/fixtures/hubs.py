"""Hub classes and models shared by the test suites."""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import AsyncIterator, Dict, Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel

from hubdocs import (
    CancellationToken,
    Hub,
    authorize,
    hub_documentation,
    hub_method_documentation,
)

T = TypeVar("T")


class Person(BaseModel):
    name: str
    age: int


@dataclass
class Address:
    street: str
    city: str
    postal_code: Optional[str] = None


class TreeNode(BaseModel):
    value: int
    children: List["TreeNode"] = []
    parent: Optional["TreeNode"] = None


TreeNode.model_rebuild()


@dataclass
class Envelope(Generic[T]):
    payload: T
    sequence: int


class Priority(Enum):
    LOW = 0
    MEDIUM = 1
    HIGH = 5


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Level(IntEnum):
    TRACE = 10
    ERROR = 40


class Broken:
    value: "MissingType"  # noqa: F821


class Container:
    broken: Broken
    label: str


class Account:
    owner: str

    @property
    def display_name(self) -> str:
        return self.owner.title()

    @property
    def _internal(self) -> int:
        return 0


class BasicHub(Hub):
    async def ping(self) -> None:
        pass

    async def echo(self, message: str, count: int) -> str:
        return message * count

    async def stream_messages(self) -> AsyncIterator[str]:
        yield "test"


@hub_documentation("Custom Hub Name", "Custom hub description")
class DocumentedHub(Hub):
    @hub_method_documentation(
        "Send a message", "Sends a message to all clients", "messaging", "broadcast"
    )
    async def send_message(self, user: str, message: str) -> None:
        pass

    async def undocumented(self) -> None:
        pass


@authorize()
class AuthorizedHub(Hub):
    async def secure_method(self) -> None:
        pass

    @authorize(roles="Admin, Support")
    async def admin_method(self) -> None:
        pass

    @authorize(policy="CanModerate")
    async def moderate(self, user: str) -> None:
        pass


class PartlyAuthorizedHub(Hub):
    async def public_method(self) -> None:
        pass

    @authorize(roles=["Admin"])
    async def admin_only(self) -> None:
        pass


class HubWithFrameworkMethods(Hub):
    async def user_method(self) -> None:
        pass

    async def on_connected(self) -> None:
        await super().on_connected()

    async def on_disconnected(self, exception: Optional[BaseException] = None) -> None:
        await super().on_disconnected(exception)

    def dispose(self) -> None:
        pass

    def _helper(self) -> None:
        pass

    @staticmethod
    def build() -> "HubWithFrameworkMethods":
        return HubWithFrameworkMethods()

    @classmethod
    def create(cls) -> "HubWithFrameworkMethods":
        return cls()

    @property
    def connection_id(self) -> str:
        return "connection"


class InheritingHub(BasicHub):
    async def extra(self) -> None:
        pass


class ModelHub(Hub):
    async def get_people(self) -> List[Person]:
        return []

    async def get_person(self, person_id: UUID) -> Optional[Person]:
        return None

    async def update_address(self, address: Address, token: CancellationToken) -> bool:
        return True

    async def set_priority(self, priority: Priority = Priority.MEDIUM) -> None:
        pass

    async def paint(self, color: Color) -> None:
        pass

    async def get_tree(self) -> TreeNode:
        return TreeNode(value=0)

    def get_settings(self) -> Dict[str, int]:
        return {}

    async def get_envelope(self) -> Envelope[Person]:
        return Envelope(Person(name="a", age=1), 1)

    async def count_up(self, limit: int, token: CancellationToken) -> AsyncIterator[int]:
        for i in range(limit):
            yield i

    async def watch_people(self) -> AsyncIterator[Person]:
        yield Person(name="a", age=1)

    async def log_many(self, *messages: str, **options: str) -> None:
        pass

    async def untyped(self, value):
        return value

    async def get_timestamps(self) -> List[datetime]:
        return []

    async def get_container(self) -> Container:
        return Container()

    async def subscribe(self, limit: int) -> asyncio.Queue[int]:
        return asyncio.Queue(limit)

    def list_people(self) -> List[Person]:
        return []
