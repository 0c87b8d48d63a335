"""
Mediator centralises how a set of objects talk to each other.

Users in a chat room never hold references to one another. They hand their
message to the room, and the room decides who receives it. Adding a user
means joining the room, not wiring it to every other user.
"""
from typing import List

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "mediator"

DIAGRAM = """
+--------+  send()   +------------+  receive()  +--------+
| User A |---------->|  ChatRoom  |------------>| User B |
+--------+           +------------+             +--------+
                     | join(u)    |------------>| User C |
                     | relay(m,u) |             +--------+
                     +------------+
"""


class ChatRoom:
    """Mediator."""

    def __init__(self, name: str):
        self.name = name
        self.users: List["User"] = []

    def join(self, user: "User") -> None:
        if user not in self.users:
            self.users.append(user)
            user.room = self

    def relay(self, message: str, sender: "User") -> None:
        for user in self.users:
            if user is not sender:
                user.receive(message, sender)


class User:
    def __init__(self, name: str, console: Console):
        self.name = name
        self.console = console
        self.room = None

    def send(self, message: str) -> None:
        self.console.write(f"{self.name} sends: {message}")
        if self.room is not None:
            self.room.relay(message, self)

    def receive(self, message: str, sender: "User") -> None:
        self.console.write(f"{self.name} received from {sender.name}: {message}")


@register_pattern(PATTERN_KEY, "Mediator", Category.BEHAVIORAL,
                  "Route communication between objects through one central object.", DIAGRAM)
def demo(console: Console) -> None:
    room = ChatRoom("general")
    alice = User("Alice", console)
    bob = User("Bob", console)
    carol = User("Carol", console)
    for user in (alice, bob, carol):
        room.join(user)

    alice.send("Hi everyone!")
    bob.send("Hello Alice")
