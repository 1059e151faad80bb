"""Mediator - encapsulate how a set of objects interact."""
from typing import Dict, List, Optional

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class NotInRoomError(DomainException):
    pass


class ChatRoom:
    """Mediator; participants never reference each other directly."""

    def __init__(self, name: str):
        self.name = name
        self._members: Dict[str, "Participant"] = {}

    def join(self, participant: "Participant") -> None:
        self._members[participant.name] = participant
        participant.room = self
        self._broadcast("system", f"{participant.name} joined")

    def leave(self, participant: "Participant") -> None:
        self._members.pop(participant.name, None)
        participant.room = None
        self._broadcast("system", f"{participant.name} left")

    def send(self, sender: str, text: str, to: Optional[str] = None) -> None:
        if sender not in self._members:
            raise NotInRoomError(f"{sender} is not in {self.name}")
        if to is None:
            self._broadcast(sender, text)
        elif to in self._members:
            self._members[to].receive(sender, f"(private) {text}")
        else:
            raise NotInRoomError(f"{to} is not in {self.name}")

    def _broadcast(self, sender: str, text: str) -> None:
        for name, member in self._members.items():
            if name != sender:
                member.receive(sender, text)


class Participant:
    """Colleague."""

    def __init__(self, name: str):
        self.name = name
        self.room: Optional[ChatRoom] = None
        self.inbox: List[str] = []

    def say(self, text: str, to: Optional[str] = None) -> None:
        if self.room is None:
            raise NotInRoomError(f"{self.name} has not joined a room")
        self.room.send(self.name, text, to=to)

    def receive(self, sender: str, text: str) -> None:
        self.inbox.append(f"{sender}: {text}")


@pattern_example(
    name="Mediator",
    category=PatternCategory.BEHAVIORAL,
    intent="Define an object that encapsulates how a set of objects interact, promoting loose coupling.",
    participants=(ChatRoom, Participant),
    related=("facade", "observer"),
)
def demo() -> List[str]:
    room = ChatRoom("patterns")
    alice, bob, carol = Participant("alice"), Participant("bob"), Participant("carol")
    for person in (alice, bob, carol):
        room.join(person)

    alice.say("hi all")
    bob.say("lunch?", to="carol")
    room.leave(carol)

    lines = [f"{p.name} inbox: {p.inbox}" for p in (alice, bob, carol)]
    try:
        carol.say("still here?")
    except NotInRoomError as e:
        lines.append(f"carol cannot talk: {e}")
    return lines
