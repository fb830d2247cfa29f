"""Participants of a two-sided matching and the pools that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator


class Role(Enum):
    """Which side of the matching a participant belongs to."""

    TEACHER = "Teacher"
    STUDENT = "Student"


@dataclass(eq=False)
class Participant:
    """A teacher or student with a ranked list of the other side."""

    role: Role
    ident: int = -1
    name: str = "Empty Name"
    preferences: list[Participant] = field(default_factory=list)
    matched: Participant | None = None
    pref_position: int = 0

    @property
    def is_matched(self) -> bool:
        return self.matched is not None

    def preference_of(self, other: Participant | None) -> int:
        """Rank of ``other`` (0 is best); one past the end of the list if not ranked."""
        for rank, candidate in enumerate(self.preferences):
            if candidate is other:
                return rank
        return len(self.preferences) + 1

    def next_preference(self) -> Participant:
        """Return the best-ranked participant not yet proposed to, and move past it."""
        if self.pref_position >= len(self.preferences):
            raise LookupError(f"{self.name} has no preferences left")
        choice = self.preferences[self.pref_position]
        self.pref_position += 1
        return choice

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"{self.role.value} ID: {self.ident}\n"
            f"Matched: {'True' if self.is_matched else 'False'}\n\n"
        )


class Pool:
    """An ordered group of participants from one side of the matching."""

    def __init__(self, members: Iterable[Participant] = ()):
        self._members = list(members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Participant]:
        return iter(self._members)

    def __getitem__(self, index: int) -> Participant:
        return self._members[index]

    def by_id(self, ident: int) -> Participant:
        """Return the member with the given id."""
        for member in self._members:
            if member.ident == ident:
                return member
        raise KeyError(ident)

    def index_of(self, member: Participant) -> int:
        """Return the position of ``member`` in the pool."""
        for index, candidate in enumerate(self._members):
            if candidate is member:
                return index
        raise ValueError("participant is not in this pool")

    def all_matched(self) -> bool:
        return all(member.is_matched for member in self._members)

    def is_stable(self, member: Participant) -> bool:
        """True if no one ``member`` or its partner prefers would rather pair with them."""
        match = member.matched
        if match is None:
            raise ValueError(f"{member.name} is not matched")
        for other in member.preferences[: member.preference_of(match)]:
            if other.preference_of(member) < other.preference_of(other.matched):
                return False
        for other in match.preferences[: match.preference_of(member)]:
            if other.preference_of(match) < other.preference_of(other.matched):
                return False
        return True

    def stable_count(self) -> int:
        return sum(self.is_stable(member) for member in self._members)

    def format_matches(self) -> str:
        """Describe each member alongside its match."""
        parts = ["\tMatches:\n\n"]
        for member in self._members:
            match = member.matched
            if match is None:
                raise ValueError(f"{member.name} is not matched")
            parts.append(
                f"Name:\t\t\t{member.name}\t{match.name}\n"
                f"ID:\t\t\t{member.ident}\t{match.ident}\n"
                f"Preference of Matched:\t{member.preference_of(match)}\t"
                f"{match.preference_of(member)}\n\n"
            )
        return "".join(parts)