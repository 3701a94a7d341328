"""In-memory room graph built by the story parser."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from cyoa.domain.defs import RoomDef, Transition


@dataclass(frozen=True, slots=True)
class StoryGraph:
    """Ordered, read-only collection of rooms in story-file order."""

    rooms: Tuple[RoomDef, ...]

    def __post_init__(self) -> None:
        if not self.rooms:
            raise ValueError("A story graph needs at least one room.")

    @property
    def initial_room_id(self) -> str:
        """Return the id of the first room in story-file order."""
        return self.rooms[0].id

    def find(self, room_id: str) -> RoomDef | None:
        """Return the first room with the given id, or None."""
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    def get(self, room_id: str) -> RoomDef:
        """Return a room by id."""
        room = self.find(room_id)
        if room is None:
            raise KeyError(room_id)
        return room

    def transitions_for(self, room_id: str) -> Tuple[Transition, ...]:
        return self.get(room_id).transitions

    def room_ids(self) -> List[str]:
        return [room.id for room in self.rooms]

    def __contains__(self, room_id: object) -> bool:
        return isinstance(room_id, str) and self.find(room_id) is not None

    def __iter__(self) -> Iterator[RoomDef]:
        return iter(self.rooms)

    def __len__(self) -> int:
        return len(self.rooms)
