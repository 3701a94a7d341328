"""Service-layer exceptions."""


class NavigationError(Exception):
    """Base exception for play-through failures."""


class UnknownRoomError(NavigationError):
    """Raised when a transition or bookmark names a room the story lacks."""

    def __init__(self, room_id: str) -> None:
        super().__init__(f"Room '{room_id}' does not exist in this story.")
        self.room_id = room_id


class DeadEndError(NavigationError):
    """Raised when a non-terminal room offers no way forward."""

    def __init__(self, room_id: str) -> None:
        super().__init__(f"Room '{room_id}' has no usable transitions.")
        self.room_id = room_id


class InvalidChoiceError(NavigationError):
    """Raised when a manual choice index is out of range."""


class SessionFinishedError(NavigationError):
    """Raised when acting on a play-through that already ended."""
