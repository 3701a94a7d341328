"""Shared type aliases for the core and domain layers."""
from typing import Literal

ManualAction = Literal["quit", "bookmark"]
SessionStatus = Literal["active", "finished"]

__all__ = ["ManualAction", "SessionStatus"]
