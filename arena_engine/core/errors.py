"""
Arena exception hierarchy.

Every failure is recoverable: the arena state is left consistent and
the caller decides whether to retry the turn.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class MoveBlock(Enum):
    """Why a move (or dig) was refused."""
    NOT_CROSSABLE = "Not crossable tile"
    OUT_OF_MAP = "Out of map"
    OCCUPIED = "Not free"
    NOT_DIGGABLE = "Not diggable"


class BattleFailure(Enum):
    """Why a battle exchange stopped."""
    ATTACKER_OUT_OF_RANGE = "Monster out of range"
    DEFENDER_OUT_OF_RANGE = "Hero out of range"


class ArenaError(Exception):
    """
    Base exception for all arena errors.

    Attributes:
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MoveError(ArenaError):
    """Raised when a fighter cannot step to the requested tile."""

    def __init__(self, reason: MoveBlock, details: dict[str, Any] | None = None):
        super().__init__(reason.value, details)
        self.reason = reason


class NotMovableError(ArenaError):
    """Raised when moving an entity without the Movable capability."""


class BattleError(ArenaError):
    """
    Raised when a battle exchange cannot complete.

    Attributes:
        reason: Which side was out of range
        result: Partial outcome when the hero's strike already landed
    """

    def __init__(
        self,
        reason: BattleFailure,
        result: Any = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(reason.value, details)
        self.reason = reason
        self.result = result


class UnknownMonsterError(ArenaError, KeyError):
    """Raised when no monster is registered under the requested id."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.message


class MissingToolError(ArenaError):
    """Raised when the hero attempts an action without the needed item."""
