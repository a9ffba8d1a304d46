"""Mini-games for Habit Arcade."""

from habitarcade.games.base import (
    BaseGame,
    GameContext,
    GameResult,
    MAX_SESSION_XP,
    award_xp,
)
from habitarcade.games.spin_wheel import Control, SpinWheelGame

__all__ = [
    "BaseGame",
    "GameContext",
    "GameResult",
    "MAX_SESSION_XP",
    "award_xp",
    "Control",
    "SpinWheelGame",
]
