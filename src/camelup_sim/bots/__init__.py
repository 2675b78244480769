"""Player bots."""

from .base import PlayerBot
from .leader_bot import LeaderBot
from .random_bot import RandomBot
from .registry import BOT_REGISTRY, UnknownBotError, available_bots, create_bot
from .roller_bot import RollerBot

__all__ = [
    "PlayerBot",
    "LeaderBot",
    "RandomBot",
    "RollerBot",
    "BOT_REGISTRY",
    "UnknownBotError",
    "available_bots",
    "create_bot",
]
