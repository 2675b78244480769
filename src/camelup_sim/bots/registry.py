"""Bot lookup by name."""

from typing import Dict, List, Optional, Type

from .base import PlayerBot
from .leader_bot import LeaderBot
from .random_bot import RandomBot
from .roller_bot import RollerBot


class UnknownBotError(ValueError):
    """Raised when a bot name is not registered."""
    pass


BOT_REGISTRY: Dict[str, Type[PlayerBot]] = {
    RandomBot.name: RandomBot,
    RollerBot.name: RollerBot,
    LeaderBot.name: LeaderBot,
}


def available_bots() -> List[str]:
    """Registered bot names, sorted."""
    return sorted(BOT_REGISTRY)


def create_bot(name: str, seed: Optional[int] = None) -> PlayerBot:
    """
    Instantiate a registered bot.

    Args:
        name: Registered bot name
        seed: Seed for bots that use randomness

    Returns:
        New bot instance

    Raises:
        UnknownBotError: If the name is not registered
    """
    try:
        bot_cls = BOT_REGISTRY[name]
    except KeyError:
        raise UnknownBotError(
            f"Unknown bot '{name}'. Available: {', '.join(available_bots())}"
        ) from None
    return bot_cls(seed=seed)
