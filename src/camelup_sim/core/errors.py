"""Exceptions raised while simulating a game."""


class GameSimulationError(Exception):
    """Base class for errors that abandon a single simulated game."""
    pass


class MalformedActionError(GameSimulationError):
    """Raised when a bot returns something that is not a recognised action."""

    def __init__(self, player: int, action: object):
        self.player = player
        self.action = action
        super().__init__(
            f"Player {player} returned a malformed action: {action!r}"
        )


class IllegalMoveError(GameSimulationError):
    """Raised when a bot returns an action outside the legal set."""

    def __init__(self, player: int, action: object):
        self.player = player
        self.action = action
        super().__init__(f"Illegal action for player {player}: {action!r}")


class GameOverError(GameSimulationError):
    """Raised when a turn is requested after the game has ended."""
    pass


class TurnLimitExceededError(GameSimulationError):
    """Raised when a game runs past the configured turn limit."""
    pass
