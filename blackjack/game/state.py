"""Round state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: WAITING_FOR_DEAL → PLAYER_TURN → DEALER_TURN → ROUND_COMPLETE
    """

    # Nothing dealt yet
    WAITING_FOR_DEAL = auto()

    # Player hits or sticks
    PLAYER_TURN = auto()

    # Dealer plays automatically
    DEALER_TURN = auto()

    # Round resolved or abandoned, ready for the next deal
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
