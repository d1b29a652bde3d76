"""Blackjack scoring rules and round outcome comparison."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from blackjack.cards import Card, value_for_scoring
from blackjack.errors import InvalidArgument, InvalidInput

BUST_VALUE = 0
BLACKJACK_VALUE = 22
MAX_POINTS = 21


@dataclass(frozen=True, order=True, slots=True)
class Score:
    """
    Final value of a hand.

    One integer carries all three kinds of result: 0 is a bust, 1..21 are
    points and 22 is a natural blackjack. Ordering follows that integer, so
    a larger score always beats a smaller one.
    """

    value: int

    def __post_init__(self) -> None:
        if not BUST_VALUE <= self.value <= BLACKJACK_VALUE:
            raise InvalidArgument(f"Score out of range: {self.value}")

    @classmethod
    def bust(cls) -> "Score":
        return cls(BUST_VALUE)

    @classmethod
    def blackjack(cls) -> "Score":
        return cls(BLACKJACK_VALUE)

    @classmethod
    def points(cls, total: int) -> "Score":
        if not 1 <= total <= MAX_POINTS:
            raise InvalidArgument(f"Points must be between 1 and 21, got {total}")
        return cls(total)

    @property
    def is_bust(self) -> bool:
        return self.value == BUST_VALUE

    @property
    def is_blackjack(self) -> bool:
        return self.value == BLACKJACK_VALUE

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if self.is_blackjack:
            return "Blackjack"
        if self.is_bust:
            return "Bust"
        return str(self.value)


def _reduced_total(cards: list[Card]) -> tuple[int, int]:
    """Return the best total and how many Aces are still counted as 11."""
    total = 0
    high_aces = 0

    for card in cards:
        total += value_for_scoring(card)
        if card.is_ace:
            high_aces += 1

    # Soft-ace reduction: one Ace at a time until the hand fits
    while total > MAX_POINTS and high_aces > 0:
        total -= 10
        high_aces -= 1

    return total, high_aces


def score(cards: Iterable[Card] | None) -> Score:
    """
    Score a hand of cards.

    Every Ace starts at 11 and is dropped to 1 while the total is over 21.
    A total still over 21 is a bust; two cards totalling 21 are a blackjack.

    Args:
        cards: The hand (or any iterable of cards) to score

    Returns:
        The hand's Score

    Raises:
        InvalidInput: If the hand is missing or holds no cards
    """
    if cards is None:
        raise InvalidInput("Cannot score a missing hand")
    cards = list(cards)
    if not cards:
        raise InvalidInput("Cannot score an empty hand")

    total, _ = _reduced_total(cards)

    if total > MAX_POINTS:
        return Score.bust()
    if len(cards) == 2 and total == MAX_POINTS:
        return Score.blackjack()
    return Score.points(total)


def is_soft(cards: Iterable[Card]) -> bool:
    """Check if a hand still counts an Ace as 11 without busting."""
    total, high_aces = _reduced_total(list(cards))
    return high_aces > 0 and total <= MAX_POINTS


class Outcome(Enum):
    """Who won a round."""

    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    DRAW = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class RoundResult:
    """Outcome of a round along with both final scores."""

    outcome: Outcome
    player_score: Score
    dealer_score: Score

    @property
    def winning_score(self) -> Score | None:
        """Return the winner's score, or None for a draw."""
        if self.outcome is Outcome.PLAYER_WINS:
            return self.player_score
        if self.outcome is Outcome.DEALER_WINS:
            return self.dealer_score
        return None


def compare(player_score: Score, dealer_score: Score) -> RoundResult:
    """
    Compare the final scores of a round.

    Blackjack beats 21, which beats every lower total; a bust loses to any
    other score. Equal scores, two busts included, are a draw.
    """
    if player_score is None or dealer_score is None:
        raise InvalidArgument("Both scores are required")

    if player_score > dealer_score:
        outcome = Outcome.PLAYER_WINS
    elif dealer_score > player_score:
        outcome = Outcome.DEALER_WINS
    else:
        outcome = Outcome.DRAW

    return RoundResult(outcome, player_score, dealer_score)
