"""Blackjack engine - cards, hands, scoring and turns, 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import (
    BlackjackError,
    EmptyDeck,
    InvalidArgument,
    InvalidInput,
    InvalidRank,
    ResourceExhausted,
)
from blackjack.hand import Hand
from blackjack.scoring import Outcome, RoundResult, Score, compare, score
from blackjack.turn import Action, DealerTurn, PlayerTurn, TurnStep

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Score",
    "Outcome",
    "RoundResult",
    "score",
    "compare",
    "Action",
    "TurnStep",
    "PlayerTurn",
    "DealerTurn",
    "BlackjackError",
    "InvalidArgument",
    "InvalidInput",
    "InvalidRank",
    "EmptyDeck",
    "ResourceExhausted",
]
