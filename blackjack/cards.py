"""Card and Deck classes - immutable cards dealt from a cursor deck or shoe."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator

from blackjack.errors import (
    EmptyDeck,
    InvalidArgument,
    InvalidInput,
    InvalidRank,
    ResourceExhausted,
)

STANDARD_DECK_SIZE = 52
DECK_REP_LEN = 13  # Cards per line when dumping a deck
HAND_REP_LEN = 7  # Cards per line when showing a hand


class Suit(Enum):
    """Card suits, in new-deck order."""

    SPADES = "S"
    DIAMONDS = "D"
    CLUBS = "C"
    HEARTS = "H"

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.HEARTS: "♥",
        }
        return symbols[self]

    @property
    def letter(self) -> str:
        """Return the one-letter suit code used in card codes."""
        return self.value


class Rank(Enum):
    """Card ranks, Ace low, in new-deck order."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value >= 10:
            return 10
        return self.value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def token(self) -> str:
        """Return the rank right-aligned in a two-character field."""
        return f"{self!s:>2}"


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return value_for_scoring(self)

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def code(self) -> str:
        """Return the fixed-width display code, e.g. ' AS' or '10H'."""
        return display(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10h', 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise InvalidInput(f"Invalid card string: {s!r}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN
        suit_map = {suit.letter: suit for suit in Suit}
        suit_map.update({str(suit): suit for suit in Suit})

        if rank_str not in rank_map:
            raise InvalidInput(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise InvalidInput(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def value_for_scoring(card: Card) -> int:
    """Return the point value of a card with every Ace counted high."""
    if not isinstance(card.rank, Rank):
        raise InvalidRank(f"Unknown rank: {card.rank!r}")
    return card.rank.blackjack_value


def display(card: Card) -> str:
    """Return the three-character code of a card."""
    if not isinstance(card.rank, Rank):
        raise InvalidRank(f"Unknown rank: {card.rank!r}")
    if not isinstance(card.suit, Suit):
        raise InvalidInput(f"Unknown suit: {card.suit!r}")
    return f"{card.rank.token}{card.suit.letter}"


def render_lines(cards: list[Card], per_line: int) -> list[str]:
    """Render card codes space-separated, ``per_line`` to a line."""
    if not cards:
        return ["\n"]
    codes = [display(card) for card in cards]
    return [
        " ".join(codes[start:start + per_line]) + "\n"
        for start in range(0, len(codes), per_line)
    ]


class Deck:
    """
    An ordered deck of one or more standard packs (a shoe).

    Cards are dealt from a head cursor; dealt cards are never revisited and
    shuffling only touches the undealt cards.
    """

    def __init__(self, cards: list[Card], rng: Random | None = None) -> None:
        """
        Initialize a deck over the given cards, head first.

        Args:
            cards: Cards in dealing order
            rng: Random number generator for shuffling
        """
        self._rng = rng or Random()
        self._cards = list(cards)
        self._head = 0

    @classmethod
    def generate(cls, packs: int = 1, rng: Random | None = None) -> "Deck":
        """
        Build a deck of ``packs`` standard packs in new-deck order.

        Each pack runs Spades, Diamonds, Clubs, Hearts, and Ace to King
        within each suit.

        Args:
            packs: Number of 52-card packs (at least 1)
            rng: Random number generator for shuffling

        Raises:
            InvalidArgument: If packs is not a positive integer
            ResourceExhausted: If the cards cannot be allocated
        """
        if isinstance(packs, bool) or not isinstance(packs, int) or packs < 1:
            raise InvalidArgument(f"A deck needs at least 1 pack, got {packs!r}")
        try:
            cards = [
                Card(rank, suit)
                for _ in range(packs)
                for suit in Suit
                for rank in Rank
            ]
        except MemoryError as exc:
            raise ResourceExhausted(f"Cannot allocate {packs} packs") from exc
        return cls(cards, rng=rng)

    def shuffle(self) -> None:
        """Fisher-Yates shuffle of the undealt cards, in place."""
        cards = self._cards
        first = self._head
        for i in range(len(cards) - 1, first, -1):
            j = self._rng.randint(first, i)
            cards[i], cards[j] = cards[j], cards[i]

    def deal_one(self) -> Card:
        """
        Deal the card at the head of the deck.

        Raises:
            EmptyDeck: If no undealt cards remain (the deck is unchanged)
        """
        if self._head >= len(self._cards):
            raise EmptyDeck("Cannot deal from an empty deck")
        card = self._cards[self._head]
        self._head += 1
        return card

    def undeal(self) -> None:
        """
        Put the most recently dealt card back on top of the deck.

        Raises:
            InvalidInput: If no card has been dealt
        """
        if self._head == 0:
            raise InvalidInput("No card has been dealt")
        self._head -= 1

    def display(self) -> list[str]:
        """Render the undealt cards, 13 to a line."""
        return render_lines(list(self), DECK_REP_LEN)

    @property
    def remaining(self) -> int:
        """Return the number of undealt cards."""
        return len(self._cards) - self._head

    @property
    def dealt(self) -> int:
        """Return the number of cards dealt so far."""
        return self._head

    @property
    def total(self) -> int:
        """Return the number of cards the deck was built with."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """Check if every card has been dealt."""
        return self.remaining == 0

    def __len__(self) -> int:
        return self.remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._head:])

    def __repr__(self) -> str:
        return f"Deck(remaining={self.remaining}, total={self.total})"

