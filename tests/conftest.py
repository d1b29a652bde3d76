"""Pytest fixtures for blackjack tests."""

from random import Random

import pytest

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.game import BlackjackGame
from blackjack.game import engine
from blackjack.hand import Hand


def _build_hand(*codes: str) -> Hand:
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


def _build_deck(*codes: str) -> Deck:
    return Deck([Card.from_string(code) for code in codes])


class StackedShoe(Deck):
    """Deck whose contents are fixed by a test and which never shuffles."""

    cards: list[str] = []

    @classmethod
    def generate(cls, packs: int = 1, rng: Random | None = None) -> "StackedShoe":
        return cls([Card.from_string(code) for code in cls.cards], rng=rng)

    def shuffle(self) -> None:
        pass


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A single shuffled pack."""
    d = Deck.generate(1, rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def shoe(rng):
    """A shuffled 6-pack shoe."""
    s = Deck.generate(6, rng=rng)
    s.shuffle()
    return s


@pytest.fixture
def stack_shoe(monkeypatch):
    """
    Make every round deal the given cards, in order.

    The opening deal goes player, dealer, player, dealer; later cards are
    hits in the order they are taken.
    """

    def _stack(*codes: str) -> None:
        shoe_cls = type("Stacked", (StackedShoe,), {"cards": list(codes)})
        monkeypatch.setattr(engine, "Deck", shoe_cls)

    return _stack


@pytest.fixture
def make_hand():
    """Factory building a hand from card strings like 'AS', '10H'."""
    return _build_hand


@pytest.fixture
def make_deck():
    """Factory building an unshuffled deck that deals the given cards in order."""
    return _build_deck


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return _build_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return _build_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return _build_hand("10S", "6H", "KC")


@pytest.fixture
def game(rng):
    """A new game instance over a seeded generator."""
    return BlackjackGame(packs=6, rng=rng)
