"""Hand of cards held by the player or the dealer."""

from dataclasses import dataclass, field
from typing import Iterator

from blackjack.cards import HAND_REP_LEN, Card, Deck, render_lines
from blackjack.errors import InvalidArgument, ResourceExhausted
from blackjack.scoring import Score, is_soft, score


@dataclass
class Hand:
    """A blackjack hand, most recent card last."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        if card is None:
            raise InvalidArgument("Cannot add a missing card")
        try:
            self.cards.append(card)
        except MemoryError as exc:
            raise ResourceExhausted("Cannot grow the hand") from exc

    def deal_from(self, deck: Deck) -> Card:
        """
        Deal the next card from a deck into this hand.

        If the deck is empty it raises EmptyDeck and neither the deck nor
        the hand changes.

        If the hand cannot grow the card goes back on top of the deck and
        ResourceExhausted is raised.
        """
        if deck is None:
            raise InvalidArgument("A deck is required")
        card = deck.deal_one()
        try:
            self.add_card(card)
        except ResourceExhausted:
            deck.undeal()
            raise
        return card

    def display(self) -> list[str]:
        """Render the hand as lines of at most seven card codes."""
        return render_lines(self.cards, HAND_REP_LEN)

    @property
    def is_empty(self) -> bool:
        """Check if the hand holds no cards."""
        return not self.cards

    @property
    def score(self) -> Score:
        """Score the current contents of the hand."""
        return score(self.cards)

    @property
    def is_soft(self) -> bool:
        """Check if an Ace is still counted as 11."""
        return is_soft(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(card.code.strip() for card in self.cards)
        if self.is_empty:
            return "(empty)"
        current = self.score
        if current.is_blackjack:
            value_str = "(BLACKJACK)"
        elif current.is_bust:
            value_str = "(BUST)"
        elif self.is_soft:
            value_str = f"(soft {current})"
        else:
            value_str = f"({current})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"
