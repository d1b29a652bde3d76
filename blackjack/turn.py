"""Turn controller: one participant's hit/stick state machine."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.errors import InvalidArgument, InvalidInput
from blackjack.hand import Hand
from blackjack.scoring import Score

DEALER_STANDS_ON = 17


class Action(Enum):
    """Actions available during a turn."""

    HIT = auto()
    STICK = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class TurnStep:
    """Result of applying one action to a turn."""

    action: Action | None
    score: Score
    done: bool
    card: Card | None = None
    accepted: bool = True


class Turn:
    """
    A single participant's turn against a deck.

    AWAITING_ACTION loops on every hit that does not bust; a stick or a
    busting hit moves the turn to DONE, after which no more actions apply.
    """

    STATES = ["awaiting_action", "done"]

    TRANSITIONS = [
        {"trigger": "took_card", "source": "awaiting_action", "dest": "awaiting_action"},
        {"trigger": "stuck", "source": "awaiting_action", "dest": "done"},
        {"trigger": "busted", "source": "awaiting_action", "dest": "done"},
    ]

    def __init__(self, deck: Deck, hand: Hand) -> None:
        """
        Start a turn.

        Args:
            deck: Deck that hits are dealt from
            hand: Hand owned by the participant taking the turn
        """
        if deck is None or hand is None:
            raise InvalidArgument("A turn needs both a deck and a hand")
        self.deck = deck
        self.hand = hand

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_action",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def is_over(self) -> bool:
        """Check if the turn has finished."""
        return self._machine_state == "done"  # type: ignore[attr-defined]

    @property
    def score(self) -> Score:
        """Score of the participant's hand right now."""
        return self.hand.score

    def hit(self) -> TurnStep:
        """
        Deal one card to the hand and re-score it.

        Raises:
            InvalidInput: If the turn is already over
            EmptyDeck: If the deck has run out (nothing changes)
        """
        self._require_open()
        card = self.hand.deal_from(self.deck)
        current = self.hand.score

        if current.is_bust:
            self.busted()
        else:
            self.took_card()

        return TurnStep(Action.HIT, current, self.is_over, card)

    def stick(self) -> TurnStep:
        """End the turn keeping the current hand."""
        self._require_open()
        current = self.hand.score
        self.stuck()
        return TurnStep(Action.STICK, current, True)

    def _require_open(self) -> None:
        if self.is_over:
            raise InvalidInput("The turn is already over")


class PlayerTurn(Turn):
    """Interactive turn driven by actions supplied from outside."""

    def apply(self, action: object) -> TurnStep:
        """
        Apply one player action.

        Anything other than an Action is rejected: no card is dealt and
        the turn stays open.
        """
        self._require_open()
        if action is Action.HIT:
            return self.hit()
        if action is Action.STICK:
            return self.stick()
        return TurnStep(None, self.hand.score, False, accepted=False)


class DealerTurn(Turn):
    """Automatic turn: hit below 17, stand on any 17 or better."""

    def __init__(
        self,
        deck: Deck,
        hand: Hand,
        stands_on: int = DEALER_STANDS_ON,
    ) -> None:
        super().__init__(deck, hand)
        self.stands_on = stands_on

    def should_hit(self) -> bool:
        """Check if the dealer must take another card."""
        current = self.hand.score
        return not current.is_bust and current.value < self.stands_on

    def play(self, on_hit: Callable[[TurnStep], None] | None = None) -> Score:
        """
        Play the dealer's hand out.

        Args:
            on_hit: Called with the step after every card the dealer takes

        Returns:
            The dealer's final score

        Raises:
            EmptyDeck: If the deck runs out before the dealer stands
        """
        while not self.is_over:
            if not self.should_hit():
                self.stick()
                break
            step = self.hit()
            if on_hit is not None:
                on_hit(step)
        return self.hand.score
