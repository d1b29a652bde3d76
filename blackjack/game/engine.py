"""Blackjack round orchestration with a state machine."""

from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.errors import EmptyDeck, InvalidArgument, InvalidInput
from blackjack.hand import Hand
from blackjack.scoring import Outcome, RoundResult, compare
from blackjack.turn import DEALER_STANDS_ON, Action, DealerTurn, PlayerTurn, TurnStep
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState

DEFAULT_PACKS = 6

_OUTCOME_EVENTS = {
    Outcome.PLAYER_WINS: EventType.PLAYER_WINS,
    Outcome.DEALER_WINS: EventType.DEALER_WINS,
    Outcome.DRAW: EventType.DRAW,
}


class BlackjackGame:
    """
    One player against the dealer, a round at a time.

    Every round is dealt from a freshly generated and shuffled shoe. The
    engine is UI-agnostic: it reports progress through events and return
    values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_cards", "source": ["waiting_for_deal", "round_complete"], "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "round_complete"},
        {"trigger": "abort_round", "source": "*", "dest": "round_complete"},
    ]

    def __init__(
        self,
        packs: int = DEFAULT_PACKS,
        rng: Random | None = None,
        dealer_stands_on: int = DEALER_STANDS_ON,
    ) -> None:
        """
        Initialize a new game.

        Args:
            packs: Number of 52-card packs in each round's shoe
            rng: Random number generator, seeded once by the caller
            dealer_stands_on: Lowest total the dealer stands on
        """
        if isinstance(packs, bool) or not isinstance(packs, int) or packs < 1:
            raise InvalidArgument(f"A shoe needs at least 1 pack, got {packs!r}")

        self.packs = packs
        self.dealer_stands_on = dealer_stands_on
        self._rng = rng or Random()

        self.deck: Deck | None = None
        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.player_turn: PlayerTurn | None = None
        self.result: RoundResult | None = None
        self.rounds_played = 0
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_deal",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore[attr-defined]

    @property
    def is_round_over(self) -> bool:
        """Check if the current round is finished (or none has started)."""
        return self.state in (GameState.WAITING_FOR_DEAL, GameState.ROUND_COMPLETE)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start_round(self) -> None:
        """
        Shuffle a new shoe and deal two cards each to player and dealer.

        Raises:
            InvalidInput: If a round is still in progress
            ResourceExhausted: If the shoe cannot be built
        """
        if not self.is_round_over:
            raise InvalidInput(f"Cannot deal during {self.state}")

        self.events.clear_history()
        self.deck = Deck.generate(self.packs, rng=self._rng)
        self.deck.shuffle()
        self.events.emit_new(EventType.SHOE_SHUFFLED, packs=self.packs, cards=self.deck.total)

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.player_turn = None
        self.result = None
        self.rounds_played += 1

        # Deal: player, dealer, player, dealer
        try:
            for hand in (self.player_hand, self.dealer_hand) * 2:
                self._deal_card_to_hand(hand)
        except EmptyDeck:
            self._abort("shoe exhausted during the deal")
            raise

        self.player_turn = PlayerTurn(self.deck, self.player_hand)
        self.deal_cards()

        self.events.emit_new(
            EventType.ROUND_STARTED,
            round=self.rounds_played,
            player_score=self.player_hand.score.value,
            dealer_upcard=self.dealer_hand.cards[0].code,
        )

    def act(self, action: object) -> TurnStep:
        """
        Apply a player action to the current round.

        Anything other than Action.HIT or Action.STICK is rejected without
        dealing. When the player's turn ends the dealer plays and the round
        is resolved before this returns.

        Raises:
            InvalidInput: If it is not the player's turn
            EmptyDeck: If the shoe runs out; the round is abandoned
        """
        if self.state != GameState.PLAYER_TURN or self.player_turn is None:
            raise InvalidInput(f"No player action allowed during {self.state}")

        try:
            step = self.player_turn.apply(action)
        except EmptyDeck:
            self._abort("shoe exhausted during the player's turn")
            raise

        if not step.accepted:
            self.events.emit_new(EventType.INVALID_ACTION, action=repr(action))
            return step

        if step.action is Action.HIT:
            self._announce_card(step.card, self.player_hand)
            self.events.emit_new(EventType.PLAYER_HIT, hand_value=step.score.value)
            if step.score.is_bust:
                self.events.emit_new(EventType.PLAYER_BUSTS)
        else:
            self.events.emit_new(EventType.PLAYER_STICK, hand_value=step.score.value)

        if step.done:
            self.player_done()
            self._play_dealer()

        return step

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        card = hand.deal_from(self.deck)
        self._announce_card(card, hand)
        return card

    def _announce_card(self, card: Card | None, hand: Hand) -> None:
        if card is None:
            return
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card.code,
            hand="dealer" if hand is self.dealer_hand else "player",
            hand_size=len(hand),
        )

    def _play_dealer(self) -> None:
        """Dealer plays their hand, then the round is resolved."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=self.dealer_hand.cards[-1].code,
            hand_value=self.dealer_hand.score.value,
        )

        turn = DealerTurn(self.deck, self.dealer_hand, stands_on=self.dealer_stands_on)
        try:
            final = turn.play(on_hit=self._on_dealer_hit)
        except EmptyDeck:
            self._abort("shoe exhausted during the dealer's turn")
            raise

        if final.is_bust:
            self.events.emit_new(EventType.DEALER_BUSTS)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=final.value)

        self._resolve_round()

    def _on_dealer_hit(self, step: TurnStep) -> None:
        self._announce_card(step.card, self.dealer_hand)
        self.events.emit_new(EventType.DEALER_HITS, hand_value=step.score.value)

    def _resolve_round(self) -> RoundResult:
        """Compare the final hands and close the round."""
        result = compare(self.player_hand.score, self.dealer_hand.score)
        self.result = result

        winning = result.winning_score
        self.events.emit_new(
            _OUTCOME_EVENTS[result.outcome],
            score=winning.value if winning is not None else None,
        )

        self.dealer_done()
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=result.outcome.name,
            player_score=result.player_score.value,
            dealer_score=result.dealer_score.value,
        )
        return result

    def _abort(self, reason: str) -> None:
        self.abort_round()
        self.events.emit_new(EventType.ROUND_ABORTED, reason=reason)
