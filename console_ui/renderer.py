"""Print game events to a text stream."""

import sys
import time
from typing import Callable, TextIO

from blackjack.game import BlackjackGame, EventType, GameEvent
from blackjack.hand import Hand
from blackjack.scoring import Outcome


def describe_hand(hand: Hand) -> str:
    """Return the hand's score as shown to the user, e.g. 'soft 17'."""
    current = hand.score
    if not current.is_blackjack and not current.is_bust and hand.is_soft:
        return f"soft {current}"
    return str(current)


def format_hand(title: str, hand: Hand) -> str:
    """Return a titled hand block: a heading line then the card lines."""
    return f"{title} ({describe_hand(hand)}):\n" + "".join(hand.display())


class ConsoleRenderer:
    """
    Writes a running commentary of a game to a text stream.

    The dealer's hits are paced with a short pause so a human can follow
    them; a pause of 0 disables it.
    """

    def __init__(
        self,
        game: BlackjackGame,
        out: TextIO | None = None,
        pause: float = 1.0,
        show_shoe: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.game = game
        self.out = out or sys.stdout
        self.pause = pause
        self.show_shoe = show_shoe
        self._sleep = sleep

        self._handlers: dict[EventType, Callable[[GameEvent], None]] = {
            EventType.SHOE_SHUFFLED: self._on_shuffled,
            EventType.ROUND_STARTED: self._on_round_started,
            EventType.PLAYER_HIT: self._on_player_hit,
            EventType.PLAYER_BUSTS: self._on_player_busts,
            EventType.INVALID_ACTION: self._on_invalid_action,
            EventType.DEALER_REVEALS: self._on_dealer_reveals,
            EventType.DEALER_HITS: self._on_dealer_hits,
            EventType.DEALER_STANDS: self._on_dealer_stands,
            EventType.DEALER_BUSTS: self._on_dealer_busts,
            EventType.ROUND_ENDED: self._on_round_ended,
            EventType.ROUND_ABORTED: self._on_round_aborted,
        }

    def attach(self) -> None:
        """Subscribe to every event this renderer prints."""
        for event_type, handler in self._handlers.items():
            self.game.subscribe(handler, event_type)

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _on_shuffled(self, event: GameEvent) -> None:
        if self.show_shoe and self.game.deck is not None:
            self.write(f"Shoe of {event.data['cards']} cards:\n")
            self.write("".join(self.game.deck.display()))

    def _on_round_started(self, event: GameEvent) -> None:
        self.write(f"\n=== Round {event.data['round']} ===\n")
        self.write(f"Dealer shows: {event.data['dealer_upcard'].strip()}\n")
        self.write(format_hand("Your hand", self.game.player_hand))

    def _on_player_hit(self, event: GameEvent) -> None:
        self.write(format_hand("Your hand", self.game.player_hand))

    def _on_player_busts(self, event: GameEvent) -> None:
        self.write("You bust!\n")

    def _on_invalid_action(self, event: GameEvent) -> None:
        self.write("Please enter h to hit or s to stick.\n")

    def _on_dealer_reveals(self, event: GameEvent) -> None:
        self.write(format_hand("Dealer's hand", self.game.dealer_hand))

    def _on_dealer_hits(self, event: GameEvent) -> None:
        if self.pause > 0:
            self._sleep(self.pause)
        self.write(format_hand("Dealer hits", self.game.dealer_hand))

    def _on_dealer_stands(self, event: GameEvent) -> None:
        self.write(f"Dealer stands on {describe_hand(self.game.dealer_hand)}.\n")

    def _on_dealer_busts(self, event: GameEvent) -> None:
        self.write("Dealer busts!\n")

    def _on_round_ended(self, event: GameEvent) -> None:
        result = self.game.result
        if result is None:
            return
        if result.outcome is Outcome.PLAYER_WINS:
            self.write(f"Player wins with {result.winning_score}!\n")
        elif result.outcome is Outcome.DEALER_WINS:
            self.write(f"Dealer wins with {result.winning_score}.\n")
        else:
            self.write("Draw.\n")

    def _on_round_aborted(self, event: GameEvent) -> None:
        self.write("The shoe ran out of cards; round abandoned.\n")
