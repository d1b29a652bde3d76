"""Tests for console rendering of game events."""

import io

from blackjack.game import BlackjackGame
from blackjack.turn import Action
from console_ui.renderer import ConsoleRenderer, describe_hand, format_hand


def attached(game: BlackjackGame, **kwargs) -> tuple[ConsoleRenderer, io.StringIO]:
    out = io.StringIO()
    renderer = ConsoleRenderer(game, out=out, **kwargs)
    renderer.attach()
    return renderer, out


class TestFormatting:
    """Tests for hand formatting helpers."""

    def test_describe_hand(self, blackjack_hand, bust_hand, soft_17_hand, hard_16_hand):
        """Test score descriptions."""
        assert describe_hand(blackjack_hand) == "Blackjack"
        assert describe_hand(bust_hand) == "Bust"
        assert describe_hand(soft_17_hand) == "soft 17"
        assert describe_hand(hard_16_hand) == "16"

    def test_format_hand(self, hard_16_hand):
        """Test a titled hand block."""
        assert format_hand("Your hand", hard_16_hand) == "Your hand (16):\n10S  6H\n"

    def test_format_long_hand_wraps(self, make_hand):
        """Test hands wrap after seven cards."""
        hand = make_hand("AS", "AD", "AC", "AH", "2S", "2D", "2C", "2H")
        text = format_hand("Dealer hits", hand)
        assert text.count("\n") == 3


class TestConsoleRenderer:
    """Tests for the event-driven renderer."""

    def test_dealer_hits_are_paced(self, game, stack_shoe):
        """Test the renderer pauses before showing each dealer hit."""
        stack_shoe("10S", "2H", "9S", "3H", "KC", "5D")
        pauses = []
        _, out = attached(game, pause=0.25, sleep=pauses.append)

        game.start_round()
        game.act(Action.STICK)

        assert pauses == [0.25, 0.25]
        assert out.getvalue().count("Dealer hits") == 2
        assert "Dealer stands on 20." in out.getvalue()

    def test_zero_pause_never_sleeps(self, game, stack_shoe):
        """Test pacing can be switched off."""
        stack_shoe("10S", "2H", "9S", "3H", "KC", "5D")
        pauses = []
        attached(game, pause=0, sleep=pauses.append)

        game.start_round()
        game.act(Action.STICK)

        assert pauses == []

    def test_dealer_upcard_only_during_player_turn(self, game, stack_shoe):
        """Test the hole card stays hidden until the dealer plays."""
        stack_shoe("10S", "QH", "9S", "7D")
        _, out = attached(game, pause=0)

        game.start_round()
        text = out.getvalue()
        assert "Dealer shows: QH" in text
        assert "7D" not in text

        game.act(Action.STICK)
        assert " QH  7D" in out.getvalue()

    def test_player_hit_shows_hand(self, game, stack_shoe):
        """Test the new card is printed after a hit."""
        stack_shoe("10S", "QH", "2S", "7D", "3C")
        _, out = attached(game, pause=0)

        game.start_round()
        game.act(Action.HIT)

        assert "Your hand (15):\n10S  2S  3C\n" in out.getvalue()

    def test_dealer_bust_message(self, game, stack_shoe):
        """Test the dealer bust line."""
        stack_shoe("10S", "10H", "8S", "6H", "KC")
        _, out = attached(game, pause=0)

        game.start_round()
        game.act(Action.STICK)

        assert "Dealer busts!" in out.getvalue()
        assert "Player wins with 18!" in out.getvalue()

    def test_shoe_hidden_by_default(self, game):
        """Test the shoe is only dumped on request."""
        _, out = attached(game, pause=0)
        game.start_round()
        assert "Shoe of" not in out.getvalue()
