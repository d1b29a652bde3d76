"""Text console front end for the blackjack engine."""
