"""Exception hierarchy for the blackjack engine."""


class BlackjackError(Exception):
    """Base class for all engine errors."""


class InvalidArgument(BlackjackError, ValueError):
    """A constructor or operation received a malformed or missing argument."""


class EmptyDeck(BlackjackError, IndexError):
    """A card was requested from a deck with no undealt cards."""


class ResourceExhausted(BlackjackError, MemoryError):
    """Storage for a deck or hand could not be allocated."""


class InvalidInput(BlackjackError, ValueError):
    """An internal value fell outside its enumeration.

    Raised by defensive checks; reaching one through the public API is a bug.
    """


class InvalidRank(InvalidInput):
    """A card carries a rank the scoring rules do not know."""
