"""Reading player decisions from the console."""

from typing import Callable

from blackjack.turn import Action

ACTION_PROMPT = "Hit or stick? [h/s] "
REPLAY_PROMPT = "Play again y/n? "

_ACTION_TOKENS = {
    "h": Action.HIT,
    "hit": Action.HIT,
    "s": Action.STICK,
    "stick": Action.STICK,
}

InputFn = Callable[[str], str]


def parse_action(token: str) -> Action | None:
    """Map a typed token to an action, or None if it is not one."""
    return _ACTION_TOKENS.get(token.strip().lower())


def ask_action(input_fn: InputFn = input) -> Action | None:
    """Prompt once for an action; unrecognised input comes back as None."""
    return parse_action(input_fn(ACTION_PROMPT))


def ask_replay(input_fn: InputFn = input) -> bool:
    """Ask whether to play another round. Only 'y' or 'yes' means yes."""
    return input_fn(REPLAY_PROMPT).strip().lower() in ("y", "yes")
