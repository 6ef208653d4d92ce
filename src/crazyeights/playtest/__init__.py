"""Terminal playtesting against the computer opponent."""

from crazyeights.playtest.display import StateRenderer, CommandPresenter, format_card
from crazyeights.playtest.rules import RuleExplainer
from crazyeights.playtest.input import HumanPlayer, InputResult
from crazyeights.playtest.session import PlaytestSession, SessionConfig, PlaytestResult

__all__ = [
    "StateRenderer",
    "CommandPresenter",
    "format_card",
    "RuleExplainer",
    "HumanPlayer",
    "InputResult",
    "PlaytestSession",
    "SessionConfig",
    "PlaytestResult",
]
