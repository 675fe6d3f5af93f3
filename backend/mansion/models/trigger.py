"""
Doubt trigger enumeration.

A trigger tags the result of a transition with the narrative event that
just happened. Triggers carry no data; they are consumed only by the doubt
state machine to pick (and sometimes advance) the antagonist's commentary.
"""

from enum import Enum


class DoubtTrigger(str, Enum):
    """Narrative events the doubt voice reacts to."""

    ENTERED_ENTRANCE = "entered_entrance"  # Session opened at the entrance
    ENTERED_MAIN = "entered_main"
    BLOCKED_EXIT_ATTEMPT = "blocked_exit_attempt"
    SOLVED_CODE = "solved_code"
    OPENED_DRAWER = "opened_drawer"
    TOOK_KEY = "took_key"
    UNKNOWN_COMMAND = "unknown_command"
    TYPO_WHISPER = "typo_whisper"
