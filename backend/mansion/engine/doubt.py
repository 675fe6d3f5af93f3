"""
Doubt state machine.

The antagonist "Doubt" comments on the player's progress. Its tone is gated
by a phase from 0 to 3 that only moves forward:

    entered_main  -> at least 1
    solved_code   -> at least 2
    took_key      -> exactly 3

Lines are picked from small fixed banks keyed by (phase, trigger). A pair
without a bank means Doubt stays silent.
"""

from __future__ import annotations

import math
import random

from mansion.models.game import MAX_DOUBT_PHASE
from mansion.models.trigger import DoubtTrigger

LINE_BANK: dict[int, dict[DoubtTrigger, list[str]]] = {
    0: {
        DoubtTrigger.ENTERED_ENTRANCE: [
            "I'm already ahead of you.",
            "I am here.",
            "I know why you stopped.",
        ],
        DoubtTrigger.UNKNOWN_COMMAND: [
            "You hesitate. I notice.",
            "I see your doubt.",
        ],
    },
    1: {
        DoubtTrigger.ENTERED_MAIN: [
            "I don't like this room.",
            "I thought you'd stop.",
            "I can still turn you around.",
        ],
        DoubtTrigger.BLOCKED_EXIT_ATTEMPT: [
            "That hall is mine.",
            "Not that way.",
        ],
        DoubtTrigger.UNKNOWN_COMMAND: [
            "The room unsettles you, does it not?",
            "Still unsure. I hear it.",
        ],
    },
    2: {
        DoubtTrigger.SOLVED_CODE: [
            "It pauses.",
            "It didn't expect you to learn.",
            "It speaks, but weaker.",
        ],
        DoubtTrigger.OPENED_DRAWER: [
            "Something just shifted...",
            "You moved it forward.",
        ],
        DoubtTrigger.UNKNOWN_COMMAND: ["Even now, you question?"],
    },
    3: {
        DoubtTrigger.TOOK_KEY: [
            "A quiet that was not there before.",
            "...",
        ],
        DoubtTrigger.UNKNOWN_COMMAND: ["Silence answers you."],
    },
}

TYPO_WHISPERS: list[str] = [
    "I fixed that.",
    "You meant...",
    "Careful.",
    "Small slip.",
    "Typos are doors.",
    "I noticed.",
    "Again?",
    "Slow down.",
]

# Lower bound each trigger pushes the phase to
_PHASE_FLOORS: dict[DoubtTrigger, int] = {
    DoubtTrigger.ENTERED_MAIN: 1,
    DoubtTrigger.SOLVED_CODE: 2,
}


def clamp_phase(phase: float) -> int:
    """Floor to an integer and clamp into [0, 3]."""
    return max(0, min(MAX_DOUBT_PHASE, math.floor(phase)))


def advance_phase(current: float, trigger: DoubtTrigger) -> int:
    """Compute the phase after ``trigger`` fires.

    Args:
        current: The phase before the trigger
        trigger: The narrative event that just happened

    Returns:
        The new phase
    """
    phase = clamp_phase(current)
    if trigger == DoubtTrigger.TOOK_KEY:
        return MAX_DOUBT_PHASE
    floor = _PHASE_FLOORS.get(trigger)
    if floor is None:
        return phase
    return max(phase, floor)


def pick_line(rng: random.Random, bank: list[str], last_line: str | None = None) -> str:
    """Pick a random line from ``bank`` other than ``last_line`` when possible."""
    shuffled = list(bank)
    rng.shuffle(shuffled)
    for line in shuffled:
        if line != last_line:
            return line
    return bank[0]


class DoubtVoice:
    """Selects Doubt's lines without repeating the previous one.

    Example:
        >>> voice = DoubtVoice(random.Random(7))
        >>> line = voice.line_for(1, DoubtTrigger.ENTERED_MAIN, last_line=None)
        >>> line in LINE_BANK[1][DoubtTrigger.ENTERED_MAIN]
        True
        >>> voice.line_for(0, DoubtTrigger.TOOK_KEY) is None
        True
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def line_for(
        self,
        phase: float,
        trigger: DoubtTrigger,
        last_line: str | None = None,
    ) -> str | None:
        """Pick a line for ``trigger`` at ``phase``, or None to stay silent."""
        bank = LINE_BANK.get(clamp_phase(phase), {}).get(trigger)
        if not bank:
            return None
        return self._pick(bank, last_line)

    def typo_whisper(self, last_line: str | None = None) -> str:
        """Pick a whisper acknowledging a corrected typo."""
        return self._pick(TYPO_WHISPERS, last_line)

    def _pick(self, bank: list[str], last_line: str | None) -> str:
        return pick_line(self.rng, bank, last_line)
