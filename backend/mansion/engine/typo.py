"""
Typo heuristic.

Decides whether input the grammar rejected is close enough to a known
command to be worth a reinterpretation call. The thresholds trade missed
typos against wasted calls to the helper.
"""

from __future__ import annotations

import re

from mansion.engine.parser import normalize

CODE_PLACEHOLDER = "####"

# Every phrase the grammar accepts plus a few it does not handle yet
CANONICAL_COMMANDS: list[str] = [
    "help",
    "commands",
    "look",
    "enter",
    "back",
    "go inside",
    "go out",
    "go north",
    "go east",
    "go west",
    "go south",
    "examine desk",
    "examine drawer",
    "examine mirror",
    "examine table",
    "examine key",
    "examine room",
    "search",
    "search room",
    "open drawer",
    "enter code ####",
    "use code ####",
    "take key",
    "use headlamp",
    "inventory",
    "ai help on",
    "ai help off",
    "quit",
    "exit",
]

_CODE_ATTEMPT = re.compile(r"^(enter|use) code (\d+)$")


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit-cost insert, delete and substitute."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def max_distance(phrase: str) -> int:
    """Largest edit distance still treated as a typo of ``phrase``."""
    length = len(phrase)
    if length <= 4:
        return 1
    if length <= 9:
        return 2
    return 3


def is_likely_typo(raw: str) -> bool:
    """Return True if ``raw`` looks like a near miss of a canonical command.

    Args:
        raw: Player text that the grammar did not recognize

    Returns:
        True if the reinterpreter should be asked about it
    """
    cleaned = normalize(raw)
    if not cleaned:
        return False

    # Wrong number of digits in a code attempt
    match = _CODE_ATTEMPT.match(cleaned)
    if match and 0 < len(match.group(2)) <= 5 and len(match.group(2)) != 4:
        return True

    for phrase in CANONICAL_COMMANDS:
        if CODE_PLACEHOLDER in phrase:
            prefix = phrase.replace(f" {CODE_PLACEHOLDER}", "")
            if cleaned.startswith(prefix):
                return True

    return any(
        levenshtein(cleaned, phrase) <= max_distance(phrase)
        for phrase in CANONICAL_COMMANDS
    )
