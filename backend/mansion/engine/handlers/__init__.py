"""
Command handlers for the mansion engine.

Each handler implements the CommandHandler protocol:
    - handle(): turn a parsed command into narration, a state delta and
      an optional doubt trigger

Handlers never write GameState themselves; the delta is applied by the
caller. SessionState flags (intro seen, session ended) are the only
thing a handler may mutate.

Example:
    >>> handler = PuzzleHandler()
    >>> result = handler.handle(command, state, session)
    >>> state.apply_updates(result.updates)
"""

from mansion.engine.handlers.movement import MovementHandler
from mansion.engine.handlers.examine import ExamineHandler
from mansion.engine.handlers.puzzle import PuzzleHandler
from mansion.engine.handlers.meta import MetaHandler

__all__ = [
    "MovementHandler",
    "ExamineHandler",
    "PuzzleHandler",
    "MetaHandler",
]
