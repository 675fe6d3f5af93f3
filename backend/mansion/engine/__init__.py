"""Game engine components.

- `parser.py`: command grammar and the reinterpretation allowlist
- `typo.py`: typo heuristic deciding when to ask the reinterpreter
- `doubt.py`: doubt phase state machine and line selection
- `transitions.py` + `handlers/`: the game transition engine
- `processor.py`: the per-submission loop tying them together

Import directly from submodules to avoid circular imports:
    from mansion.engine.processor import TurnProcessor
    from mansion.engine.state import GameStateManager
"""

# Note: No eager imports to avoid circular import issues
