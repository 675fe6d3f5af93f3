"""LLM integration components.

- `client.py`: LiteLLM client wrapper
- `prompt_loader.py`: Prompt template loading utility
- `session_logger.py`: Per-session turn logs
- `reinterpreter.py`: ReinterpreterAI for typo recovery

Import ReinterpreterAI from its submodule to avoid circular imports:
    from mansion.llm.reinterpreter import ReinterpreterAI
"""

from mansion.llm.client import get_completion, get_model_string, is_configured
from mansion.llm.prompt_loader import get_loader

__all__ = [
    "get_completion",
    "get_model_string",
    "is_configured",
    "get_loader",
]
