"""
LLM client - Provider-agnostic LLM integration using LiteLLM
"""

import os
import logging
from typing import Any

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Environment variable holding the API key for each keyed provider
API_KEY_VARS: dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def get_provider() -> str:
    """Get configured LLM provider"""
    return os.getenv("LLM_PROVIDER", "openai")


def get_model() -> str:
    """Get configured model name"""
    return os.getenv("LLM_MODEL", "gpt-4o-mini")


def get_timeout() -> float:
    """Get the request timeout in seconds"""
    try:
        return float(os.getenv("LLM_TIMEOUT_SECONDS", "15"))
    except ValueError:
        logger.warning("LLM_TIMEOUT_SECONDS is not a number, using 15")
        return 15.0


def get_model_string() -> str:
    """Get the full model string for LiteLLM"""
    provider = get_provider()
    model = get_model()

    # LiteLLM uses prefixed model names for some providers
    if provider == "gemini":
        return f"gemini/{model}"
    elif provider == "anthropic":
        return f"anthropic/{model}"
    elif provider == "ollama":
        return f"ollama/{model}"
    else:
        # OpenAI doesn't need a prefix
        return model


def is_configured() -> bool:
    """Whether the configured provider has what it needs to be called"""
    key_var = API_KEY_VARS.get(get_provider())
    if key_var is None:
        # Local providers need no key
        return True
    return bool(os.getenv(key_var))


async def get_completion(
    messages: list[dict[str, str]],
    model: str | None = None,
    temperature: float = 0.7,
    max_tokens: int = 2048,
    timeout: float | None = None,
) -> str:
    """
    Get completion from configured LLM provider.

    Args:
        messages: List of message dicts with 'role' and 'content'
        model: Optional model override
        temperature: Creativity (0-1)
        max_tokens: Maximum response length
        timeout: Seconds before giving up; LLM_TIMEOUT_SECONDS if omitted

    Returns:
        The generated text response (empty string if the model said nothing)

    Raises:
        TimeoutError: If the provider did not answer in time
    """
    import litellm

    _configure_api_keys()

    model_string = model or get_model_string()
    timeout = timeout if timeout is not None else get_timeout()

    logger.info(
        f"LLM Request: model={model_string}, temperature={temperature}, max_tokens={max_tokens}"
    )
    logger.debug(f"Messages: {len(messages)} messages, timeout={timeout}s")

    kwargs: dict[str, Any] = {
        "model": model_string,
        "messages": messages,
        "temperature": temperature,
        "max_tokens": max_tokens,
        "timeout": timeout,
    }

    try:
        response = await litellm.acompletion(**kwargs)
    except litellm.Timeout as e:
        logger.warning(f"LLM request timed out after {timeout}s")
        raise TimeoutError(f"LLM request timed out after {timeout}s") from e
    except Exception as e:
        logger.error(f"LLM Error: {type(e).__name__}: {e}")
        raise

    content = response.choices[0].message.content or ""
    finish_reason = getattr(response.choices[0], "finish_reason", "unknown")

    logger.info(
        f"LLM Response: finish_reason={finish_reason}, content_length={len(content)}"
    )

    if not content:
        logger.warning("LLM returned empty content")
    else:
        preview = content[:200] + "..." if len(content) > 200 else content
        logger.debug(f"Response preview: {preview}")

    return content


def _configure_api_keys():
    """Configure API keys for LiteLLM from environment"""
    import litellm

    provider = get_provider()
    logger.debug(f"Configuring API keys for provider: {provider}")

    if provider == "ollama":
        base_url = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
        os.environ["OLLAMA_API_BASE"] = base_url
        logger.debug(f"OLLAMA_API_BASE configured: {base_url}")
        return

    key_var = API_KEY_VARS.get(provider)
    if key_var is None:
        return

    api_key = os.getenv(key_var)
    if not api_key:
        logger.warning(f"{key_var} not found in environment")
    elif provider == "openai":
        litellm.api_key = api_key
        logger.debug(f"{key_var} configured (length: {len(api_key)})")
    else:
        os.environ[key_var] = api_key
        logger.debug(f"{key_var} configured (length: {len(api_key)})")
