"""
Prompt Loader - Loads prompts from text files with hot reloading support.

Prompts are organized in subdirectories:
- reinterpreter/ - Typo reinterpretation prompts
"""

import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class PromptLoader:
    """Loads and caches prompts from text files."""

    def __init__(self, prompts_dir: Optional[Path] = None):
        """
        Initialize the prompt loader.

        Args:
            prompts_dir: Directory containing prompt files. If None, uses the
                        prompts/ directory next to this module.
        """
        if prompts_dir is None:
            prompts_dir = Path(__file__).parent / "prompts"

        self.prompts_dir = Path(prompts_dir)
        self._cache: Dict[str, str] = {}
        self._file_timestamps: Dict[str, float] = {}

    def _get_prompt_path(self, category: str, filename: str) -> Path:
        return self.prompts_dir / category / filename

    def get_prompt(self, category: str, filename: str, reload: bool = False) -> str:
        """
        Get a prompt from cache or file.

        A cached prompt is re-read when its file changed on disk.

        Args:
            category: Subdirectory name (e.g., 'reinterpreter')
            filename: Prompt filename (e.g., 'system_prompt.txt')
            reload: If True, force reload from file even if cached

        Returns:
            Prompt content as string

        Raises:
            FileNotFoundError: If the prompt was never loaded and the file is missing
        """
        cache_key = f"{category}/{filename}"
        path = self._get_prompt_path(category, filename)

        if not path.exists():
            if cache_key in self._cache:
                logger.warning(f"Prompt file deleted but using cached version: {cache_key}")
                return self._cache[cache_key]
            raise FileNotFoundError(
                f"Prompt file not found: {path}\n"
                f"Expected location: {self.prompts_dir}/{category}/{filename}"
            )

        mtime = path.stat().st_mtime
        if reload or cache_key not in self._cache:
            logger.debug(f"Loading prompt: {cache_key}")
        elif mtime > self._file_timestamps.get(cache_key, 0):
            logger.info(f"Hot reloading modified prompt: {cache_key}")
        else:
            return self._cache[cache_key]

        self._cache[cache_key] = path.read_text(encoding="utf-8")
        self._file_timestamps[cache_key] = mtime
        return self._cache[cache_key]

    def clear(self) -> None:
        """Drop every cached prompt."""
        self._cache.clear()
        self._file_timestamps.clear()


_loader: Optional[PromptLoader] = None


def get_loader() -> PromptLoader:
    """Get the global prompt loader instance."""
    global _loader
    if _loader is None:
        _loader = PromptLoader()
    return _loader
