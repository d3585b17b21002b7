from pathlib import Path

from training_generator.generation.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_PROMPT = "system_prompt.txt"
AUTO_SELECT_PROMPT = "auto_select_prompt.txt"
REFINE_PROMPT = "refine_prompt.txt"
REFINE_SYSTEM_PROMPT = "refine_system_prompt.txt"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a prompt template by file name.

    Args:
        name: Template file name, e.g. SYSTEM_PROMPT.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled prompts directory.

    Returns:
        The raw template string with placeholders.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template '{name}': {exc}") from exc
