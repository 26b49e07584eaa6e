from pathlib import Path

from detector.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_default_prompt(path: Path | None = None) -> str:
    """Load the analysis prompt sent along with every image.

    Args:
        path: Path to a prompt file.
              Defaults to the bundled default_prompt.txt.

    Returns:
        The prompt text with surrounding whitespace removed.

    Raises:
        AnalysisError: if the file cannot be read or is empty.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "default_prompt.txt"
    try:
        prompt = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AnalysisError(f"Failed to load analysis prompt: {exc}") from exc
    if not prompt:
        raise AnalysisError(f"Analysis prompt file is empty: {path}")
    return prompt
