from pathlib import Path

from detector.ingestion.exceptions import SampleUnavailableError

_SAMPLES_DIR = Path(__file__).parent / "samples"


def load_sample_report(path: Path | None = None) -> str:
    """Load the report text displayed alongside the bundled sample image.

    Raises:
        SampleUnavailableError: if the file cannot be read.
    """
    if path is None:
        path = _SAMPLES_DIR / "sample_report.md"
    try:
        return path.read_text(encoding="utf-8").rstrip("\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise SampleUnavailableError(f"Failed to load sample report: {exc}") from exc
