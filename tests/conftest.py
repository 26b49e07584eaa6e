import base64

import pytest

from detector.ingestion.encoding import encode_data_url
from detector.ingestion.models import EncodedImage

# 1x1 transparent PNG
_PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8DwHwAFBQIAX8jx0gAAAABJRU5ErkJggg=="
)


@pytest.fixture()
def png_bytes() -> bytes:
    """Bytes of a minimal valid PNG image."""
    return _PNG_1X1


@pytest.fixture()
def encoded_png(png_bytes: bytes) -> EncodedImage:
    return encode_data_url(png_bytes, "image/png")


@pytest.fixture()
def sample_report_text() -> str:
    """A short report in the format the inference service usually answers with."""
    return "\n".join(
        [
            "## AI Image Detection Analysis",
            "",
            "### Overall Assessment",
            "🔍 **Verdict: AI-Generated Image (98.7% confidence)**",
            "",
            "1. **Unnatural Perfection:** details here",
            "   - Suspiciously perfect symmetry",
            "This image displays multiple hallmarks of AI generation.",
        ]
    )
