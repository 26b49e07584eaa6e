"""Example inference client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseInferenceClient and register the provider in AnalysisClientFactory.
"""

from typing import ClassVar

from detector.analysis.client_base import BaseInferenceClient


class ExampleClientAdapter(BaseInferenceClient):
    """Example adapter that returns a fixed, well-formed report.

    No network calls. Useful for local development and tests; it is only used
    when explicitly selected with ANALYSIS_PROVIDER=example.
    """

    DEFAULT_REPORT: ClassVar[str] = "\n".join(
        [
            "## AI Image Detection Analysis",
            "",
            "### Overall Assessment",
            "**Verdict: Real Photograph (example provider)**",
            "",
            "1. **Provider:** this report was produced without contacting a model",
            "- Configure ANALYSIS_PROVIDER to analyze images for real",
        ]
    )

    async def create_image_analysis(
        self,
        *,
        model: str,
        prompt: str,
        image_mime_type: str,
        image_payload: str,
    ) -> str:
        _ = model, prompt, image_mime_type, image_payload
        return self.DEFAULT_REPORT
