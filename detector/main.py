from pathlib import Path

from detector.analysis.factory import AnalysisClientFactory
from detector.config.settings import Settings
from detector.ingestion.ingestor import ImageIngestor
from detector.logging.logger import Log
from detector.report.parser import ReportParser
from detector.session.controller import SessionController


def build_session_controller(settings: Settings) -> SessionController:
    """Build a SessionController with its own analysis client."""
    sample_path = Path(settings.sample_image_path) if settings.sample_image_path else None
    ingestor = ImageIngestor(max_bytes=settings.max_image_bytes, sample_path=sample_path)
    analysis_client = AnalysisClientFactory.create(settings)
    return SessionController(
        ingestor=ingestor,
        analysis_client=analysis_client,
        parser=ReportParser(),
    )


async def open_session(settings: Settings | None = None) -> SessionController:
    """Entry point for the presentation layer: configure -> build -> bootstrap."""
    settings = settings if settings is not None else Settings()
    Log.configure(settings.log_level)
    controller = build_session_controller(settings)
    await controller.start()
    return controller
