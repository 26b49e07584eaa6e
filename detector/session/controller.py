"""Session state machine: ingest -> analyze -> parse, with stale-result discard."""

import asyncio
from collections.abc import Callable

from detector.analysis.analyzer import AnalysisClient
from detector.analysis.exceptions import AnalysisError
from detector.ingestion.base import BaseImageFile
from detector.ingestion.exceptions import IngestionError
from detector.ingestion.ingestor import ImageIngestor
from detector.ingestion.models import EncodedImage
from detector.logging.logger import Log
from detector.report.parser import ReportParser
from detector.session.messages import user_message
from detector.session.models import (
    Analyzing,
    Bootstrapping,
    Failed,
    Idle,
    Ready,
    SessionState,
)
from detector.session.sample_loader import load_sample_report

StateListener = Callable[[SessionState], None]


class SessionController:
    """Owns the state of one user session.

    Every operation takes a new generation number when it starts. Only the
    operation holding the current generation may apply its result; anything
    older has been superseded by a newer upload and is dropped.
    """

    def __init__(
        self,
        *,
        ingestor: ImageIngestor,
        analysis_client: AnalysisClient,
        parser: ReportParser,
        sample_report: str | None = None,
    ) -> None:
        self._ingestor = ingestor
        self._analysis_client = analysis_client
        self._parser = parser
        self._sample_report = sample_report
        self._state: SessionState = Idle()
        self._generation = 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every new state; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def start(self) -> None:
        """Show the bundled sample image and report without contacting the service."""
        if not isinstance(self._state, Idle):
            Log.warning("Session already started", state=self._state.name)
            return
        generation = self._begin()
        self._transition(Bootstrapping(), generation)
        try:
            image = await self._ingestor.load_bundled_sample()
            report = self._sample_report
            if report is None:
                report = await asyncio.to_thread(load_sample_report)
        except IngestionError as exc:
            Log.error(f"Bootstrap failed: {exc}")
            self._fail(None, exc, generation)
            return
        if not self._is_current(generation, "bootstrap"):
            return
        self._transition(Ready(image=image, blocks=self._parser.parse(report)), generation)

    async def request_upload(self, file: BaseImageFile, prompt: str | None = None) -> None:
        """Ingest and analyze a user-selected image, superseding any work in flight."""
        generation = self._begin()
        prior_image = self._current_image()
        try:
            image = await self._ingestor.ingest(file)
        except IngestionError as exc:
            Log.warning(f"Upload rejected: {exc}", generation=generation)
            self._fail(prior_image, exc, generation)
            return
        if not self._is_current(generation, "ingest"):
            return
        await self._analyze(image, prompt, generation)

    async def request_reanalysis(self, prompt: str | None = None) -> None:
        """Analyze the image already on screen again, e.g. after a failure."""
        if not isinstance(self._state, (Ready, Failed)) or self._state.image is None:
            Log.warning("Nothing to re-analyze", state=self._state.name)
            return
        image = self._state.image
        generation = self._begin()
        await self._analyze(image, prompt, generation)

    async def _analyze(
        self, image: EncodedImage, prompt: str | None, generation: int
    ) -> None:
        self._transition(Analyzing(image=image), generation)
        try:
            report = await self._analysis_client.analyze(image, prompt)
        except AnalysisError as exc:
            Log.error(f"Analysis failed: {exc}", generation=generation)
            self._fail(image, exc, generation)
            return
        if not self._is_current(generation, "analysis"):
            return
        self._transition(Ready(image=image, blocks=self._parser.parse(report)), generation)

    def _begin(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int, operation: str) -> bool:
        if generation == self._generation:
            return True
        Log.info(
            f"Discarding stale {operation} result",
            generation=generation,
            current=self._generation,
        )
        return False

    def _current_image(self) -> EncodedImage | None:
        if isinstance(self._state, (Ready, Analyzing, Failed)):
            return self._state.image
        return None

    def _fail(
        self,
        image: EncodedImage | None,
        error: IngestionError | AnalysisError,
        generation: int,
    ) -> None:
        if not self._is_current(generation, "failure"):
            return
        self._transition(Failed(image=image, message=user_message(error)), generation)

    def _transition(self, state: SessionState, generation: int) -> None:
        self._state = state
        Log.info(f"State -> {state.name}", generation=generation)
        for listener in list(self._listeners):
            listener(state)
