from dataclasses import dataclass, field

from detector.ingestion.models import EncodedImage
from detector.report.models import ReportBlock


@dataclass(frozen=True)
class Idle:
    name: str = field(default="idle", init=False)


@dataclass(frozen=True)
class Bootstrapping:
    name: str = field(default="bootstrapping", init=False)


@dataclass(frozen=True)
class Ready:
    """An image and its parsed report, ready to display."""

    image: EncodedImage
    blocks: tuple[ReportBlock, ...]
    name: str = field(default="ready", init=False)


@dataclass(frozen=True)
class Analyzing:
    image: EncodedImage
    name: str = field(default="analyzing", init=False)


@dataclass(frozen=True)
class Failed:
    """An operation failed; ``image`` is whatever the user can still retry with."""

    image: EncodedImage | None
    message: str
    name: str = field(default="failed", init=False)


SessionState = Idle | Bootstrapping | Ready | Analyzing | Failed
