from dataclasses import dataclass, field


@dataclass(frozen=True)
class SectionHeading:
    """A ``##`` or ``###`` heading line."""

    level: int
    text: str
    kind: str = field(default="section_heading", init=False)


@dataclass(frozen=True)
class VerdictStatement:
    """The line carrying the model's overall verdict."""

    prefix: str
    verdict_label: str
    is_positive_class: bool
    remainder: str = ""
    kind: str = field(default="verdict", init=False)


@dataclass(frozen=True)
class EnumeratedItem:
    """A numbered finding with an emphasized title."""

    index: int
    title: str
    body: str
    kind: str = field(default="enumerated_item", init=False)


@dataclass(frozen=True)
class BulletItem:
    text: str
    kind: str = field(default="bullet_item", init=False)


@dataclass(frozen=True)
class Spacer:
    kind: str = field(default="spacer", init=False)


@dataclass(frozen=True)
class Paragraph:
    text: str
    kind: str = field(default="paragraph", init=False)


ReportBlock = (
    SectionHeading | VerdictStatement | EnumeratedItem | BulletItem | Spacer | Paragraph
)
