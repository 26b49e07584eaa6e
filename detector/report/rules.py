"""Line classification rules, evaluated in order by ReportParser."""

import re
from abc import ABC, abstractmethod

from detector.report.models import (
    BulletItem,
    EnumeratedItem,
    Paragraph,
    ReportBlock,
    SectionHeading,
    Spacer,
    VerdictStatement,
)

VERDICT_MARKER = "**Verdict:"
EMPHASIS_MARKER = "**"
BULLET_MARKER = "- "

# "1. **Title:** body" and "1. **Title**: body"
_ENUMERATED_RE = re.compile(r"^(\d+)\.\s\*\*([^*]+?):?\*\*:?\s*(.*)$")


class LineRule(ABC):
    @abstractmethod
    def match(self, line: str) -> ReportBlock | None:
        """Return the block for ``line`` or None to defer to the next rule."""


class HeadingRule(LineRule):
    def __init__(self, level: int) -> None:
        self._level = level
        self._prefix = "#" * level + " "

    def match(self, line: str) -> ReportBlock | None:
        if not line.startswith(self._prefix):
            return None
        return SectionHeading(level=self._level, text=line[len(self._prefix):])


class VerdictRule(LineRule):
    """Splits ``<prefix>**Verdict: <label>**<remainder>``.

    The label counts as the positive ("real") class when it contains the
    substring "real", case-insensitively. "Not real" and "surreal" therefore
    also count as positive.
    """

    def match(self, line: str) -> ReportBlock | None:
        if VERDICT_MARKER not in line:
            return None
        prefix, _, rest = line.partition(VERDICT_MARKER)
        label, _, remainder = rest.partition(EMPHASIS_MARKER)
        label = label.strip()
        return VerdictStatement(
            prefix=prefix,
            verdict_label=label,
            is_positive_class="real" in label.lower(),
            remainder=remainder,
        )


class EnumeratedItemRule(LineRule):
    def match(self, line: str) -> ReportBlock | None:
        found = _ENUMERATED_RE.match(line)
        if found is None:
            return None
        index, title, body = found.groups()
        return EnumeratedItem(index=int(index), title=title.strip(), body=body.strip())


class BulletRule(LineRule):
    def match(self, line: str) -> ReportBlock | None:
        stripped = line.lstrip()
        if not stripped.startswith(BULLET_MARKER):
            return None
        return BulletItem(text=stripped[len(BULLET_MARKER):])


class SpacerRule(LineRule):
    def match(self, line: str) -> ReportBlock | None:
        return Spacer() if not line.strip() else None


class ParagraphRule(LineRule):
    """Total fallback: every line is at least a paragraph."""

    def match(self, line: str) -> ReportBlock | None:
        return Paragraph(text=line)


DEFAULT_RULES: tuple[LineRule, ...] = (
    HeadingRule(level=2),
    HeadingRule(level=3),
    VerdictRule(),
    EnumeratedItemRule(),
    BulletRule(),
    SpacerRule(),
    ParagraphRule(),
)
