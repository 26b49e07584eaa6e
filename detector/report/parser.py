"""Turns the free-form text returned by the inference service into blocks."""

from collections.abc import Sequence

from detector.logging.logger import Log
from detector.report.models import Paragraph, ReportBlock
from detector.report.rules import DEFAULT_RULES, LineRule


class ReportParser:
    """Classifies a report line by line, keeping the input order.

    Each line yields exactly one block: the first rule that matches wins and
    lines no rule claims become Paragraph blocks, so parsing never fails.
    """

    def __init__(self, rules: Sequence[LineRule] | None = None) -> None:
        self._rules = tuple(rules) if rules is not None else DEFAULT_RULES

    def parse(self, text: str) -> tuple[ReportBlock, ...]:
        blocks = tuple(self._classify(line.rstrip("\r")) for line in text.split("\n"))
        Log.debug("Parsed report", lines=len(blocks))
        return blocks

    def _classify(self, line: str) -> ReportBlock:
        for rule in self._rules:
            block = rule.match(line)
            if block is not None:
                return block
        return Paragraph(text=line)


def parse_report(text: str) -> tuple[ReportBlock, ...]:
    """Parse ``text`` with the default rule set."""
    return ReportParser().parse(text)
