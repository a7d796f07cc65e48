"""Heuristic removal of non-narrative text runs.

A run is dropped when any rule matches:
    - it sits in the header zone (top of the page)
    - it sits in the footer zone (bottom of the page)
    - its text is a page number ("12", "Page 3", "Page 3 of 10")
    - its text is boilerplate (copyright line, chapter heading, figure caption)
    - it is set smaller than body text (footnotes)

Pattern rules are kept in ordered tuples so each one can be added, removed
or tested on its own.
"""

import logging
import re
from dataclasses import dataclass

from story_ingest.models.schemas import LayoutThresholds, TextRun

logger = logging.getLogger(__name__)

HEADER_ZONE = "header"
FOOTER_ZONE = "footer"
FOOTNOTE = "footnote"


@dataclass(frozen=True)
class PatternRule:
    """A tagged regular expression matched against trimmed run text."""

    tag: str
    pattern: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


PAGE_NUMBER_RULES: tuple[PatternRule, ...] = (
    PatternRule("page_number", re.compile(r"^\d+$")),
    PatternRule("page_label", re.compile(r"^page\s+\d+(?:\s+of\s+\d+)?$", re.IGNORECASE)),
)

BOILERPLATE_RULES: tuple[PatternRule, ...] = (
    PatternRule("copyright", re.compile(r"^(?:©|\(c\)\s|copyright\b)", re.IGNORECASE)),
    PatternRule("rights_reserved", re.compile(r"\ball rights reserved\.?$", re.IGNORECASE)),
    PatternRule("chapter_heading", re.compile(r"^(?i:chapter)\s+(?:\d+|[IVXLCDM]+)\.?$")),
    PatternRule("figure_caption", re.compile(r"^(?:figure|fig\.)\s*\d+(?:\.\d+)*\b", re.IGNORECASE)),
)


def in_header_zone(y: float, page_height: float, thresholds: LayoutThresholds) -> bool:
    return y > thresholds.header_zone_ratio * page_height


def in_footer_zone(y: float, page_height: float, thresholds: LayoutThresholds) -> bool:
    return y < thresholds.footer_zone_ratio * page_height


def is_footnote(run: TextRun, thresholds: LayoutThresholds) -> bool:
    """Small text is treated as footnotes; zero height means unknown."""
    return 0 < run.height < thresholds.footnote_height


def exclusion_reason(
    run: TextRun,
    page_height: float,
    thresholds: LayoutThresholds,
) -> str | None:
    """Return the tag of the first rule that drops the run, or None to keep it.

    Args:
        run: The text run to classify.
        page_height: Height of the run's page.
        thresholds: Layout heuristics.

    Returns:
        Rule tag such as "header", "page_number" or "footnote", or None.
    """
    if in_header_zone(run.y, page_height, thresholds):
        return HEADER_ZONE
    if in_footer_zone(run.y, page_height, thresholds):
        return FOOTER_ZONE

    text = run.text.strip()
    for rule in (*PAGE_NUMBER_RULES, *BOILERPLATE_RULES):
        if rule.matches(text):
            return rule.tag

    if is_footnote(run, thresholds):
        return FOOTNOTE
    return None


def filter_runs(
    runs: list[TextRun],
    page_height: float,
    thresholds: LayoutThresholds,
) -> list[TextRun]:
    """Drop non-narrative runs, keeping the survivors in their original order.

    Args:
        runs: Runs of one page in engine order.
        page_height: Height of that page.
        thresholds: Layout heuristics.

    Returns:
        The runs no rule excluded.
    """
    kept: list[TextRun] = []
    dropped: dict[str, int] = {}
    for run in runs:
        reason = exclusion_reason(run, page_height, thresholds)
        if reason is None:
            kept.append(run)
        else:
            dropped[reason] = dropped.get(reason, 0) + 1

    if dropped:
        logger.debug(f"Dropped {sum(dropped.values())} of {len(runs)} runs: {dropped}")
    return kept
