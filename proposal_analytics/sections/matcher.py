"""Required-section matching for the compliance tracker.

Funder section names and proposal section titles rarely agree exactly
("Executive Summary" vs "Exec Summary Section"), so both are reduced to a
canonical key and compared by substring in either direction.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Sequence

from ..config.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from ..models.proposal import (
    ProposalSection,
    RequiredSection,
    RequiredSectionStatus,
    SectionCompletion,
)

logger = logging.getLogger(__name__)

_NON_ALPHA = re.compile(r"[^a-z]")


def normalize(name: str) -> str:
    """Canonical comparison key: lowercase with everything except a-z removed."""
    return _NON_ALPHA.sub("", (name or "").lower())


def match_required_section(
    required: RequiredSection,
    sections: Sequence[ProposalSection],
) -> Optional[ProposalSection]:
    """Find the proposal section that covers a required section.

    A section matches when either normalized name contains the other. The
    first match in input order wins.
    """
    required_key = normalize(required.name)
    for section in sections:
        title_key = normalize(section.title)
        if title_key in required_key or required_key in title_key:
            return section
    return None


def is_section_addressed(
    section: Optional[ProposalSection],
    min_chars: int = DEFAULT_THRESHOLDS.section_addressed_min_chars,
) -> bool:
    """True when the section has more than `min_chars` characters of content."""
    if section is None or not section.content:
        return False
    return len(section.content) > min_chars


def count_words(text: Optional[str]) -> int:
    return len((text or "").split())


def word_limit_status(
    word_count: int,
    word_limit: Optional[int],
    warning_ratio: float = DEFAULT_THRESHOLDS.word_limit_warning_ratio,
) -> Optional[str]:
    """'over', 'near' or 'ok' against a word limit; None when there is no limit."""
    if not word_limit:
        return None
    if word_count > word_limit:
        return "over"
    if word_count > word_limit * warning_ratio:
        return "near"
    return "ok"


def section_completion(
    required_sections: Iterable[RequiredSection],
    sections: Sequence[ProposalSection],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> SectionCompletion:
    """Match every required section and report which ones are addressed.

    The word limit comes from the funder requirement when given, otherwise
    from the matched section itself.
    """
    statuses: list[RequiredSectionStatus] = []

    for required in required_sections:
        matched = match_required_section(required, sections)
        word_count = matched.word_count if matched else 0
        word_limit = required.word_limit or (matched.word_limit if matched else None)
        statuses.append(
            RequiredSectionStatus(
                name=required.name,
                matched_section_id=matched.id if matched else None,
                addressed=is_section_addressed(matched, thresholds.section_addressed_min_chars),
                word_count=word_count,
                word_limit=word_limit,
                limit_status=word_limit_status(
                    word_count, word_limit, thresholds.word_limit_warning_ratio
                ),
            )
        )

    complete = sum(1 for s in statuses if s.addressed)
    logger.debug("Section completion: %d/%d required sections addressed", complete, len(statuses))

    return SectionCompletion(sections=statuses, complete=complete, total=len(statuses))


def proposal_progress(sections: Sequence[ProposalSection]) -> float:
    """Percentage of sections marked complete (0 for an empty proposal)."""
    if not sections:
        return 0.0
    completed = sum(1 for s in sections if s.is_complete)
    return completed / len(sections) * 100
