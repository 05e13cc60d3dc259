"""Required-section matching."""

from .matcher import (
    normalize,
    match_required_section,
    is_section_addressed,
    count_words,
    word_limit_status,
    section_completion,
    proposal_progress,
)

__all__ = [
    "normalize",
    "match_required_section",
    "is_section_addressed",
    "count_words",
    "word_limit_status",
    "section_completion",
    "proposal_progress",
]
