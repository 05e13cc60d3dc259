"""Compliance checklist scoring."""

from .scorer import extract_keywords, is_item_addressed, compliance_band, score_compliance

__all__ = ["extract_keywords", "is_item_addressed", "compliance_band", "score_compliance"]
