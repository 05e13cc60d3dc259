"""Heuristic threshold configuration.

The matching and scoring heuristics use a handful of fixed constants
(addressed-section length, keyword length, urgency window, ...). They are
collected here so they can be tuned per deployment without code changes.
"""

import json
import yaml
from pathlib import Path
from typing import Callable, Optional
from pydantic import BaseModel, field_validator


class AnalyticsThresholds(BaseModel):
    """Tunable constants for the aggregation heuristics."""

    section_addressed_min_chars: int = 100
    keyword_min_length: int = 4
    urgent_deadline_days: int = 14
    word_limit_warning_ratio: float = 0.9
    compliance_good_score: int = 80
    compliance_fair_score: int = 50
    version: str = "1.0"

    @field_validator('section_addressed_min_chars', 'keyword_min_length', 'urgent_deadline_days')
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Threshold must be non-negative, got {v}")
        return v

    @field_validator('word_limit_warning_ratio')
    @classmethod
    def ratio_range(cls, v: float) -> float:
        """Warning ratio is a fraction of the word limit."""
        if not 0 < v <= 1:
            raise ValueError(f"Warning ratio must be in (0, 1], got {v}")
        return v

    @field_validator('compliance_good_score', 'compliance_fair_score')
    @classmethod
    def score_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"Score threshold must be between 0 and 100, got {v}")
        return v

    def model_post_init(self, __context) -> None:
        """Validate that the compliance bands are ordered."""
        if self.compliance_fair_score > self.compliance_good_score:
            raise ValueError(
                f"compliance_fair_score ({self.compliance_fair_score}) must not exceed "
                f"compliance_good_score ({self.compliance_good_score})"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump()


DEFAULT_THRESHOLDS = AnalyticsThresholds()


def _json_dump(data: dict, stream) -> None:
    json.dump(data, stream, indent=2)


def _yaml_dump(data: dict, stream) -> None:
    yaml.dump(data, stream, default_flow_style=False)


# suffix -> (reader, writer)
_FORMATS: dict[str, tuple[Callable, Callable]] = {
    ".json": (json.load, _json_dump),
    ".yaml": (yaml.safe_load, _yaml_dump),
    ".yml": (yaml.safe_load, _yaml_dump),
}


def _format_for(path: Path) -> tuple[Callable, Callable]:
    try:
        return _FORMATS[path.suffix.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported thresholds format: {path.suffix or '(none)'}. "
            f"Use one of {', '.join(sorted(_FORMATS))}"
        ) from None


def load_thresholds(filepath: Optional[str] = None) -> AnalyticsThresholds:
    """Resolve thresholds for a deployment.

    No path means the built-in defaults. A JSON or YAML file only needs the
    keys it overrides; an empty file yields the defaults.

    Raises:
        FileNotFoundError: the named file does not exist
        ValueError: unsupported suffix or an out-of-range value
    """
    if not filepath:
        return DEFAULT_THRESHOLDS

    path = Path(filepath)
    reader, _ = _format_for(path)
    if not path.exists():
        raise FileNotFoundError(f"Thresholds file not found: {filepath}")

    with path.open("r") as stream:
        overrides = reader(stream) or {}
    return AnalyticsThresholds(**overrides)


def save_thresholds(thresholds: AnalyticsThresholds, filepath: str) -> None:
    """Write thresholds in the format named by the file suffix."""
    path = Path(filepath)
    _, writer = _format_for(path)
    with path.open("w") as stream:
        writer(thresholds.to_dict(), stream)
