from __future__ import annotations

from dataclasses import dataclass

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 200

# auto-generated titles without a sentence or line boundary are cut to this
TITLE_TRUNCATE_LENGTH = 50


@dataclass(frozen=True)
class ValidationRules:
    """Limits shared by the field validator and the title extractor.

    All lengths are counted in codepoints.
    - title_min_length / title_max_length: accepted trimmed title length.
    - truncate_length: cap for titles produced by the length fallback,
      ellipsis included.
    - min_break_fraction: a word-boundary cut may not land before
      truncate_length // min_break_fraction.
    """

    title_min_length: int = TITLE_MIN_LENGTH
    title_max_length: int = TITLE_MAX_LENGTH
    truncate_length: int = TITLE_TRUNCATE_LENGTH
    min_break_fraction: int = 3
    ellipsis: str = "..."
    untitled: str = "Untitled"

    def __post_init__(self) -> None:
        if self.title_min_length < 1:
            raise ValueError("title_min_length must be >= 1")
        if self.title_max_length < self.title_min_length:
            raise ValueError("title_max_length must be >= title_min_length")
        if not len(self.ellipsis) < self.truncate_length <= self.title_max_length:
            raise ValueError("truncate_length must fit the ellipsis and title_max_length")
        if self.min_break_fraction < 1:
            raise ValueError("min_break_fraction must be >= 1")
        if not self.untitled.strip() or len(self.untitled) > self.title_max_length:
            raise ValueError("untitled must be a valid title")

    @property
    def min_break_index(self) -> int:
        return self.truncate_length // self.min_break_fraction


DEFAULT_RULES = ValidationRules()
