"""
Independent signal scorers feeding the decision engine.

Each scorer returns one factor in [0, 1]: values above 0.5 lean towards
image generation, values below lean towards text generation.
"""
from typing import Sequence

from ..schemas import ChatMessage, ToolType
from .lexicon import (
    SPATIAL_PREPOSITIONS,
    TEXTUAL_KEYWORDS,
    TEXTUAL_PATTERNS,
    VISUAL_DESCRIPTORS,
    VISUAL_KEYWORDS,
    VISUAL_PATTERNS,
    count_matches,
    matched_keywords,
)

NEUTRAL = 0.5


def balance_score(visual_hits: int, textual_hits: int) -> float:
    """
    Turn visual/textual hit counts into a factor.

    Neutral when nothing matched, a plain ratio when both sides matched,
    and pushed towards the extremes when only one side matched.
    """
    if visual_hits == 0 and textual_hits == 0:
        return NEUTRAL
    if textual_hits == 0:
        return min(0.95, 0.8 + visual_hits * 0.1)
    if visual_hits == 0:
        return max(0.05, 0.2 - textual_hits * 0.1)
    return visual_hits / (visual_hits + textual_hits)


class KeywordMatcher:
    """Scores lexicon keyword containment."""

    def score(self, text: str) -> float:
        visual = len(matched_keywords(text, VISUAL_KEYWORDS))
        textual = len(matched_keywords(text, TEXTUAL_KEYWORDS))
        return balance_score(visual, textual)


class PatternMatcher:
    """Scores structural pattern matches."""

    def score(self, text: str) -> float:
        visual = count_matches(text, VISUAL_PATTERNS)
        textual = count_matches(text, TEXTUAL_PATTERNS)
        return balance_score(visual, textual)


class SemanticAnalyzer:
    """
    Scores how descriptive the input reads.

    Visual descriptions carry more adjectives and spatial prepositions
    than requests for text.
    """

    def score(self, text: str) -> float:
        descriptor_count = len(matched_keywords(text, VISUAL_DESCRIPTORS))
        word_count = len(text.split()) or 1
        adjective_ratio = descriptor_count / word_count
        spatial_count = sum(
            1 for prep in SPATIAL_PREPOSITIONS if f" {prep} " in text
        )
        return min(
            1.0,
            adjective_ratio * 2 + spatial_count * 0.1 + descriptor_count * 0.05,
        )


class ContextScorer:
    """Scores which tool handled the most recent turns."""

    WINDOW = 3

    def score(self, messages: Sequence[ChatMessage]) -> float:
        if not messages:
            return NEUTRAL

        image_context = 0
        text_context = 0
        for message in list(messages)[-self.WINDOW:]:
            if message.action_log is None:
                continue
            if message.action_log.tool_used == ToolType.IMAGE_GENERATION:
                image_context += 1
            elif message.action_log.tool_used == ToolType.TEXT_GENERATION:
                text_context += 1

        # +1 pulls towards text when recent turns carry no signal
        return image_context / (image_context + text_context + 1)


class LengthScorer:
    """Longer inputs tend to be image descriptions."""

    STEPS = ((10, 0.2), (30, 0.4), (60, 0.6), (100, 0.8))
    LONG = 0.9

    def score(self, text: str) -> float:
        length = len(text)
        for limit, value in self.STEPS:
            if length < limit:
                return value
        return self.LONG
