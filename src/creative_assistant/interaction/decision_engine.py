"""
Deterministic decision engine for tool selection.

Combines five signal factors into an image affinity and a text affinity,
then picks image generation, text generation or clarification. No LLM,
no state: the same input and context always give the same decision.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ..schemas import ConversationContext, ToolDecision, ToolType
from .signals import (
    ContextScorer,
    KeywordMatcher,
    LengthScorer,
    PatternMatcher,
    SemanticAnalyzer,
)

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 0.75
STRONG_THRESHOLD = 0.65
AMBIGUOUS_CUTOFF = 0.6
SCORE_CAP = 0.98
MIN_INPUT_LENGTH = 2


@dataclass(frozen=True)
class DecisionWeights:
    keyword: float = 0.40
    pattern: float = 0.30
    semantic: float = 0.15
    context: float = 0.10
    length: float = 0.05


WEIGHTS = DecisionWeights()


@dataclass(frozen=True)
class DecisionFactors:
    """Per-call factor record, each value in [0, 1]."""
    keyword_score: float
    pattern_score: float
    semantic_score: float
    context_score: float
    length_score: float


@dataclass(frozen=True)
class ScoreBreakdown:
    factors: DecisionFactors
    image_score: float
    text_score: float


class DecisionEngine:
    """
    Decides which collaborator should handle a user turn.

    Usage:
        engine = DecisionEngine()
        decision = engine.decide("Draw a red fox", context)
    """

    def __init__(self):
        self._keywords = KeywordMatcher()
        self._patterns = PatternMatcher()
        self._semantic = SemanticAnalyzer()
        self._context = ContextScorer()
        self._length = LengthScorer()

    def decide(
        self, user_input: str, context: Optional[ConversationContext] = None
    ) -> ToolDecision:
        """
        Decide which tool should handle the input.

        :param user_input: Raw user utterance
        :param context: Conversation window (may be None or empty)
        :return: ToolDecision with a reasoning string citing the scores used
        """
        text = user_input.lower().strip()

        if len(text) < MIN_INPUT_LENGTH:
            decision = ToolDecision(
                tool=ToolType.CLARIFICATION,
                confidence=0.95,
                reasoning="Input too short to determine intent",
            )
            logger.debug("Decision: clarification (input too short)")
            return decision

        breakdown = self._score_normalized(text, context)
        decision = self.apply_thresholds(breakdown.image_score, breakdown.text_score)
        logger.debug(
            f"Decision: {decision.tool.value} confidence={decision.confidence:.2f} "
            f"image={breakdown.image_score:.2f} text={breakdown.text_score:.2f}"
        )
        return decision

    def score(
        self, user_input: str, context: Optional[ConversationContext] = None
    ) -> ScoreBreakdown:
        """Compute factors and both affinity scores without deciding."""
        return self._score_normalized(user_input.lower().strip(), context)

    def _score_normalized(
        self, text: str, context: Optional[ConversationContext]
    ) -> ScoreBreakdown:
        factors = self.compute_factors(text, context)
        return ScoreBreakdown(
            factors=factors,
            image_score=self.image_score(factors),
            text_score=self.text_score(factors),
        )

    def compute_factors(
        self, text: str, context: Optional[ConversationContext] = None
    ) -> DecisionFactors:
        """Run the five scorers over lowercased, trimmed text."""
        messages = context.messages if context is not None else []
        return DecisionFactors(
            keyword_score=self._keywords.score(text),
            pattern_score=self._patterns.score(text),
            semantic_score=self._semantic.score(text),
            context_score=self._context.score(messages),
            length_score=self._length.score(text),
        )

    @staticmethod
    def image_score(factors: DecisionFactors) -> float:
        return min(
            SCORE_CAP,
            factors.keyword_score * WEIGHTS.keyword
            + factors.pattern_score * WEIGHTS.pattern
            + factors.semantic_score * WEIGHTS.semantic
            + factors.context_score * WEIGHTS.context
            + factors.length_score * WEIGHTS.length,
        )

    @staticmethod
    def text_score(factors: DecisionFactors) -> float:
        # Each factor is inverted before weighting; this is not 1 - image_score
        return min(
            SCORE_CAP,
            (1 - factors.keyword_score) * WEIGHTS.keyword
            + (1 - factors.pattern_score) * WEIGHTS.pattern
            + (1 - factors.semantic_score) * WEIGHTS.semantic
            + (1 - factors.context_score) * WEIGHTS.context
            + (1 - factors.length_score) * WEIGHTS.length,
        )

    @staticmethod
    def apply_thresholds(image_score: float, text_score: float) -> ToolDecision:
        if image_score > text_score:
            if image_score >= CONFIDENCE_THRESHOLD:
                return ToolDecision(
                    tool=ToolType.IMAGE_GENERATION,
                    confidence=min(0.95, image_score),
                    reasoning=f"Strong visual intent detected (score: {image_score:.2f})",
                )
            if image_score >= STRONG_THRESHOLD:
                return ToolDecision(
                    tool=ToolType.IMAGE_GENERATION,
                    confidence=image_score,
                    reasoning=(
                        f"Visual content indicated by multiple signals "
                        f"(score: {image_score:.2f})"
                    ),
                )
        else:
            if text_score >= CONFIDENCE_THRESHOLD:
                return ToolDecision(
                    tool=ToolType.TEXT_GENERATION,
                    confidence=min(0.95, text_score),
                    reasoning=f"Strong text generation intent (score: {text_score:.2f})",
                )
            if text_score >= STRONG_THRESHOLD:
                return ToolDecision(
                    tool=ToolType.TEXT_GENERATION,
                    confidence=text_score,
                    reasoning=(
                        f"Text content indicated by multiple signals "
                        f"(score: {text_score:.2f})"
                    ),
                )

        max_score = max(image_score, text_score)
        if max_score < AMBIGUOUS_CUTOFF:
            return ToolDecision(
                tool=ToolType.CLARIFICATION,
                confidence=0.9,
                reasoning=f"Ambiguous input - max confidence only {max_score:.2f}",
            )

        if image_score > text_score:
            return ToolDecision(
                tool=ToolType.IMAGE_GENERATION,
                confidence=image_score,
                reasoning=(
                    f"Slight preference for visual content "
                    f"({image_score:.2f} vs {text_score:.2f})"
                ),
            )
        return ToolDecision(
            tool=ToolType.TEXT_GENERATION,
            confidence=text_score,
            reasoning=(
                f"Slight preference for text content "
                f"({text_score:.2f} vs {image_score:.2f})"
            ),
        )
