"""
Clarification advisor.

Runs only when the decision engine asks for clarification. It scores the
input again with its own, simpler confidence formula and turns that into
a message telling the user how to phrase an image or text request.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from ..schemas import ClarificationRequest, ToolResult, ToolType
from .lexicon import (
    CLARIFICATION_TEXTUAL_PATTERNS,
    CLARIFICATION_VISUAL_PATTERNS,
    TEXTUAL_KEYWORDS,
    VISUAL_KEYWORDS,
    count_matches,
    matched_keywords,
)

logger = logging.getLogger(__name__)

MODEL_NAME = "enhanced-clarification-engine"
EXECUTION_TIME_MS = 75
MAX_SUGGESTIONS = 4

OPENER = (
    "I'd love to help you create something amazing! However, I need a bit "
    "more clarity to provide exactly what you're looking for."
)
PRO_TIP = (
    "**🚀 Pro Tip**: The more specific you are, the better I can help you "
    "create exactly what you envision!"
)

VISUAL_SUGGESTIONS = (
    'Try: "Create a detailed image of [subject] in [setting] with [style]"',
    'Example: "A majestic lion in a savanna at sunset, photorealistic style"',
    'Or: "Design a colorful cartoon character wearing [clothing] in [environment]"',
)
TEXTUAL_SUGGESTIONS = (
    'Try: "Write a [type] about [topic] for [audience]"',
    'Example: "Help me write an engaging email subject line for a product launch"',
    'Or: "Create a compelling description for [your specific need]"',
)
EITHER_SUGGESTIONS = (
    '🎨 **For Image Creation**: "Create/Draw/Generate [detailed visual description]"',
    '✍️ **For Text Help**: "Write/Help me with/Compose [specific text type]"',
    "💡 **Be Specific**: Include details about style, purpose, audience, or visual elements",
)
TOO_BRIEF_SUGGESTIONS = (
    "📝 **Too Brief**: Please provide more details about what you need",
    "🎯 **Be Specific**: What type of content are you looking for?",
)
UNCLEAR_DETAIL_SUGGESTIONS = (
    "🔍 **Clarify Intent**: Your description is detailed but I need to know "
    "if you want an image or text",
    '✨ **Choose One**: Add "create an image of" or "write about" to clarify your intent',
)


@dataclass(frozen=True)
class ClarificationAnalysis:
    confidence: float
    likely_intent: str
    keywords: List[str] = field(default_factory=list)

    @property
    def leans_visual(self) -> bool:
        return "visual" in self.likely_intent

    @property
    def leans_textual(self) -> bool:
        return "textual" in self.likely_intent


class ClarificationAdvisor:
    """
    Builds clarification replies.

    Implements the ClarificationProvider capability; never raises on
    string input.
    """

    async def clarify(self, request: ClarificationRequest) -> ToolResult:
        analysis = self.analyze(request.user_input)
        suggestions = self.suggest(request.user_input, analysis)
        message = self.build_message(suggestions, analysis)
        logger.debug(
            f"Clarification: intent={analysis.likely_intent} "
            f"confidence={analysis.confidence:.2f} suggestions={len(suggestions)}"
        )
        return ToolResult(
            type=ToolType.CLARIFICATION,
            content=message,
            reasoning=(
                f"Input analysis: {self._confidence_bucket(analysis.confidence)} "
                f"({analysis.confidence * 100:.1f}% confidence)"
            ),
            model_used=MODEL_NAME,
            execution_time=EXECUTION_TIME_MS,
        )

    def analyze(self, user_input: str) -> ClarificationAnalysis:
        """
        Estimate the likely intent of the input.

        :param user_input: Raw user utterance
        :return: ClarificationAnalysis with confidence capped at 0.8
        """
        text = user_input.lower()
        length = len(text)

        visual_keywords = matched_keywords(text, VISUAL_KEYWORDS)
        textual_keywords = matched_keywords(text, TEXTUAL_KEYWORDS)
        ic, tc = len(visual_keywords), len(textual_keywords)
        vp = count_matches(text, CLARIFICATION_VISUAL_PATTERNS)
        tp = count_matches(text, CLARIFICATION_TEXTUAL_PATTERNS)

        if ic > tc or vp > tp:
            confidence = min(0.8, ic * 0.2 + vp * 0.3 + (0.2 if length > 20 else 0))
            return ClarificationAnalysis(confidence, "visual", visual_keywords)

        if tc > ic or tp > vp:
            confidence = min(0.8, tc * 0.2 + tp * 0.3 + (0.2 if length < 50 else 0))
            return ClarificationAnalysis(confidence, "textual", textual_keywords)

        confidence = max(0.1, min(0.4, length / 100))
        likely_intent = "possibly visual" if length > 30 else "possibly textual"
        return ClarificationAnalysis(
            confidence, likely_intent, visual_keywords + textual_keywords
        )

    def suggest(self, user_input: str, analysis: ClarificationAnalysis) -> List[str]:
        """Pick at most four suggestions, most relevant first."""
        length = len(user_input.lower())
        suggestions: List[str] = []

        if analysis.leans_visual:
            suggestions.extend(VISUAL_SUGGESTIONS)
        elif analysis.leans_textual:
            suggestions.extend(TEXTUAL_SUGGESTIONS)
        else:
            suggestions.extend(EITHER_SUGGESTIONS)

        if length < 5:
            suggestions.extend(TOO_BRIEF_SUGGESTIONS)
        elif length > 100 and analysis.confidence < 0.6:
            suggestions.extend(UNCLEAR_DETAIL_SUGGESTIONS)

        if analysis.keywords:
            hint = ", ".join(analysis.keywords[:3])
            implied = (
                "this suggests image creation"
                if analysis.leans_visual
                else "this suggests text generation"
            )
            suggestions.append(f"🔑 **Detected Keywords**: {hint} - {implied}")

        return suggestions[:MAX_SUGGESTIONS]

    def build_message(
        self, suggestions: List[str], analysis: ClarificationAnalysis
    ) -> str:
        if analysis.confidence > 0.5:
            if analysis.leans_visual:
                wants = "likely want visual content"
            elif analysis.leans_textual:
                wants = "likely want text content"
            else:
                wants = "might want either visual or text content"
            intent_line = (
                f"🤔 **My Analysis**: Based on your input, you {wants} "
                f"({analysis.confidence * 100:.0f}% confidence)."
            )
        else:
            intent_line = (
                "🤔 **Unclear Intent**: I'm not sure whether you want me to "
                "create an image or generate text content "
                f"({analysis.confidence * 100:.0f}% confidence)."
            )

        if not suggestions:
            return (
                f"{OPENER}\n\n{intent_line}\n\n"
                "Could you please be more specific about:\n"
                "• What type of content you need (image or text)\n"
                "• The subject matter or topic\n"
                "• The style or format you prefer"
            )

        suggestion_list = "\n\n".join(suggestions)
        return (
            f"{OPENER}\n\n{intent_line}\n\n"
            f"**💡 Here's how to get better results:**\n\n{suggestion_list}"
            f"\n\n---\n\n{PRO_TIP}"
        )

    @staticmethod
    def _confidence_bucket(confidence: float) -> str:
        if confidence < 0.3:
            return "very ambiguous"
        if confidence < 0.6:
            return "somewhat unclear"
        return "moderately clear"
