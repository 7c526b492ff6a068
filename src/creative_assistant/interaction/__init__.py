"""
Interaction layer for intent scoring and tool selection.

Deterministic classification without LLM calls: the decision engine
chooses a tool, the clarification advisor explains how to rephrase.
"""
from .decision_engine import DecisionEngine, DecisionFactors, ScoreBreakdown
from .clarification_advisor import ClarificationAdvisor, ClarificationAnalysis

__all__ = [
    "DecisionEngine",
    "DecisionFactors",
    "ScoreBreakdown",
    "ClarificationAdvisor",
    "ClarificationAnalysis",
]
