"""
Static keyword and pattern tables for intent scoring.

Loaded once at import time and never mutated. Keyword matching is plain
substring containment on lowercased input, so short terms also match
inside longer words ("oil" also matches "toil"). A few terms are listed
twice on purpose and count twice when matched.
"""
import re
from typing import Callable, List, Tuple

Predicate = Callable[[str], bool]

# \w and \b stay ASCII-only so accented words do not count as word runs.
_PATTERN_FLAGS = re.IGNORECASE | re.ASCII


def _compile(*patterns: str) -> Tuple[Predicate, ...]:
    """Compile case-insensitive patterns into boolean match predicates."""
    return tuple(
        (lambda text, rx=re.compile(p, _PATTERN_FLAGS): rx.search(text) is not None)
        for p in patterns
    )


VISUAL_KEYWORDS: Tuple[str, ...] = (
    # Core visual terms
    "image", "picture", "photo", "visual", "graphic", "illustration",
    "artwork", "drawing", "sketch", "painting", "render", "design",
    "create", "generate", "make", "produce", "craft", "build", "construct",
    "develop",
    # Creation verbs
    "draw", "paint", "sketch", "illustrate", "design", "render", "visualize",
    "depict", "portray", "show", "display", "present", "exhibit",
    "demonstrate", "compose", "arrange", "layout", "style", "fashion",
    "form", "shape",
    # Visual elements
    "color", "colors", "colorful", "bright", "vibrant", "vivid", "neon",
    "dark", "light", "shadow", "highlight", "contrast", "saturation",
    "texture", "pattern", "gradient", "shade", "tone", "hue",
    # Styles and genres
    "realistic", "abstract", "cartoon", "anime", "manga", "comic", "pixel",
    "watercolor", "oil", "acrylic", "digital", "3d", "photorealistic",
    "surreal", "fantasy", "sci-fi", "vintage", "modern", "minimalist",
    "detailed", "stylized", "artistic", "creative", "beautiful", "stunning",
    # Composition
    "portrait", "landscape", "closeup", "wide", "panoramic", "aerial",
    "perspective", "angle", "view", "scene", "composition", "frame",
    "background", "foreground", "centered", "symmetrical", "asymmetrical",
    # Technical
    "resolution", "quality", "sharp", "crisp", "detailed", "smooth",
    "professional", "studio", "lighting", "exposure", "focus", "depth",
    # Subjects
    "character", "person", "face", "animal", "creature", "object", "item",
    "building", "architecture", "nature", "outdoor", "indoor",
    "environment", "logo", "icon", "symbol", "emblem", "badge", "banner",
    "poster",
    # Aesthetic descriptors
    "beautiful", "gorgeous", "stunning", "amazing", "incredible", "awesome",
    "elegant", "sophisticated", "dramatic", "epic", "magical", "mystical",
    "peaceful", "serene", "energetic", "dynamic", "powerful", "bold",
)

TEXTUAL_KEYWORDS: Tuple[str, ...] = (
    # Core writing terms
    "write", "text", "content", "copy", "description", "caption", "title",
    "heading", "headline", "subtitle", "paragraph", "sentence", "phrase",
    "word", "letter", "message", "note", "document", "article", "blog",
    # Content types
    "story", "essay", "script", "dialogue", "narrative", "novel", "poem",
    "email", "letter", "memo", "report", "summary", "review", "analysis",
    "proposal", "presentation", "speech", "announcement", "press", "news",
    # Writing actions
    "compose", "draft", "edit", "revise", "rewrite", "proofread", "format",
    "structure", "organize", "outline", "brainstorm", "develop", "expand",
    # Help and assistance
    "help", "assist", "support", "guide", "advise", "suggest", "recommend",
    "explain", "how", "what", "why", "when", "where", "who", "which",
    "clarify", "describe", "define", "elaborate", "detail", "improve",
    "enhance", "optimize", "refine", "polish", "perfect",
    # Communication purposes
    "communicate", "convey", "express", "share", "inform", "notify",
    "announce", "advertise", "promote", "market", "sell", "persuade",
    "convince", "argue", "debate", "discuss", "explain", "teach",
    # Content qualities
    "engaging", "compelling", "persuasive", "informative", "educational",
    "entertaining", "professional", "formal", "casual", "friendly",
    "creative", "original", "unique", "catchy", "memorable", "impactful",
)

VISUAL_PATTERNS: Tuple[Predicate, ...] = _compile(
    # Descriptive scenes
    r"\b(a|an|the)\s+\w+\s+(in|on|at|under|over|beside|near|with|holding|wearing)\s+\w+",
    r"\b(beautiful|stunning|amazing|gorgeous|elegant|dramatic|epic)\s+\w+",
    r"\b(red|blue|green|yellow|orange|purple|pink|black|white|bright|dark|colorful)\s+\w+",
    r"\b(tall|short|big|small|huge|tiny|massive|giant|miniature)\s+\w+",
    r"\b(old|new|ancient|modern|vintage|futuristic|classic)\s+\w+",
    # Style and artistic
    r"\b(realistic|abstract|cartoon|anime|digital|watercolor|oil\s+painting)\b",
    r"\b(portrait|landscape|closeup|wide\s+shot|aerial\s+view)\b",
    r"\b(lighting|shadows|highlights|contrast|composition)\b",
    # Creation commands
    r"\b(create|make|generate|produce|design|build|craft)\s+(a|an|some)\s+\w+",
    r"\b(draw|paint|sketch|illustrate|render|visualize)\s+\w+",
    r"\b(show\s+me|I\s+want\s+to\s+see|display)\s+\w+",
    # Scene descriptions
    r"\w+\s+(standing|sitting|running|flying|walking|lying)\s+(in|on|at)\s+\w+",
    r"\w+\s+with\s+\w+\s+(background|setting|environment)",
    # Atmosphere
    r"\b(peaceful|serene|chaotic|dramatic|mysterious|magical|dreamy)\s+\w+",
    r"\b(sunset|sunrise|storm|rain|snow|fog|mist)\b",
)

TEXTUAL_PATTERNS: Tuple[Predicate, ...] = _compile(
    # Writing requests
    r"\b(write|compose|create|draft|generate)\s+(a|an|some)\s+(title|headline|description|story|article|email|letter)",
    r"\b(help\s+me\s+write|assist\s+with\s+writing|need\s+help\s+writing)",
    r"\bwrite\s+about\s+\w+",
    # Content improvement
    r"\b(improve|enhance|optimize|rewrite|edit|revise|polish)\s+\w+",
    r"\b(make\s+it\s+better|sound\s+more|more\s+professional)",
    # Explanations
    r"\b(explain|describe|tell\s+me\s+about|what\s+is|how\s+to|why\s+does)",
    r"\b(define|clarify|elaborate|detail)\s+\w+",
    # Communication
    r"\b(send|email|message|communicate|inform|notify)\s+\w+",
    r"\bI\s+need\s+to\s+(say|tell|write|communicate)",
    # Content types
    r"\b(blog\s+post|article|essay|report|summary|review|analysis)",
    r"\b(social\s+media|marketing|advertising|promotional)\s+\w+",
)

VISUAL_DESCRIPTORS: Tuple[str, ...] = (
    "beautiful", "colorful", "bright", "dark", "tall", "short", "big",
    "small", "round", "square", "smooth", "rough", "shiny", "matte",
    "transparent", "opaque", "detailed", "simple", "complex", "elegant",
    "dramatic",
)

SPATIAL_PREPOSITIONS: Tuple[str, ...] = (
    "in", "on", "at", "under", "over", "beside", "near", "behind", "front",
)

# Smaller pair used only by the clarification advisor
CLARIFICATION_VISUAL_PATTERNS: Tuple[Predicate, ...] = _compile(
    r"\b(a|an|the)\s+\w+\s+(in|on|at|with|holding|wearing)\s+\w+",
    r"\b(red|blue|green|yellow|bright|dark|colorful)\s+\w+",
    r"\b(beautiful|amazing|stunning|creative|detailed)\s+\w+",
    r"\b(tall|short|big|small|huge|tiny)\s+\w+",
)

CLARIFICATION_TEXTUAL_PATTERNS: Tuple[Predicate, ...] = _compile(
    r"\b(write|help|explain|describe|tell)\s+(me\s+)?(about|how|what|why)",
    r"\b(need\s+help|assistance|support)\s+with",
    r"\b(create|write|compose)\s+(a|an|some)\s+(title|story|article|email)",
)


def matched_keywords(text: str, keywords: Tuple[str, ...]) -> List[str]:
    """Return the keywords contained in text, in table order."""
    return [keyword for keyword in keywords if keyword in text]


def count_matches(text: str, predicates: Tuple[Predicate, ...]) -> int:
    """Count how many predicates match text."""
    return sum(1 for matches in predicates if matches(text))
