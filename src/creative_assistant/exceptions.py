class CreativeAssistantError(Exception):
    """Base exception for creative assistant service."""


class ConfigurationError(CreativeAssistantError):
    """Raised when required configuration is missing or invalid."""


class ServiceNotInitializedError(CreativeAssistantError):
    """Raised when the app is used before initialization."""


class GenerationError(CreativeAssistantError):
    """Raised when a generation backend fails."""


class TextGenerationError(GenerationError):
    """Raised when the text backend fails or returns nothing."""


class ImageGenerationError(GenerationError):
    """Raised when the image backend fails or returns no URL."""
