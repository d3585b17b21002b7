class GenerationError(Exception):
    """Base exception for all generation-related errors."""


class ModelClientError(GenerationError):
    """Raised when the model provider returns an unusable response."""


class ModelNetworkError(ModelClientError):
    """Raised when the provider call fails due to network/infrastructure issues."""


class PromptLoadError(GenerationError):
    """Raised when a bundled prompt template cannot be read."""


class AutoSelectFailedError(GenerationError):
    """Raised inside the auto-selector when the model's answer is unusable."""


class _ModelCallFailedError(GenerationError):
    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause


class GenerationFailedError(_ModelCallFailedError):
    """Raised when the initial generation call fails."""


class RefinementFailedError(_ModelCallFailedError):
    """Raised when a refinement call fails; the caller keeps its last artifact."""
