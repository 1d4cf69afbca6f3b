"""Errors surfaced to API callers as ``{"error": message}``."""

MISSING_BRIEF_MESSAGE = "Missing brief or API keys"
GENERATION_FAILED_MESSAGE = "Failed to generate"


class DeckError(Exception):
    status_code: int = 500
    message: str = GENERATION_FAILED_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingBriefError(DeckError):
    """Empty brief or unconfigured upstream credentials."""

    status_code = 400
    message = MISSING_BRIEF_MESSAGE


class DeckGenerationError(DeckError):
    status_code = 500
    message = GENERATION_FAILED_MESSAGE
