"""Error taxonomy surfaced to callers of the generation actions."""

from enum import StrEnum


class SmartChefError(Exception):
    """Base error carrying a message safe to show to the user."""

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class ConfigurationError(SmartChefError):
    """The generative service credential is missing or a placeholder."""


class InputValidationError(SmartChefError):
    """User input was rejected before composing a request."""


class GenerationError(SmartChefError):
    """The generative service call failed."""


class DecodeErrorKind(StrEnum):
    """Why a service response could not be decoded."""

    EMPTY_RESPONSE = "empty_response"
    MALFORMED_JSON = "malformed_json"
    EMPTY_RESULT = "empty_result"
    INCOMPLETE_RESPONSE = "incomplete_response"
    NO_IMAGE_RETURNED = "no_image_returned"


class DecodeError(SmartChefError):
    """The service responded but the payload is unusable."""

    def __init__(self, kind: DecodeErrorKind, user_message: str) -> None:
        super().__init__(user_message)
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind}: {self.user_message}"
