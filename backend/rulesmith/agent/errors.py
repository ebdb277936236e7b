import logging
import traceback

import httpx
from openai import APIConnectionError

logger = logging.getLogger(__name__)

CREDENTIAL_MARKER = "GEMINI_API_KEY"
NETWORK_MARKERS = ("network", "fetch")

CREDENTIAL_MISSING_MESSAGE = (
    "Gemini API key not found. Please define the GEMINI_API_KEY variable in your .env file."
)
CONNECTIVITY_MESSAGE = (
    "Could not communicate with Gemini API. Please check your internet connection."
)


class RulesGenerationError(Exception):
    """Base class for every failure surfaced by the rules pipeline."""


class GenerationFailure(RulesGenerationError):
    """
    A failure reported by the generative backend, carried unaltered.
    `stack` holds the formatted traceback of the underlying error when one exists.
    """

    def __init__(self, original_message: str, stack: str | None = None):
        super().__init__(original_message)
        self.original_message = original_message
        self.stack = stack

    @classmethod
    def from_exception(cls, exc: BaseException) -> "GenerationFailure":
        if isinstance(exc, GenerationFailure):
            return exc
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        failure = cls(str(exc) or type(exc).__name__, stack=stack)
        failure.__cause__ = exc
        return failure


class CredentialMissingError(GenerationFailure):
    """Raised by a backend before any network attempt when it has no API key."""


class UserFacingFailure(RulesGenerationError):
    """A remapped failure whose message is safe to show to the caller."""


class CredentialMissingFailure(UserFacingFailure):
    pass


class ConnectivityFailure(UserFacingFailure):
    pass


def _is_connection_error(err: GenerationFailure) -> bool:
    cause = err.__cause__
    return isinstance(cause, (APIConnectionError, httpx.TransportError))


def translate_failure(err: GenerationFailure) -> Exception:
    """
    Map a backend failure to a user-facing one.

    Returns the remapped exception, or `err` itself when its message matches no
    known pattern. The caller raises whatever comes back, exactly once.
    """
    logger.error("Error generating cursor rules with AI: %s", err.original_message)
    if err.stack:
        logger.error("Error stack: %s", err.stack)

    message = err.original_message or ""
    if isinstance(err, CredentialMissingError) or CREDENTIAL_MARKER in message:
        return CredentialMissingFailure(CREDENTIAL_MISSING_MESSAGE)

    lowered = message.lower()
    if any(marker in lowered for marker in NETWORK_MARKERS) or _is_connection_error(err):
        return ConnectivityFailure(CONNECTIVITY_MESSAGE)

    return err
