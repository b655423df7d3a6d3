"""Exceptions raised inside the engine.

Each exception carries its ``ErrorCode`` as a class attribute, so the facade
can convert it to a ``ConjugationError`` value by type alone.
"""

from models import ConjugationError, ErrorCode


class ConjugatorError(Exception):
    """Base class for all engine failures."""

    code: ErrorCode = ErrorCode.CONJUGATION_FAILED
    default_message = "An unexpected error occurred during conjugation"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_error(self) -> ConjugationError:
        """Convert to the error value returned by the facade."""
        return ConjugationError(code=self.code, message=self.message)


class EmptyInputError(ConjugatorError):
    code = ErrorCode.EMPTY_INPUT
    default_message = "Please enter a Japanese verb"


class InvalidCharactersError(ConjugatorError):
    code = ErrorCode.INVALID_CHARACTERS
    default_message = "Please enter a valid Japanese verb using hiragana, katakana, or kanji"


class UnknownVerbError(ConjugatorError):
    code = ErrorCode.UNKNOWN_VERB
    default_message = (
        "This verb is not recognized. Please check the spelling or try the dictionary form"
    )


class AmbiguousVerbError(ConjugatorError):
    """Reserved: the classifier always picks one interpretation or fails."""

    code = ErrorCode.AMBIGUOUS_VERB
    default_message = "This verb has more than one possible reading"


class ConjugationFailedError(ConjugatorError):
    code = ErrorCode.CONJUGATION_FAILED
