from typing import Any


class ParacodecError(Exception):
    """Base class for every error raised by paracodec itself."""


class ConfigurationError(ParacodecError):
    """
    The stage is wired incorrectly, e.g. no data format was provided.
    This is fatal and never occurs in a correctly assembled pipeline.
    """


class LifecycleError(ParacodecError):
    """A service was used outside of the lifecycle state that allows it."""


class BodyTypeError(ParacodecError, TypeError):
    """
    The body of the in-message cannot be viewed as a binary stream.
    Raised before the data format is invoked.
    """

    def __init__(self, body_type: type, message: str | None = None) -> None:
        self.body_type = body_type
        super().__init__(
            message or f"No binary stream available for body of type '{body_type.__name__}'"
        )


class CodecError(ParacodecError):
    """
    A data format failed to decode its input: malformed payload, schema
    mismatch, oversized message or I/O failure while reading the stream.
    """


class ContractViolationError(ParacodecError, RuntimeError):
    """A data format returned an exchange other than the one it was given."""

    def __init__(self, returned: Any, expected: Any) -> None:
        self.returned = returned
        self.expected = expected
        super().__init__(
            f"The returned exchange {returned} is not the same as "
            f"{expected} provided to the data format"
        )


class ResourceCleanupError(ParacodecError):
    """Closing the input stream failed after the body was decoded."""
