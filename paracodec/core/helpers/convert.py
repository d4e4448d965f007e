import io
from typing import Any, BinaryIO

from paracodec.core.errors import BodyTypeError


def to_input_stream(value: Any, charset: str = "utf-8") -> BinaryIO:
    """
    View a message body as a readable binary stream.

    - bytes-like bodies are wrapped in a BytesIO
    - str bodies are encoded with `charset` first
    - binary file objects (and anything exposing read/close) are returned as-is

    Text streams, closed or unreadable streams and any other type raise
    BodyTypeError. Nothing is opened on failure, so there is nothing to
    release.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(value))

    if isinstance(value, str):
        try:
            return io.BytesIO(value.encode(charset))
        except (LookupError, UnicodeEncodeError) as exc:
            raise BodyTypeError(
                str, f"Cannot encode body using charset '{charset}': {exc}"
            ) from exc

    if isinstance(value, io.TextIOBase):
        raise BodyTypeError(
            type(value), "Text streams cannot be unmarshalled, open the source in binary mode"
        )

    if isinstance(value, io.IOBase):
        if value.closed or not value.readable():
            raise BodyTypeError(type(value), "Body stream is closed or not readable")
        return value  # type: ignore[return-value]

    if callable(getattr(value, "read", None)) and callable(getattr(value, "close", None)):
        return value

    raise BodyTypeError(type(value))
