import contextlib
import logging
from typing import BinaryIO, Generator

from paracodec.core.errors import CodecError, ResourceCleanupError

logger = logging.getLogger("core.helpers.io")

CHUNK_SIZE = 64 * 1024


def close_quietly(stream: BinaryIO, name: str) -> None:
    """Close `stream`, logging instead of raising if it fails."""
    try:
        stream.close()
    except Exception as exc:
        logger.warning(f"Cannot close {name}: {exc}", exc_info=exc)


@contextlib.contextmanager
def released(stream: BinaryIO, name: str = "input stream") -> Generator[BinaryIO, None, None]:
    """
    Scope the use of `stream` and close it exactly once on exit.

    When the block raises, the stream is closed quietly and the original
    exception keeps propagating. When the block succeeds, a failure to
    close is raised as ResourceCleanupError.
    """
    try:
        yield stream
    except BaseException:
        close_quietly(stream, name)
        raise

    try:
        stream.close()
    except Exception as exc:
        raise ResourceCleanupError(f"Failed to close {name}: {exc}") from exc


def read_payload(stream: BinaryIO, limit: int = 0) -> bytes:
    """
    Read the stream until EOF, refusing payloads larger than `limit` bytes.
    A limit of 0 reads without bound.

    Raw streams (pipes, sockets, unbuffered files) may return fewer bytes
    than requested, so reading goes on chunk by chunk until an empty read.
    A stream with no data available right now (`None`) cannot be decoded.
    """
    payload = bytearray()

    while True:
        size = CHUNK_SIZE if limit <= 0 else min(CHUNK_SIZE, limit + 1 - len(payload))
        try:
            chunk = stream.read(size)
        except OSError as exc:
            raise CodecError(f"Failed to read payload: {exc}") from exc

        if chunk is None:
            raise CodecError("Stream has no data available, non-blocking streams are not supported")
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise CodecError(f"Stream returned {type(chunk).__name__} instead of bytes")
        if not chunk:
            return bytes(payload)

        payload.extend(chunk)
        if limit > 0 and len(payload) > limit:
            raise CodecError(f"Payload exceeds the maximum message size of {limit} bytes")
