from typing import Any, BinaryIO

from paracodec.core.helpers.io import read_payload
from paracodec.core.models.context import PipelineContext
from paracodec.core.models.exchange import Exchange
from paracodec.core.ports.dataformat import DataFormat


class StreamDataFormat(DataFormat):
    """
    Base for data formats decoding a whole payload at once.

    The payload is read from the stream in a single call, bounded by the
    `max_message_size` of the injected PipelineContext. Subclasses only
    implement `decode()`.
    """
    name: str = "stream"

    def __init__(self) -> None:
        self._context: PipelineContext | None = None

    def __str__(self) -> str:
        return self.name

    @property
    def context(self) -> PipelineContext | None:
        return self._context

    def set_context(self, context: PipelineContext | None) -> None:
        self._context = context

    @property
    def max_message_size(self) -> int:
        if self._context is None:
            return 0
        return self._context.max_message_size

    def unmarshal(self, exchange: Exchange, stream: BinaryIO) -> Any:
        payload = read_payload(stream, self.max_message_size)
        return self.decode(exchange, payload)

    def decode(self, exchange: Exchange, payload: bytes) -> Any:
        raise NotImplementedError
