from typing import Any, BinaryIO, Protocol, runtime_checkable

from paracodec.core.models.context import PipelineContext
from paracodec.core.models.exchange import Exchange
from paracodec.core.models.result import DecodeResult


@runtime_checkable
class DataFormat(Protocol):
    """
    Defines the interface for decoding the body of an in-flight message
    from its wire representation into an application-level object.

    `unmarshal` receives the exchange being processed and the body as a
    readable binary stream. It returns one of:
    - SameExchange(exchange): the data format populated `exchange.get_out()`
      itself; it must be the very exchange it was given
    - ReplacementMessage(message): `message` becomes the out-message
    - DecodedValue(value): `value` becomes the body of the out-message

    A bare return value is accepted too and classified by the stage, see
    `paracodec.core.models.result.as_result`.

    Implementations:
    - must not close the stream, the stage owns it
    - should raise CodecError on malformed input
    - may implement `start()`/`stop()` to manage their own resources
    """

    def unmarshal(self, exchange: Exchange, stream: BinaryIO) -> DecodeResult | Any:
        """Decode the stream into an application-level object."""


@runtime_checkable
class ContextAware(Protocol):
    """
    Optional capability of a data format needing the pipeline context.
    The context is injected once, before the data format is started.
    """

    def set_context(self, context: PipelineContext | None) -> None:
        ...
