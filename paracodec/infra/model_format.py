import logging
from typing import Any, BinaryIO

from pydantic import TypeAdapter, ValidationError

from paracodec.core.errors import CodecError, LifecycleError
from paracodec.core.models.context import PipelineContext
from paracodec.core.models.exchange import Exchange
from paracodec.core.models.result import (
    DecodeResult,
    DecodedValue,
    ReplacementMessage,
    SameExchange,
    as_result,
)
from paracodec.core.ports.dataformat import ContextAware, DataFormat
from paracodec.core.service.support import start_service, stop_service


class ModelDataFormat(DataFormat):
    """
    Validates what another data format decoded against a pydantic model.

    The inner data format parses the wire representation; this one turns
    the resulting plain objects into a typed instance of `model`. The
    validator is built when the data format is started and dropped when it
    is stopped.

    The context and the lifecycle are forwarded to the inner data format.
    """

    def __init__(self, model: Any, inner: DataFormat) -> None:
        self._model = model
        self._inner = inner
        self._adapter: TypeAdapter[Any] | None = None
        self._logger = logging.getLogger("infra.model_format")

    def __str__(self) -> str:
        name = getattr(self._model, "__name__", repr(self._model))
        return f"{self._inner}->{name}"

    def set_context(self, context: PipelineContext | None) -> None:
        if isinstance(self._inner, ContextAware):
            self._inner.set_context(context)

    def start(self) -> None:
        start_service(self._inner)
        self._adapter = TypeAdapter(self._model)
        self._logger.debug(f"Built validator for {self}")

    def stop(self) -> None:
        self._adapter = None
        stop_service(self._inner)

    def unmarshal(self, exchange: Exchange, stream: BinaryIO) -> DecodeResult:
        if self._adapter is None:
            raise LifecycleError(f"Data format {self} is not started")

        result = as_result(self._inner.unmarshal(exchange, stream))

        match result:
            case DecodedValue(value=value):
                return DecodedValue(self._validate(value))
            case ReplacementMessage(message=message):
                message.body = self._validate(message.body)
                return result
            case SameExchange():
                out = exchange.get_out()
                out.body = self._validate(out.body)
                return result

    def _validate(self, value: Any) -> Any:
        try:
            return self._adapter.validate_python(value)  # type: ignore[union-attr]
        except ValidationError as exc:
            raise CodecError(f"Payload does not match {self}: {exc}") from exc
