import logging

from paracodec.core.errors import ConfigurationError, ContractViolationError, LifecycleError
from paracodec.core.helpers.io import released
from paracodec.core.models.context import PipelineContext
from paracodec.core.models.exchange import Exchange
from paracodec.core.models.message import Message
from paracodec.core.models.result import (
    DecodedValue,
    ReplacementMessage,
    SameExchange,
    as_result,
)
from paracodec.core.ports.dataformat import ContextAware, DataFormat
from paracodec.core.service.support import ServiceSupport, start_service, stop_service


class UnmarshalProcessor(ServiceSupport):
    """
    Pipeline stage decoding the body of the in-message with a DataFormat.

    For each exchange:
    - the in-message body is viewed as a binary stream (BodyTypeError if
      it cannot be)
    - a fresh out-message carrying the in-message metadata is set on the
      exchange before the data format runs, so a data format mutating
      `exchange.get_out()` finds the headers already there
    - the data format result decides the final out-message: untouched
      (same exchange), replaced (message) or filled with the decoded body
    - any error clears the out slot and propagates unchanged
    - the stream is closed exactly once, whatever happens

    A close failure after a successful decode is raised as
    ResourceCleanupError; the committed out-message is kept.

    The stage holds no per-call state and may process distinct exchanges
    concurrently once started. The data format is started and stopped with
    the stage, and receives the pipeline context first if it is
    ContextAware.
    """

    def __init__(
        self,
        data_format: DataFormat,
        context: PipelineContext | None = None,
    ) -> None:
        super().__init__()
        self._data_format = data_format
        self._context = context
        self._logger = logging.getLogger("core.processor.unmarshal")

    def __str__(self) -> str:
        return f"Unmarshal[{self._data_format}]"

    @property
    def trace_label(self) -> str:
        return f"unmarshal[{self._data_format}]"

    @property
    def data_format(self) -> DataFormat:
        return self._data_format

    @property
    def context(self) -> PipelineContext | None:
        return self._context

    @context.setter
    def context(self, context: PipelineContext | None) -> None:
        self._context = context

    def set_context(self, context: PipelineContext | None) -> None:
        self._context = context

    def process(self, exchange: Exchange) -> None:
        if self._data_format is None:
            raise ConfigurationError("No data format configured for the unmarshal stage")
        if not self.is_started:
            raise LifecycleError(f"{self} cannot process exchanges in state '{self.state}'")

        try:
            stream = exchange.get_in().get_mandatory_body(exchange.charset)
        except BaseException:
            exchange.set_out(None)
            raise

        with released(stream):
            try:
                out = Message()
                out.copy_from(exchange.get_in())
                exchange.set_out(out)

                result = as_result(self._data_format.unmarshal(exchange, stream))

                match result:
                    case SameExchange(exchange=returned):
                        if returned is not exchange:
                            raise ContractViolationError(returned, exchange)
                    case ReplacementMessage(message=message):
                        exchange.set_out(message)
                    case DecodedValue(value=value):
                        out.body = value
                        exchange.set_out(out)
            except BaseException:
                exchange.set_out(None)
                raise

            self._logger.debug(
                f"{exchange!r} unmarshalled by {self._data_format} "
                f"({type(result).__name__})"
            )

    def do_start(self) -> None:
        if isinstance(self._data_format, ContextAware):
            self._data_format.set_context(self._context)
        start_service(self._data_format)

    def do_stop(self) -> None:
        stop_service(self._data_format)
