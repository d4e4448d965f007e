import uuid
from typing import Any

from paracodec.core.models.context import PipelineContext
from paracodec.core.models.message import Message


class Exchange:
    """
    Unit of work in flight through the pipeline.

    The exchange holds the in-message and an out-message slot. Stages
    borrow it for the duration of a call and mutate the out slot; the
    exchange itself is owned by the routing engine.
    """

    CHARSET = "charset"

    def __init__(
        self,
        in_message: Message | None = None,
        context: PipelineContext | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        self.exchange_id = str(uuid.uuid4())
        self.context = context
        self.properties: dict[str, Any] = dict(properties or {})
        self._in = in_message if in_message is not None else Message()
        self._out: Message | None = None

    def __repr__(self) -> str:
        return f"Exchange[{self.exchange_id}]"

    @property
    def charset(self) -> str:
        if charset := self.properties.get(self.CHARSET):
            return charset
        if self.context is not None:
            return self.context.charset
        return "utf-8"

    def get_in(self) -> Message:
        return self._in

    def set_in(self, message: Message) -> None:
        self._in = message

    def get_out(self) -> Message:
        """Return the out-message, creating an empty one if the slot is unset."""
        if self._out is None:
            self._out = Message()
        return self._out

    def set_out(self, message: Message | None) -> None:
        self._out = message

    def has_out(self) -> bool:
        return self._out is not None
