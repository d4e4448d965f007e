import msgpack
from typing import Any

from paracodec.core.errors import CodecError
from paracodec.core.models.exchange import Exchange
from paracodec.infra.stream_format import StreamDataFormat


class MsgPackDataFormat(StreamDataFormat):
    """
    MsgPack-based implementation of the DataFormat interface.

    - compact binary encoding
    - raw strings are decoded as UTF-8 str, binary stays bytes
    - map keys are restricted to str/bytes when `strict_map_key` is set
    """
    name = "msgpack"

    def __init__(self, strict_map_key: bool = False) -> None:
        super().__init__()
        self._strict_map_key = strict_map_key

    def decode(self, exchange: Exchange, payload: bytes) -> Any:
        try:
            return msgpack.unpackb(
                payload,
                raw=False,
                strict_map_key=self._strict_map_key,
            )
        except (ValueError, TypeError, msgpack.exceptions.UnpackException) as exc:
            raise CodecError(f"Malformed MsgPack payload: {exc}") from exc
