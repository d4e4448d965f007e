import json
from typing import Any

from paracodec.core.errors import CodecError
from paracodec.core.models.exchange import Exchange
from paracodec.infra.stream_format import StreamDataFormat


class JsonDataFormat(StreamDataFormat):
    """
    JSON implementation of the DataFormat interface.

    The payload is decoded with the exchange charset and parsed into plain
    Python objects (dict, list, str, int, float, bool, None).
    """
    name = "json"

    def decode(self, exchange: Exchange, payload: bytes) -> Any:
        try:
            return json.loads(payload.decode(exchange.charset))
        except (UnicodeDecodeError, LookupError) as exc:
            raise CodecError(f"Cannot decode JSON payload as {exchange.charset}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CodecError(f"Malformed JSON payload: {exc}") from exc
