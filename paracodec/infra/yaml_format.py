import yaml
from typing import Any

from paracodec.core.errors import CodecError
from paracodec.core.models.exchange import Exchange
from paracodec.infra.stream_format import StreamDataFormat


class YamlDataFormat(StreamDataFormat):
    """
    YAML implementation of the DataFormat interface.

    Only the safe subset of YAML is accepted: payloads cannot instantiate
    arbitrary Python objects.
    """
    name = "yaml"

    def decode(self, exchange: Exchange, payload: bytes) -> Any:
        try:
            return yaml.safe_load(payload.decode(exchange.charset))
        except (UnicodeDecodeError, LookupError) as exc:
            raise CodecError(f"Cannot decode YAML payload as {exchange.charset}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise CodecError(f"Malformed YAML payload: {exc}") from exc
