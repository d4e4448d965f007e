import json
from functools import lru_cache
from typing import Callable

from pydantic import ValidationError

from paracodec.bootstrap.config.settings import ParacodecConfig, CodecSettings
from paracodec.core.errors import ConfigurationError
from paracodec.core.models.context import PipelineContext
from paracodec.core.ports.dataformat import DataFormat
from paracodec.core.processor.unmarshal import UnmarshalProcessor
from paracodec.infra.json_format import JsonDataFormat
from paracodec.infra.msgpack_format import MsgPackDataFormat
from paracodec.infra.yaml_format import YamlDataFormat


DATA_FORMATS: dict[str, Callable[[CodecSettings], DataFormat]] = {
    "json": lambda settings: JsonDataFormat(),
    "msgpack": lambda settings: MsgPackDataFormat(strict_map_key=settings.strict_map_key),
    "yaml": lambda settings: YamlDataFormat(),
}


def build_data_format(settings: CodecSettings) -> DataFormat:
    factory = DATA_FORMATS.get(settings.format)
    if factory is None:
        raise ConfigurationError(f"Unknown data format '{settings.format}'")
    return factory(settings)


@lru_cache
def get_config() -> ParacodecConfig:
    try:
        return ParacodecConfig()
    except FileNotFoundError as ex:
        raise SystemExit(f"Provide a correct configuration file path: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


@lru_cache
def get_context() -> PipelineContext:
    config = get_config()
    return PipelineContext(
        name=config.pipeline.name,
        max_message_size=config.codec.max_message_size,
        charset=config.pipeline.charset,
    )


@lru_cache
def get_data_format() -> DataFormat:
    return build_data_format(get_config().codec)


@lru_cache
def get_unmarshal_processor() -> UnmarshalProcessor:
    return UnmarshalProcessor(
        data_format=get_data_format(),
        context=get_context(),
    )
