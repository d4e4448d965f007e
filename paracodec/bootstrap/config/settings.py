from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from paracodec.bootstrap.config.loader import get_configfile


class PipelineSettings(BaseModel):
    name: Annotated[
        str,
        Field(
            description=(
                "Name of the pipeline hosting the unmarshal stage.\n"
                "It is exposed to context-aware data formats and used in logs."
            ),
            default="default"
        )
    ]

    charset: Annotated[
        str,
        Field(
            description=(
                "Default charset for textual bodies and text-based formats\n"
                "(JSON, YAML) when the exchange does not carry its own."
            ),
            default="utf-8"
        )
    ]


class CodecSettings(BaseModel):
    format: Annotated[
        Literal["json", "msgpack", "yaml"],
        Field(
            description="Wire format of the message bodies to unmarshal.",
            default="json"
        )
    ]

    max_message_size: Annotated[
        int,
        Field(
            description=(
                "Maximum size in bytes of a single body. Larger payloads are\n"
                "rejected by the data format. 0 disables the limit."
            ),
            default=1 * 1024 * 1024,
            ge=0
        )
    ]

    strict_map_key: Annotated[
        bool,
        Field(
            description="MsgPack only: reject map keys that are not str or bytes.",
            default=False
        )
    ]


class LoggingSettings(BaseModel):
    level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description=(
                "Logging verbosity.\n"
                "DEBUG    → one record per unmarshalled exchange.\n"
                "INFO     → standard operational logs (default).\n"
                "WARNING  → only warnings (e.g. stream close failures) and errors."
            ),
            default="INFO"
        )
    ]


class ParacodecConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PARACODEC_",
        env_nested_delimiter="__",
        extra="allow"
    )

    pipeline: Annotated[
        PipelineSettings,
        Field(
            description="Pipeline-level settings shared with context-aware data formats.",
            default_factory=PipelineSettings
        )
    ]

    codec: Annotated[
        CodecSettings,
        Field(
            description=(
                "Data format configuration.\n"
                "Selects the wire format and the limits applied while decoding."
            ),
            default_factory=CodecSettings
        )
    ]

    logging: Annotated[
        LoggingSettings,
        Field(
            description="Logging configuration.",
            default_factory=LoggingSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=get_configfile()),
        )
