import os

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, YamlConfigSettingsSource

from paracodec.bootstrap.config.settings import ParacodecConfig
from paracodec.core.models.exchange import Exchange
from paracodec.core.models.message import Message


class FakeParacodecConfig(ParacodecConfig, BaseSettings):
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (YamlConfigSettingsSource(settings_cls, yaml_file=os.environ["TEST_PARACODECCONFIG"]),)


def make_exchange(body=None, headers=None, attachments=None, **kwargs) -> Exchange:
    message = Message(
        body=body,
        headers=dict(headers or {}),
        attachments=dict(attachments or {}),
    )
    return Exchange(in_message=message, **kwargs)
