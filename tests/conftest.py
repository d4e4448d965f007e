import os
from typing import Generator

import pytest
import yaml

from paracodec.bootstrap.config.loader import get_configfile
from paracodec.bootstrap import deps
from paracodec.core.models.context import PipelineContext
from tests.fake.fake_dataformat import FakeDataFormat, FakeServiceDataFormat
from tests.helpers import FakeParacodecConfig


@pytest.fixture
def data_format():
    return FakeDataFormat()


@pytest.fixture
def service_data_format():
    return FakeServiceDataFormat()


@pytest.fixture
def context():
    return PipelineContext(name="test", max_message_size=1024)


@pytest.fixture
def config_data() -> dict:
    return {
        "pipeline": {
            "name": "orders",
            "charset": "utf-8",
        },
        "codec": {
            "format": "json",
            "max_message_size": 2048,
        },
        "logging": {
            "level": "DEBUG",
        },
    }


@pytest.fixture
def config_file(tmp_path, config_data):
    file = tmp_path / "paracodec.yaml"
    file.write_text(yaml.dump(config_data))
    return file


@pytest.fixture
def paracodec_config(config_file) -> Generator[FakeParacodecConfig, None, None]:
    backup = os.environ.copy()

    try:
        os.environ["TEST_PARACODECCONFIG"] = str(config_file)
        yield FakeParacodecConfig()
    finally:
        os.environ.clear()
        os.environ.update(backup)


@pytest.fixture
def wired_config(config_file, monkeypatch):
    """Point the real configuration discovery at `config_file`."""
    monkeypatch.setenv("PARACODECCONFIG", str(config_file))
    caches = (
        get_configfile,
        deps.get_config,
        deps.get_context,
        deps.get_data_format,
        deps.get_unmarshal_processor,
    )
    for cached in caches:
        cached.cache_clear()

    yield config_file

    for cached in caches:
        cached.cache_clear()
