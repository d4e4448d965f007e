import io

import msgpack
import pytest
import yaml

from paracodec.core.errors import CodecError
from paracodec.core.models.context import PipelineContext
from paracodec.core.ports.dataformat import DataFormat
from paracodec.core.processor.unmarshal import UnmarshalProcessor
from paracodec.infra.json_format import JsonDataFormat
from paracodec.infra.model_format import ModelDataFormat
from paracodec.infra.msgpack_format import MsgPackDataFormat
from paracodec.infra.yaml_format import YamlDataFormat
from tests.fake.fake_stream import ShortReadStream
from tests.helpers import make_exchange


def unmarshal(data_format, payload: bytes, **kwargs):
    exchange = make_exchange(body=payload, **kwargs)
    return data_format.unmarshal(exchange, io.BytesIO(payload))


@pytest.mark.ut
def test_json_decodes_objects():
    assert unmarshal(JsonDataFormat(), b'{"x": [1, 2.5, null, true]}') == {"x": [1, 2.5, None, True]}


@pytest.mark.ut
def test_json_uses_exchange_charset():
    payload = '{"name": "é"}'.encode("latin-1")

    assert unmarshal(JsonDataFormat(), payload, properties={"charset": "latin-1"}) == {"name": "é"}


@pytest.mark.ut
@pytest.mark.parametrize("payload", [b'{"x":', b"", b"\xff\xfe{"])
def test_json_malformed(payload):
    with pytest.raises(CodecError):
        unmarshal(JsonDataFormat(), payload)


@pytest.mark.ut
def test_msgpack_decodes_binary_and_text():
    payload = msgpack.packb({"key": b"\x00\x01", "text": "hello", "n": 7}, use_bin_type=True)

    assert unmarshal(MsgPackDataFormat(), payload) == {"key": b"\x00\x01", "text": "hello", "n": 7}


@pytest.mark.ut
def test_msgpack_non_strict_map_keys():
    payload = msgpack.packb({1: "one"}, use_bin_type=True)

    assert unmarshal(MsgPackDataFormat(), payload) == {1: "one"}
    with pytest.raises(CodecError):
        unmarshal(MsgPackDataFormat(strict_map_key=True), payload)


@pytest.mark.ut
@pytest.mark.parametrize("payload", [b"\x82\xa1a", b"\xc1", b"\x01\x02"])
def test_msgpack_malformed(payload):
    with pytest.raises(CodecError):
        unmarshal(MsgPackDataFormat(), payload)


@pytest.mark.ut
def test_yaml_decodes_documents():
    payload = yaml.dump({"items": [1, 2], "name": "x"}).encode()

    assert unmarshal(YamlDataFormat(), payload) == {"items": [1, 2], "name": "x"}


@pytest.mark.ut
def test_yaml_refuses_python_objects():
    with pytest.raises(CodecError):
        unmarshal(YamlDataFormat(), b"!!python/object/apply:os.getcwd []")


@pytest.mark.ut
def test_yaml_malformed():
    with pytest.raises(CodecError):
        unmarshal(YamlDataFormat(), b"a: [1, 2")


@pytest.mark.ut
@pytest.mark.parametrize("data_format", [JsonDataFormat(), MsgPackDataFormat(), YamlDataFormat()])
def test_context_limits_payload_size(data_format):
    context = PipelineContext(max_message_size=8)
    processor = UnmarshalProcessor(data_format, context=context)
    processor.start()
    exchange = make_exchange(body=b'"0123456789"')

    with pytest.raises(CodecError, match="maximum message size"):
        processor.process(exchange)

    assert data_format.context is context
    assert data_format.max_message_size == 8
    assert exchange.has_out() is False


@pytest.mark.ut
def test_without_context_there_is_no_limit():
    data_format = JsonDataFormat()

    assert data_format.max_message_size == 0
    assert unmarshal(data_format, b'"' + b"x" * 10_000 + b'"') == "x" * 10_000


@pytest.mark.ut
def test_names():
    assert str(JsonDataFormat()) == "json"
    assert str(MsgPackDataFormat()) == "msgpack"
    assert str(YamlDataFormat()) == "yaml"


@pytest.mark.ut
@pytest.mark.parametrize(
    "data_format, payload, expected",
    [
        (YamlDataFormat(), b"a: 1\nb: 2\nc: 3\n", {"a": 1, "b": 2, "c": 3}),
        (JsonDataFormat(), b'{"x": 1, "y": 2}', {"x": 1, "y": 2}),
        (MsgPackDataFormat(), msgpack.packb({"x": 1, "y": [1, 2, 3]}), {"x": 1, "y": [1, 2, 3]}),
    ],
    ids=["yaml", "json", "msgpack"],
)
def test_short_reading_body_is_decoded_whole(data_format, payload, expected):
    processor = UnmarshalProcessor(data_format, context=PipelineContext())
    processor.start()
    stream = ShortReadStream(payload, chunk=8)
    exchange = make_exchange(body=stream)

    processor.process(exchange)

    assert exchange.get_out().body == expected
    assert stream.closed


@pytest.mark.ut
@pytest.mark.parametrize(
    "data_format",
    [JsonDataFormat(), MsgPackDataFormat(), YamlDataFormat(), ModelDataFormat(dict, JsonDataFormat())],
)
def test_formats_implement_the_port(data_format):
    assert isinstance(data_format, DataFormat)
    assert DataFormat in type(data_format).__mro__
