"""Unit tests for JSON serialization and schema validation."""

import json

import jsonschema
import pytest
from edtf_parsing.edtf_parser import parse
from edtf_parsing.errors import EdtfParseError
from edtf_parsing.model import Date, IntervalFrom, Terminal
from edtf_parsing.serialization import (
    EDTF_VALUE_SCHEMA,
    EdtfJSONEncoder,
    deserialize,
    dumps,
    edtf_format_checker,
    loads,
    serialize,
    validate_document,
)

EVENT_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "when": {"type": "string", "format": "edtf"},
    },
    "required": ["title", "when"],
}


class TestSerialization:
    """The EDTF string is the wire format."""

    @pytest.mark.parametrize("text", ["2019-07?", "2019/..", "Y-17000", "1985-04-12T23:20:30Z"])
    def test_serialize_is_render(self, text):
        assert serialize(parse(text)) == text
        assert deserialize(text) == parse(text)

    def test_deserialize_rejects_invalid(self):
        with pytest.raises(EdtfParseError):
            deserialize("2019-13")

    def test_encoder(self):
        payload = {"when": parse("2019/.."), "count": 2}
        assert json.dumps(payload, cls=EdtfJSONEncoder) == '{"when": "2019/..", "count": 2}'
        assert dumps(payload, sort_keys=True) == '{"count": 2, "when": "2019/.."}'

    def test_encoder_rejects_other_objects(self):
        with pytest.raises(TypeError):
            dumps({"when": object()})

    def test_loads_bare_string(self):
        assert loads('"2019-07"') == Date.from_ym(2019, 7)

    def test_loads_named_fields(self):
        data = loads('{"title": "2019", "when": "2019/.."}', fields=["when", "missing"])
        assert data == {"title": "2019", "when": IntervalFrom(Date.from_year(2019), Terminal.OPEN)}

    def test_loads_other_documents_untouched(self):
        assert loads("[1, 2]") == [1, 2]

    @pytest.mark.parametrize("text,type_name", [
        ('["2019/.."]', "list"),
        ('"2019"', "str"),
        ("12", "int"),
    ])
    def test_loads_fields_need_an_object(self, text, type_name):
        with pytest.raises(ValueError, match=f"need a top-level JSON object, got {type_name}"):
            loads(text, fields=["when"])


class TestSchemaValidation:
    """Test cases for the "edtf" jsonschema format."""

    def test_format_checker(self):
        assert edtf_format_checker.conforms("2019-07-XX?", "edtf")
        assert not edtf_format_checker.conforms("2019-07-XX?-01", "edtf")

    def test_valid_value(self):
        assert validate_document("2004-07-XX") == (True, None)

    def test_invalid_value(self):
        is_valid, errors = validate_document("2021-02-29")
        assert is_valid is False
        assert "is not a 'edtf'" in errors[0]

    def test_wrong_type(self):
        is_valid, errors = validate_document(2019, EDTF_VALUE_SCHEMA)
        assert is_valid is False
        assert "is not of type 'string'" in errors[0]

    def test_document(self):
        assert validate_document({"title": "Rome", "when": "-0753/0476"}, EVENT_SCHEMA) == (True, None)
        is_valid, errors = validate_document({"title": "Rome", "when": "753 BC"}, EVENT_SCHEMA)
        assert is_valid is False
        assert "'753 BC'" in errors[0]

    def test_invalid_schema(self):
        is_valid, errors = validate_document("2019", {"type": 12})
        assert is_valid is False
        assert errors[0].startswith("Invalid schema:")

    def test_plain_jsonschema_call(self):
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate("../..", EDTF_VALUE_SCHEMA, format_checker=edtf_format_checker)
