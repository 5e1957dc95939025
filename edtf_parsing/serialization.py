"""JSON hooks that use the EDTF text itself as the wire format.

A value serializes to the string ``render`` produces and deserializes through
``parse``; there is no other layout. Documents that embed EDTF strings can be
checked with ``jsonschema`` using the ``"edtf"`` format.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

import jsonschema

from edtf_parsing.errors import EdtfParseError
from edtf_parsing.formatter import render
from edtf_parsing.model import Edtf

# Schema for a single EDTF value
EDTF_VALUE_SCHEMA = {"type": "string", "format": "edtf"}

edtf_format_checker = jsonschema.FormatChecker()


@edtf_format_checker.checks("edtf", raises=EdtfParseError)
def is_edtf(instance: Any) -> bool:
    # Other JSON types are left to the schema's "type" keyword
    if not isinstance(instance, str):
        return True
    # Lazy import to avoid circular dependency
    from edtf_parsing.edtf_parser import parse
    parse(instance)
    return True


def serialize(value: Edtf) -> str:
    return render(value)


def deserialize(text: str) -> Edtf:
    """Parse a wire string back into a value.

    Raises:
        EdtfParseError: If ``text`` is not valid EDTF
    """
    # Lazy import to avoid circular dependency
    from edtf_parsing.edtf_parser import parse
    return parse(text)


class EdtfJSONEncoder(json.JSONEncoder):
    """Encodes any Edtf value found in the payload as its EDTF string."""

    def default(self, o):
        if isinstance(o, Edtf):
            return serialize(o)
        return super().default(o)


def dumps(obj: Any, **kwargs) -> str:
    """``json.dumps`` with EDTF values written as strings."""
    return json.dumps(obj, cls=EdtfJSONEncoder, **kwargs)


def loads(text: str, fields: Optional[List[str]] = None, **kwargs) -> Any:
    """``json.loads``, parsing the named top-level fields of an object as EDTF.

    Args:
        text: The JSON document
        fields: Keys of a top-level object whose string values are EDTF. When
            omitted, a bare top-level string is parsed and anything else is
            returned as decoded.

    Raises:
        EdtfParseError: If a named field is not valid EDTF
        ValueError: If ``fields`` is given but the document is not a JSON object
    """
    data = json.loads(text, **kwargs)
    if fields is None:
        return deserialize(data) if isinstance(data, str) else data
    if not isinstance(data, dict):
        raise ValueError(
            f"EDTF fields {fields} need a top-level JSON object, got {type(data).__name__}"
        )
    for key in fields:
        if isinstance(data.get(key), str):
            data[key] = deserialize(data[key])
    return data


def validate_document(data: Any, schema: Dict = EDTF_VALUE_SCHEMA) -> Tuple[bool, Optional[List[str]]]:
    """
    Validate a JSON document against a schema, checking "edtf" formats.

    Args:
        data: Decoded JSON document
        schema: JSON schema; defaults to a single EDTF string

    Returns:
        Tuple of (is_valid, errors)
    """
    try:
        jsonschema.validate(instance=data, schema=schema, format_checker=edtf_format_checker)
        return (True, None)
    except jsonschema.ValidationError as e:
        return (False, [e.message])
    except jsonschema.SchemaError as e:
        return (False, [f"Invalid schema: {e.message}"])
