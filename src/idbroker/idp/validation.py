"""
Structural validation of identity provider records.
"""

import jsonschema
from typing import Dict, Any

from .errors import UnderlyingDecodeError


# Only the type tag is inspected; the rest of the record depends on it.
PROVIDER_TYPE_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {
            "type": ["string", "null"],
            "description": "Identity provider type tag"
        }
    },
    "additionalProperties": True
}

# Keystone identity provider configuration schema
KEYSTONE_PARAMS_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": ["string", "null"],
            "description": "Name of the provider within the identity manager"
        },
        "domain": {
            "type": ["string", "null"],
            "description": "Domain appended to usernames and groups"
        },
        "description": {
            "type": ["string", "null"],
            "description": "Human readable description of the provider"
        },
        "url": {
            "type": ["string", "null"],
            "description": "Address of the keystone server"
        }
    },
    "additionalProperties": True
}


def validate_record(record: Any, schema: Dict[str, Any], what: str) -> None:
    """Validate a record against a schema, raising UnderlyingDecodeError."""
    try:
        jsonschema.validate(record, schema)
    except jsonschema.ValidationError as e:
        location = ".".join(str(p) for p in e.absolute_path)
        detail = f"{location}: {e.message}" if location else e.message
        raise UnderlyingDecodeError(f"cannot unmarshal {what}: {detail}", cause=e) from e
