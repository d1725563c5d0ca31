"""
Decoder for identity provider configuration records.

A record is a mapping of field names to values with a mandatory ``type``
tag. The tag is read first and selects the shape used to decode the
rest of the record:

    type: keystone
    name: idm
    url: https://keystone.example.com:5000

Singleton providers (``usso``, ``usso_oauth``, ``agent``) take no other
fields. The keystone family requires ``name`` and ``url`` and accepts
``domain`` and ``description``.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Sequence

from .base import (
    AGENT_IDENTITY_PROVIDER,
    KEYSTONE_TYPES,
    UBUNTU_SSO_IDENTITY_PROVIDER,
    UBUNTU_SSO_OAUTH_IDENTITY_PROVIDER,
    IdentityProvider,
    KeystoneParams,
    ProviderType,
    _new_keystone_identity_provider,
)
from .errors import DecodeError, MissingFieldError, UnderlyingDecodeError, UnrecognizedTypeError
from .validation import KEYSTONE_PARAMS_SCHEMA, PROVIDER_TYPE_SCHEMA, validate_record

logger = logging.getLogger(__name__)


def decode(record: Mapping[str, Any]) -> IdentityProvider:
    """
    Decode an identity provider from a configuration record.

    Args:
        record: Mapping holding the provider configuration

    Returns:
        The decoded IdentityProvider

    Raises:
        UnrecognizedTypeError: If the type tag is not supported
        MissingFieldError: If a required keystone field is empty
        UnderlyingDecodeError: If the record is malformed
    """
    record = _as_dict(record)
    validate_record(record, PROVIDER_TYPE_SCHEMA, "identity provider type")
    provider_type = record.get("type") or ""
    logger.debug(f"Decoding identity provider of type {provider_type!r}")

    decoder = _DECODERS.get(provider_type)
    if decoder is None:
        raise UnrecognizedTypeError(provider_type)
    return decoder(ProviderType(provider_type), record)


def decode_keystone(provider_type: ProviderType, record: Mapping[str, Any]) -> IdentityProvider:
    """Decode the keystone parameters of a keystone family record."""
    if provider_type not in KEYSTONE_TYPES:
        raise UnrecognizedTypeError(str(provider_type))
    record = _as_dict(record)
    validate_record(record, KEYSTONE_PARAMS_SCHEMA, "keystone configuration")

    params = KeystoneParams(
        name=record.get("name") or "",
        url=record.get("url") or "",
        domain=record.get("domain") or "",
        description=record.get("description") or "",
    )
    if not params.name:
        raise MissingFieldError("name", context="cannot unmarshal keystone configuration")
    if not params.url:
        raise MissingFieldError("url", context="cannot unmarshal keystone configuration")

    logger.debug(f"Decoded {provider_type} identity provider {params.name!r} at {params.url}")
    return _new_keystone_identity_provider(provider_type, params)


def decode_all(records: Sequence[Mapping[str, Any]]) -> List[IdentityProvider]:
    """
    Decode a list of identity provider records in order.

    The first record that fails stops decoding; its position is added
    to the error message.
    """
    if not isinstance(records, (list, tuple)):
        raise UnderlyingDecodeError(
            f"cannot unmarshal identity providers: expected a list, got {type(records).__name__}"
        )

    providers = []
    for index, record in enumerate(records):
        try:
            providers.append(decode(record))
        except DecodeError as e:
            e.args = (f"identity provider {index}: {e}",)
            raise
    return providers


def _as_dict(record: Any) -> Any:
    # jsonschema only treats dict instances as objects
    if isinstance(record, Mapping) and not isinstance(record, dict):
        return dict(record)
    return record


_DECODERS: Dict[str, Callable[[ProviderType, Mapping[str, Any]], IdentityProvider]] = {
    ProviderType.UBUNTU_SSO.value: lambda t, r: UBUNTU_SSO_IDENTITY_PROVIDER,
    ProviderType.UBUNTU_SSO_OAUTH.value: lambda t, r: UBUNTU_SSO_OAUTH_IDENTITY_PROVIDER,
    ProviderType.AGENT.value: lambda t, r: AGENT_IDENTITY_PROVIDER,
    ProviderType.KEYSTONE.value: decode_keystone,
    ProviderType.KEYSTONE_USERPASS.value: decode_keystone,
    ProviderType.KEYSTONE_TOKEN.value: decode_keystone,
}
