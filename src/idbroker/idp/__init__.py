"""
Identity provider configuration for the identity broker.
Decodes provider records into typed, validated IdentityProvider values.
"""

from .base import (
    AGENT_IDENTITY_PROVIDER,
    KEYSTONE_TYPES,
    UBUNTU_SSO_IDENTITY_PROVIDER,
    UBUNTU_SSO_OAUTH_IDENTITY_PROVIDER,
    IdentityProvider,
    KeystoneParams,
    ProviderType,
    keystone_identity_provider,
    keystone_token_identity_provider,
    keystone_userpass_identity_provider,
)
from .decoder import decode, decode_all
from .errors import DecodeError, MissingFieldError, UnderlyingDecodeError, UnrecognizedTypeError

__all__ = [
    "AGENT_IDENTITY_PROVIDER",
    "KEYSTONE_TYPES",
    "UBUNTU_SSO_IDENTITY_PROVIDER",
    "UBUNTU_SSO_OAUTH_IDENTITY_PROVIDER",
    "DecodeError",
    "IdentityProvider",
    "KeystoneParams",
    "MissingFieldError",
    "ProviderType",
    "UnderlyingDecodeError",
    "UnrecognizedTypeError",
    "decode",
    "decode_all",
    "keystone_identity_provider",
    "keystone_token_identity_provider",
    "keystone_userpass_identity_provider",
]
