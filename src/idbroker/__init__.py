"""
idbroker - identity provider configuration for an identity broker service.
"""

from .idp import IdentityProvider, KeystoneParams, ProviderType, decode, decode_all

__version__ = "0.1.0"
__all__ = ["IdentityProvider", "KeystoneParams", "ProviderType", "decode", "decode_all"]
