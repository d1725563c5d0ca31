"""
Identity provider model.

An identity provider is described by a type tag and, for the keystone
family, the parameters needed to reach the keystone server.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Any

from .errors import UnrecognizedTypeError


class ProviderType(str, Enum):
    """Type tags of the supported identity providers."""

    UBUNTU_SSO = "usso"
    UBUNTU_SSO_OAUTH = "usso_oauth"
    AGENT = "agent"
    KEYSTONE = "keystone"
    KEYSTONE_USERPASS = "keystone_userpass"
    KEYSTONE_TOKEN = "keystone_token"

    def __str__(self) -> str:
        return self.value


KEYSTONE_TYPES = frozenset({
    ProviderType.KEYSTONE,
    ProviderType.KEYSTONE_USERPASS,
    ProviderType.KEYSTONE_TOKEN,
})


@dataclass(frozen=True)
class KeystoneParams:
    """Parameters to use with a keystone identity provider."""

    # Name of the identity provider within the identity manager. It is
    # used as part of the url for communicating with the provider.
    name: str
    url: str
    # Appended to any usernames or groups from this provider.
    domain: str = ""
    # Shown when a list of providers is offered to a user to choose.
    description: str = ""

    def qualify(self, username: str) -> str:
        """Return username@domain, or username when no domain is set."""
        if not self.domain:
            return username
        return f"{username}@{self.domain}"


@dataclass(frozen=True)
class IdentityProvider:
    """Configuration of an identity provider."""

    type: ProviderType
    config: Optional[KeystoneParams] = None

    def __post_init__(self):
        try:
            provider_type = ProviderType(self.type)
        except ValueError as e:
            raise UnrecognizedTypeError(str(self.type)) from e
        object.__setattr__(self, "type", provider_type)

    def to_dict(self) -> Dict[str, Any]:
        """Render the provider back into its configuration record."""
        record: Dict[str, Any] = {"type": self.type.value}
        if self.config is not None:
            record["name"] = self.config.name
            if self.config.domain:
                record["domain"] = self.config.domain
            if self.config.description:
                record["description"] = self.config.description
            record["url"] = self.config.url
        return record


# Identity provider that uses Ubuntu SSO.
UBUNTU_SSO_IDENTITY_PROVIDER = IdentityProvider(ProviderType.UBUNTU_SSO)

# Identity provider that uses Ubuntu SSO OAuth.
UBUNTU_SSO_OAUTH_IDENTITY_PROVIDER = IdentityProvider(ProviderType.UBUNTU_SSO_OAUTH)

# Identity provider that uses the agent login mechanism.
AGENT_IDENTITY_PROVIDER = IdentityProvider(ProviderType.AGENT)


def keystone_identity_provider(params: KeystoneParams) -> IdentityProvider:
    """Create an identity provider using a keystone service."""
    return _new_keystone_identity_provider(ProviderType.KEYSTONE, params)


def keystone_userpass_identity_provider(params: KeystoneParams) -> IdentityProvider:
    """Create a keystone identity provider with a non-interactive interface."""
    return _new_keystone_identity_provider(ProviderType.KEYSTONE_USERPASS, params)


def keystone_token_identity_provider(params: KeystoneParams) -> IdentityProvider:
    """Create an identity provider that identifies users by keystone tokens."""
    return _new_keystone_identity_provider(ProviderType.KEYSTONE_TOKEN, params)


def _new_keystone_identity_provider(provider_type: ProviderType, params: KeystoneParams) -> IdentityProvider:
    return IdentityProvider(type=provider_type, config=params)
