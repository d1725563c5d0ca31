"""
Tests for the identity provider model and constructors.
"""

import dataclasses
import pytest

from idbroker.idp import (
    AGENT_IDENTITY_PROVIDER,
    KEYSTONE_TYPES,
    UBUNTU_SSO_IDENTITY_PROVIDER,
    IdentityProvider,
    KeystoneParams,
    ProviderType,
    UnrecognizedTypeError,
    decode,
    keystone_identity_provider,
    keystone_token_identity_provider,
    keystone_userpass_identity_provider,
)


@pytest.fixture
def keystone_params():
    """Keystone parameters shared by the constructor tests."""
    return KeystoneParams(
        name="openstack",
        url="https://keystone.example.com:5000",
        domain="openstack",
        description="OpenStack"
    )


class TestKeystoneConstructors:
    """Test the keystone family constructors."""

    def test_constructors_differ_only_in_type(self, keystone_params):
        """Test that the constructors share the same payload."""
        providers = [
            keystone_identity_provider(keystone_params),
            keystone_userpass_identity_provider(keystone_params),
            keystone_token_identity_provider(keystone_params),
        ]

        assert [p.type for p in providers] == ["keystone", "keystone_userpass", "keystone_token"]
        assert all(p.config == keystone_params for p in providers)
        assert {p.type for p in providers} == KEYSTONE_TYPES

    def test_constructor_matches_decode(self, keystone_params):
        """Test that a constructed provider equals the decoded one."""
        record = {
            "type": "keystone_userpass",
            "name": "openstack",
            "url": "https://keystone.example.com:5000",
            "domain": "openstack",
            "description": "OpenStack"
        }

        assert decode(record) == keystone_userpass_identity_provider(keystone_params)


class TestProviderValues:
    """Test identity provider values."""

    def test_values_are_immutable(self, keystone_params):
        """Test that providers and params cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            UBUNTU_SSO_IDENTITY_PROVIDER.type = ProviderType.AGENT
        with pytest.raises(dataclasses.FrozenInstanceError):
            keystone_params.url = "https://other.example.com"

    def test_type_is_coerced(self):
        """Test that a string type tag becomes a ProviderType."""
        provider = IdentityProvider("agent")

        assert provider.type is ProviderType.AGENT
        assert provider == AGENT_IDENTITY_PROVIDER

    def test_unknown_type_rejected(self):
        """Test that providers cannot be built with an unknown type."""
        with pytest.raises(UnrecognizedTypeError) as exc_info:
            IdentityProvider("bogus")

        assert exc_info.value.type == "bogus"

    def test_values_are_hashable(self, keystone_params):
        """Test that providers can be held in sets."""
        providers = {
            AGENT_IDENTITY_PROVIDER,
            IdentityProvider(ProviderType.AGENT),
            keystone_identity_provider(keystone_params),
        }

        assert len(providers) == 2

    def test_provider_type_is_string(self):
        """Test that provider types compare equal to their tags."""
        assert ProviderType.UBUNTU_SSO_OAUTH == "usso_oauth"
        assert str(ProviderType.KEYSTONE_TOKEN) == "keystone_token"
        assert f"{ProviderType.AGENT}" == "agent"

    def test_to_dict_singleton(self):
        """Test rendering a singleton provider."""
        assert AGENT_IDENTITY_PROVIDER.to_dict() == {"type": "agent"}

    def test_to_dict_keystone(self, keystone_params):
        """Test rendering a keystone provider."""
        assert keystone_token_identity_provider(keystone_params).to_dict() == {
            "type": "keystone_token",
            "name": "openstack",
            "domain": "openstack",
            "description": "OpenStack",
            "url": "https://keystone.example.com:5000"
        }

    def test_to_dict_omits_empty_optional_fields(self):
        """Test that empty domain and description are not rendered."""
        provider = keystone_identity_provider(KeystoneParams(name="idm", url="https://example.test"))

        assert provider.to_dict() == {"type": "keystone", "name": "idm", "url": "https://example.test"}

    def test_qualify_with_domain(self, keystone_params):
        """Test that usernames are qualified with the domain."""
        assert keystone_params.qualify("alice") == "alice@openstack"

    def test_qualify_without_domain(self):
        """Test that usernames are unchanged without a domain."""
        params = KeystoneParams(name="idm", url="https://example.test")

        assert params.qualify("alice") == "alice"
