"""Unit tests for Firebase ID token verification."""

import base64
import json
from unittest.mock import MagicMock, patch

import pytest

from chatly.adapter.error import InvalidTokenError
from chatly.adapter.firebase.auth import (
    MockFirebaseIdentityVerifier,
    RealFirebaseIdentityVerifier,
    decode_service_account,
)


class TestDecodeServiceAccount:
    """Tests for decode_service_account."""

    def test_decodes_base64_json(self):
        """A base64 JSON document decodes to a dict."""
        account = {"type": "service_account", "project_id": "chatly-test"}
        encoded = base64.b64encode(json.dumps(account).encode()).decode()

        assert decode_service_account(encoded) == account

    @pytest.mark.parametrize("encoded", [None, "", "not base64!!", "bm90IGpzb24="])
    def test_unset_or_unreadable_is_none(self, encoded):
        """Missing, non-base64 and non-JSON values fall back to None."""
        assert decode_service_account(encoded) is None


class TestMockFirebaseIdentityVerifier:
    """Tests for MockFirebaseIdentityVerifier."""

    @pytest.mark.asyncio
    async def test_accepts_mock_token(self):
        """mock-token:<uid> yields that uid."""
        identity = await MockFirebaseIdentityVerifier().verify("mock-token:alice")

        assert identity.uid == "alice"
        assert identity.email == "alice@example.com"
        assert identity.name == "Test User alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["eyJhbGciOi.fake", "mock-token:", "alice"])
    async def test_rejects_other_tokens(self, token):
        """Anything else is invalid."""
        with pytest.raises(InvalidTokenError):
            await MockFirebaseIdentityVerifier().verify(token)


class TestRealFirebaseIdentityVerifier:
    """Tests for RealFirebaseIdentityVerifier with the SDK patched out."""

    @pytest.mark.asyncio
    async def test_maps_decoded_claims(self):
        """Decoded claims become a VerifiedIdentity."""
        verifier = RealFirebaseIdentityVerifier(project_id="chatly-test")

        with (
            patch.object(verifier, "_get_app", return_value=MagicMock()),
            patch(
                "chatly.adapter.firebase.auth.auth.verify_id_token",
                return_value={"uid": "u1", "email": "u1@example.com", "name": "U One"},
            ),
        ):
            identity = await verifier.verify("real-token")

        assert identity.uid == "u1"
        assert identity.email == "u1@example.com"
        assert identity.name == "U One"

    @pytest.mark.asyncio
    async def test_sdk_rejection_is_invalid_token(self):
        """SDK errors become InvalidTokenError."""
        verifier = RealFirebaseIdentityVerifier(project_id="chatly-test")

        with (
            patch.object(verifier, "_get_app", return_value=MagicMock()),
            patch(
                "chatly.adapter.firebase.auth.auth.verify_id_token",
                side_effect=ValueError("Wrong number of segments"),
            ),
        ):
            with pytest.raises(InvalidTokenError):
                await verifier.verify("garbage")
