"""Firebase ID token verification.

Uses the Firebase Admin SDK. The service account is read from
``FIREBASE__SERVICE_ACCOUNT_JSON`` as base64-encoded JSON; when it is absent
or unreadable, application default credentials are used instead. The
service account must never be shipped to clients.
"""

import asyncio
import base64
import binascii
import json
import threading

import firebase_admin
import logfire
from firebase_admin import auth, credentials, exceptions

from chatly.adapter.error import InvalidTokenError
from chatly.domain.service.identity_service import IdentityVerifier
from chatly.domain.value import VerifiedIdentity

APP_NAME = "chatly"
MOCK_TOKEN_PREFIX = "mock-token:"


class FirebaseIdentityVerifier(IdentityVerifier):
    """Base class for Firebase verifiers.

    Provides type distinction for dependency injection.
    """

    pass


def decode_service_account(encoded: str | None) -> dict | None:
    """Decode a base64 service account JSON, or None if unset or unreadable."""
    if not encoded:
        return None
    try:
        return json.loads(base64.b64decode(encoded).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logfire.error(
            "Failed to parse FIREBASE__SERVICE_ACCOUNT_JSON; ensure it is a base64 JSON string",
            error=str(e),
        )
        return None


class RealFirebaseIdentityVerifier(FirebaseIdentityVerifier):
    """Verifies Firebase ID tokens with the Admin SDK."""

    def __init__(
        self, service_account_json: str | None = None, project_id: str | None = None
    ) -> None:
        """Initialize verifier. The Firebase app is created on first use.

        Args:
            service_account_json: Base64-encoded service account JSON
            project_id: Firebase project id (optional with a service account)
        """
        self.service_account_json = service_account_json
        self.project_id = project_id
        self._app: firebase_admin.App | None = None
        self._lock = threading.Lock()

    def _get_app(self) -> firebase_admin.App:
        with self._lock:
            if self._app is not None:
                return self._app

            try:
                self._app = firebase_admin.get_app(APP_NAME)
                return self._app
            except ValueError:
                # Not initialized yet
                pass

            options = {"projectId": self.project_id} if self.project_id else None
            account = decode_service_account(self.service_account_json)
            if account is None:
                logfire.warn(
                    "Firebase service account not configured, using application default credentials"
                )
                credential = None
            else:
                credential = credentials.Certificate(account)

            self._app = firebase_admin.initialize_app(
                credential=credential, options=options, name=APP_NAME
            )
            logfire.info("Firebase Admin initialized", project_id=self.project_id)
            return self._app

    def _verify_sync(self, token: str) -> VerifiedIdentity:
        try:
            decoded = auth.verify_id_token(token, app=self._get_app())
        except (ValueError, exceptions.FirebaseError) as e:
            raise InvalidTokenError(str(e)) from e

        return VerifiedIdentity(
            uid=decoded["uid"],
            email=decoded.get("email"),
            name=decoded.get("name") or decoded.get("displayName"),
        )

    async def verify(self, token: str) -> VerifiedIdentity:
        """Verify an ID token.

        The SDK call is blocking (it may fetch Google's public keys), so it
        runs in a worker thread.

        Raises:
            InvalidTokenError: If the token is malformed, expired, revoked or
                issued for another project
        """
        return await asyncio.to_thread(self._verify_sync, token)


class MockFirebaseIdentityVerifier(FirebaseIdentityVerifier):
    """Mock verifier for development and testing.

    Accepts ``mock-token:<uid>`` and rejects everything else.
    """

    async def verify(self, token: str) -> VerifiedIdentity:
        """Verify a mock token."""
        if not token.startswith(MOCK_TOKEN_PREFIX):
            raise InvalidTokenError("Invalid mock token")
        uid = token[len(MOCK_TOKEN_PREFIX) :]
        if not uid:
            raise InvalidTokenError("Mock token has no uid")
        return VerifiedIdentity(
            uid=uid, email=f"{uid}@example.com", name=f"Test User {uid}"
        )
