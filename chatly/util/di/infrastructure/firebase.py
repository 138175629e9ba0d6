"""Firebase infrastructure providers."""

from dishka import Scope, provide

from chatly.adapter.firebase import (
    FirebaseIdentityVerifier,
    RealFirebaseIdentityVerifier,
)
from chatly.config import Settings
from chatly.util.di.base import ProviderBase


class FirebaseProvider(ProviderBase):
    """Firebase component base."""

    __mock_component__ = "firebase"


class ProdFirebaseProvider(FirebaseProvider):
    """Production Firebase provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_firebase_verifier(self, settings: Settings) -> FirebaseIdentityVerifier:
        """Provide Firebase ID token verifier.

        Returns:
            Verifier using the Admin SDK
        """
        return RealFirebaseIdentityVerifier(
            service_account_json=settings.firebase.service_account_json,
            project_id=settings.firebase.project_id,
        )
