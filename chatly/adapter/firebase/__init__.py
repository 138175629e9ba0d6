"""Firebase identity adapter."""

from chatly.adapter.firebase.auth import (
    FirebaseIdentityVerifier,
    MockFirebaseIdentityVerifier,
    RealFirebaseIdentityVerifier,
)

__all__ = [
    "FirebaseIdentityVerifier",
    "MockFirebaseIdentityVerifier",
    "RealFirebaseIdentityVerifier",
]
