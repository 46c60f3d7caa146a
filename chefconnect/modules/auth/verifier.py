import hashlib
import logging
import time
from typing import Dict, Optional, Tuple

import firebase_admin
from firebase_admin import auth as firebase_auth

from chefconnect.core.exceptions import InvalidCredential, NotFoundError, UnexpectedError
from chefconnect.modules.auth.schemas import VerifiedIdentity

logger = logging.getLogger(__name__)


class FirebaseIdentityVerifier:
    """Verifies Firebase ID tokens. Keeps a short TTL cache so parallel requests with one token verify once."""

    def __init__(
        self,
        app: Optional[firebase_admin.App] = None,
        cache_ttl_seconds: int = 60,
        cache_max_size: int = 500,
    ):
        self.app = app
        self.cache_ttl_seconds = cache_ttl_seconds
        self.cache_max_size = cache_max_size
        self._cache: Dict[str, Tuple[VerifiedIdentity, float]] = {}

    def verify(self, token: str) -> VerifiedIdentity:
        if not token:
            raise InvalidCredential("Unauthorized - No token provided")

        cache_key = hashlib.sha256(token.encode()).hexdigest()
        now = time.monotonic()
        cached = self._cache.get(cache_key)
        if cached is not None:
            identity, expiry = cached
            if now < expiry:
                return identity
            del self._cache[cache_key]

        try:
            decoded = firebase_auth.verify_id_token(token, app=self.app)
        except (firebase_auth.InvalidIdTokenError, firebase_auth.UserDisabledError, ValueError) as e:
            logger.info("Rejected ID token: %s", e)
            raise InvalidCredential("Unauthorized - Invalid token", details=str(e))
        except firebase_auth.CertificateFetchError as e:
            logger.error("Could not fetch Firebase public keys: %s", e)
            raise UnexpectedError("Authentication service unavailable", details=str(e))

        identity = VerifiedIdentity(
            subject_id=decoded["uid"],
            phone_number=decoded.get("phone_number"),
            claims=decoded,
        )
        # A cached identity must not outlive the token's own exp claim
        lifetime = float(self.cache_ttl_seconds)
        if "exp" in decoded:
            lifetime = min(lifetime, float(decoded["exp"]) - time.time())
        if lifetime > 0 and len(self._cache) < self.cache_max_size:
            self._cache[cache_key] = (identity, now + lifetime)
        return identity

    def delete_subject(self, subject_id: str) -> None:
        """Remove the Firebase account backing a deleted user."""
        self._cache = {k: v for k, v in self._cache.items() if v[0].subject_id != subject_id}
        try:
            firebase_auth.delete_user(subject_id, app=self.app)
        except firebase_auth.UserNotFoundError:
            raise NotFoundError("Firebase user not found")
        except Exception as e:
            logger.error("Failed to delete Firebase user %s: %s", subject_id, e)
            raise UnexpectedError("Failed to delete Firebase user", details=str(e))
