import logging

from chefconnect.core.exceptions import ValidationError
from chefconnect.modules.auth.schemas import AuthResponse
from chefconnect.modules.auth.verifier import FirebaseIdentityVerifier
from chefconnect.modules.users.service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, verifier: FirebaseIdentityVerifier, users: UserService):
        self.verifier = verifier
        self.users = users

    def verify_and_upsert(self, id_token: str) -> AuthResponse:
        """Verify a Firebase ID token and create the user on first sight, otherwise stamp updated_at"""
        if not id_token:
            raise ValidationError("ID token is required")

        identity = self.verifier.verify(id_token)
        if not identity.phone_number:
            raise ValidationError("Phone number not found in token")

        existing = self.users.find_by_external_id(identity.subject_id)
        if existing:
            user = self.users.touch_user(identity.subject_id)
        else:
            user = self.users.create_user(identity.subject_id, identity.phone_number)

        return AuthResponse(user=user)
