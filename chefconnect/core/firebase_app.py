import logging

import firebase_admin
from firebase_admin import credentials

from chefconnect.config import Settings

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "chefconnect"


def initialize_firebase_app(settings: Settings) -> firebase_admin.App:
    """Initialize (or reuse) the named Firebase Admin app from the service account settings."""
    try:
        return firebase_admin.get_app(FIREBASE_APP_NAME)
    except ValueError:
        pass

    private_key = settings.get_firebase_private_key()
    if not (settings.firebase_project_id and settings.firebase_client_email and private_key):
        raise RuntimeError(
            "FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY must be set"
        )

    cred = credentials.Certificate({
        "type": "service_account",
        "project_id": settings.firebase_project_id,
        "client_email": settings.firebase_client_email,
        "private_key": private_key,
        "token_uri": "https://oauth2.googleapis.com/token",
    })
    app = firebase_admin.initialize_app(
        cred,
        {"projectId": settings.firebase_project_id},
        name=FIREBASE_APP_NAME,
    )
    logger.info("Firebase Admin initialized for project %s", settings.firebase_project_id)
    return app
