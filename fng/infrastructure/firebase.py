"""Firebase app bootstrap shared by the Firestore store and FCM push."""

import logging
from typing import Iterable

import firebase_admin
from dishka import Provider, provide
from firebase_admin import credentials

from fng.config import Config, FirebaseConfig
from fng.domain.shared.error import ConfigurationError
from fng.util.di.scope import Scope

logger = logging.getLogger(__name__)

APP_NAME = "fng"


def initialize_firebase(config: FirebaseConfig) -> firebase_admin.App:
    """Create a named Firebase app from a service-account file or ADC."""
    try:
        if config.credentials_file:
            credential = credentials.Certificate(config.credentials_file)
        else:
            credential = credentials.ApplicationDefault()
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Unusable Firebase credentials: {e}") from e

    options = {"projectId": config.project_id} if config.project_id else None
    app = firebase_admin.initialize_app(credential, options=options, name=APP_NAME)
    logger.info("Firebase app initialized (project=%s)", config.project_id or "<default>")
    return app


class FirebaseProvider(Provider):
    """APP-scoped Firebase app, deleted when the container closes."""

    @provide(scope=Scope.APP)
    def get_firebase_app(self, config: Config) -> Iterable[firebase_admin.App]:
        app = initialize_firebase(config.firebase)
        yield app
        firebase_admin.delete_app(app)
