"""FCM adapter implementing ReadingBroadcaster."""

import asyncio
import logging

import firebase_admin
from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import messaging
from google.auth.exceptions import GoogleAuthError

from fng.domain.reading.model.value import SentimentReading
from fng.domain.reading.port.broadcaster import ReadingBroadcaster
from fng.domain.shared.error import PublishError

logger = logging.getLogger(__name__)


def build_message(reading: SentimentReading, topic: str) -> messaging.Message:
    """Silent, data-only topic message.

    Android gets high priority delivery; APNs gets a background push with
    content-available so the app wakes without showing an alert.
    """
    return messaging.Message(
        topic=topic,
        data=reading.as_push_data(),
        android=messaging.AndroidConfig(priority="high"),
        apns=messaging.APNSConfig(
            headers={"apns-push-type": "background", "apns-priority": "5"},
            payload=messaging.APNSPayload(aps=messaging.Aps(content_available=True)),
        ),
    )


class FcmBroadcaster(ReadingBroadcaster):
    """Publishes readings to an FCM topic."""

    def __init__(self, app: firebase_admin.App, topic: str = "fng-all") -> None:
        self._app = app
        self._topic = topic

    async def publish(self, reading: SentimentReading) -> None:
        message = build_message(reading, self._topic)
        try:
            # messaging.send is blocking; keep the event loop free
            message_id = await asyncio.to_thread(messaging.send, message, app=self._app)
        except (firebase_exceptions.FirebaseError, GoogleAuthError) as e:
            raise PublishError(f"FCM send to topic '{self._topic}' failed: {e}") from e

        logger.debug("Published to topic %s (message_id=%s)", self._topic, message_id)
