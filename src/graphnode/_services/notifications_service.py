from ._base_service import BaseService


class NotificationsService(BaseService):
    """Real-time notifications of the signed-in user."""

    _base_path = "/v1/notifications"

    def stream_url(self) -> str:
        """Absolute URL of the notification event stream.

        No request is sent. The endpoint streams ``text/event-stream`` and
        authenticates with the session cookie, so an SSE consumer must send
        cookies when connecting.

        Returns:
            str: The stream URL.
        """
        return self._request.path("/stream").url()
