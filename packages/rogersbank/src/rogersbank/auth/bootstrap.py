import logging

from rogersbank.client import RogersBankClient
from rogersbank.urls import RogersBankApiUrls

logger = logging.getLogger(__name__)


class SessionBootstrap:
    """Open the start page so the server sets its session cookies.

    The cookies are kept by the client's httpx cookie jar and sent with every
    following request of the login attempt.
    """

    def __init__(self, client: RogersBankClient) -> None:
        self.client = client

    async def start(self) -> None:
        """
        Request the start page once, without credentials.

        Raises:
            HTTPError: On transport failure or a non-200 status.
            NoDataReceivedError: If the start page is empty.
        """
        logger.debug("Requesting start page")
        response = await self.client.send("GET", RogersBankApiUrls.START)
        self.client.ensure_success(response)
        logger.debug(f"Session started with {len(self.client.client.cookies)} cookies")
