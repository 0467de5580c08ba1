from dataclasses import asdict
from typing import Any

import aiohttp
from loguru import logger

from fazuh.checkin.config import Config
from fazuh.checkin.error import LoginRejected
from fazuh.checkin.error import MissingCredential
from fazuh.checkin.error import ResponseDecodeError
from fazuh.checkin.error import TransportError
from fazuh.checkin.ikuuu.cookie import format_cookie
from fazuh.checkin.ikuuu.path import Path
from fazuh.checkin.model import Account
from fazuh.checkin.model import AuthenticatedAccount


class Ikuuu:
    """Client for the ikuuu login and check-in endpoints.

    The session is owned by the caller. It must not keep cookies between
    requests (see `DailyCheckin`), since every request carries the credential
    of exactly one account.
    """

    def __init__(self, config: Config, session: aiohttp.ClientSession):
        self.config = config
        self.session = session

    @property
    def login_url(self) -> str:
        return Path.url(self.config.host, Path.LOGIN)

    @property
    def checkin_url(self) -> str:
        return Path.url(self.config.host, Path.CHECKIN)

    def login_fields(self, account: Account) -> list[tuple[str, str]]:
        """Form fields expected by the login endpoint."""
        return [
            ("host", self.config.host),
            ("email", account.email),
            ("passwd", account.passwd),
            ("code", ""),
            ("remember_me", "off"),
        ]

    async def login(self, account: Account) -> AuthenticatedAccount:
        """Logs in and returns the account together with its session cookie.

        Raises:
            TransportError: The login request did not return a 2xx status.
            ResponseDecodeError: The body is not a JSON object.
            LoginRejected: The service reported a failed login (`ret` != 1).
            MissingCredential: No usable Set-Cookie header was returned.
        """
        logger.info(f"{account.name}: Logging in...")

        form = aiohttp.FormData(self.login_fields(account), default_to_multipart=True)
        async with self.session.post(self.login_url, data=form) as response:
            self._raise_for_status(response)
            data = await self._read_json(response)

            if data.get("ret") != 1:
                raise LoginRejected(f"Login failed: {data.get('msg')}")
            logger.info(f"{account.name}: {data.get('msg')}")

            raw_cookies = response.headers.getall("Set-Cookie", [])

        if not raw_cookies:
            raise MissingCredential("Failed to obtain session cookie.")

        cookie = format_cookie(raw_cookies)
        if not cookie:
            raise MissingCredential("Failed to obtain session cookie.")

        logger.debug(f"{account.name}: Received {len(raw_cookies)} cookies.")
        return AuthenticatedAccount(**asdict(account), cookie=cookie)

    async def checkin(self, account: AuthenticatedAccount) -> str:
        """Claims the daily check-in and returns the service's message verbatim.

        Raises:
            TransportError: The check-in request did not return a 2xx status.
            ResponseDecodeError: The body is not a JSON object with a `msg` field.
        """
        headers = {
            "Cookie": account.cookie,
            "User-Agent": self.config.user_agent,
        }
        async with self.session.post(self.checkin_url, headers=headers) as response:
            self._raise_for_status(response)
            data = await self._read_json(response)

        if "msg" not in data:
            raise ResponseDecodeError("Check-in response has no message.")

        message = str(data["msg"])
        logger.info(f"{account.name}: {message}")
        return message

    @staticmethod
    def _raise_for_status(response: aiohttp.ClientResponse):
        if not 200 <= response.status < 300:
            raise TransportError(f"Request failed - {response.status}")

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> dict[str, Any]:
        # The service does not always send an application/json content type
        try:
            data = await response.json(content_type=None)
        except ValueError:
            raise ResponseDecodeError(f"Invalid JSON response from {response.url}")

        if not isinstance(data, dict):
            raise ResponseDecodeError(f"Unexpected response from {response.url}")
        return data
