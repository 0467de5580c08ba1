import asyncio

import aiohttp
from loguru import logger

from fazuh.checkin.config import Config
from fazuh.checkin.ikuuu.ikuuu import Ikuuu
from fazuh.checkin.model import Account
from fazuh.checkin.model import Failure
from fazuh.checkin.model import Outcome
from fazuh.checkin.model import Success


class DailyCheckin:
    """Runs login and check-in for every configured account.

    Each account is processed as one sequential unit (login, then check-in).
    All units run concurrently and every unit settles into exactly one
    Outcome, so one account failing never affects the others.
    """

    def __init__(self, conf: Config, accounts: list[Account]):
        self.conf = conf
        self.accounts = accounts

    async def run(self) -> list[Outcome]:
        """Processes all accounts and returns their outcomes in input order."""
        if not self.accounts:
            logger.warning("No accounts configured. Nothing to do.")
            return []

        logger.info(f"Checking in {len(self.accounts)} accounts on {self.conf.host}...")

        # Cookies are sent explicitly per account, so the session must not store any
        async with aiohttp.ClientSession(cookie_jar=aiohttp.DummyCookieJar()) as session:
            ikuuu = Ikuuu(self.conf, session)
            outcomes = await asyncio.gather(
                *(self._process(ikuuu, account) for account in self.accounts)
            )

        return list(outcomes)

    async def _process(self, ikuuu: Ikuuu, account: Account) -> Outcome:
        try:
            authenticated = await ikuuu.login(account)
            message = await ikuuu.checkin(authenticated)
        except Exception as e:
            # Some transport errors (e.g. timeouts) carry no message
            message = str(e) or type(e).__name__
            logger.error(f"{account.name}: {message}")
            return Failure(message)

        return Success(message)
