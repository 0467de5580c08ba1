import os
from typing import Self

from dotenv import load_dotenv
from loguru import logger

from fazuh.checkin.model import Account
from fazuh.checkin.model import parse_accounts

DEFAULT_HOST = "ikuuu.one"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class Config:
    """Application configuration.

    Holds the service host, the raw account list and the CI output location.
    It is populated once at process start and handed to the components that
    need it, so nothing else reads the environment.
    """

    def __init__(
        self,
        accounts_json: str | None = None,
        host: str = DEFAULT_HOST,
        user_agent: str = DEFAULT_USER_AGENT,
        github_output: str | None = None,
    ):
        self.accounts_json = accounts_json
        self.host = host
        self.user_agent = user_agent
        self.github_output = github_output

    @classmethod
    def load(cls) -> Self:
        """Load environment variables

        The priority is environment variables > .env file
        See .env-example for the required variables
        """
        load_dotenv()
        accounts_json = os.getenv("ACCOUNTS")
        if accounts_json is None:
            logger.warning("ACCOUNTS environment variable is not set.")

        return cls(
            accounts_json=accounts_json,
            host=os.getenv("HOST") or DEFAULT_HOST,
            user_agent=os.getenv("USER_AGENT") or DEFAULT_USER_AGENT,
            github_output=os.getenv("GITHUB_OUTPUT") or None,
        )

    def load_accounts(self) -> list[Account]:
        """Parse the configured account list.

        Raises:
            ConfigError: If ACCOUNTS is missing or malformed.
        """
        return parse_accounts(self.accounts_json)
