from dataclasses import dataclass
import json
from typing import Any

from loguru import logger

from fazuh.checkin.error import ConfigError


@dataclass(frozen=True)
class Account:
    name: str
    email: str
    passwd: str

    def __repr__(self):
        # Keep the password out of logs
        return f"Account(name={self.name!r}, email={self.email!r})"


@dataclass(frozen=True)
class AuthenticatedAccount(Account):
    cookie: str = ""

    def __repr__(self):
        return f"AuthenticatedAccount(name={self.name!r}, email={self.email!r})"


@dataclass(frozen=True)
class Success:
    message: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    message: str

    @property
    def ok(self) -> bool:
        return False


Outcome = Success | Failure


def _parse_account(index: int, item: Any) -> Account:
    if not isinstance(item, dict):
        raise ConfigError(f"Account #{index} must be a JSON object.")

    fields = {}
    for key in ("name", "email", "passwd"):
        value = item.get(key)
        if not isinstance(value, str):
            raise ConfigError(f"Account #{index} is missing a string '{key}' field.")
        fields[key] = value

    return Account(**fields)


def parse_accounts(raw: str | None) -> list[Account]:
    """Parses the ACCOUNTS JSON array into Account objects.

    Args:
        raw: JSON text, e.g. '[{"name": "main", "email": "a@b.c", "passwd": "..."}]'.

    Returns:
        list[Account]: Accounts in the same order as the array. May be empty.

    Raises:
        ConfigError: If the value is missing, not JSON, not an array, or holds a malformed entry.
    """
    if not raw:
        raise ConfigError("Account configuration is not set.")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        raise ConfigError("Account configuration is not valid JSON.")

    if not isinstance(data, list):
        raise ConfigError("Account configuration must be a JSON array.")

    accounts = [_parse_account(i, item) for i, item in enumerate(data)]
    logger.info(f"Loaded {len(accounts)} accounts.")
    return accounts
