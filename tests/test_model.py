import json

import pytest

from fazuh.checkin.error import ConfigError
from fazuh.checkin.model import Account
from fazuh.checkin.model import AuthenticatedAccount
from fazuh.checkin.model import Failure
from fazuh.checkin.model import Success
from fazuh.checkin.model import parse_accounts


def test_parse_accounts():
    raw = json.dumps(
        [
            {"name": "main", "email": "main@example.com", "passwd": "pw1"},
            {"name": "alt", "email": "alt@example.com", "passwd": "pw2", "note": "ignored"},
        ]
    )

    assert parse_accounts(raw) == [
        Account(name="main", email="main@example.com", passwd="pw1"),
        Account(name="alt", email="alt@example.com", passwd="pw2"),
    ]


def test_parse_accounts_empty_array():
    assert parse_accounts("[]") == []


@pytest.mark.parametrize("raw", [None, ""])
def test_parse_accounts_missing(raw):
    with pytest.raises(ConfigError, match="not set"):
        parse_accounts(raw)


def test_parse_accounts_invalid_json():
    with pytest.raises(ConfigError, match="not valid JSON"):
        parse_accounts("[{name: main}]")


def test_parse_accounts_not_array():
    with pytest.raises(ConfigError, match="JSON array"):
        parse_accounts('{"name": "main"}')


def test_parse_accounts_bad_entry():
    raw = json.dumps([{"name": "main", "email": "main@example.com", "passwd": "pw"}, {"name": "x"}])

    with pytest.raises(ConfigError, match="#1"):
        parse_accounts(raw)


def test_repr_hides_secrets():
    account = AuthenticatedAccount(name="main", email="m@example.com", passwd="pw", cookie="uid=1")

    assert "pw" not in repr(account)
    assert "uid=1" not in repr(account)


def test_outcome_ok():
    assert Success("x").ok
    assert not Failure("x").ok
