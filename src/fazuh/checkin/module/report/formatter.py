from dataclasses import dataclass

from fazuh.checkin.error import InternalError
from fazuh.checkin.model import Account
from fazuh.checkin.model import Outcome

SUCCESS_ICON = "✅"
FAILURE_ICON = "❌"


@dataclass(frozen=True)
class Report:
    """Per-account result lines of one run."""

    lines: list[str]
    failed: bool

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def format_line(account: Account, outcome: Outcome) -> str:
    """'main: ✅ Checked in, got 500MB' or 'main: ❌ Login failed: ...'"""
    icon = SUCCESS_ICON if outcome.ok else FAILURE_ICON
    return f"{account.name}: {icon} {outcome.message}"


def build_report(accounts: list[Account], outcomes: list[Outcome]) -> Report:
    """Pairs each account with its outcome by position.

    Raises:
        InternalError: If there is not exactly one outcome per account.
    """
    if len(accounts) != len(outcomes):
        raise InternalError(
            f"Expected {len(accounts)} outcomes, got {len(outcomes)} instead."
        )

    lines = [format_line(account, outcome) for account, outcome in zip(accounts, outcomes)]
    failed = any(not outcome.ok for outcome in outcomes)
    return Report(lines=lines, failed=failed)
