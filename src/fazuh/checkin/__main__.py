"""Main entry point for the Checkin application.

Loads the configuration, checks in every account, and reports the results
to the console and to GitHub Actions. The exit code is non-zero when any
account failed.
"""

import argparse
import asyncio
import sys

from loguru import logger

from fazuh.checkin.config import Config
from fazuh.checkin.error import ConfigError
from fazuh.checkin.module.daily_checkin import DailyCheckin
from fazuh.checkin.module.report.formatter import FAILURE_ICON
from fazuh.checkin.module.report.formatter import build_report
from fazuh.checkin.module.report.output import GithubOutput

RESULT_OUTPUT = "result"


async def main(argv: list[str] | None = None) -> int:
    """Async entry point.

    Returns:
        int: Process exit code. 0 if every account checked in, 1 otherwise.
    """
    parser = argparse.ArgumentParser(description="ikuuu daily check-in")
    parser.add_argument(
        "--host",
        type=str,
        help="Service domain. Overrides the HOST environment variable.",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Do not write logs to the log/ directory",
    )
    args = parser.parse_args(argv)

    conf = Config.load()
    if args.host:
        conf.host = args.host

    if not args.no_log_file:
        logger.add("log/{time}.log", rotation="1 day")

    output = GithubOutput(conf.github_output)

    try:
        accounts = conf.load_accounts()
    except ConfigError as e:
        message = f"{FAILURE_ICON} {e}"
        logger.error(message)
        await output.write(RESULT_OUTPUT, message)
        return 1

    try:
        outcomes = await DailyCheckin(conf, accounts).run()
        report = build_report(accounts, outcomes)
    except Exception as e:
        logger.error(f"{FAILURE_ICON} Script execution error: {e}")
        await output.write(RESULT_OUTPUT, f"Script execution error: {e}")
        return 1

    logger.info("======== Check-in Results ========")
    for line, outcome in zip(report.lines, outcomes):
        if outcome.ok:
            logger.success(line)
        else:
            logger.error(line)

    await output.write(RESULT_OUTPUT, report.text)
    return 1 if report.failed else 0


def main_sync():
    """Synchronous wrapper for the async main function."""
    try:
        code = asyncio.run(main())
    except Exception as e:
        logger.error(f"{FAILURE_ICON} Script execution error: {e}")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main_sync()
