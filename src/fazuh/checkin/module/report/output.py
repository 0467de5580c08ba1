import asyncio
from pathlib import Path
import uuid

from loguru import logger


class GithubOutput:
    """Writes step outputs to the file GitHub Actions exposes as GITHUB_OUTPUT."""

    def __init__(self, file_path: str | Path | None = None):
        self.file_path = Path(file_path) if file_path else None

    @property
    def enabled(self) -> bool:
        return self.file_path is not None

    @staticmethod
    def serialize(name: str, value: str, delimiter: str | None = None) -> str:
        """Multi-line output in the heredoc form `name<<DELIMITER ... DELIMITER`.

        The delimiter is random unless given, so no line of `value` can end the
        output early.
        """
        if delimiter is None:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
        return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"

    def _append(self, content: str):
        with open(self.file_path, "a", encoding="utf-8") as f:
            f.write(content)

    async def write(self, name: str, value: str):
        """Appends an output asynchronously. Does nothing outside of CI."""
        if not self.enabled:
            logger.debug(f"GITHUB_OUTPUT is not set. Skipping output '{name}'.")
            return

        await asyncio.to_thread(self._append, self.serialize(name, value))
        logger.debug(f"Wrote output '{name}' to {self.file_path}.")
