"""
Repository Sync Service for the trend dataset.

Keeps the local checkout of the dataset repository current by cloning it on
first run and pulling on every later run.
"""

import asyncio
from pathlib import Path
from typing import List

import structlog

logger = structlog.get_logger(__name__)


class RepositorySyncService:

    def __init__(
        self,
        repository_url: str,
        repository_path: str,
        interval_minutes: int = 20,
        git_executable: str = "git"
    ):
        """
        Initialize the sync service.

        Args:
            repository_url: Remote git repository to clone
            repository_path: Local checkout directory
            interval_minutes: Minutes to wait between syncs
            git_executable: git binary to invoke
        """
        self.repository_url = repository_url
        self.repository_path = Path(repository_path)
        self.interval_minutes = interval_minutes
        self.git_executable = git_executable

    def build_command(self) -> List[str]:
        if not self.repository_path.exists():
            return [self.git_executable, "clone", self.repository_url, str(self.repository_path)]
        return [self.git_executable, "-C", str(self.repository_path), "pull"]

    async def sync_once(self) -> bool:
        """
        Clone or pull the dataset repository once.

        Returns:
            True if git exited successfully
        """
        command = self.build_command()
        action = command[1] if command[1] == "clone" else "pull"

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
            _, stderr = await process.communicate()
        except OSError as e:
            logger.warning("Repository sync could not start git", action=action, error=str(e))
            return False

        if process.returncode != 0:
            logger.warning(
                "Repository sync failed",
                action=action,
                returncode=process.returncode,
                stderr=stderr.decode("utf-8", errors="replace").strip()
            )
            return False

        logger.info("Repository sync completed", action=action, path=str(self.repository_path))
        return True

    async def run_forever(self) -> None:
        logger.info(
            "Repository sync scheduled",
            repository=self.repository_url,
            interval_minutes=self.interval_minutes
        )

        while True:
            await self.sync_once()
            await asyncio.sleep(self.interval_minutes * 60)
