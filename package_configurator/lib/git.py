from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ConfigurationError
from .command import CmdResult, CommandRunner

logger = logging.getLogger(__name__)


def git_clone(runner: CommandRunner, url: str, destination: str | Path) -> CmdResult:
    """Clone url into destination.

    git refuses to clone into a non-empty directory; fail the same way before
    spawning it so a dry run or a recorded run reports the same error.
    """

    dest = Path(destination)
    if dest.exists() and (not dest.is_dir() or any(dest.iterdir())):
        raise ConfigurationError(f"Clone destination already exists and is not empty: {dest}")

    return runner.run(["git", "clone", url, str(dest)])
