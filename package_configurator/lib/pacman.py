from __future__ import annotations

import logging
from typing import Sequence

from .command import CmdResult, CommandRunner

logger = logging.getLogger(__name__)


def pacman_install(runner: CommandRunner, packages: Sequence[str]) -> CmdResult | None:
    if not packages:
        return None
    logger.info("Installing extra packages: %s", ", ".join(packages))
    return runner.run(["pacman", "-S", "--noconfirm", "--needed", *packages])
