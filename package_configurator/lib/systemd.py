from __future__ import annotations

import logging

from .command import CmdResult, CommandRunner

logger = logging.getLogger(__name__)


def enable_service(runner: CommandRunner, service: str) -> CmdResult:
    logger.info("Enabling service %s", service)
    return runner.run(["systemctl", "enable", service])
