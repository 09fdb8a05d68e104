from __future__ import annotations

import logging

from ..context import ConfigContext
from ..lib.files import append_text

logger = logging.getLogger(__name__)


class SudoRoutine:
    package = "sudo"

    def run(self, ctx: ConfigContext) -> None:
        # Appends unconditionally; a second run adds a duplicate rule.
        line = f"{ctx.username} ALL=(ALL) ALL\n"
        append_text(ctx.paths.sudoers, line, dry_run=ctx.dry_run)
        logger.info("Granted sudo to %s in %s", ctx.username, ctx.paths.sudoers)
