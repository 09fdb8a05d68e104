from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .config import Configuration
from .lib.command import CmdResult, CommandRunner
from .lib.env import Paths
from .lib.git import git_clone
from .lib.pacman import pacman_install
from .lib.systemd import enable_service
from .lib.users import chown_command, su_command

logger = logging.getLogger(__name__)


@dataclass
class ConfigContext:
    """Everything a routine may touch: the configuration and the command runner."""

    config: Configuration
    runner: CommandRunner
    warnings: List[str] = field(default_factory=list)

    @property
    def username(self) -> str:
        return self.config.username

    @property
    def paths(self) -> Paths:
        return self.config.paths

    def __post_init__(self) -> None:
        # A dry-run configuration must never reach a live runner.
        if self.config.dry_run and not self.runner.dry_run:
            logger.info("Dry run: commands are logged, not executed")
            self.runner = CommandRunner(dry_run=True)

    @property
    def dry_run(self) -> bool:
        return self.runner.dry_run

    def home_path(self, relative: Optional[str] = None) -> Path:
        p = Path(self.paths.home_root) / self.username
        if relative:
            p = p / relative
        return p

    def chown_to_user(self, path: str | Path) -> CmdResult:
        return self.runner.run(chown_command(self.username, str(path)))

    def clone_repository(self, url: str, destination: str | Path) -> CmdResult:
        return git_clone(self.runner, url, destination)

    def enable_service(self, name: str) -> CmdResult:
        return enable_service(self.runner, name)

    def install_packages(self, packages: Sequence[str]) -> Optional[CmdResult]:
        return pacman_install(self.runner, packages)

    def run_as_user(self, argv: Sequence[str], *, check: bool = True) -> CmdResult:
        return self.runner.run(su_command(self.username, argv), check=check)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)
