from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lib.command import CmdResult


class ConfigurationError(RuntimeError):
    """A package routine could not complete; the configuration pass must stop."""


class CommandError(ConfigurationError):
    def __init__(self, message: str, result: "CmdResult") -> None:
        super().__init__(message)
        self.result = result

    @property
    def returncode(self) -> int:
        return self.result.returncode
