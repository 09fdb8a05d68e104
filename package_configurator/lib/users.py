from __future__ import annotations

import shlex
from typing import Sequence


def su_command(username: str, argv: Sequence[str]) -> list[str]:
    """Wrap argv so it runs in a login shell of a non-root user."""

    return ["su", "-", username, "-c", shlex.join(list(argv))]


def chsh_command(username: str, shell: str) -> list[str]:
    return ["chsh", f"--shell={shell}", username]


def chown_command(username: str, path: str, *, recursive: bool = True) -> list[str]:
    # Trailing colon: owner only, group left to chown's login-group default.
    argv = ["chown"]
    if recursive:
        argv.append("-R")
    return [*argv, f"{username}:", path]
