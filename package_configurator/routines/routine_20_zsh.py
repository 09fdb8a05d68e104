from __future__ import annotations

import logging

from ..context import ConfigContext
from ..lib.files import move_file
from ..lib.users import chsh_command

logger = logging.getLogger(__name__)

ZSH = "/bin/zsh"
OH_MY_ZSH = ".oh-my-zsh"

# (repository, destination relative to the user's home)
REPOSITORIES = [
    ("https://github.com/ohmyzsh/ohmyzsh.git", OH_MY_ZSH),
    (
        "https://github.com/zsh-users/zsh-syntax-highlighting.git",
        f"{OH_MY_ZSH}/custom/plugins/zsh-syntax-highlighting",
    ),
    (
        "https://github.com/zsh-users/zsh-autosuggestions.git",
        f"{OH_MY_ZSH}/custom/plugins/zsh-autosuggestions",
    ),
    (
        "https://github.com/bhilburn/powerlevel9k.git",
        f"{OH_MY_ZSH}/custom/themes/powerlevel9k",
    ),
]


class ZshRoutine:
    """Make zsh the login shell and install oh-my-zsh with plugins.

    Not re-runnable: the clones fail once ~/.oh-my-zsh is populated.
    """

    package = "zsh"

    def run(self, ctx: ConfigContext) -> None:
        for user in ("root", ctx.username):
            ctx.runner.run(chsh_command(user, ZSH))

        zshrc = ctx.home_path(".zshrc")
        move_file(ctx.paths.staged("zshrc"), zshrc, dry_run=ctx.dry_run)
        ctx.chown_to_user(zshrc)

        for url, rel in REPOSITORIES:
            ctx.clone_repository(url, ctx.home_path(rel))

        ctx.chown_to_user(ctx.home_path(OH_MY_ZSH))
        logger.info("zsh configured for root and %s", ctx.username)
