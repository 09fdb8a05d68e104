from __future__ import annotations

import logging
from pathlib import Path

from ..context import ConfigContext
from ..lib.files import make_dirs, move_file

logger = logging.getLogger(__name__)

FONT_PACKAGES = ["ttf-droid", "ttf-ubuntu-font-family"]
SETTINGS_DIR = "Code - OSS/User"

# Known issue: this extension also gets a second, root-owned install under a
# different letter-casing. Kept until it is clear whether anything relies on it.
SYNTHWAVE_ID = "robbowen.synthwave-vscode"
SYNTHWAVE_ROOT_ID = "RobbOwen.synthwave-vscode"


def _install_extension_argv(extension: str) -> list[str]:
    return ["code", "--install-extension", extension]


class CodeRoutine:
    package = "code"

    def run(self, ctx: ConfigContext) -> None:
        ctx.install_packages(FONT_PACKAGES)

        root_settings = Path(ctx.paths.root_home) / ".config" / SETTINGS_DIR
        make_dirs(root_settings, dry_run=ctx.dry_run)
        move_file(ctx.paths.staged("vscode_root.json"), root_settings / "settings.json", dry_run=ctx.dry_run)

        user_config = ctx.home_path(".config")
        user_settings = user_config / SETTINGS_DIR
        make_dirs(user_settings, dry_run=ctx.dry_run)
        move_file(ctx.paths.staged("vscode.json"), user_settings / "settings.json", dry_run=ctx.dry_run)
        ctx.chown_to_user(user_config)

        # Extension installs are best-effort: failures are reported, not fatal.
        extensions = ctx.config.vscode_extensions
        for ext in extensions:
            r = ctx.run_as_user(_install_extension_argv(ext), check=False)
            if not r.ok:
                ctx.warn(f"Failed to install editor extension {ext} (exit {r.returncode})")

        if SYNTHWAVE_ID in extensions:
            r = ctx.runner.run(_install_extension_argv(SYNTHWAVE_ROOT_ID), check=False)
            if not r.ok:
                ctx.warn(f"Failed to install editor extension {SYNTHWAVE_ROOT_ID} as root (exit {r.returncode})")

        logger.info("Editor configured (%d extensions requested)", len(extensions))
