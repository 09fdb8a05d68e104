from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

from package_configurator.config import Configuration, ShadowsocksConfig
from package_configurator.errors import CommandError
from package_configurator.lib.command import CmdResult, CommandRunner, fmt_argv
from package_configurator.lib.env import Paths

SS_TEMPLATE = """{
    "server": "",
    "server_port": 8388,
    "local_address": "127.0.0.1",
    "local_port": 1080,
    "password": "",
    "timeout": 300,
    "method": "chacha20-ietf-poly1305"
}
"""


class RecordingRunner(CommandRunner):
    """Records argv instead of spawning; `git clone` creates its destination."""

    def __init__(self, fail_when: Optional[Callable[[List[str]], bool]] = None) -> None:
        super().__init__(dry_run=False)
        self.calls: List[List[str]] = []
        self.fail_when = fail_when

    def run(self, argv: Sequence[str], *, check: bool = True) -> CmdResult:
        argv_list = list(argv)
        self.calls.append(argv_list)

        rc = 1 if self.fail_when is not None and self.fail_when(argv_list) else 0
        result = CmdResult(argv=argv_list, returncode=rc, stdout="", stderr="boom" if rc else "")
        if rc and check:
            raise CommandError(f"Command failed ({rc}): {fmt_argv(argv_list)}", result)

        if rc == 0 and argv_list[:2] == ["git", "clone"]:
            dest = Path(argv_list[3])
            dest.mkdir(parents=True, exist_ok=True)
            (dest / "README").write_text("cloned\n", encoding="utf-8")
        return result

    def commands(self, program: str) -> List[List[str]]:
        return [c for c in self.calls if c[0] == program]


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def paths(tmp_path: Path) -> Paths:
    p = Paths(
        installer_dir=str(tmp_path / "root/installer"),
        home_root=str(tmp_path / "home"),
        root_home=str(tmp_path / "root"),
        sudoers=str(tmp_path / "etc/sudoers"),
        systemd_unit_dir=str(tmp_path / "etc/systemd/system"),
        shadowsocks_dir=str(tmp_path / "etc/shadowsocks-libev"),
    )
    for d in (p.installer_dir, p.systemd_unit_dir, f"{p.home_root}/alice"):
        Path(d).mkdir(parents=True, exist_ok=True)
    Path(p.sudoers).write_text("root ALL=(ALL) ALL\n", encoding="utf-8")
    return p


@pytest.fixture
def stage(paths: Paths) -> Callable[..., None]:
    """Write the files an earlier installer stage leaves in installer_dir."""

    def _stage(*names: str) -> None:
        contents = {
            "zshrc": "export ZSH=$HOME/.oh-my-zsh\n",
            "vscode.json": '{"editor.fontFamily": "Droid Sans Mono"}\n',
            "vscode_root.json": '{"window.titleBarStyle": "custom"}\n',
            "ss-local.service": "[Service]\nExecStart=/usr/bin/ss-local -c /etc/shadowsocks-libev/config.json\n",
            "ss-config.json": SS_TEMPLATE,
        }
        for name in names or tuple(contents):
            paths.staged(name).write_text(contents[name], encoding="utf-8")

    return _stage


@pytest.fixture
def make_config(paths: Paths) -> Callable[..., Configuration]:
    def _make(
        packages: Sequence[str] = (),
        extensions: Sequence[str] = (),
        shadowsocks: Optional[ShadowsocksConfig] = None,
        username: str = "alice",
    ) -> Configuration:
        return Configuration(
            username=username,
            pacman_packages=tuple(packages),
            vscode_extensions=tuple(extensions),
            shadowsocks=shadowsocks,
            paths=paths,
        )

    return _make


@pytest.fixture
def make_runner() -> Callable[..., RecordingRunner]:
    return RecordingRunner


@pytest.fixture
def ss_template() -> str:
    return SS_TEMPLATE


@pytest.fixture(autouse=True)
def _no_root_log_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    # main.run() would otherwise attach file/console handlers to the root logger
    monkeypatch.setattr("package_configurator.main.configure_logging", lambda log_path, **kwargs: log_path)
