from dataclasses import replace
from pathlib import Path

import pytest

from package_configurator.configurator import configure
from package_configurator.lib.command import CommandRunner
from package_configurator.routines import ROUTINES, routine_table, supported_packages


def test_registration_table_order() -> None:
    assert supported_packages() == [
        'sudo',
        'zsh',
        'code',
        'shadowsocks-libev',
        'gvfs-google',
        'virt-manager',
        'dhcpcd',
        'gdm',
        'networkmanager',
    ]
    assert list(routine_table()) == supported_packages()
    assert len(ROUTINES) == 9


def test_unknown_packages_are_a_noop(make_config, runner, paths) -> None:
    sudoers_before = Path(paths.sudoers).read_text()
    config = make_config(['base', 'linux', 'vim', 'Sudo', 'NetworkManager'])

    result = configure(config, runner)

    assert result.ok
    assert result.outcomes == []
    assert result.skipped == supported_packages()
    assert runner.calls == []
    assert Path(paths.sudoers).read_text() == sudoers_before


def test_services_enabled_in_declared_order(make_config, runner) -> None:
    config = make_config(['networkmanager', 'gdm', 'dhcpcd'])

    result = configure(config, runner)

    assert result.ok
    assert result.ran == ['dhcpcd', 'gdm', 'networkmanager']
    assert runner.calls == [
        ['systemctl', 'enable', 'dhcpcd.service'],
        ['systemctl', 'enable', 'gdm.service'],
        ['systemctl', 'enable', 'NetworkManager.service'],
    ]


def test_first_failure_stops_remaining_routines(make_config, make_runner) -> None:
    runner = make_runner(fail_when=lambda argv: 'libvirtd.service' in argv)
    config = make_config(['virt-manager', 'gvfs-google', 'dhcpcd', 'gdm'])

    result = configure(config, runner)

    assert not result.ok
    assert result.ran == ['gvfs-google', 'virt-manager']
    assert result.failed is not None
    assert result.failed.package == 'virt-manager'
    assert 'libvirtd.service' in (result.failed.error or '')
    assert ['systemctl', 'enable', 'dhcpcd.service'] not in runner.calls
    assert ['systemctl', 'enable', 'gdm.service'] not in runner.calls


def test_filesystem_failure_is_fatal(make_config, runner) -> None:
    # zshrc is not staged
    result = configure(make_config(['zsh', 'gdm']), runner)

    assert not result.ok
    assert result.failed is not None and result.failed.package == 'zsh'
    assert ['systemctl', 'enable', 'gdm.service'] not in runner.calls


def test_zsh_twice_reports_failure(make_config, runner, stage) -> None:
    config = make_config(['zsh'])
    stage('zshrc')
    assert configure(config, runner).ok

    stage('zshrc')
    second = configure(config, runner)

    assert not second.ok
    assert second.failed is not None
    assert 'already exists' in (second.failed.error or '')


def test_warnings_are_attached_to_outcome(make_config, make_runner, stage) -> None:
    stage('vscode.json', 'vscode_root.json')
    runner = make_runner(fail_when=lambda argv: argv[0] == 'su')
    config = make_config(['code', 'gdm'], extensions=['a.b'])

    result = configure(config, runner)

    assert result.ok
    code, gdm = result.outcomes
    assert len(code.warnings) == 1
    assert gdm.warnings == ()


def test_start_at_and_stop_after(make_config, runner) -> None:
    config = make_config(['sudo', 'dhcpcd', 'gdm', 'networkmanager'])

    result = configure(config, runner, start_at='dhcpcd', stop_after='gdm')

    assert result.ran == ['dhcpcd', 'gdm']
    assert runner.calls == [
        ['systemctl', 'enable', 'dhcpcd.service'],
        ['systemctl', 'enable', 'gdm.service'],
    ]


def test_unknown_range_bound_is_rejected(make_config, runner) -> None:
    with pytest.raises(ValueError, match='unknown package'):
        configure(make_config(['gdm']), runner, start_at='emacs')


def test_dry_run_configuration_never_spawns(make_config, stage, paths, monkeypatch: pytest.MonkeyPatch) -> None:
    spawned = []
    monkeypatch.setattr(
        'package_configurator.lib.command.subprocess.run',
        lambda argv, **kwargs: spawned.append(list(argv)),
    )
    stage('zshrc')
    config = replace(make_config(['sudo', 'zsh', 'gdm']), dry_run=True)
    sudoers_before = Path(paths.sudoers).read_text()

    result = configure(config, CommandRunner())

    assert result.ok
    assert result.ran == ['sudo', 'zsh', 'gdm']
    assert spawned == []
    assert Path(paths.sudoers).read_text() == sudoers_before
    assert paths.staged('zshrc').exists()


def test_dry_run_configuration_bypasses_injected_runner(make_config, runner) -> None:
    result = configure(replace(make_config(['dhcpcd']), dry_run=True), runner)

    assert result.ok
    assert runner.calls == []
