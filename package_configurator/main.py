from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import Optional

from .config import Configuration, load_configuration
from .configurator import ConfigureResult, configure
from .lib.command import CommandRunner
from .lib.env import DEFAULT_CONFIG_PATH
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .routines import supported_packages

logger = logging.getLogger(__name__)


def run(
    *,
    config: Configuration,
    runner: Optional[CommandRunner] = None,
    log_path: str = DEFAULT_LOG_PATH,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> ConfigureResult:
    """Configure every selected package of an already-loaded configuration."""

    actual_log_path = configure_logging(log_path=log_path)
    logger.info("Configuring packages for %s (log=%s)", config.username, actual_log_path)

    if runner is None:
        runner = CommandRunner(dry_run=config.dry_run)

    result = configure(config, runner, start_at=start_at, stop_after=stop_after)

    for outcome in result.outcomes:
        for w in outcome.warnings:
            logger.warning("%s: %s", outcome.package, w)

    if result.ok:
        logger.info("Configured: %s", ", ".join(result.ran) or "(nothing)")
    elif result.failed is not None:
        logger.error("Configuration aborted at %s: %s", result.failed.package, result.failed.error)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="package-configurator")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to configuration (json|yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to configurator log")
    p.add_argument("--dry-run", action="store_true", help="Log commands and file changes without applying them")
    p.add_argument("--start-at", default=None, help="Start at package (e.g. zsh)")
    p.add_argument("--stop-after", default=None, help="Stop after package")
    p.add_argument("--list-packages", action="store_true", help="Print supported packages in dispatch order")

    args = p.parse_args(argv)

    if args.list_packages:
        for name in supported_packages():
            print(name)
        return 0

    for opt in ("start_at", "stop_after"):
        value = getattr(args, opt)
        if value is not None and value not in supported_packages():
            p.error(f"--{opt.replace('_', '-')}: unsupported package {value!r}")

    config = load_configuration(args.config)
    if args.dry_run:
        config = dataclasses.replace(config, dry_run=True)

    result = run(
        config=config,
        log_path=args.log,
        start_at=args.start_at,
        stop_after=args.stop_after,
    )
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
