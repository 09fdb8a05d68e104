from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .config import Configuration
from .context import ConfigContext
from .errors import ConfigurationError
from .lib.command import CommandRunner
from .routines import ROUTINES, Routine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoutineOutcome:
    package: str
    ok: bool
    error: Optional[str] = None
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ConfigureResult:
    outcomes: List[RoutineOutcome] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def ran(self) -> List[str]:
        return [o.package for o in self.outcomes]

    @property
    def failed(self) -> Optional[RoutineOutcome]:
        for o in self.outcomes:
            if not o.ok:
                return o
        return None


def _select_range(
    routines: Sequence[Routine],
    start_at: Optional[str],
    stop_after: Optional[str],
) -> List[Routine]:
    known = [r.package for r in routines]
    for name, value in (("start_at", start_at), ("stop_after", stop_after)):
        if value is not None and value not in known:
            raise ValueError(f"{name}: unknown package {value!r} (known: {', '.join(known)})")

    selected: List[Routine] = []
    started = start_at is None
    for r in routines:
        if not started:
            if r.package == start_at:
                started = True
            else:
                continue
        selected.append(r)
        if stop_after is not None and r.package == stop_after:
            break
    return selected


def _run_routine(routine: Routine, ctx: ConfigContext) -> RoutineOutcome:
    already_warned = len(ctx.warnings)
    try:
        routine.run(ctx)
    except (ConfigurationError, OSError) as e:
        logger.exception("Configuring %s failed", routine.package)
        return RoutineOutcome(
            package=routine.package,
            ok=False,
            error=str(e),
            warnings=tuple(ctx.warnings[already_warned:]),
        )
    return RoutineOutcome(package=routine.package, ok=True, warnings=tuple(ctx.warnings[already_warned:]))


def configure(
    config: Configuration,
    runner: CommandRunner,
    *,
    routines: Sequence[Routine] = ROUTINES,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> ConfigureResult:
    """Run the routine of every selected package, in table order.

    Stops at the first failing routine; later routines do not run.
    """

    ctx = ConfigContext(config=config, runner=runner)
    outcomes: List[RoutineOutcome] = []
    skipped: List[str] = []

    for routine in _select_range(routines, start_at, stop_after):
        if not config.has_package(routine.package):
            skipped.append(routine.package)
            continue

        logger.info("Configuring %s", routine.package)
        outcome = _run_routine(routine, ctx)
        outcomes.append(outcome)
        if not outcome.ok:
            logger.error("Stopping: %s failed, remaining packages left unconfigured", routine.package)
            break

    return ConfigureResult(outcomes=outcomes, skipped=skipped)
