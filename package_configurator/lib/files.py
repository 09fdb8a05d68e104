from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def make_dirs(path: str | Path, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would create directory %s", str(p))
        return
    p.mkdir(parents=True, exist_ok=True)


def move_file(src: str | Path, dst: str | Path, *, dry_run: bool = False) -> None:
    """Move a staged file into place, replacing whatever is at dst."""

    s = Path(src)
    d = Path(dst)
    if dry_run:
        logger.info("Would move %s -> %s", str(s), str(d))
        return
    if not s.exists():
        raise FileNotFoundError(str(s))
    shutil.move(str(s), str(d))
    logger.info("Moved %s -> %s", str(s), str(d))


def append_text(path: str | Path, contents: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would append to %s", str(p))
        return
    with p.open("a", encoding="utf-8") as f:
        f.write(contents)


def read_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: str | Path, contents: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would write %s", str(p))
        return
    p.write_text(contents, encoding="utf-8")
