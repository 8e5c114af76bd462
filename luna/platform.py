"""Host details that differ between operating systems."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path

_IS_WINDOWS = sys.platform == "win32"


@dataclass(frozen=True)
class FileMetadata:
    size: int
    blocks: int
    ino: int
    mode: str
    uid: int
    gid: int


def get_hostname() -> str:
    """Return the machine's host name, or ``localhost`` when unknown."""
    if _IS_WINDOWS:
        return os.environ.get("COMPUTERNAME", "localhost")
    try:
        return Path("/proc/sys/kernel/hostname").read_text().strip()
    except OSError:
        return "localhost"


def get_timezone_offset() -> int:
    """Return the local standard-time offset from UTC, in seconds east."""
    if hasattr(time, "tzset"):
        time.tzset()
    return -time.timezone


def get_file_metadata(stat_result: os.stat_result) -> FileMetadata:
    """Summarise a stat result the way the file listing shows it."""
    if _IS_WINDOWS:
        attributes = getattr(stat_result, "st_file_attributes", 0)
        return FileMetadata(
            size=stat_result.st_size,
            blocks=0,
            ino=0,
            mode=f"{attributes:X}",
            uid=0,
            gid=0,
        )
    return FileMetadata(
        size=stat_result.st_size,
        blocks=getattr(stat_result, "st_blocks", 0),
        ino=stat_result.st_ino,
        mode=f"{stat_result.st_mode & 0o777:o}",
        uid=stat_result.st_uid,
        gid=stat_result.st_gid,
    )