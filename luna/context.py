"""Snapshot of shell state shared by prompt rendering and plugins."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Mapping

from luna.platform import get_hostname, get_timezone_offset

SHELL_NAME = "luna"


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 into a (year, month, day) civil date."""
    z = days + 719468
    era = (z if z >= 0 else z - 146096) // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    year = yoe + era * 400
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    if month <= 2:
        year += 1
    return year, month, day


def local_time() -> tuple[int, int, int, int, int, int]:
    """Return the local (year, month, day, hour, minute, second)."""
    local_secs = max(int(time.time()) + get_timezone_offset(), 0)
    days, tod = divmod(local_secs, 86400)
    hour, rest = divmod(tod, 3600)
    minute, second = divmod(rest, 60)
    year, month, day = days_to_ymd(days)
    return year, month, day, hour, minute, second


def _short_dir(cwd: str) -> str:
    name = PurePath(cwd).name
    return name if name and name != ".." else cwd


@dataclass
class ShellContext:
    """All shell state for one prompt or command cycle."""

    last_exit_code: int
    last_duration_ms: int
    cwd: str
    cwd_home: str
    cwd_short: str
    user: str
    hostname: str
    shell: str
    pid: int
    time_h: str
    time_m: str
    time_s: str
    date_y: int
    date_mo: int
    date_d: int
    date_iso: str
    datetime: str
    env: dict[str, str] = field(default_factory=dict)
    variables: dict[str, str] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        last_exit_code: int,
        last_duration_ms: int,
        cwd: str,
        env: Mapping[str, str],
        variables: Mapping[str, str],
    ) -> "ShellContext":
        """Build a snapshot from the shell state and the current time."""
        year, month, day, hour, minute, second = local_time()

        home = env.get("HOME")
        if home is not None and cwd.startswith(home):
            cwd_home = "~" + cwd[len(home):]
        else:
            cwd_home = cwd

        user = env.get("USER") or env.get("LOGNAME") or "user"
        if "USER" in env:
            user = env["USER"]
        elif "LOGNAME" in env:
            user = env["LOGNAME"]

        date_iso = f"{year:04}-{month:02}-{day:02}"
        return cls(
            last_exit_code=last_exit_code,
            last_duration_ms=last_duration_ms,
            cwd=cwd,
            cwd_home=cwd_home,
            cwd_short=_short_dir(cwd),
            user=user,
            hostname=get_hostname(),
            shell=SHELL_NAME,
            pid=os.getpid(),
            time_h=f"{hour:02}",
            time_m=f"{minute:02}",
            time_s=f"{second:02}",
            date_y=year,
            date_mo=month,
            date_d=day,
            date_iso=date_iso,
            datetime=f"{date_iso} {hour:02}:{minute:02}:{second:02}",
            env=dict(env),
            variables=dict(variables),
        )