# dijkstra_viz/app/config.py
#!/usr/bin/env python3
"""
Viewer settings.

Precedence (lowest first): defaults, environment, command line.

- ENV: DIJKSTRA_VIZ_ROWS, DIJKSTRA_VIZ_COLS, DIJKSTRA_VIZ_CELL_SIZE,
       DIJKSTRA_VIZ_DELAY_MS, DIJKSTRA_VIZ_DEBUG
- CLI: --rows=N --cols=N --cell-size=N --delay=MS --debug
"""

import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

ENV_PREFIX = "DIJKSTRA_VIZ_"

# field name -> (env suffix, cli flag, minimum)
_INT_OPTIONS = {
    "rows":      ("ROWS",      "--rows",      1),
    "cols":      ("COLS",      "--cols",      1),
    "cell_size": ("CELL_SIZE", "--cell-size", 4),
    "delay_ms":  ("DELAY_MS",  "--delay",     0),
}

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Settings:
    rows: int = 20
    cols: int = 30
    cell_size: int = 30
    delay_ms: int = 50
    debug: bool = False

    @property
    def delay(self) -> float:
        return self.delay_ms / 1000.0


def _parse_int(name: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def resolve_settings(argv: Optional[List[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    values: Dict[str, object] = {}
    for field_name, (suffix, _flag, minimum) in _INT_OPTIONS.items():
        raw = environ.get(ENV_PREFIX + suffix)
        if raw:
            values[field_name] = _parse_int(ENV_PREFIX + suffix, raw, minimum)
    if environ.get(ENV_PREFIX + "DEBUG", "").lower() in _TRUTHY:
        values["debug"] = True

    for arg in argv:
        if arg == "--debug":
            values["debug"] = True
            continue
        for field_name, (_suffix, flag, minimum) in _INT_OPTIONS.items():
            if arg.startswith(flag + "="):
                values[field_name] = _parse_int(flag, arg.split("=", 1)[1], minimum)

    settings = Settings(**values)
    if settings.rows * settings.cols < 2:
        raise ValueError("grid needs at least two cells")
    return settings
