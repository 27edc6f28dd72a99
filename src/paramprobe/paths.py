from __future__ import annotations

"""Per-user data locations for paramprobe.

Everything lives under ~/.paramprobe:
- paramprobe.yaml: default connection configuration
- snapshots/: saved parameter snapshots for offline inspection
"""

import os
from pathlib import Path


def data_dir() -> Path:
    return Path(os.path.expanduser("~/.paramprobe"))


def default_user_config_path() -> Path:
    return data_dir() / "paramprobe.yaml"


def snapshots_dir() -> Path:
    return data_dir() / "snapshots"
