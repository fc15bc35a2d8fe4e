from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional

DIST_NAME = "tildepad"


def _installed_version() -> Optional[str]:
    try:
        return importlib.metadata.version(DIST_NAME)
    except importlib.metadata.PackageNotFoundError:
        return None


def _git_commit() -> Optional[str]:
    # Only meaningful when running from a source checkout
    here = Path(__file__).resolve().parent
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short=7", "HEAD"],
            cwd=str(here),
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def get_version_string() -> str:
    version = _installed_version() or "0+unknown"
    commit = _git_commit()
    return f"{version} ({commit})" if commit else version
