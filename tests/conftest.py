import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def run_cli():
    """Run `python -m taskpaper` with the given arguments."""

    def run(*args: str, input: str | None = None, cwd: Path | None = None):
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(SRC), env.get("PYTHONPATH", "")) if p
        )
        return subprocess.run(
            [sys.executable, "-m", "taskpaper", *args],
            capture_output=True,
            text=True,
            input=input,
            cwd=cwd,
            env=env,
        )

    return run
