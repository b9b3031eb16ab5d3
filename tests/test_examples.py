"""Smoke tests for example and benchmark scripts."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_multilateration_demo_runs() -> None:
    """Test that examples/multilateration_demo.py runs successfully."""
    script = ROOT / "examples" / "multilateration_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        env={**os.environ, "PYTHONPATH": str(ROOT)},
        capture_output=True,
        text=True,
        check=False,
        timeout=120,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )
    assert "BFGS quasi-Newton method" in result.stdout
    assert "The running time is" in result.stdout
    assert "The iterative number is" in result.stdout
