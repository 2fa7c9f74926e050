"""Tests for what importing the package pulls in."""

import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def _loaded_after(code: str) -> list[str]:
    """Run code in a fresh interpreter and list the optional modules it loaded."""
    script = (
        f"import sys\n{code}\n"
        "watched = ('float_duration.calendar_duration', 'dateutil')\n"
        "print(','.join(name for name in watched if name in sys.modules))"
    )
    result = subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        check=True,
        cwd=REPO_ROOT,
        text=True,
    )
    return [name for name in result.stdout.strip().split(",") if name]


def test_package_import_skips_calendar_bridge():
    """Test that importing the package loads neither the calendar bridge nor dateutil."""
    assert _loaded_after("import float_duration") == []


def test_timedelta_bridge_does_not_need_dateutil():
    """Test that timedelta conversions work without loading dateutil."""
    code = (
        "from datetime import date\n"
        "from float_duration import Duration, duration_since\n"
        "assert Duration.from_hours(1.0).to_calendar().seconds == 3600\n"
        "assert duration_since(date(2024, 1, 2), date(2024, 1, 1)).as_days() == 1.0"
    )
    assert _loaded_after(code) == ["float_duration.calendar_duration"]
