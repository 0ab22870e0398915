from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def lines_csv() -> Path:
    """Path to the sample CSV used by the line iterator tests."""
    return DATA_DIR / "test_lines.csv"


@pytest.fixture
def write_toml(tmp_path):
    """Write TOML text to a file under tmp_path and return its path.

    Usage:
        def test_something(write_toml):
            path = write_toml("pyproject.toml", "[tool.corekit]\\npartition_size = 5\\n")
    """

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
