from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def clear_enumforge_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``ENUMFORGE_*`` variables from the caller's shell out of the tests."""

    for name in ("BASE_CLASS", "EXTENSION", "NAMESPACE", "AUTHOR", "DESCRIPTION", "TEMPLATE"):
        monkeypatch.delenv(f"ENUMFORGE_{name}", raising=False)
