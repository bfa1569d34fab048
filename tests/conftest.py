from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))


import pytest

from jest_explorer.examples import SAMPLE_WORK_DIR, sample_response, sample_total_results
from jest_explorer.models import JestResponse
from jest_explorer.services import TestReconciler


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JEST_EXPLORER_WORK_DIR", raising=False)
    monkeypatch.delenv("JEST_EXPLORER_LOG_LEVEL", raising=False)


@pytest.fixture
def work_dir() -> str:
    return SAMPLE_WORK_DIR


@pytest.fixture
def response() -> JestResponse:
    return sample_response()


@pytest.fixture
def reconciler() -> TestReconciler:
    reconciler = TestReconciler()
    reconciler.update_file_with_jest_status(sample_total_results())
    return reconciler
