"""
Pytest configuration and shared fixtures.
"""

import json
from concurrent.futures import Executor, Future
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from company_picker_api.app.core.config import Settings
from company_picker_api.app.main import create_app


@pytest.fixture
def sample_companies() -> List[Dict[str, Any]]:
    """A small catalog."""
    return [
        {"id": 1, "name": "Acme", "logo": "https://example.com/acme.png"},
        {"id": 2, "name": "Globex", "logo": "https://example.com/globex.png"},
        {"id": 3, "name": "Initech", "logo": "bad-url"},
        {"id": 4, "name": "Umbrella Corp", "logo": "https://example.com/umbrella.png"},
    ]


@pytest.fixture
def big_catalog() -> List[Dict[str, Any]]:
    """Twenty‑five distinct companies, more than the selection can hold."""
    return [
        {"id": i, "name": f"Company {i}", "logo": f"https://example.com/{i}.png"}
        for i in range(1, 26)
    ]


@pytest.fixture
def data_dir(tmp_path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def settings(data_dir) -> Settings:
    return Settings(data_dir=str(data_dir), log_level="DEBUG")


@pytest.fixture
def seeded_data_dir(data_dir, sample_companies) -> Path:
    """Data directory holding the sample catalog and no selection file."""
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "companies.json").write_text(json.dumps(sample_companies, indent=2), encoding="utf-8")
    return data_dir


@pytest.fixture
def client(settings, seeded_data_dir):
    """TestClient with startup events run against the seeded data dir."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


class ImmediateExecutor(Executor):
    """Runs submitted callables synchronously."""

    def submit(self, fn, *args, **kwargs):
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


class DeferredExecutor(Executor):
    """Collects submitted callables so tests can run them in any order."""

    def __init__(self) -> None:
        self.jobs = []

    def submit(self, fn, *args, **kwargs):
        future: Future = Future()
        self.jobs.append((fn, args, kwargs, future))
        return future

    def run(self, index: int) -> None:
        fn, args, kwargs, future = self.jobs[index]
        future.set_result(fn(*args, **kwargs))


class FakeAPI:
    """In‑memory stand‑in for ``CompanyPickerAPI``."""

    def __init__(self, companies=None, selected=None, broken_logos=()) -> None:
        self.companies = list(companies or [])
        self.selected = list(selected or [])
        self.broken_logos = set(broken_logos)
        self.saved: List[List[Dict[str, Any]]] = []
        self.list_error = None
        self.selected_error = None
        self.save_error = None

    def list_companies(self):
        if self.list_error:
            return [], self.list_error
        return list(self.companies), None

    def get_selected_companies(self):
        if self.selected_error:
            return [], self.selected_error
        return list(self.selected), None

    def save_selected_companies(self, items):
        self.saved.append(list(items))
        if self.save_error:
            return False, self.save_error
        self.selected = list(items)
        return True, None

    def probe_logo(self, url):
        return bool(url) and url not in self.broken_logos


@pytest.fixture
def immediate_executor() -> ImmediateExecutor:
    return ImmediateExecutor()


@pytest.fixture
def fake_api(sample_companies) -> FakeAPI:
    return FakeAPI(companies=sample_companies)
