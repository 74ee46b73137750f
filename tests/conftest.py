"""Shared test fixtures for glesysdns tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest
import yaml
from typer.testing import CliRunner

from glesysdns.config import GlesysSettings
from glesysdns.exceptions import NotFound
from glesysdns.models import Domain, DomainOptions, DomainRecord, EditRecordOptions
from glesysdns.providers.dns.base import DomainRecordClient


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


# ============================================================================
# Project Directory Fixtures
# ============================================================================


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """Create a temporary project directory with a fast polling budget."""
    config_data = {
        "polling": {"attempts": 3, "delay": 0},
        "live": {"domain_suffix": "example.org"},
    }

    config_file = tmp_path / "glesysdns.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config_data, f)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ============================================================================
# Mock Fixtures - HTTP/API
# ============================================================================


def _glesys_response(status_code: int = 200, **payload) -> httpx.Response:
    """Build a GleSYS-style JSON response."""
    body = {
        "response": {
            "status": {"code": status_code, "text": payload.pop("text", "OK")},
            **payload,
        }
    }
    return httpx.Response(status_code, json=body)


@pytest.fixture
def glesys_response():
    """Factory for GleSYS-style JSON responses."""
    return _glesys_response


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.Client for API calls."""
    with patch("httpx.Client") as mock_client_class:
        mock_client = MagicMock()
        mock_client_class.return_value = mock_client
        yield mock_client


# ============================================================================
# Mock Fixtures - Environment Settings
# ============================================================================


@pytest.fixture
def mock_env_settings():
    """Mock environment settings with test credentials."""
    settings = GlesysSettings(username="cl12345", api_key="test-key")
    with patch("glesysdns.commands.common.load_env_settings", return_value=settings):
        yield settings


@pytest.fixture
def mock_env_settings_missing():
    """Mock environment settings without credentials."""
    settings = GlesysSettings(username=None, api_key=None)
    with patch("glesysdns.commands.common.load_env_settings", return_value=settings):
        yield settings


# ============================================================================
# In-memory provider
# ============================================================================


class FakeDomainRecordClient(DomainRecordClient):
    """In-memory provider whose listings lag behind writes.

    Record creates/deletes and domain deletes become visible only after
    `lag` listing calls. Domain creates and edits apply immediately.
    """

    def __init__(self, lag: int = 0):
        self.lag = lag
        self.domains: dict[str, Domain] = {}
        self.records: dict[str, DomainRecord] = {}
        self.list_calls = 0
        self._pending: list[list] = []
        self._next_id = 1000

    def _write(self, apply) -> None:
        if self.lag == 0:
            apply()
        else:
            self._pending.append([self.lag, apply])

    def _tick(self) -> None:
        self.list_calls += 1
        remaining = []
        for item in self._pending:
            item[0] -= 1
            if item[0] <= 0:
                item[1]()
            else:
                remaining.append(item)
        self._pending = remaining

    def list_domains(self) -> set[Domain]:
        self._tick()
        return set(self.domains.values())

    def get_domain(self, domain_name: str) -> Domain:
        if domain_name not in self.domains:
            raise NotFound(f"Domain {domain_name} not found")
        return self.domains[domain_name]

    def add_domain(self, domain_name: str, options: DomainOptions | None = None) -> Domain:
        fields = {"domainname": domain_name, "createtime": "2024-01-01 12:00:00"}
        fields.update(options.to_params() if options else {})
        domain = Domain.model_validate(fields)
        self.domains[domain_name] = domain
        return domain

    def edit_domain(self, domain_name: str, options: DomainOptions) -> None:
        domain = self.get_domain(domain_name)
        self.domains[domain_name] = Domain.model_validate(
            {**domain.model_dump(by_alias=True), **options.to_params()}
        )

    def delete_domain(self, domain_name: str) -> None:
        self.get_domain(domain_name)

        def apply():
            self.domains.pop(domain_name, None)
            for record_id, record in list(self.records.items()):
                if record.domain_name == domain_name:
                    del self.records[record_id]

        self._write(apply)

    def list_records(self, domain_name: str) -> set[DomainRecord]:
        self._tick()
        return {r for r in self.records.values() if r.domain_name == domain_name}

    def add_record(self, domain_name, host, type, data, ttl=None) -> None:
        self.get_domain(domain_name)
        record = DomainRecord(
            id=str(self._next_id),
            domain_name=domain_name,
            host=host,
            type=type,
            data=data,
            ttl=ttl or 3600,
        )
        self._next_id += 1
        self._write(lambda: self.records.__setitem__(record.id, record))

    def edit_record(self, record_id: str, options: EditRecordOptions) -> None:
        if record_id not in self.records:
            raise NotFound(f"Record {record_id} not found")
        record = self.records[record_id]
        self.records[record_id] = record.model_copy(
            update=options.model_dump(exclude_none=True)
        )

    def delete_record(self, record_id: str) -> None:
        if record_id not in self.records:
            raise NotFound(f"Record {record_id} not found")
        self._write(lambda: self.records.pop(record_id, None))


@pytest.fixture
def make_fake_client():
    """Factory for in-memory clients with a given listing lag."""
    return FakeDomainRecordClient


@pytest.fixture
def fake_client() -> FakeDomainRecordClient:
    """In-memory client whose listings lag two reads behind writes."""
    return FakeDomainRecordClient(lag=2)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_domains() -> list[dict]:
    """Provide sample domain payloads as returned by domain/list."""
    return [
        {
            "domainname": "example.com",
            "createtime": "2012-01-25 12:16:06",
            "recordcount": 9,
            "usingglesysnameserver": "yes",
        },
        {
            "domainname": "example.org",
            "createtime": "2013-05-02 08:00:00",
            "recordcount": 3,
            "usingglesysnameserver": "no",
        },
    ]


@pytest.fixture
def sample_records() -> list[dict]:
    """Provide sample record payloads as returned by domain/listrecords."""
    return [
        {
            "recordid": 224538,
            "domainname": "example.com",
            "host": "@",
            "type": "A",
            "data": "192.168.1.100",
            "ttl": 3600,
        },
        {
            "recordid": 224539,
            "domainname": "example.com",
            "host": "www",
            "type": "CNAME",
            "data": "example.com.",
            "ttl": 3600,
        },
        {
            "recordid": 224540,
            "domainname": "example.com",
            "host": "@",
            "type": "MX",
            "data": "10 mx01.glesys.se.",
            "ttl": 3600,
        },
    ]
