"""Shared fixtures for the InvestWise test suite."""

import random
from decimal import Decimal

import pytest

from investwise.accounts import AccountManager
from investwise.audit import AuditLogger
from investwise.config import AccountSettings, PortfolioSettings
from investwise.models.records import Asset, User
from investwise.portfolio import PortfolioService, ReportExporter
from investwise.services.storage import (
    InMemoryAuditStorage,
    InMemoryStorage,
    JsonFileStorage,
)


class ScriptedRandom(random.Random):
    """Random source whose randint returns a fixed sequence of values."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)
        self.calls = 0

    def randint(self, a, b):
        self.calls += 1
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def file_storage(tmp_path):
    return JsonFileStorage(
        users_path=tmp_path / "users.json",
        assets_path=tmp_path / "assets.json",
    )


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def audit_logger(audit_storage):
    return AuditLogger(audit_storage)


@pytest.fixture
def account_settings():
    return AccountSettings(seed_demo_assets=False)


@pytest.fixture
def accounts(memory_storage, account_settings, audit_logger):
    return AccountManager(
        memory_storage,
        settings=account_settings,
        audit_logger=audit_logger,
        rng=random.Random(1234),
    )


@pytest.fixture
def portfolio(memory_storage, audit_logger):
    return PortfolioService(
        memory_storage,
        settings=PortfolioSettings(zakat_rate=Decimal("0.025")),
        audit_logger=audit_logger,
    )


@pytest.fixture
def reports(portfolio, tmp_path, audit_logger):
    return ReportExporter(portfolio, reports_dir=tmp_path / "reports", audit_logger=audit_logger)


@pytest.fixture
def ann():
    return User(id=1000, name="Ann", email="ann@x.com", password="pw1")


@pytest.fixture
def bob():
    return User(id=2000, name="Bob", email="bob@x.com", password="pw2")


@pytest.fixture
def nvidia(ann):
    return Asset(owner_id=ann.id, category="Stock", name="Nvidia", value=Decimal("17000"))
