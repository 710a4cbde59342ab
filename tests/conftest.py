"""Shared test fixtures for jabberid tests."""

from __future__ import annotations

import pytest

from jabberid.address import Address, parse_address


@pytest.fixture()
def full_address_str() -> str:
    return "alice@wonderland.lit/tea"


@pytest.fixture()
def full_address(full_address_str) -> Address:
    return parse_address(full_address_str)


@pytest.fixture()
def bare_address() -> Address:
    return parse_address("alice@wonderland.lit")


@pytest.fixture()
def domain_address() -> Address:
    return parse_address("wonderland.lit")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep the developer's JABBERID_* settings out of every test."""
    for var in ("JABBERID_HOME", "JABBERID_LOG_LEVEL", "JABBERID_OUTPUT_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("JABBERID_HOME", str(tmp_path / "jabberid_home"))
