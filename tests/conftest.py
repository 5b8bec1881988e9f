"""Pytest configuration and fixtures for invoicegen tests.

Provides common fixtures for testing.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from PIL import Image

from invoicegen.builder import sample_items
from invoicegen.config import AppConfig, AssetSettings, InvoiceSettings, reset_config
from invoicegen.models import InvoiceItem

INVOICE_ENV_VARS = (
    "INVOICE_LOGO_PATH",
    "INVOICE_OUTPUT_PATH",
    "INVOICE_FONT_PATH",
    "INVOICE_COMPANY_NAME",
    "INVOICE_NUMBER",
    "INVOICE_QR_URL",
    "INVOICE_TOTAL_MODE",
    "INVOICE_TOTAL_AMOUNT",
    "INVOICE_MARGIN_MM",
    "INVOICE_PAGE_SIZE",
    "INVOICE_ORIENTATION",
    "LOG_LEVEL",
    "JSON_LOGS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the caller's environment and cached config."""
    for name in INVOICE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def frozen_date() -> date:
    """Fixed invoice date."""
    return date(2024, 3, 5)


@pytest.fixture
def logo_path(tmp_path: Path) -> Path:
    """A small PNG logo."""
    path = tmp_path / "assets" / "logo.png"
    path.parent.mkdir(parents=True)
    Image.new("RGB", (120, 40), (20, 40, 90)).save(path)
    return path


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """Output PDF location (parent does not exist yet)."""
    return tmp_path / "output" / "invoice_sample.pdf"


@pytest.fixture
def app_config(logo_path: Path, output_path: Path) -> AppConfig:
    """Default configuration pointing at temporary assets and output."""
    return AppConfig(
        assets=AssetSettings(logo_path=logo_path),
        invoice=InvoiceSettings(output_path=output_path),
    )


@pytest.fixture
def items() -> list[InvoiceItem]:
    """The three sample invoice items."""
    return sample_items()
