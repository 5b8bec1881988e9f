"""Unit tests for invoicegen configuration management.

Tests AppConfig loading from environment variables and defaults.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from invoicegen.config import AppConfig, get_config, reset_config


class TestAppConfig:
    """Test AppConfig creation and validation."""

    def test_from_env_defaults(self):
        """Test defaults reproduce the stock sample invoice."""
        config = AppConfig.from_env()

        assert config.page.page_size == "A4"
        assert config.page.orientation == "vertical"
        assert config.page.margin_mm == 15.0
        assert config.assets.logo_path == Path("assets/logo.png")
        assert config.assets.font_path is None
        assert config.invoice.company_name == "CODEHEIM"
        assert config.invoice.invoice_number == "1001"
        assert config.invoice.qr_url == "https://codeheim.io"
        assert config.invoice.total_mode == "fixed"
        assert config.invoice.total_amount == "$1100"
        assert config.invoice.output_path == Path("output/invoice_sample.pdf")
        assert config.log_level == "INFO"
        assert config.json_logs is False

    def test_from_env_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("INVOICE_OUTPUT_PATH", "build/out.pdf")
        monkeypatch.setenv("INVOICE_LOGO_PATH", "static/brand.png")
        monkeypatch.setenv("INVOICE_FONT_PATH", "fonts/Inter.ttf")
        monkeypatch.setenv("INVOICE_NUMBER", "2042")
        monkeypatch.setenv("INVOICE_TOTAL_MODE", "Computed")
        monkeypatch.setenv("INVOICE_MARGIN_MM", "20")
        monkeypatch.setenv("INVOICE_PAGE_SIZE", "letter")
        monkeypatch.setenv("JSON_LOGS", "true")

        config = AppConfig.from_env()

        assert config.invoice.output_path == Path("build/out.pdf")
        assert config.assets.logo_path == Path("static/brand.png")
        assert config.assets.font_path == Path("fonts/Inter.ttf")
        assert config.invoice.invoice_number == "2042"
        assert config.invoice.total_mode == "computed"
        assert config.page.margin_mm == 20.0
        assert config.page.page_size == "LETTER"
        assert config.json_logs is True

    def test_from_env_rejects_unknown_total_mode(self, monkeypatch):
        """Test INVOICE_TOTAL_MODE is validated."""
        monkeypatch.setenv("INVOICE_TOTAL_MODE", "estimated")

        with pytest.raises(ValueError) as exc_info:
            AppConfig.from_env()

        assert "INVOICE_TOTAL_MODE" in str(exc_info.value)


class TestGetConfig:
    """Test singleton access."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_reloads_env(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("INVOICE_NUMBER", "7")
        reset_config()

        second = get_config()

        assert second is not first
        assert second.invoice.invoice_number == "7"
