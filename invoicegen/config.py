"""invoicegen configuration management.

Loads configuration from environment variables with defaults that reproduce
the stock CODEHEIM sample invoice (A4 portrait, 15 mm margins).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class PageSettings:
    """Page geometry handed to the layout layer."""

    page_size: str = "A4"  # A4, LETTER, LEGAL
    orientation: str = "vertical"  # vertical or horizontal
    margin_mm: float = 15.0


@dataclass
class AssetSettings:
    """Static files read while rendering."""

    logo_path: Path = Path("assets/logo.png")
    font_path: Path | None = None  # optional TTF, built-in Helvetica otherwise


@dataclass
class InvoiceSettings:
    """Invoice content and output location."""

    company_name: str = "CODEHEIM"
    invoice_number: str = "1001"
    qr_url: str = "https://codeheim.io"
    signatory_label: str = "Authorized Signatory"
    currency_symbol: str = "$"

    # "fixed" prints total_amount verbatim, "computed" sums the item totals
    total_mode: str = "fixed"
    total_amount: str = "$1100"

    output_path: Path = Path("output/invoice_sample.pdf")


@dataclass
class AppConfig:
    """Root application configuration."""

    log_level: str = "INFO"
    json_logs: bool = False

    page: PageSettings = field(default_factory=PageSettings)
    assets: AssetSettings = field(default_factory=AssetSettings)
    invoice: InvoiceSettings = field(default_factory=InvoiceSettings)

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Every variable is optional; unset values fall back to the defaults
        above.

        Raises:
            ValueError: If INVOICE_TOTAL_MODE or INVOICE_MARGIN_MM is invalid
        """
        total_mode = os.getenv("INVOICE_TOTAL_MODE", "fixed").lower()
        if total_mode not in ("fixed", "computed"):
            raise ValueError(
                f"INVOICE_TOTAL_MODE must be 'fixed' or 'computed', got {total_mode!r}"
            )

        font_path = os.getenv("INVOICE_FONT_PATH")

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            json_logs=os.getenv("JSON_LOGS", "false").lower() == "true",
            page=PageSettings(
                page_size=os.getenv("INVOICE_PAGE_SIZE", "A4").upper(),
                orientation=os.getenv("INVOICE_ORIENTATION", "vertical").lower(),
                margin_mm=float(os.getenv("INVOICE_MARGIN_MM", "15")),
            ),
            assets=AssetSettings(
                logo_path=Path(os.getenv("INVOICE_LOGO_PATH", "assets/logo.png")),
                font_path=Path(font_path) if font_path else None,
            ),
            invoice=InvoiceSettings(
                company_name=os.getenv("INVOICE_COMPANY_NAME", "CODEHEIM"),
                invoice_number=os.getenv("INVOICE_NUMBER", "1001"),
                qr_url=os.getenv("INVOICE_QR_URL", "https://codeheim.io"),
                total_mode=total_mode,
                total_amount=os.getenv("INVOICE_TOTAL_AMOUNT", "$1100"),
                output_path=Path(
                    os.getenv("INVOICE_OUTPUT_PATH", "output/invoice_sample.pdf")
                ),
            ),
        )


# Singleton instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create singleton AppConfig instance from environment."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads env."""
    global _config
    _config = None
