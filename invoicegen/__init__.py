"""invoicegen - one-page invoice PDFs composed from rows and columns."""

__version__ = "0.1.0"
