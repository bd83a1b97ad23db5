"""VAT Checker package relaying VAT number lookups to the EU VIES service."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["get_version"]


def get_version() -> str:
    """Return the installed package version."""
    try:
        return version("vat-checker")
    except PackageNotFoundError:  # pragma: no cover - running from a source checkout
        return "1.0.0"
