"""Locale-aware money and percentage formatting (display only)."""

from babel.numbers import format_currency as _babel_format_currency
from babel.numbers import format_percent as _babel_format_percent

from backend.app.core.config import settings


def format_currency(amount: float, currency: str | None = None, locale: str | None = None) -> str:
    """Format an amount using the currency's minor unit, e.g. 4.158 -> "4,16 €" in pt_PT."""
    return _babel_format_currency(amount, currency or settings.currency, locale=locale or settings.locale)


def format_percent(value: float, decimals: int = 2, locale: str | None = None) -> str:
    """Format a 0-100 percentage value, e.g. 33.333 -> "33,33%" in pt_PT."""
    pattern = "#,##0." + "0" * decimals + "%" if decimals else "#,##0%"
    return _babel_format_percent(value / 100, format=pattern, locale=locale or settings.locale)
