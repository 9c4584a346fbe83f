"""Locale-aware currency formatting."""

import logging
from decimal import Decimal
from typing import Union

from babel.core import UnknownLocaleError
from babel.numbers import format_currency as babel_format_currency

from ..models import Locale

logger = logging.getLogger(__name__)


def format_currency(amount: Union[int, float, Decimal], locale: Locale) -> str:
    """Format ``amount`` in the locale's currency, e.g. ``$20.00`` or ``20,00 $``."""
    value = Decimal(str(amount))
    try:
        return babel_format_currency(value, locale.currency, locale=locale.tag)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Falling back to plain currency format for {locale.tag}: {e}")
        return f"{value:,.2f} {locale.currency}"
