"""Shared domain constants."""

CURRENCY_CODE_LENGTH = 3
DEFAULT_CURRENCY = "USD"

# Discounts are whole percentages
MIN_DISCOUNT_PCT = 0
MAX_DISCOUNT_PCT = 100
