"""Serializer fields shared across apps."""

from decimal import ROUND_HALF_UP

from rest_framework import serializers


class MoneyField(serializers.DecimalField):
    """
    Read-side money field.

    Amounts are kept at full precision in storage and only rounded to cents
    (half up) when rendered.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', None)
        kwargs.setdefault('decimal_places', 2)
        kwargs.setdefault('rounding', ROUND_HALF_UP)
        kwargs.setdefault('read_only', True)
        super().__init__(**kwargs)
