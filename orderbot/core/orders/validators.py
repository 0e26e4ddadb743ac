"""
Validators for order data.
"""

import re
from typing import Optional, Tuple


class QuantityValidator:
    """Validate product quantity."""

    QUANTITY_PATTERN = re.compile(r'^[+-]?\d+$')

    MAX_QUANTITY = 1000  # Maximum items per order

    ERROR_MESSAGE = "Пожалуйста, введите корректное количество (число больше 0):"

    @classmethod
    def validate(cls, quantity_str: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Validate quantity: a whole number greater than zero.

        Returns:
            Tuple of (is_valid, quantity, error_message)
        """
        quantity_str = quantity_str.strip()

        if not cls.QUANTITY_PATTERN.match(quantity_str):
            return False, None, cls.ERROR_MESSAGE

        try:
            quantity = int(quantity_str)
        except ValueError:
            # Longer than the interpreter's int conversion limit
            return False, None, f"Максимальное количество: {cls.MAX_QUANTITY}"

        if quantity <= 0:
            return False, None, cls.ERROR_MESSAGE

        if quantity > cls.MAX_QUANTITY:
            return False, None, f"Максимальное количество: {cls.MAX_QUANTITY}"

        return True, quantity, None
