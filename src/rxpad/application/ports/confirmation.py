"""Confirmation port - yes/no decision for destructive actions."""

from collections.abc import Callable

Confirmation = Callable[[], bool]


def always() -> bool:
    """Confirmation that always accepts."""
    return True


def never() -> bool:
    """Confirmation that always declines."""
    return False
