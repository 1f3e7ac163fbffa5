"""Caller-side validation, run before a prop reaches the engine."""

import math

from .exceptions import InvalidPropError
from .models import Direction, StatKey


def validate_projection_input(line, direction, simulations=None, stat_key=None, last_n=None) -> None:
    """
    Raise InvalidPropError for configuration the engine should never see.

    Args:
        line: Sportsbook line, must be a finite number
        direction: OVER or UNDER
        simulations: Optional simulation count, must be a positive integer
        stat_key: Optional stat code, must be a known StatKey
        last_n: Optional lookback window, must be a positive integer
    """
    try:
        line_value = float(line)
    except (TypeError, ValueError):
        raise InvalidPropError(f"Line must be a number, got {line!r}") from None
    if not math.isfinite(line_value):
        raise InvalidPropError(f"Line must be finite, got {line!r}")

    try:
        Direction.parse(direction)
    except ValueError as e:
        raise InvalidPropError(str(e)) from None

    if simulations is not None:
        if isinstance(simulations, bool) or not isinstance(simulations, int) or simulations <= 0:
            raise InvalidPropError(f"Simulation count must be a positive integer, got {simulations!r}")

    if last_n is not None:
        if isinstance(last_n, bool) or not isinstance(last_n, int) or last_n <= 0:
            raise InvalidPropError(f"Lookback window must be a positive integer, got {last_n!r}")

    if stat_key is not None:
        try:
            StatKey.parse(stat_key)
        except ValueError as e:
            raise InvalidPropError(str(e)) from None
