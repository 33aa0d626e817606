"""IRR computation via Newton-Raphson.

Pure functions. No I/O. Never raises: a sequence without a reachable root
just returns wherever the iteration stopped.
"""

import logging
import math

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 40
TOLERANCE = 1e-7
MIN_RATE = -0.99  # Keeps (1 + r) away from zero


def npv(rate: float, cash_flows: list[float]) -> float:
    return sum(cf / (1 + rate) ** t for t, cf in enumerate(cash_flows))


def npv_derivative(rate: float, cash_flows: list[float]) -> float:
    return sum(-t * cf / (1 + rate) ** (t + 1) for t, cf in enumerate(cash_flows))


def internal_rate_of_return(cash_flows: list[float], guess: float = 0.05) -> float:
    """Annual IRR of a cash-flow vector.

    cash_flows[0] should be negative (initial investment); the rest are
    yearly net flows.
    """
    rate = guess
    for _ in range(MAX_ITERATIONS):
        try:
            new_rate = rate - npv(rate, cash_flows) / npv_derivative(rate, cash_flows)
        except (ZeroDivisionError, OverflowError):
            new_rate = math.nan
        if not math.isfinite(new_rate):
            logger.debug("IRR update not finite at rate %.6f, keeping it", rate)
            break
        if abs(new_rate - rate) < TOLERANCE:
            rate = new_rate
            break
        rate = max(MIN_RATE, new_rate)
    else:
        logger.debug("IRR did not converge after %d iterations (rate %.6f)", MAX_ITERATIONS, rate)

    return rate
