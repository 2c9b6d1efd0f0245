"""
Environment-driven defaults for boundedlru.

Values are read from the environment on every call, so changes to `os.environ`
take effect for caches constructed afterwards.
"""

import logging
import os

DEFAULT_CAPACITY = 128
DEFAULT_CAPACITY_ENV = "BOUNDEDLRU_DEFAULT_CAPACITY"


log = logging.getLogger(__name__)


def default_capacity() -> int:
    """
    Returns the capacity used by caches constructed without one.

    Reads `BOUNDEDLRU_DEFAULT_CAPACITY`. Missing values fall back to `DEFAULT_CAPACITY`;
    values that are not positive integers are logged and fall back as well.
    """
    raw = os.environ.get(DEFAULT_CAPACITY_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_CAPACITY

    try:
        capacity = int(raw)
    except ValueError:
        capacity = 0

    if capacity < 1:
        log.warning(f"{DEFAULT_CAPACITY_ENV}={raw!r} is invalid, using default capacity {DEFAULT_CAPACITY}")
        return DEFAULT_CAPACITY
    return capacity
