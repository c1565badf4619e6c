from bpsim.parameter import *

__all__ = ["ConfigurationError", "mask", "bits", "check_index_bits", "check_history_bits"]


class ConfigurationError(ValueError):
    """Predictor size parameters that can not build a table."""


def mask(width: int) -> int:
    """
    :return: width个1, width为0时返回0
    """
    return (1 << width) - 1


def bits(x: int, low: int, width: int) -> int:
    """
    :param low: 最低位
    :param width: 取多少位
    :return: x[low + width - 1:low]
    """
    return (x >> low) & mask(width)


def check_index_bits(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 0 or value > MAX_INDEX_BITS:
        raise ConfigurationError(f"{name} must be in [0, {MAX_INDEX_BITS}], got {value}")
    return value


def check_history_bits(m1: int, n: int) -> None:
    check_index_bits("M1", m1)
    check_index_bits("N", n)
    if n > m1:
        raise ConfigurationError(f"N ({n}) must not exceed M1 ({m1})")
