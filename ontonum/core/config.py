"""
Global numeric configuration for ontonum.

This module holds the process-wide knobs that the value library consults:
the direct-exponentiation ceiling used by chunked powers, the number of
terms used by the convergent series behind the irrational constants, and
whether absent-reference coercions warn.
"""

from typing import Any, Dict

# Largest exponent handed to a single direct power call; the native signed
# 32-bit limit.
DEFAULT_POW_CEILING = 2**31 - 1

DEFAULT_SERIES_TERMS = 100


class NumericConfig:
    """
    Global numeric configuration.

    Settings are class-level and read at call time, except for the series
    terms, which are read once when the constant registry initialises.
    """

    _pow_ceiling: int = DEFAULT_POW_CEILING
    _series_terms: int = DEFAULT_SERIES_TERMS
    _warn_on_absent: bool = True

    @classmethod
    def set_pow_ceiling(cls, ceiling: int) -> None:
        """
        Set the direct-exponentiation ceiling.

        Args:
            ceiling: Largest exponent passed to a single direct power call

        Raises:
            ValueError: If ceiling is not a positive integer
        """
        if isinstance(ceiling, bool) or not isinstance(ceiling, int) or ceiling < 1:
            raise ValueError(f"Invalid power ceiling: {ceiling!r}")
        cls._pow_ceiling = ceiling

    @classmethod
    def get_pow_ceiling(cls) -> int:
        """Get the current direct-exponentiation ceiling."""
        return cls._pow_ceiling

    @classmethod
    def set_series_terms(cls, terms: int) -> None:
        """
        Set the default number of terms for convergent series.

        Raises:
            ValueError: If terms is not a positive integer
        """
        if isinstance(terms, bool) or not isinstance(terms, int) or terms < 1:
            raise ValueError(f"Invalid series terms: {terms!r}")
        cls._series_terms = terms

    @classmethod
    def get_series_terms(cls) -> int:
        return cls._series_terms

    @classmethod
    def set_warn_on_absent(cls, warn: bool) -> None:
        """Enable or disable the warning issued when an absent value is coerced."""
        cls._warn_on_absent = bool(warn)

    @classmethod
    def warns_on_absent(cls) -> bool:
        return cls._warn_on_absent

    @classmethod
    def snapshot(cls) -> Dict[str, Any]:
        """Return the current settings as a dict."""
        return {
            'pow_ceiling': cls._pow_ceiling,
            'series_terms': cls._series_terms,
            'warn_on_absent': cls._warn_on_absent,
        }

    @classmethod
    def restore(cls, settings: Dict[str, Any]) -> None:
        """Apply settings previously returned by snapshot()."""
        cls.set_pow_ceiling(settings['pow_ceiling'])
        cls.set_series_terms(settings['series_terms'])
        cls.set_warn_on_absent(settings['warn_on_absent'])


_SETTERS = {
    'pow_ceiling': NumericConfig.set_pow_ceiling,
    'series_terms': NumericConfig.set_series_terms,
    'warn_on_absent': NumericConfig.set_warn_on_absent,
}


# Context manager for temporary configuration changes
class config_context:
    """
    Context manager for temporary configuration changes.

    Example:
        with config_context(pow_ceiling=64):
            # Powers above 2**64 are computed in chunks of 64
            value = full_range_pow(2, 65)
        # Back to the previous ceiling
    """

    def __init__(self, **overrides: Any):
        unknown = set(overrides) - set(_SETTERS)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        self.overrides = overrides
        self.saved = None

    def __enter__(self):
        self.saved = NumericConfig.snapshot()
        try:
            for key, value in self.overrides.items():
                _SETTERS[key](value)
        except ValueError:
            NumericConfig.restore(self.saved)
            raise
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb):
        NumericConfig.restore(self.saved)
