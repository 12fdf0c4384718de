"""
refellipsoid.config - Numeric options shared by the transforms

Options are read once from the environment at import and may be changed
at runtime with set_option() or temporarily with option_context().

Environment variables:
    REFELLIPSOID_TOLERANCE: comparison tolerance (default 1e-14)
    REFELLIPSOID_MAXITER: default iteration bound for geocentric to
        geodetic conversion (default 10)
    REFELLIPSOID_ON_NONCONVERGENCE: 'ignore', 'warn' or 'raise'
        (default 'warn')

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import os
import threading
import warnings
from contextlib import contextmanager
from typing import Any

__all__ = [
    'DEFAULTS',
    'NONCONVERGENCE_POLICIES',
    'get_option',
    'option_context',
    'reset_options',
    'set_option',
    'show_options',
]


DEFAULTS = {
    'tolerance': 1e-14,
    'maxiter': 10,
    'on_nonconvergence': 'warn',
}

NONCONVERGENCE_POLICIES = ('ignore', 'warn', 'raise')

_ENV_VARS = {
    'tolerance': 'REFELLIPSOID_TOLERANCE',
    'maxiter': 'REFELLIPSOID_MAXITER',
    'on_nonconvergence': 'REFELLIPSOID_ON_NONCONVERGENCE',
}


def _validate(name: str, value: Any) -> Any:
    """Check an option value and return it in canonical form."""
    if name == 'tolerance':
        value = float(value)
        if not value > 0.0:
            raise ValueError(f"tolerance must be positive, got {value}")
    elif name == 'maxiter':
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"maxiter must be an integer, got {value}")
        value = int(value)
        if value < 1:
            raise ValueError(f"maxiter must be at least 1, got {value}")
    elif name == 'on_nonconvergence':
        value = str(value).strip().lower()
        if value not in NONCONVERGENCE_POLICIES:
            raise ValueError(
                f"Unknown non-convergence policy: {value}. "
                f"Supported: {list(NONCONVERGENCE_POLICIES)}"
            )
    else:
        raise ValueError(
            f"Unknown option: {name}. Supported: {list(DEFAULTS.keys())}"
        )
    return value


# =============================================================================
# Global State
# =============================================================================

class _OptionsState:
    """Thread-safe options manager."""

    def __init__(self):
        self._lock = threading.Lock()
        self._options = dict(DEFAULTS)

        # Read environment variables
        self._init_from_env()

    def _init_from_env(self):
        """Initialize options from environment variables."""
        for name, var in _ENV_VARS.items():
            raw = os.environ.get(var, '').strip()
            if not raw:
                continue
            try:
                self._options[name] = _validate(name, raw)
            except ValueError as exc:
                warnings.warn(
                    f"Ignoring {var}={raw!r}: {exc}. "
                    f"Using default {DEFAULTS[name]!r}.",
                    UserWarning,
                    stacklevel=2
                )

    def get(self, name: str) -> Any:
        with self._lock:
            if name not in self._options:
                raise ValueError(
                    f"Unknown option: {name}. Supported: {list(DEFAULTS.keys())}"
                )
            return self._options[name]

    def set(self, name: str, value: Any):
        value = _validate(name, value)
        with self._lock:
            self._options[name] = value

    def reset(self):
        with self._lock:
            self._options = dict(DEFAULTS)

    def snapshot(self) -> dict:
        with self._lock:
            return dict(self._options)


# Global state instance
_state = _OptionsState()


# =============================================================================
# Public API
# =============================================================================

def get_option(name: str) -> Any:
    """Return the current value of an option.

    Parameters
    ----------
    name : str
        Option name ('tolerance', 'maxiter' or 'on_nonconvergence')

    Returns
    -------
    Any
        Current option value
    """
    return _state.get(name)


def set_option(name: str, value: Any) -> None:
    """Set an option for the rest of the process.

    Parameters
    ----------
    name : str
        Option name
    value : Any
        New value, validated before it is stored

    Raises
    ------
    ValueError
        If the option name or value is invalid
    """
    _state.set(name, value)


def reset_options() -> None:
    """Restore every option to its built-in default."""
    _state.reset()


@contextmanager
def option_context(**options):
    """Temporarily override options.

    Examples
    --------
    >>> with option_context(maxiter=50, on_nonconvergence='raise'):
    ...     lon, lat, h = WGS84.geocentric_to_geodetic(x, y, z)
    """
    previous = {name: get_option(name) for name in options}
    # validate everything before touching the state
    validated = {name: _validate(name, value) for name, value in options.items()}
    try:
        for name, value in validated.items():
            _state.set(name, value)
        yield
    finally:
        for name, value in previous.items():
            _state.set(name, value)


def show_options() -> None:
    """Print current options and their environment variables."""
    print("refellipsoid options")
    print("=" * 50)
    for name, value in _state.snapshot().items():
        print(f"  {name:<20} {value!r:<12} (${_ENV_VARS[name]})")
