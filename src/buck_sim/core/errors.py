"""Configuration and numeric errors raised by the simulation engine."""


class ConfigurationError(ValueError):
    """Raised when converter parameters cannot produce a valid run."""


class InvalidDutyRatio(ConfigurationError):
    """Raised when the duty ratio is outside [0, 1] or not finite."""


class InvalidSamplingWindow(ConfigurationError):
    """Raised when the steady-state window is empty or outside the horizon."""


class DegenerateCircuit(ConfigurationError):
    """Raised when R, L or C is not strictly positive."""


class InvalidTimeBase(ConfigurationError):
    """Raised when step, frequency or horizon leave nothing to integrate."""


class NumericOverflowError(ArithmeticError):
    """Raised when a run produces NaN or infinite state values."""
