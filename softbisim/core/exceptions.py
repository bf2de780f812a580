"""Exceptions raised by softbisim."""


class InvalidWeightsError(ValueError):
    """A cost coefficient is missing, negative or not finite."""


class ConfigurationError(ValueError):
    """Training or optimizer configuration cannot be used as given."""
