"""
Errors raised outside the sampler core
"""


class ConfigurationError(ValueError):
    """Invalid settings or an unknown vocabulary"""
