"""
Exceptions raised by the host application layer.

The projection core never raises for bad readings; these cover the
configuration and the data handed over by external collaborators.
"""


class SceneError(Exception):
    """Base class for errors raised by the scene sessions."""


class ConfigurationError(SceneError, ValueError):
    """A session configuration value is invalid or has the wrong units."""


class CountryRecordError(SceneError, ValueError):
    """A country lookup payload does not have the expected shape."""
