"""
Exception hierarchy for the solar-yield pipeline.

Every failure reaches the user as the same generic message; the distinct
types exist so logs and tests can tell the causes apart.
"""


class PVYieldError(Exception):
    """Base class for all pipeline errors."""


class ConfigurationError(PVYieldError):
    """Deployment configuration is missing or invalid (e.g. no API key)."""


class UnresolvableLocation(PVYieldError):
    """The postal lookup produced no usable coordinates."""


class RetrievalError(PVYieldError):
    """The simulation data could not be retrieved or interpreted."""


class UpstreamUnavailable(RetrievalError):
    """Transport failure or non-success status from an upstream service."""


class MalformedResponse(RetrievalError):
    """Upstream answered, but the payload does not have the expected shape."""
