"""Exceptions raised outside the pure document assembly."""


class CbSwaggerError(Exception):
    """Base class for all cb-swagger errors."""


class ConfigError(CbSwaggerError):
    """Missing or invalid configuration, e.g. no API key."""


class FetchError(CbSwaggerError):
    """The entity types could not be retrieved from the Communibase API."""
