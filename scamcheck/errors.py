from __future__ import annotations


class ClassifierError(Exception):
    """Base class for failures of the remote classifier."""


class ConfigurationAbsentError(ClassifierError):
    """No credential configured for the remote service."""


class RemoteCallFailedError(ClassifierError):
    """Network, timeout or service-side error while calling the model."""


class InvalidResponseFormatError(ClassifierError):
    """Model output could not be parsed as JSON."""


class InvalidResponseSchemaError(ClassifierError):
    """Model output parsed but does not describe a verdict."""
