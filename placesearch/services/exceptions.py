"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class NetworkError(ServiceError):
    """The search endpoint could not be reached or answered with garbage."""
