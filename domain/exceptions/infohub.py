class InfoHubException(Exception):
    pass


class InvalidAmountError(InfoHubException):
    pass


class CityNotFoundError(InfoHubException):
    pass


class UpstreamServiceError(InfoHubException):
    """Raised when an upstream failure must surface to the client.

    The message is the client-safe text; the underlying error is chained.
    """
    pass
