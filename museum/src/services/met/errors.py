class MetAPIError(Exception):
    """Base class for failures talking to the Met collection API."""

    pass


class TransportError(MetAPIError):
    """The connection could not be established, was reset, or returned an error status."""

    pass


class ParseError(MetAPIError):
    """The response body was not valid JSON."""

    pass


class FetchTimeoutError(MetAPIError, TimeoutError):
    """The deadline elapsed before the upstream call finished."""

    pass


class UpstreamUnavailable(MetAPIError):
    """The seed search of an aggregation failed outright."""

    pass


class InvalidArtistId(ValueError):
    """An artist id could not be decoded back to a display name."""

    pass
