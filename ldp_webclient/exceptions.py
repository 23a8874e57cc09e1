class LDPClientError(Exception):
    """Base class for errors raised by this package."""


class MissingContentTypeError(LDPClientError):
    """A body was about to be parsed without a declared content type."""


class ConfigError(LDPClientError):
    pass


class TransportError(LDPClientError):
    """The request never produced a response (connection refused, timeout)."""


class HttpError(LDPClientError):
    """The server answered with a non-2xx status."""
    def __init__(self, status, reason, response=None):
        super().__init__(status, reason)
        self.status = status
        self.reason = reason
        self.response = response

    def __str__(self):
        return "{0} {1}".format(self.status, self.reason)


class GraphParseError(LDPClientError):
    """A body could not be parsed as RDF (bad syntax, unsupported type)."""
