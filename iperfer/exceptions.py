"""Exception classes for Iperfer runs.

Every error is terminal for the run. The class-level ``message`` is the
exact text printed after ``Error: `` on stdout.
"""


class IperferError(Exception):
    """
    Base exception class for all Iperfer errors.
    """
    message = "unexpected error"

    def __init__(self):
        super().__init__(self.message)


class ArgumentError(IperferError):
    """
    Raised for any malformed argument list: wrong token count, unknown or
    repeated flag, missing value, or a non-integer where one is required.
    """
    message = "missing or additional arguments"


class PortRangeError(IperferError):
    """
    Raised when the port lies outside 1024..65535.
    """
    message = "port number must be in the range 1024 to 65535"


class TimeRangeError(IperferError):
    """
    Raised when the sender duration is zero or negative.
    """
    message = "time must be positive"


class HostResolutionError(IperferError):
    """
    Raised when the sender cannot resolve the receiver hostname.
    """
    message = "could not resolve hostname"


class ConnectError(IperferError):
    """
    Raised when the sender cannot connect, or the stream fails mid-send.
    """
    message = "could not connect to server"


class ServerError(IperferError):
    """
    Raised when the receiver cannot bind, accept, or read.
    """
    message = "could not start server"
