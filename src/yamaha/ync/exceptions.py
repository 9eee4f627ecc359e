"""Exception classes for the YNC protocol."""


class YncException(Exception):
    pass


class NotStartedException(YncException):
    pass


class TransportFailure(YncException):
    """The HTTP exchange with the receiver failed."""


class InvalidEnumValue(YncException, ValueError):
    def __init__(self, enum_name: str, value: object):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Invalid {enum_name} {value!r}")


class InvalidLine(YncException, ValueError):
    def __init__(self, line: int):
        self.line = line
        super().__init__(f"Line must be 1 or greater, got {line}")


class UnknownInputZone(YncException):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Could not find zone by input {value!r}")


class ProtocolParseError(YncException):
    pass


class ProtocolRejected(YncException):
    """The receiver answered with a non-zero return code."""

    def __init__(self, rc: str | None = None, request: str | None = None):
        self.rc = rc
        self.request = request
        super().__init__(f"'rc':{rc}, 'request':{request}")
