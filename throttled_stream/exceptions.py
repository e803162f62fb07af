class ThrottledStreamError(Exception):
    pass


class InvalidGateConfigError(ThrottledStreamError, ValueError):
    pass


class GateAlreadyOwnedError(ThrottledStreamError):
    pass


class InvalidSourceError(ThrottledStreamError, TypeError):
    pass
