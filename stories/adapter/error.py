"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class RealtimeProtocolError(AdapterError):
    """A realtime client sent a frame the server cannot act on."""

    pass
