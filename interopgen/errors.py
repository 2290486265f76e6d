"""Exceptions raised by the binding emitter"""


class InteropError(Exception):
    """Base class for all interopgen errors"""


class CatalogError(InteropError):
    """The call catalog document is malformed"""


class MalformedTypeError(InteropError):
    """A type graph could not be unwrapped to a terminal node"""


class SinkClosedError(InteropError):
    """An output sink was written to after its phase completed"""
