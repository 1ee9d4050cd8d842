"""Errors raised while talking to the NWS API."""


class TransportError(Exception):
    """A request to the NWS API failed or returned an unusable response."""


class DecodeError(TransportError):
    """A response parsed as JSON but lacked a required field."""
