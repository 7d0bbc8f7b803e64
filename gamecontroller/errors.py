#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""Exceptions raised by the packet codecs."""


class GameControllerError(Exception):
    """Base exception class for all codec errors."""
    pass


class DecodeError(GameControllerError, ValueError):
    """A buffer could not be decoded into a packet."""

    def __init__(self, message, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class LengthMismatch(DecodeError):
    """Buffer is not exactly the fixed packet size."""
    pass


class BadHeader(DecodeError):
    """First 4 bytes do not match the packet's magic tag."""
    pass


class UnsupportedVersion(DecodeError):
    """Version field differs from the one supported version."""
    pass


class EncodeError(GameControllerError, ValueError):
    """A packet value does not fit the wire layout."""
    pass
