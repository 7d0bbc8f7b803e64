"""Tests for the robot return packet."""

import pytest

from gamecontroller import returndata
from gamecontroller.constants import ReturnMessage
from gamecontroller.errors import BadHeader, EncodeError, LengthMismatch, UnsupportedVersion
from gamecontroller.returndata import RETURN_DATA_SIZE, ReturnData, new_return_packet


def test_new_return_packet():
    """Header and version are filled in by the factory."""
    packet = new_return_packet(5, 1, ReturnMessage.ALIVE)
    assert packet.header == b"RGrt"
    assert packet.version == 2
    assert packet.team == 5
    assert packet.player == 1
    assert packet.message == 2


def test_encode_layout():
    data = returndata.encode(new_return_packet(5, 1, ReturnMessage.ALIVE))
    assert data == b"RGrt\x02\x05\x01\x02"
    assert len(data) == RETURN_DATA_SIZE == 8


def test_roundtrip():
    for message in ReturnMessage:
        packet = new_return_packet(17, 3, message)
        decoded = returndata.decode(returndata.encode(packet))
        assert decoded == packet
        assert decoded.message is message


def test_unknown_message_passes_through():
    packet = new_return_packet(5, 2, 9)
    decoded = returndata.decode(returndata.encode(packet))
    assert decoded.message == 9
    assert type(decoded.message) is int


def test_bad_header():
    with pytest.raises(BadHeader):
        returndata.decode(b"RGme\x02\x05\x01\x02")


def test_unsupported_version():
    with pytest.raises(UnsupportedVersion) as excinfo:
        returndata.decode(b"RGrt\x03\x05\x01\x02")
    assert excinfo.value.actual == 3


def test_length_mismatch():
    data = returndata.encode(new_return_packet(5, 1))
    with pytest.raises(LengthMismatch):
        returndata.decode(data[:-1])
    with pytest.raises(LengthMismatch):
        returndata.decode(data + b"\x00")


def test_encode_errors():
    with pytest.raises(EncodeError):
        returndata.encode(new_return_packet(5, 256))
    foreign = ReturnData(header=b"RGme", version=2, team=5, player=1, message=2)
    with pytest.raises(EncodeError):
        returndata.encode(foreign)
