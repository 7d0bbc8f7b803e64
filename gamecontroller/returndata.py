#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""Return packet (robot -> controller): header(4) version team player message."""

from dataclasses import dataclass

from construct import Byte, Const, ConstructError, Struct

from .constants import (
    GAMECONTROLLER_RETURN_STRUCT_HEADER,
    GAMECONTROLLER_RETURN_STRUCT_VERSION,
    ReturnMessage,
    as_code,
)
from .errors import BadHeader, EncodeError, LengthMismatch, UnsupportedVersion

ReturnDataStruct = "returndata" / Struct(
    "header" / Const(GAMECONTROLLER_RETURN_STRUCT_HEADER),
    "version" / Const(GAMECONTROLLER_RETURN_STRUCT_VERSION, Byte),
    "team" / Byte,
    "player" / Byte,  # player number starts with 1
    "message" / Byte
)

RETURN_DATA_SIZE = ReturnDataStruct.sizeof()


@dataclass(frozen=True)
class ReturnData:
    header: bytes
    version: int
    team: int
    player: int
    message: int


def new_return_packet(team, player, message=ReturnMessage.ALIVE):
    return ReturnData(
        header=GAMECONTROLLER_RETURN_STRUCT_HEADER,
        version=GAMECONTROLLER_RETURN_STRUCT_VERSION,
        team=team,
        player=player,
        message=message,
    )


def encode(packet):
    try:
        return ReturnDataStruct.build(dict(
            header=packet.header,
            version=packet.version,
            team=packet.team,
            player=packet.player,
            message=packet.message,
        ))
    except ConstructError as e:
        raise EncodeError(f"Cannot encode return data: {e}") from e


def decode(data):
    """Parse a return packet, see gamestate.decode for the error order."""
    data = bytes(data)
    if len(data) != RETURN_DATA_SIZE:
        raise LengthMismatch(f"Expected {RETURN_DATA_SIZE} bytes, got {len(data)}",
                             expected=RETURN_DATA_SIZE, actual=len(data))
    header = data[:4]
    if header != GAMECONTROLLER_RETURN_STRUCT_HEADER:
        raise BadHeader(f"Bad header {header!r}",
                        expected=GAMECONTROLLER_RETURN_STRUCT_HEADER, actual=header)
    version = data[4]
    if version != GAMECONTROLLER_RETURN_STRUCT_VERSION:
        raise UnsupportedVersion(f"Unsupported version {version}",
                                 expected=GAMECONTROLLER_RETURN_STRUCT_VERSION, actual=version)

    parsed = ReturnDataStruct.parse(data)
    return ReturnData(
        header=parsed.header,
        version=parsed.version,
        team=parsed.team,
        player=parsed.player,
        message=as_code(ReturnMessage, parsed.message),
    )
