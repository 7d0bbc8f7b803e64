#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""Encoder/decoder for the RoboCup GameController packets."""

from .errors import (
    BadHeader,
    DecodeError,
    EncodeError,
    GameControllerError,
    LengthMismatch,
    UnsupportedVersion,
)
from .gamestate import GAME_STATE_SIZE, GameControlData, RobotInfo, TeamInfo, new_game_state
from .returndata import RETURN_DATA_SIZE, ReturnData, new_return_packet

__version__ = "0.1.0"
