#!/usr/bin/env python
# -*- coding:utf-8 -*-

from enum import IntEnum

# Socket info. Transport lives outside this package, the ports are kept for callers.
DEFAULT_LISTENING_HOST = '0.0.0.0'
GAMECONTROLLER_DATA_PORT = 3838
GAMECONTROLLER_RETURN_PORT = 3939

# Game Controller message info.
GAMECONTROLLER_STRUCT_HEADER = b'RGme'
GAMECONTROLLER_STRUCT_VERSION = 11

GAMECONTROLLER_RETURN_STRUCT_HEADER = b'RGrt'
GAMECONTROLLER_RETURN_STRUCT_VERSION = 2

MAX_NUM_PLAYERS = 6
NUM_TEAMS = 2

DROPBALL = 255
NO_DROP_IN = 0xFFFF  # drop_in_time before the first drop in


class TeamColor(IntEnum):
    # SPL
    BLUE = 0    # cyan, blue, violet
    RED = 1     # magenta, pink (not red/orange)
    YELLOW = 2
    BLACK = 3   # black, dark gray
    WHITE = 4
    GREEN = 5
    ORANGE = 6
    PURPLE = 7  # purple, violet
    BROWN = 8
    GRAY = 9    # lighter grey
    # HL
    CYAN = 0
    MAGENTA = 1


class CompetitionPhase(IntEnum):
    ROUNDROBIN = 0
    PLAYOFF = 1


class CompetitionType(IntEnum):
    NORMAL = 0
    MIXEDTEAM = 1
    GENERAL_PENALTY_KICK = 2


class State(IntEnum):
    INITIAL = 0
    READY = 1
    SET = 2
    PLAYING = 3
    FINISHED = 4
    GOAL_FREE_KICK = 5
    PENALTY_FREE_KICK = 6


class SecondaryState(IntEnum):
    NORMAL = 0
    PENALTYSHOOT = 1
    OVERTIME = 2
    TIMEOUT = 3


class Penalty(IntEnum):
    """Penalty codes shared by every league."""
    NONE = 0
    SUBSTITUTE = 14
    MANUAL = 15


class SPLPenalty(IntEnum):
    NONE = 0
    ILLEGAL_BALL_CONTACT = 1  # ball holding / playing with hands
    PLAYER_PUSHING = 2
    ILLEGAL_MOTION_IN_SET = 3
    INACTIVE_PLAYER = 4       # fallen, inactive, local game stuck
    ILLEGAL_DEFENDER = 5
    LEAVING_THE_FIELD = 6
    KICK_OFF_GOAL = 7
    REQUEST_FOR_PICKUP = 8
    SUBSTITUTE = 14
    MANUAL = 15


class HLKidPenalty(IntEnum):
    NONE = 0
    BALL_MANIPULATION = 1
    PHYSICAL_CONTACT = 2
    ILLEGAL_ATTACK = 3
    ILLEGAL_DEFENSE = 4
    REQUEST_FOR_PICKUP = 5
    REQUEST_FOR_SERVICE = 6
    REQUEST_FOR_PICKUP_2_SERVICE = 7
    SUBSTITUTE = 14
    MANUAL = 15


class HLTeenPenalty(IntEnum):
    NONE = 0
    BALL_MANIPULATION = 1
    PHYSICAL_CONTACT = 2
    ILLEGAL_ATTACK = 3
    ILLEGAL_DEFENSE = 4
    REQUEST_FOR_PICKUP = 5
    REQUEST_FOR_SERVICE = 6
    REQUEST_FOR_PICKUP_2_SERVICE = 7
    SUBSTITUTE = 14
    MANUAL = 15


class ReturnMessage(IntEnum):
    MAN_PENALISE = 0
    MAN_UNPENALISE = 1
    ALIVE = 2


PENALTY_TABLES = {
    'spl': SPLPenalty,
    'hl_kid': HLKidPenalty,
    'hl_teen': HLTeenPenalty,
}


def as_code(enum_cls, value):
    """Return the enum member for a known code, the plain int otherwise."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


def code_name(enum_cls, value):
    try:
        return enum_cls(value).name
    except ValueError:
        return f"UNKNOWN({value})"


def penalty_name(value, league='spl'):
    """Name a penalty code for the given league ('spl', 'hl_kid' or 'hl_teen')."""
    try:
        table = PENALTY_TABLES[league]
    except KeyError:
        raise ValueError(f"Unknown league: {league}") from None
    return code_name(table, value)
