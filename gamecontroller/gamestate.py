#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""Game state broadcast packet (controller -> robots).

Wire layout, all multi-byte integers little-endian::

    header(4) version(u16) packet_number players_per_team competition
    state first_half kicking_team secondary_state drop_in_team
    drop_in_time(u16) secs_remaining(u16) secondary_time(u16) teams[2]

The ``competition`` byte carries two 4-bit fields: competition_phase in the
low nibble and competition_type in the high nibble.
"""

from dataclasses import dataclass, field

from construct import Array, Byte, Const, ConstructError, Int16ul, Struct

from .constants import (
    GAMECONTROLLER_STRUCT_HEADER,
    GAMECONTROLLER_STRUCT_VERSION,
    MAX_NUM_PLAYERS,
    NO_DROP_IN,
    NUM_TEAMS,
    CompetitionPhase,
    CompetitionType,
    SecondaryState,
    State,
    TeamColor,
    as_code,
)
from .errors import BadHeader, EncodeError, LengthMismatch, UnsupportedVersion

Short = Int16ul

RobotInfoStruct = "robot_info" / Struct(
    # Penalty codes depend on the league, see constants.SPLPenalty / HLKidPenalty
    "penalty" / Byte,
    "secs_till_unpenalised" / Byte
)

TeamInfoStruct = "team" / Struct(
    "team_number" / Byte,
    "team_color" / Byte,
    "score" / Byte,
    "penalty_shot" / Byte,  # penalty shot counter
    "single_shots" / Short,  # bits represent penalty shot success
    "players" / Array(MAX_NUM_PLAYERS, RobotInfoStruct)
)

GameState = "gamedata" / Struct(
    "header" / Const(GAMECONTROLLER_STRUCT_HEADER),
    "version" / Const(GAMECONTROLLER_STRUCT_VERSION, Short),
    "packet_number" / Byte,
    "players_per_team" / Byte,
    "competition" / Byte,
    "game_state" / Byte,
    "first_half" / Byte,
    "kicking_team" / Byte,
    "secondary_state" / Byte,
    "drop_in_team" / Byte,
    "drop_in_time" / Short,
    "secs_remaining" / Short,
    "secondary_time" / Short,
    "teams" / Array(NUM_TEAMS, TeamInfoStruct)
)

GAME_STATE_SIZE = GameState.sizeof()

COMPETITION_OFFSET = 8


def _default_players():
    return tuple(RobotInfo() for _ in range(MAX_NUM_PLAYERS))


@dataclass(frozen=True)
class RobotInfo:
    penalty: int = 0
    secs_till_unpenalised: int = 0

    @property
    def penalised(self):
        return self.penalty != 0


@dataclass(frozen=True)
class TeamInfo:
    team_number: int = 0
    team_color: int = 0
    score: int = 0
    penalty_shot: int = 0
    single_shots: int = 0
    players: tuple = field(default_factory=_default_players)

    def __post_init__(self):
        object.__setattr__(self, 'players', tuple(self.players))

    def shot_succeeded(self, index):
        """True if penalty shot ``index`` (0-based) was a success."""
        return bool(self.single_shots >> index & 1)


@dataclass(frozen=True)
class GameControlData:
    """A decoded RoboCupGameControlData packet.

    ``teams`` is ordered as on the wire; the position says nothing about the
    team colour, use :meth:`team` to look a team up by its number.
    """

    header: bytes
    version: int
    packet_number: int
    players_per_team: int
    competition_phase: int
    competition_type: int
    state: int
    first_half: int
    kicking_team: int
    secondary_state: int
    drop_in_team: int
    drop_in_time: int
    secs_remaining: int
    secondary_time: int
    teams: tuple

    def __post_init__(self):
        object.__setattr__(self, 'teams', tuple(self.teams))

    def team(self, team_number):
        for team in self.teams:
            if team.team_number == team_number:
                return team
        return None

    def active_players(self, team):
        """Players of ``team`` that take part, the rest is only padding on the wire."""
        return team.players[:min(self.players_per_team, MAX_NUM_PLAYERS)]


def new_game_state(**fields):
    """Build a GameControlData with header and version filled in.

    Every field not given gets a neutral default: initial state, first half,
    no drop in yet and two empty teams.
    """
    values = dict(
        header=GAMECONTROLLER_STRUCT_HEADER,
        version=GAMECONTROLLER_STRUCT_VERSION,
        packet_number=0,
        players_per_team=MAX_NUM_PLAYERS,
        competition_phase=CompetitionPhase.ROUNDROBIN,
        competition_type=CompetitionType.NORMAL,
        state=State.INITIAL,
        first_half=1,
        kicking_team=0,
        secondary_state=SecondaryState.NORMAL,
        drop_in_team=0,
        drop_in_time=NO_DROP_IN,
        secs_remaining=0,
        secondary_time=0,
        teams=(TeamInfo(), TeamInfo()),
    )
    values.update(fields)
    return GameControlData(**values)


def pack_competition(phase, competition_type):
    if not 0 <= phase <= 0x0F:
        raise EncodeError(f"competition_phase {phase} does not fit in 4 bits")
    if not 0 <= competition_type <= 0x0F:
        raise EncodeError(f"competition_type {competition_type} does not fit in 4 bits")
    return (competition_type << 4) | phase


def unpack_competition(value):
    return value & 0x0F, (value >> 4) & 0x0F


def _team_to_dict(team):
    return dict(
        team_number=team.team_number,
        team_color=team.team_color,
        score=team.score,
        penalty_shot=team.penalty_shot,
        single_shots=team.single_shots,
        players=[dict(penalty=p.penalty, secs_till_unpenalised=p.secs_till_unpenalised)
                 for p in team.players],
    )


def _team_from_container(team):
    return TeamInfo(
        team_number=team.team_number,
        team_color=as_code(TeamColor, team.team_color),
        score=team.score,
        penalty_shot=team.penalty_shot,
        single_shots=team.single_shots,
        players=tuple(RobotInfo(p.penalty, p.secs_till_unpenalised) for p in team.players),
    )


def encode(packet):
    """Serialize a GameControlData into its fixed size wire form."""
    competition = pack_competition(packet.competition_phase, packet.competition_type)
    try:
        return GameState.build(dict(
            header=packet.header,
            version=packet.version,
            packet_number=packet.packet_number,
            players_per_team=packet.players_per_team,
            competition=competition,
            game_state=packet.state,
            first_half=packet.first_half,
            kicking_team=packet.kicking_team,
            secondary_state=packet.secondary_state,
            drop_in_team=packet.drop_in_team,
            drop_in_time=packet.drop_in_time,
            secs_remaining=packet.secs_remaining,
            secondary_time=packet.secondary_time,
            teams=[_team_to_dict(team) for team in packet.teams],
        ))
    except ConstructError as e:
        raise EncodeError(f"Cannot encode game state: {e}") from e


def decode(data):
    """Parse a broadcast packet.

    Raises LengthMismatch, BadHeader or UnsupportedVersion, checked in that
    order. Unknown enumerated codes are passed through as plain ints.
    """
    data = bytes(data)
    if len(data) != GAME_STATE_SIZE:
        raise LengthMismatch(f"Expected {GAME_STATE_SIZE} bytes, got {len(data)}",
                             expected=GAME_STATE_SIZE, actual=len(data))
    header = data[:4]
    if header != GAMECONTROLLER_STRUCT_HEADER:
        raise BadHeader(f"Bad header {header!r}",
                        expected=GAMECONTROLLER_STRUCT_HEADER, actual=header)
    version = Short.parse(data[4:6])
    if version != GAMECONTROLLER_STRUCT_VERSION:
        raise UnsupportedVersion(f"Unsupported version {version}",
                                 expected=GAMECONTROLLER_STRUCT_VERSION, actual=version)

    parsed = GameState.parse(data)
    phase, competition_type = unpack_competition(parsed.competition)
    return GameControlData(
        header=parsed.header,
        version=parsed.version,
        packet_number=parsed.packet_number,
        players_per_team=parsed.players_per_team,
        competition_phase=as_code(CompetitionPhase, phase),
        competition_type=as_code(CompetitionType, competition_type),
        state=as_code(State, parsed.game_state),
        first_half=parsed.first_half,
        kicking_team=parsed.kicking_team,
        secondary_state=as_code(SecondaryState, parsed.secondary_state),
        drop_in_team=parsed.drop_in_team,
        drop_in_time=parsed.drop_in_time,
        secs_remaining=parsed.secs_remaining,
        secondary_time=parsed.secondary_time,
        teams=tuple(_team_from_container(team) for team in parsed.teams),
    )
