#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""Offline tool to inspect and produce GameController packets.

Packets are read from and written to files (raw bytes, or hex text with
``--hex``), nothing here touches the network.
"""

import argparse
import logging
import sys

from . import gamestate, returndata
from .constants import (
    DROPBALL,
    GAMECONTROLLER_RETURN_STRUCT_HEADER,
    NO_DROP_IN,
    PENALTY_TABLES,
    CompetitionPhase,
    CompetitionType,
    ReturnMessage,
    SecondaryState,
    State,
    TeamColor,
    code_name,
    penalty_name,
)
from .errors import DecodeError, EncodeError

logger = logging.getLogger('gamecontroller')

MESSAGES = {
    'penalise': ReturnMessage.MAN_PENALISE,
    'unpenalise': ReturnMessage.MAN_UNPENALISE,
    'alive': ReturnMessage.ALIVE,
}


def setup_logging(debug=False):
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(console_handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def read_packet(path, as_hex=False):
    with open(path, 'rb') as f:
        data = f.read()
    if as_hex:
        data = bytes.fromhex(data.decode('ascii'))
    return data


def write_packet(data, path=None, as_hex=False):
    if path is None:
        if as_hex:
            print(data.hex())
        else:
            sys.stdout.buffer.write(data)
            sys.stdout.flush()
        return
    if as_hex:
        with open(path, 'w') as f:
            f.write(data.hex() + "\n")
    else:
        with open(path, 'wb') as f:
            f.write(data)
    logger.info(f"Wrote {len(data)} bytes to {path}")


def log_game_state(packet, league='spl'):
    half = "first half" if packet.first_half else "second half"
    logger.info(f"Game state packet #{packet.packet_number}: "
                f"{code_name(State, packet.state)} ({code_name(SecondaryState, packet.secondary_state)}), "
                f"{half}, {packet.secs_remaining} s remaining, secondary time {packet.secondary_time} s")
    logger.info(f"Competition: {code_name(CompetitionPhase, packet.competition_phase)} / "
                f"{code_name(CompetitionType, packet.competition_type)}, "
                f"{packet.players_per_team} players per team")

    kicking = "DROPBALL" if packet.kicking_team == DROPBALL else packet.kicking_team
    if packet.drop_in_time == NO_DROP_IN:
        drop_in = "none yet"
    else:
        drop_in = f"team {packet.drop_in_team}, {packet.drop_in_time} s ago"
    logger.info(f"Kicking team: {kicking}, last drop in: {drop_in}")

    for team in packet.teams:
        logger.info(f"Team {team.team_number} ({code_name(TeamColor, team.team_color)}): "
                    f"score {team.score}, penalty shots {team.penalty_shot}")
        for number, robot in enumerate(packet.active_players(team), start=1):
            logger.info(f"  Player {number}: {penalty_name(robot.penalty, league)}"
                        f" ({robot.secs_till_unpenalised} s)")
        logger.debug(f"  single shots: {team.single_shots:016b}")


def log_return_data(packet):
    logger.info(f"Return packet: team {packet.team}, player {packet.player}, "
                f"message {code_name(ReturnMessage, packet.message)}")


def cmd_decode(args):
    try:
        data = read_packet(args.file, args.hex)
    except (OSError, ValueError) as e:
        logger.warning(f"Cannot read {args.file}: {e}")
        return 1
    logger.debug(f"Read {len(data)} bytes from {args.file}")
    try:
        if data[:4] == GAMECONTROLLER_RETURN_STRUCT_HEADER:
            log_return_data(returndata.decode(data))
        else:
            log_game_state(gamestate.decode(data), args.league)
    except DecodeError as e:
        logger.warning(f"Parse Error: {e}")
        return 1
    return 0


def cmd_return(args):
    packet = returndata.new_return_packet(args.team, args.player, MESSAGES[args.message])
    try:
        data = returndata.encode(packet)
    except EncodeError as e:
        logger.error(f"Error: {e}")
        return 1
    write_packet(data, args.output, args.hex)
    return 0


def cmd_gamestate(args):
    teams = tuple(gamestate.TeamInfo(team_number=number, team_color=color)
                  for number, color in zip(args.teams, (TeamColor.BLUE, TeamColor.RED)))
    packet = gamestate.new_game_state(
        packet_number=args.packet_number,
        players_per_team=args.players_per_team,
        state=State[args.state.upper()],
        first_half=0 if args.second_half else 1,
        kicking_team=args.kicking_team,
        secs_remaining=args.secs_remaining,
        teams=teams,
    )
    try:
        data = gamestate.encode(packet)
    except EncodeError as e:
        logger.error(f"Error: {e}")
        return 1
    write_packet(data, args.output, args.hex)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog='gamecontroller', description=__doc__)
    parser.add_argument('--debug', action='store_true', help='Enable debug output')
    subparsers = parser.add_subparsers(dest='command', required=True)

    decode_parser = subparsers.add_parser('decode', help='Decode a packet file')
    decode_parser.add_argument('file')
    decode_parser.add_argument('--hex', action='store_true', help='File contains hex text')
    decode_parser.add_argument('--league', choices=sorted(PENALTY_TABLES), default='spl')
    decode_parser.set_defaults(func=cmd_decode)

    return_parser = subparsers.add_parser('return', help='Build a return packet')
    return_parser.add_argument('--team', type=int, required=True)
    return_parser.add_argument('--player', type=int, required=True)
    return_parser.add_argument('--message', choices=sorted(MESSAGES), default='alive')
    return_parser.add_argument('--output', '-o')
    return_parser.add_argument('--hex', action='store_true', help='Write hex text instead of raw bytes')
    return_parser.set_defaults(func=cmd_return)

    state_parser = subparsers.add_parser('gamestate', help='Build a game state packet')
    state_parser.add_argument('--state', choices=[s.name.lower() for s in State], default='initial')
    state_parser.add_argument('--packet-number', type=int, default=0)
    state_parser.add_argument('--players-per-team', type=int, default=5)
    state_parser.add_argument('--teams', type=int, nargs=2, default=[1, 2], metavar=('FIRST', 'SECOND'))
    state_parser.add_argument('--kicking-team', type=int, default=DROPBALL)
    state_parser.add_argument('--secs-remaining', type=int, default=600)
    state_parser.add_argument('--second-half', action='store_true')
    state_parser.add_argument('--output', '-o')
    state_parser.add_argument('--hex', action='store_true', help='Write hex text instead of raw bytes')
    state_parser.set_defaults(func=cmd_gamestate)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
