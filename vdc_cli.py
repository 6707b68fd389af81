import argparse
import logging
import math
import re
import sys
import traceback
from collections import namedtuple

from project_utils.remote_exec import run_command
from vdc.constants import (DEFAULT_LOCATION, DEFAULT_POWER_DELAY, DEFAULT_SSH_TIMEOUT,
                           DEFAULT_SSH_USERNAME, LOG_FORMAT)
from vdc.power_ops import toggle_power

__version__ = '0.1.0'

logger = logging.getLogger('vdc')

Command = namedtuple('Command', ['name', 'args'])

ALIASES = {'on': 'power-on', 'off': 'power-off'}


def location_url(value):
    if not re.match(r'^http', value):
        raise argparse.ArgumentTypeError('invalid vDC URL "{}"'.format(value))
    return value.rstrip('/')


def seconds(value):
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid number of seconds "{}"'.format(value))
    if not math.isfinite(number) or number < 0:
        raise argparse.ArgumentTypeError('seconds must be a non-negative number, got "{}"'.format(value))
    return number


def add_power_command(subparsers, name, alias, state):
    parser = subparsers.add_parser(name, aliases=[alias],
                                   help='Switch power of a VM {} via vDC'.format(state))
    parser.add_argument('-l', '--location', type=location_url, default=DEFAULT_LOCATION,
                        metavar='<url>', help='The vDC URL')
    parser.add_argument('-u', '--username', metavar='<username>',
                        help='The vDC login username (usually the Email address)')
    parser.add_argument('-p', '--password', metavar='<password>', help='The vDC login password')
    parser.add_argument('-d', '--delay', type=seconds, default=DEFAULT_POWER_DELAY, metavar='<seconds>',
                        help='Pause between two power togglings')
    parser.add_argument('vm_name', metavar='<vm-name>', help='Name of VM(s), comma separated')
    return parser


def build_parser():
    parser = argparse.ArgumentParser(
        prog='vdc', description='Simple msg Cloud Virtual Data Center (vDC) Command-Line Interface (CLI)')
    parser.add_argument('-V', '--version', action='version', version='%(prog)s {}'.format(__version__))
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages')
    subparsers = parser.add_subparsers(dest='command')

    add_power_command(subparsers, 'power-on', 'on', 'ON')
    add_power_command(subparsers, 'power-off', 'off', 'OFF')

    exec_parser = subparsers.add_parser('exec', help='Execute a shell command under an OS via SSH')
    exec_parser.add_argument('-u', '--username', default=DEFAULT_SSH_USERNAME, metavar='<username>',
                             help='The OS login username')
    exec_parser.add_argument('-p', '--password', metavar='<password>', help='The OS login password')
    exec_parser.add_argument('-t', '--timeout', type=seconds, default=DEFAULT_SSH_TIMEOUT, metavar='<seconds>',
                             help='SSH connect timeout')
    exec_parser.add_argument('host_name', metavar='<host-name>', help='Name of host(s), comma separated')
    exec_parser.add_argument('cmd', metavar='<command>', help='Command to execute')
    return parser


def parse_command(argv=None, parser=None):
    """
    :return: (Command with canonical name and parsed args or None when no command was given, parsed args)
    """
    parser = parser or build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        return None, args
    return Command(ALIASES.get(args.command, args.command), args), args


def dispatch(command):
    args = command.args
    if command.name == 'power-on':
        toggle_power(True, args.vm_name, args)
    elif command.name == 'power-off':
        toggle_power(False, args.vm_name, args)
    elif command.name == 'exec':
        run_command(args.cmd, args.host_name, args)


def main(argv=None):
    command, args = parse_command(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    if command is None:
        return 1
    logger.debug('dispatching %s', command.name)
    try:
        dispatch(command)
    except (Exception, KeyboardInterrupt) as ex:
        print('vdc: ERROR: {}'.format(ex))
        print('vdc: ERROR: {}'.format(traceback.format_exc()))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
