# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command registry and argument parser of the iku CLI."""

import argparse
from ..constants import CLI_VERSION, ENV_LOG_LEVEL, ENV_ORGANIZATION, LOG_LEVELS
from typing import Any, Callable, Dict, List, Sequence, Tuple


CLI_DESCRIPTION = 'Command-line client for the ChiselEdge database provisioning service'

GROUP_HELP = {
    ('db',): 'Manage databases.',
    ('db', 'instances'): 'Manage the instances (replicas) of a database.',
}

ArgumentSpec = Tuple[Tuple[str, ...], Dict[str, Any]]


class Command:
    """A registered CLI command."""

    def __init__(
        self,
        path: Tuple[str, ...],
        func: Callable[..., int],
        help: str,
        arguments: Sequence[ArgumentSpec],
    ):
        """Initialize the command.

        Args:
            path: Words invoking the command, e.g. ('db', 'create')
            func: Function run with the settings and the parsed arguments
            help: One-line help text
            arguments: Argument specs built with `argument`
        """
        self.path = path
        self.func = func
        self.help = help
        self.arguments = list(arguments)

    @property
    def name(self) -> str:
        """Get the full command name."""
        return ' '.join(self.path)


_commands: Dict[Tuple[str, ...], Command] = {}


def argument(*flags: str, **kwargs: Any) -> ArgumentSpec:
    """Describe a command argument with the same parameters as add_argument."""
    return flags, kwargs


def command(
    path: str, help: str, arguments: Sequence[ArgumentSpec] = ()
) -> Callable[[Callable[..., int]], Callable[..., int]]:
    """Register a function as a CLI command.

    The function receives the settings followed by one keyword argument per
    declared argument.
    """

    def decorator(func: Callable[..., int]) -> Callable[..., int]:
        words = tuple(path.split())
        _commands[words] = Command(words, func, help, arguments)
        return func

    return decorator


def get_commands() -> List[Command]:
    """List the registered commands in registration order."""
    return list(_commands.values())


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every registered command."""
    parser = argparse.ArgumentParser(prog='iku', description=CLI_DESCRIPTION)
    parser.add_argument('--version', action='version', version=f'%(prog)s {CLI_VERSION}')
    parser.add_argument(
        '--org',
        dest='organization',
        help=f'Organization to scope requests to (default: ${ENV_ORGANIZATION})',
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        metavar='LEVEL',
        help=f'Log level written to stderr (default: ${ENV_LOG_LEVEL} or WARNING)',
    )

    groups: Dict[Tuple[str, ...], Any] = {
        (): parser.add_subparsers(dest='command', metavar='COMMAND', required=True)
    }

    for cmd in get_commands():
        for depth in range(1, len(cmd.path)):
            prefix = cmd.path[:depth]
            if prefix not in groups:
                group = groups[prefix[:-1]].add_parser(
                    prefix[-1], help=GROUP_HELP.get(prefix)
                )
                groups[prefix] = group.add_subparsers(
                    dest='_'.join(prefix), metavar='COMMAND', required=True
                )

        subparser = groups[cmd.path[:-1]].add_parser(cmd.path[-1], help=cmd.help)
        dests = []
        for flags, kwargs in cmd.arguments:
            action = subparser.add_argument(*flags, **kwargs)
            dests.append(action.dest)
        subparser.set_defaults(handler=cmd, handler_args=dests)

    return parser
