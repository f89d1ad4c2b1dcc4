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

"""General utility functions for the iku CLI."""

import random
import re
import subprocess
import time
from ..constants import (
    ERROR_SHELL_FAILED,
    ERROR_SHELL_NOT_FOUND,
    SQL_SHELL_COMMAND,
    SQL_SHELL_CONNECT_DELAY,
)
from ..exceptions import ShellLaunchError
from loguru import logger
from typing import Optional


ADJECTIVES = (
    'amazing', 'bold', 'brave', 'bright', 'calm', 'clever', 'cosmic', 'crisp',
    'daring', 'eager', 'fancy', 'fierce', 'gentle', 'glad', 'golden', 'grand',
    'happy', 'humble', 'jolly', 'keen', 'kind', 'lively', 'lucky', 'mellow',
    'mighty', 'nimble', 'noble', 'proud', 'quick', 'quiet', 'rapid', 'royal',
    'shiny', 'silent', 'smart', 'snappy', 'solid', 'steady', 'sunny', 'swift',
    'tidy', 'vivid', 'warm', 'wise', 'witty', 'zesty',
)  # fmt: skip

NOUNS = (
    'badger', 'beacon', 'bison', 'comet', 'cougar', 'falcon', 'ferret', 'fox',
    'gecko', 'glacier', 'harbor', 'hawk', 'heron', 'iguana', 'jaguar', 'kestrel',
    'koala', 'lemur', 'lynx', 'marten', 'meadow', 'meteor', 'moose', 'nebula',
    'ocelot', 'orca', 'otter', 'owl', 'panda', 'panther', 'pelican', 'puffin',
    'quasar', 'raven', 'river', 'salmon', 'sparrow', 'spruce', 'tiger', 'toucan',
    'tundra', 'viper', 'walrus', 'willow', 'wombat', 'zebra',
)  # fmt: skip

DATABASE_NAME_PATTERN = re.compile(r'^[a-z]+-[a-z]+$')


def generate_database_name(rng: Optional[random.Random] = None) -> str:
    """Generate a random database name in the adjective-noun form.

    Args:
        rng: Random source, defaults to the operating system's

    Returns:
        str: A name such as `brave-otter`
    """
    if rng is None:
        rng = random.SystemRandom()
    return f'{rng.choice(ADJECTIVES)}-{rng.choice(NOUNS)}'


def elapsed_seconds(start: float) -> int:
    """Get the whole seconds elapsed since a time.monotonic() reading."""
    return int(time.monotonic() - start)


def launch_sql_shell(url: str, delay: float = SQL_SHELL_CONNECT_DELAY) -> None:
    """Run an interactive SQL shell connected to a database.

    The shell inherits the terminal's standard streams and this call returns
    once the user exits it.

    Raises:
        ShellLaunchError: If the shell is not installed or exits with an error
    """
    time.sleep(delay)
    logger.debug(f'Running {SQL_SHELL_COMMAND} {url}')
    try:
        result = subprocess.run([SQL_SHELL_COMMAND, url])
    except FileNotFoundError as error:
        raise ShellLaunchError(
            ERROR_SHELL_NOT_FOUND.format(SQL_SHELL_COMMAND, SQL_SHELL_COMMAND, url)
        ) from error

    if result.returncode != 0:
        raise ShellLaunchError(ERROR_SHELL_FAILED.format(SQL_SHELL_COMMAND, result.returncode))
