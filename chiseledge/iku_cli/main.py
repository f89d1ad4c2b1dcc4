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

"""iku CLI entry point."""

import chiseledge.iku_cli.commands  # noqa: F401 - imported for side effects to register commands
import os
import sys
from chiseledge.iku_cli.common.cli import build_parser
from chiseledge.iku_cli.common.config import Settings
from chiseledge.iku_cli.constants import (
    CLI_VERSION,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    ERROR_LOG_LEVEL,
    LOG_LEVELS,
)
from loguru import logger
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """Run the iku CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = args.log_level or (os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        parser.error(ERROR_LOG_LEVEL.format(log_level, ENV_LOG_LEVEL, ', '.join(LOG_LEVELS)))

    logger.remove()
    logger.add(sys.stderr, level=log_level)

    # explicit settings, passed down to the command
    settings = Settings.from_env(organization=args.organization)

    logger.debug(f'iku CLI v{CLI_VERSION}')
    logger.debug(f'API host: {settings.api_hostname}')
    if settings.organization:
        logger.debug(f'Organization: {settings.organization}')

    command = args.handler
    kwargs = {dest: getattr(args, dest) for dest in args.handler_args}
    logger.debug(f'Running {command.name}')
    return command.func(settings, **kwargs)


if __name__ == '__main__':
    sys.exit(main())
