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

"""Command to create a new database."""

import time
from ...clients.databases import DatabaseClient
from ...clients.regions import to_location
from ...common.cli import argument, command
from ...common.config import Settings
from ...common.connection import ApiClient
from ...common.decorator import handle_exceptions
from ...common.utils import elapsed_seconds, generate_database_name, launch_sql_shell
from ...constants import (
    DEFAULT_DATABASE_REGION,
    MESSAGE_CONNECTING_SHELL,
    SUCCESS_CREATED_DATABASE,
)
from loguru import logger
from typing import Optional


CREATE_DATABASE_HELP = 'Create a database.'


@command(
    'db create',
    help=CREATE_DATABASE_HELP,
    arguments=[
        argument(
            'name',
            nargs='?',
            help='Database name. If no name is specified, one will be automatically generated.',
        ),
        argument(
            '--no-shell',
            dest='launch_shell',
            action='store_false',
            help='Do not connect a SQL shell to the new database',
        ),
    ],
)
@handle_exceptions
def create_database(
    settings: Settings, name: Optional[str] = None, launch_shell: bool = True
) -> None:
    """Create a database and optionally connect a SQL shell to it.

    Args:
        settings: The CLI settings
        name: Database name, generated when empty
        launch_shell: Whether to run psql against the new database
    """
    if not name:
        name = generate_database_name()
        logger.info(f'Generated database name {name}')

    with ApiClient.from_settings(settings) as client:
        start = time.monotonic()
        database = DatabaseClient(client).create(name, DEFAULT_DATABASE_REGION)
        elapsed = elapsed_seconds(start)

    url = database.connection_url()
    print(SUCCESS_CREATED_DATABASE.format(name, elapsed))
    print()
    print('You can access the database at:')
    print()
    print(f'   {url} [{database.type} in {to_location(database.region)}]')
    print()

    if launch_shell:
        print(MESSAGE_CONNECTING_SHELL)
        print()
        launch_sql_shell(url)
