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

"""Command to replicate a database to another region."""

import time
from ...clients.databases import DatabaseClient
from ...clients.regions import to_location
from ...common.cli import argument, command
from ...common.config import Settings
from ...common.connection import ApiClient
from ...common.decorator import handle_exceptions
from ...common.utils import elapsed_seconds
from ...constants import (
    ERROR_MISSING_REPLICATE_NAME,
    ERROR_MISSING_REPLICATE_REGION,
    SQL_SHELL_COMMAND,
    SUCCESS_REPLICATED_DATABASE,
)
from ...exceptions import ConfigurationError


REPLICATE_DATABASE_HELP = 'Replicate a database.'


@command(
    'db replicate',
    help=REPLICATE_DATABASE_HELP,
    arguments=[
        argument('name', metavar='database-name', help='Database name (required)'),
        argument('region', metavar='region-id', help='Region ID (required)'),
    ],
)
@handle_exceptions
def replicate_database(settings: Settings, name: str, region: str) -> None:
    """Replicate a database to another region.

    Args:
        settings: The CLI settings
        name: Name of the database to replicate
        region: Region code of the replica
    """
    if not name:
        raise ConfigurationError(ERROR_MISSING_REPLICATE_NAME)
    if not region:
        raise ConfigurationError(ERROR_MISSING_REPLICATE_REGION)

    with ApiClient.from_settings(settings) as client:
        start = time.monotonic()
        database = DatabaseClient(client).replicate(name, region)
        elapsed = elapsed_seconds(start)

    print(SUCCESS_REPLICATED_DATABASE.format(name, to_location(database.region), elapsed))
    print()
    print('You can access the database by running:')
    print()
    print(f'   {SQL_SHELL_COMMAND} {database.connection_url()}')
    print()
