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

"""Command to list the instances of a database."""

from ...clients.instances import InstancesClient
from ...clients.regions import to_location
from ...common.cli import argument, command
from ...common.config import Settings
from ...common.connection import ApiClient
from ...common.decorator import handle_exceptions
from ...constants import MESSAGE_NO_INSTANCES


INSTANCE_COLUMNS = ('NAME', 'TYPE', 'LOCATION', 'HOSTNAME')


@command(
    'db instances list',
    help='List the instances of a database.',
    arguments=[argument('database', help='Database name')],
)
@handle_exceptions
def list_instances(settings: Settings, database: str) -> None:
    """Print one row per instance of a database.

    Args:
        settings: The CLI settings
        database: Name of the database
    """
    with ApiClient.from_settings(settings) as client:
        instances = InstancesClient(client).list(database)

    if not instances:
        print(MESSAGE_NO_INSTANCES.format(database))
        return

    rows = [INSTANCE_COLUMNS] + [
        (instance.name, instance.type, to_location(instance.region), instance.hostname)
        for instance in instances
    ]
    widths = [max(len(row[column]) for row in rows) for column in range(len(INSTANCE_COLUMNS))]
    for row in rows:
        print('  '.join(value.ljust(width) for value, width in zip(row, widths)).rstrip())
