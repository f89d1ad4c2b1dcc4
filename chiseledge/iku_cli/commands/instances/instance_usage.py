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

"""Command to show the usage of an instance."""

from ...clients.instances import InstancesClient
from ...common.cli import argument, command
from ...common.config import Settings
from ...common.connection import ApiClient
from ...common.decorator import handle_exceptions


@command(
    'db instances usage',
    help='Show the number of rows read by an instance.',
    arguments=[argument('instance_id', metavar='instance-id', help='Instance UUID')],
)
@handle_exceptions
def instance_usage(settings: Settings, instance_id: str) -> None:
    """Print the rows read counter of an instance."""
    with ApiClient.from_settings(settings) as client:
        rows_read = InstancesClient(client).get_usage(instance_id)

    print(f'Rows read: {rows_read}')
