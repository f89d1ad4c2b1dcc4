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

"""Command to list the regions databases can be placed in."""

from ...clients.regions import list_regions
from ...common.cli import command
from ...common.config import Settings
from ...common.decorator import handle_exceptions


@command('db regions', help='List available database regions.')
@handle_exceptions
def list_database_regions(settings: Settings) -> None:
    """Print the region table. No token is needed and no request is made."""
    for region in list_regions():
        print(f'  {region.code} - {region.location}')
