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

"""Static lookup of the regions databases can be placed in."""

from ..constants import REGIONS, UNKNOWN_REGION
from pydantic import BaseModel, Field
from typing import List


class Region(BaseModel):
    """Deployment location."""

    code: str = Field(description='Short region identifier, e.g. fra')
    location: str = Field(description='Human-readable location name')


def to_location(region_id: str) -> str:
    """Get the display name of a region, or a fallback naming the unknown code."""
    return REGIONS.get(region_id, UNKNOWN_REGION.format(region_id))


def list_regions() -> List[Region]:
    """List every known region in display order."""
    return [Region(code=code, location=location) for code, location in REGIONS.items()]
