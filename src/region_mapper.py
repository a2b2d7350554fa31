"""
Projection of desired function definitions onto their target regions.
"""

import logging
from typing import List

from models import FunctionDefinition, RegionMap

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-central1"


def create_functions_by_region_map(
    project_id: str,
    definitions: List[FunctionDefinition],
    default_region: str = DEFAULT_REGION,
) -> RegionMap:
    """
    Create a map of regions to the functions being deployed to each region.

    Every region a definition targets receives its own deep copy with the
    regions field removed and the name rewritten to the full resource name.

    Args:
        project_id: GCP project ID
        definitions: Desired functions, named by their local id
        default_region: Region used when a definition lists none

    Returns:
        RegionMap of region -> fully-qualified definitions
    """
    region_map: RegionMap = {}
    for definition in definitions:
        regions = definition.regions or [default_region]
        for region in regions:
            regional = definition.copy()
            regional.regions = None
            regional.name = "/".join(
                [
                    "projects",
                    project_id,
                    "locations",
                    region,
                    "functions",
                    definition.name,
                ]
            )
            region_map.setdefault(region, []).append(regional)

    logger.debug(
        f"Mapped {len(definitions)} function(s) onto {len(region_map)} region(s)"
    )
    return region_map


def flatten_region_map(region_map: RegionMap) -> List[FunctionDefinition]:
    """Flatten a RegionMap into a single list of functions."""
    functions: List[FunctionDefinition] = []
    for regional in region_map.values():
        functions.extend(regional)
    return functions
