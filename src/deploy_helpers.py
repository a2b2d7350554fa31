"""
Helpers for function resource names and --only style filter groups.

Fully-qualified function names have the shape
``projects/{project}/locations/{region}/functions/{function_id}``.
"""

import logging
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

SCHEDULE_PREFIX = "fnplan-schedule"


def get_filter_groups(only: Optional[str]) -> List[List[str]]:
    """
    Parse an --only selector string into filter groups.

    ``"functions:api.users,functions:cron,hosting"`` becomes
    ``[["api", "users"], ["cron"]]``. Selectors for other targets are
    ignored, and a bare ``functions`` selector selects every function.

    Args:
        only: Comma separated selectors, or None

    Returns:
        List of filter groups (empty means select everything)
    """
    if not only:
        return []

    groups: List[List[str]] = []
    for selector in only.split(","):
        parts = selector.strip().split(":")
        if parts[0] != "functions" or len(parts) < 2 or not parts[1]:
            continue
        groups.append(re.split(r"[.-]", parts[1]))
    logger.debug(f"Parsed filter groups from '{only}': {groups}")
    return groups


def function_matches_group(function_name: str, group_chunks: List[str]) -> bool:
    """Check whether a function id starts with the given dash-separated chunks."""
    last = function_name.split("/")[-1]
    if not last:
        return False
    name_chunks = last.split("-")[: len(group_chunks)]
    return name_chunks == group_chunks


def function_matches_any_group(
    function_name: str, filter_groups: List[List[str]]
) -> bool:
    """True if no filter groups are given or any group selects the function."""
    if not filter_groups:
        return True
    return any(function_matches_group(function_name, g) for g in filter_groups)


def get_project_id(full_name: str) -> str:
    return _name_parts(full_name)[0]


def get_region(full_name: str) -> str:
    return _name_parts(full_name)[1]


def get_function_id(full_name: str) -> str:
    return _name_parts(full_name)[2]


def get_topic_name(full_name: str) -> str:
    """
    Derive the Pub/Sub topic that triggers a scheduled function.

    Args:
        full_name: Fully-qualified function name

    Returns:
        Topic resource name, e.g.
        ``projects/p/topics/fnplan-schedule-nightly-us-central1``
    """
    project, region, function_id = _name_parts(full_name)
    return f"projects/{project}/topics/{SCHEDULE_PREFIX}-{function_id}-{region}"


def get_schedule_name(full_name: str, app_engine_location: str) -> str:
    """
    Derive the Cloud Scheduler job name for a scheduled function.

    Scheduler jobs live in the project's App Engine location, which may
    differ from the function's region.
    """
    project, region, function_id = _name_parts(full_name)
    return (
        f"projects/{project}/locations/{app_engine_location}/jobs/"
        f"{SCHEDULE_PREFIX}-{function_id}-{region}"
    )


def _name_parts(full_name: str):
    parts = full_name.split("/")
    if len(parts) != 6 or parts[0] != "projects" or parts[2] != "locations":
        raise ValueError(f"Not a fully-qualified function name: {full_name}")
    return parts[1], parts[3], parts[5]
