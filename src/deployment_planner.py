"""
Deployment planning for Cloud Functions.

Diffs the desired functions of each region against the functions that
already exist in the backend and decides what to create, update and delete,
including the schedules of scheduled functions.
"""

import logging
from typing import Callable, Dict, List, Optional

import deployment_tool
from deploy_helpers import function_matches_any_group, get_topic_name
from models import DeploymentPlan, FunctionDefinition, RegionalDeployment, RegionMap

logger = logging.getLogger(__name__)


class PlanValidationError(ValueError):
    """Raised when a desired function cannot be planned as given."""


def create_deployment_plan(
    functions_by_region: RegionMap,
    existing_functions: List[FunctionDefinition],
    filters: List[List[str]],
    *,
    matches: Callable[[str, List[List[str]]], bool] = function_matches_any_group,
    topic_name: Callable[[str], str] = get_topic_name,
    is_managed: Callable[[Optional[Dict[str, str]]], bool] = deployment_tool.check,
) -> DeploymentPlan:
    """
    Create a plan for deploying all functions in every region.

    Scheduled desired functions get their event trigger pointed at the
    generated schedule topic. Existing functions left unmatched after all
    regions are processed are deleted if this tool owns them and, when
    filters are given, they match the filters.

    Args:
        functions_by_region: Desired functions keyed by region
        existing_functions: Functions currently deployed (not modified)
        filters: Filter groups from --only (empty selects everything)
        matches: Predicate deciding whether a name is selected by filters
        topic_name: Derives the schedule topic for a function name
        is_managed: Decides whether existing labels mark tool ownership

    Returns:
        DeploymentPlan

    Raises:
        PlanValidationError: If a scheduled function has no event trigger
    """
    plan = DeploymentPlan()
    remaining = list(existing_functions)

    for region, functions in functions_by_region.items():
        regional = RegionalDeployment(region=region)

        for fn in functions:
            if not matches(fn.name, filters):
                logger.debug(f"Skipping {fn.name}: not selected by filters")
                continue

            matching = next((ex for ex in remaining if ex.name == fn.name), None)
            was_scheduled = matching is not None and deployment_tool.is_scheduled(
                matching.labels
            )

            if fn.schedule is not None:
                if fn.event_trigger is None:
                    raise PlanValidationError(
                        f"Scheduled function {fn.name} has no event trigger"
                    )
                fn.event_trigger["resource"] = topic_name(fn.name)
                regional.schedules_to_create_or_update.append(fn)
            elif was_scheduled:
                logger.debug(f"{fn.name} is no longer scheduled")
                plan.schedules_to_delete.append(matching.name)

            if matching is None:
                regional.functions_to_create.append(fn)
            else:
                regional.functions_to_update.append(fn)
                remaining = [ex for ex in remaining if ex.name != fn.name]

        plan.regional_deployments.append(regional)

    # Only delete what this tool deployed, and stay within --only scope.
    to_delete = [fn for fn in remaining if is_managed(fn.labels)]
    if filters:
        to_delete = [fn for fn in to_delete if matches(fn.name, filters)]

    plan.functions_to_delete = [fn.name for fn in to_delete]
    for fn in to_delete:
        if deployment_tool.is_scheduled(fn.labels):
            plan.schedules_to_delete.append(fn.name)

    unmanaged = len(remaining) - len(to_delete)
    if unmanaged:
        logger.debug(
            f"Leaving {unmanaged} existing function(s) untouched "
            "(not owned by this tool or outside filters)"
        )
    return plan
