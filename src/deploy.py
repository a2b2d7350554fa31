"""
Composition of region mapping, backend listing and planning.
"""

import json
import logging
from typing import List, Optional

from clients import FunctionsRestClient
from config import PlannerConfig
from deployment_planner import create_deployment_plan
from models import DeploymentPlan, FunctionDefinition
from region_mapper import create_functions_by_region_map

logger = logging.getLogger(__name__)


def prepare_deployment(
    config: PlannerConfig,
    definitions: List[FunctionDefinition],
    client: Optional[FunctionsRestClient] = None,
) -> DeploymentPlan:
    """
    Build the deployment plan for a set of desired functions.

    Args:
        config: Planner configuration
        definitions: Desired functions named by their local id
        client: Client used to list existing functions (created if omitted)

    Returns:
        DeploymentPlan for the caller to execute
    """
    if client is None:
        client = FunctionsRestClient(project_id=config.project_id)

    functions_by_region = create_functions_by_region_map(
        config.project_id, definitions, default_region=config.default_region
    )
    existing = client.list_functions()

    filters = config.filters
    if filters:
        logger.info(f"Restricting deployment to filter groups: {filters}")

    plan = create_deployment_plan(functions_by_region, existing, filters)

    summary = plan.summary()
    logger.info(
        f"Deployment plan for {config.project_id}: "
        f"{summary['create']} to create, {summary['update']} to update, "
        f"{summary['delete']} to delete, "
        f"{summary['schedule_upsert']} schedule(s) to create/update, "
        f"{summary['schedule_delete']} schedule(s) to delete"
    )
    logger.debug(json.dumps(plan.to_dict(), indent=2))
    return plan
