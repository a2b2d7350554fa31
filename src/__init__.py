"""
Cloud Functions Deployment Planner.
"""

from clients import FunctionsRestClient
from config import PlannerConfig
from deploy import prepare_deployment
from deployment_planner import PlanValidationError, create_deployment_plan
from log_utils import setup_logging
from models import DeploymentPlan, FunctionDefinition, RegionalDeployment
from region_mapper import create_functions_by_region_map, flatten_region_map

__all__ = [
    "FunctionsRestClient",
    "PlannerConfig",
    "prepare_deployment",
    "PlanValidationError",
    "create_deployment_plan",
    "setup_logging",
    "DeploymentPlan",
    "FunctionDefinition",
    "RegionalDeployment",
    "create_functions_by_region_map",
    "flatten_region_map",
]
