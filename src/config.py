"""
Configuration management for the Cloud Functions Deployment Planner.
"""

import os
import re
from dataclasses import dataclass
from typing import List, Mapping, Optional

from deploy_helpers import get_filter_groups
from region_mapper import DEFAULT_REGION

# 6-30 chars, lowercase letters, digits, hyphens; starts with a letter
PROJECT_ID_PATTERN = re.compile(r"^[a-z][a-z0-9-]{4,28}[a-z0-9]$")


@dataclass
class PlannerConfig:
    """Configuration for deployment planning."""

    project_id: str
    only: Optional[str] = None
    default_region: str = DEFAULT_REGION
    verbose: bool = False

    @property
    def filters(self) -> List[List[str]]:
        """Filter groups parsed from the --only selector."""
        return get_filter_groups(self.only)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PlannerConfig":
        """
        Create configuration from environment variables.

        Reads GCP_PROJECT_ID (required), DEPLOY_ONLY, DEFAULT_REGION and
        VERBOSE.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            PlannerConfig instance

        Raises:
            ValueError: If the project ID is missing or malformed
        """
        env = os.environ if environ is None else environ

        project_id = env.get("GCP_PROJECT_ID", "").strip()
        if not project_id:
            raise ValueError("GCP_PROJECT_ID env var is required")
        if not PROJECT_ID_PATTERN.match(project_id):
            raise ValueError(f"Invalid project_id format: {project_id}")

        verbose = env.get("VERBOSE", "").lower() in ("true", "1", "yes")

        return cls(
            project_id=project_id,
            only=env.get("DEPLOY_ONLY") or None,
            default_region=env.get("DEFAULT_REGION") or DEFAULT_REGION,
            verbose=verbose,
        )
