"""
Data models for the Cloud Functions Deployment Planner.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# dataclass attribute -> Cloud Functions v1 REST field
_API_FIELDS = {
    "name": "name",
    "regions": "regions",
    "labels": "labels",
    "environment_variables": "environmentVariables",
    "entry_point": "entryPoint",
    "runtime": "runtime",
    "source_upload_url": "sourceUploadUrl",
    "vpc_connector": "vpcConnector",
    "vpc_connector_egress_settings": "vpcConnectorEgressSettings",
    "ingress_settings": "ingressSettings",
    "available_memory_mb": "availableMemoryMb",
    "timeout": "timeout",
    "max_instances": "maxInstances",
    "service_account_email": "serviceAccountEmail",
    "https_trigger": "httpsTrigger",
    "event_trigger": "eventTrigger",
    "failure_policy": "failurePolicy",
    "schedule": "schedule",
    "time_zone": "timeZone",
}


@dataclass
class FunctionDefinition:
    """A desired or existing Cloud Function."""

    name: str  # local id before region projection, full resource name after
    regions: Optional[List[str]] = None
    labels: Dict[str, str] = field(default_factory=dict)
    environment_variables: Dict[str, str] = field(default_factory=dict)
    entry_point: Optional[str] = None
    runtime: Optional[str] = None
    source_upload_url: Optional[str] = None
    vpc_connector: Optional[str] = None
    vpc_connector_egress_settings: Optional[str] = None
    ingress_settings: Optional[str] = None
    available_memory_mb: Optional[int] = None
    timeout: Optional[str] = None
    max_instances: Optional[int] = None
    service_account_email: Optional[str] = None
    https_trigger: Optional[Dict[str, Any]] = None
    event_trigger: Optional[Dict[str, Any]] = None
    failure_policy: Optional[Dict[str, Any]] = None
    schedule: Optional[Dict[str, Any]] = None
    time_zone: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def copy(self) -> "FunctionDefinition":
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FunctionDefinition":
        """
        Build a definition from a Cloud Functions REST resource.

        Args:
            data: Resource dictionary with camelCase keys

        Returns:
            FunctionDefinition instance
        """
        known = {api_key: attr for attr, api_key in _API_FIELDS.items()}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            if key in known:
                kwargs[known[key]] = copy.deepcopy(value)
            else:
                extra[key] = copy.deepcopy(value)
        if "name" not in kwargs:
            raise ValueError(f"Function resource has no name: {data}")
        kwargs["labels"] = kwargs.get("labels") or {}
        kwargs["environment_variables"] = kwargs.get("environment_variables") or {}
        return cls(extra=extra, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the REST resource shape, omitting unset fields."""
        data: Dict[str, Any] = copy.deepcopy(self.extra)
        for attr, api_key in _API_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            if attr in ("labels", "environment_variables") and not value:
                continue
            data[api_key] = copy.deepcopy(value)
        return data


RegionMap = Dict[str, List[FunctionDefinition]]


@dataclass
class RegionalDeployment:
    """Planned actions for a single region."""

    region: str
    source_token: Optional[str] = None
    first_function_deployment: Optional[FunctionDefinition] = None
    functions_to_create: List[FunctionDefinition] = field(default_factory=list)
    functions_to_update: List[FunctionDefinition] = field(default_factory=list)
    schedules_to_create_or_update: List[FunctionDefinition] = field(
        default_factory=list
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/reporting."""
        return {
            "region": self.region,
            "source_token": self.source_token,
            "first_function_deployment": (
                self.first_function_deployment.name
                if self.first_function_deployment is not None
                else None
            ),
            "functions_to_create": [fn.name for fn in self.functions_to_create],
            "functions_to_update": [fn.name for fn in self.functions_to_update],
            "schedules_to_create_or_update": [
                fn.name for fn in self.schedules_to_create_or_update
            ],
        }


@dataclass
class DeploymentPlan:
    """Full plan across all regions."""

    regional_deployments: List[RegionalDeployment] = field(default_factory=list)
    functions_to_delete: List[str] = field(default_factory=list)
    schedules_to_delete: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not any(self.summary().values())

    def summary(self) -> Dict[str, int]:
        """Count planned actions by kind."""
        regional = self.regional_deployments
        return {
            "create": sum(len(rd.functions_to_create) for rd in regional),
            "update": sum(len(rd.functions_to_update) for rd in regional),
            "delete": len(self.functions_to_delete),
            "schedule_upsert": sum(
                len(rd.schedules_to_create_or_update) for rd in regional
            ),
            "schedule_delete": len(self.schedules_to_delete),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/reporting."""
        return {
            "regional_deployments": [rd.to_dict() for rd in self.regional_deployments],
            "functions_to_delete": list(self.functions_to_delete),
            "schedules_to_delete": list(self.schedules_to_delete),
            "summary": self.summary(),
        }
