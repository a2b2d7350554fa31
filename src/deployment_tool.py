"""
Ownership labels stamped on functions deployed by this tool.

Only functions carrying the tool label are eligible for automatic deletion.
"""

from typing import Dict, Optional

DEPLOYMENT_TOOL_LABEL = "deployment-tool"
SCHEDULED_LABEL = "deployment-scheduled"
BASE = "cli-fnplan"


def labels() -> Dict[str, str]:
    """Labels a caller applies to every function it creates."""
    return {DEPLOYMENT_TOOL_LABEL: BASE}


def check(labels: Optional[Dict[str, str]]) -> bool:
    """
    Check whether a function was deployed by this tool.

    Args:
        labels: Labels of the backend function (may be None)

    Returns:
        True if the deployment-tool label marks the function as ours
    """
    if not labels:
        return False
    value = labels.get(DEPLOYMENT_TOOL_LABEL)
    return bool(value) and value.startswith(BASE)


def is_scheduled(labels: Optional[Dict[str, str]]) -> bool:
    return bool(labels) and labels.get(SCHEDULED_LABEL) == "true"
