"""
REST API client for listing deployed Cloud Functions (v1 API).
"""

import logging
from typing import Dict, List, Optional

import google.auth
from google.auth.transport.requests import AuthorizedSession

from models import FunctionDefinition

logger = logging.getLogger(__name__)

API_BASE = "https://cloudfunctions.googleapis.com/v1"


class FunctionsRestClient:
    """Read-only REST client for the Cloud Functions v1 API."""

    def __init__(self, project_id: str, timeout_s: int = 60):
        """
        Initialize the Cloud Functions REST client.

        Args:
            project_id: GCP project ID
            timeout_s: Request timeout in seconds
        """
        self.project_id = project_id
        self.timeout_s = timeout_s

        creds, _ = google.auth.default(
            scopes=["https://www.googleapis.com/auth/cloud-platform"]
        )
        self.session = AuthorizedSession(creds)

    def _url(self, path: str) -> str:
        """Construct full API URL from path."""
        return f"{API_BASE}/{path.lstrip('/')}"

    def _get(self, url: str, params: Optional[Dict] = None):
        logger.debug(f"GET {url} params={params}")
        return self.session.get(url, params=params or {}, timeout=self.timeout_s)

    def list_functions(self, location: str = "-") -> List[FunctionDefinition]:
        """
        List all functions deployed in a location.

        Args:
            location: Region (e.g. 'us-central1'), or '-' for all regions

        Returns:
            List of FunctionDefinition objects with fully-qualified names

        Raises:
            RuntimeError: If API call fails
        """
        parent = f"projects/{self.project_id}/locations/{location}"
        url = self._url(f"{parent}/functions")

        functions: List[FunctionDefinition] = []
        page_token: Optional[str] = None

        while True:
            params = {}
            if page_token:
                params["pageToken"] = page_token

            resp = self._get(url, params=params)
            if resp.status_code != 200:
                raise RuntimeError(
                    f"List functions failed ({resp.status_code}): {resp.text}"
                )

            data = resp.json()
            for item in data.get("functions", []):
                functions.append(FunctionDefinition.from_dict(item))

            unreachable = data.get("unreachable")
            if unreachable:
                logger.warning(
                    f"Could not list functions in: {', '.join(unreachable)}"
                )

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        logger.info(f"Found {len(functions)} existing function(s) in {parent}")
        return functions

    def get_function(self, function_name: str) -> Optional[FunctionDefinition]:
        """
        Get a single function by its full resource name.

        Args:
            function_name: Full function resource name

        Returns:
            FunctionDefinition if found, None otherwise

        Raises:
            RuntimeError: If API call fails
        """
        resp = self._get(self._url(function_name))
        if resp.status_code == 404:
            return None
        if resp.status_code != 200:
            raise RuntimeError(f"Get function failed ({resp.status_code}): {resp.text}")
        return FunctionDefinition.from_dict(resp.json())
