# -*- coding: utf-8 -*-
"""
Projects API Client
===================

REST access to the projects backend: the project resource itself and its
per-project sub-resources (siteplan, license, contract, awarding), plus the
authenticated file-retrieval endpoint.
"""

import json as _json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

# (part name, (filename or None, content, [mime])) as accepted by requests' files=
MultipartParts = Sequence[Tuple[str, Tuple]]


@dataclass
class ApiConfig:
    """
    Connection settings.

    Anything left as None is read from Config (which reads .env).

    Example .env:
        API_BASE_URL=http://192.168.1.20:8000/api
        API_ACCESS_TOKEN=...
        API_REFRESH_TOKEN=...
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL
        if self.access_token is None:
            self.access_token = Config.API_ACCESS_TOKEN
        if self.refresh_token is None:
            self.refresh_token = Config.API_REFRESH_TOKEN


class ProjectsApiClient:
    """
    Client for the projects backend.

    Features:
    - Bearer authentication
    - One transparent token refresh + retry on 401
    - JSON and multipart submissions
    - Errors raised as ApiException / NetworkException

    Usage:
        client = ProjectsApiClient(ApiConfig(base_url="http://localhost:8000/api"))
        contract = client.list_resource(12, "contract")
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.access_token: Optional[str] = self.config.access_token
        self.refresh_token: Optional[str] = self.config.refresh_token

        if not self.config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    # ==================== Authentication ====================

    def set_tokens(self, access_token: str, refresh_token: Optional[str] = None):
        """Set tokens from the authenticated user session."""
        self.access_token = access_token
        if refresh_token is not None:
            self.refresh_token = refresh_token
        logger.debug("Access token updated externally")

    def refresh_access_token(self) -> bool:
        """
        Exchange the refresh token for a new access token.

        Returns:
            True if a new access token was obtained
        """
        from app.config import Config

        if not self.refresh_token:
            logger.warning("No refresh token available")
            return False

        try:
            response = requests.request(
                method="POST",
                url=self._url(Config.API_TOKEN_REFRESH_ENDPOINT),
                json={"refresh": self.refresh_token},
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Token refresh failed: {e}")
            return False

        access = data.get("access") if isinstance(data, dict) else None
        if not access:
            logger.error("Token refresh response has no access token")
            return False

        self.access_token = access
        self.refresh_token = data.get("refresh", self.refresh_token)
        logger.info("Token refreshed")
        return True

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    # ==================== Transport ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        files: Optional[MultipartParts] = None,
        context: Optional[str] = None,
        retry_on_401: bool = True
    ) -> Any:
        """
        Execute an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PATCH)
            endpoint: Path relative to the API base (e.g. "projects/12/license/")
            json_data: JSON payload
            params: Query parameters
            files: Multipart parts; when given the body is multipart/form-data
            context: Label attached to raised exceptions
            retry_on_401: Refresh the token and retry once on 401

        Returns:
            Response JSON data (None for an empty body)
        """
        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data is not None:
            logger.debug(f"[API REQ] Body: {_json.dumps(json_data, ensure_ascii=False, default=str)}")
        if files:
            logger.debug(f"[API REQ] Parts: {[name for name, _ in files]}")

        try:
            response = requests.request(
                method=method,
                url=self._url(endpoint),
                json=json_data if files is None else None,
                params=params,
                files=list(files) if files is not None else None,
                headers=self._headers(json_body=files is None),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )

            if response.status_code == 401 and retry_on_401:
                logger.info(f"[API RES] 401 {endpoint}, refreshing token")
                if self.refresh_access_token():
                    return self._request(
                        method, endpoint, json_data=json_data, params=params,
                        files=files, context=context, retry_on_401=False
                    )

            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            if result:
                res_str = _json.dumps(result, ensure_ascii=False, default=str)
                if len(res_str) > 1000:
                    logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
                else:
                    logger.debug(f"[API RES] Body: {res_str}")

            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                response_data = {"detail": e.response.text[:500]} if e.response is not None else {}
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data,
                context=context
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=context)
        except ValueError as e:
            logger.error(f"Invalid JSON in response: {endpoint} - {e}")
            raise ApiException(message=f"Invalid JSON response: {e}", context=context)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=context)

    @staticmethod
    def build_multipart(fields: Dict[str, Any],
                        files: Optional[MultipartParts] = None) -> List[Tuple[str, Tuple]]:
        """
        Combine text fields and binary parts into one requests `files=` list.

        Text fields go as (None, value) parts. None values are skipped.
        """
        parts: List[Tuple[str, Tuple]] = []
        for name, value in fields.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            parts.append((name, (None, str(value))))
        parts.extend(files or [])
        return parts

    # ==================== Projects ====================

    def list_projects(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """GET projects/ (paginated or plain list responses both accepted)."""
        return self._as_list(self._request("GET", "projects/", params=params, context="projects"))

    def find_projects_by_internal_code(self, internal_code: str) -> List[Dict[str, Any]]:
        """Projects whose internal code equals `internal_code` exactly."""
        projects = self.list_projects({"internal_code": internal_code})
        # Some backends treat the filter as "contains"
        return [p for p in projects if (p.get("internal_code") or "") == internal_code]

    def get_project(self, project_id: Any) -> Dict[str, Any]:
        return self._request("GET", f"projects/{project_id}/", context="project") or {}

    def create_project(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "projects/", json_data=payload, context="project") or {}

    def update_project(self, project_id: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "PATCH", f"projects/{project_id}/", json_data=payload, context="project"
        ) or {}

    # ==================== Project sub-resources ====================

    def list_resource(self, project_id: Any, resource: str) -> List[Dict[str, Any]]:
        """GET projects/{id}/{resource}/ as a list of records."""
        return self._as_list(
            self._request("GET", f"projects/{project_id}/{resource}/", context=resource)
        )

    def create_resource(
        self,
        project_id: Any,
        resource: str,
        payload: Optional[Dict[str, Any]] = None,
        files: Optional[MultipartParts] = None
    ) -> Dict[str, Any]:
        """POST a new sub-resource record (JSON, or multipart when `files` is given)."""
        return self._request(
            "POST", f"projects/{project_id}/{resource}/",
            json_data=payload, files=files, context=resource
        ) or {}

    def update_resource(
        self,
        project_id: Any,
        resource: str,
        record_id: Any,
        payload: Optional[Dict[str, Any]] = None,
        files: Optional[MultipartParts] = None
    ) -> Dict[str, Any]:
        """PATCH an existing sub-resource record."""
        return self._request(
            "PATCH", f"projects/{project_id}/{resource}/{record_id}/",
            json_data=payload, files=files, context=resource
        ) or {}

    @staticmethod
    def _as_list(result: Any) -> List[Dict[str, Any]]:
        if result is None:
            return []
        if isinstance(result, list):
            return result
        if isinstance(result, dict):
            if isinstance(result.get("results"), list):
                return result["results"]
            return [result]
        return []

    # ==================== Files ====================

    def build_file_url(self, path: Optional[str]) -> str:
        """
        URL of the authenticated file endpoint for a stored media path.

        Absolute http(s) URLs are returned unchanged.
        """
        from app.config import Config

        if not path:
            return ""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        clean = path.lstrip("/")
        return f"{self.base_url}/{Config.API_FILES_ENDPOINT}/{quote(clean, safe='/')}"

    def fetch_file(self, path: str) -> bytes:
        """
        Download a stored file through the file endpoint.

        A 401 triggers one token refresh and retry before failing.
        """
        url = self.build_file_url(path)
        if not url:
            raise ValueError("File path is required")

        logger.info(f"[API REQ] GET {url}")
        try:
            response = self._get_file(url)
            if response.status_code == 401 and self.refresh_access_token():
                response = self._get_file(url)
            response.raise_for_status()
            logger.info(f"[API RES] {response.status_code} file ({len(response.content)} bytes)")
            return response.content
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            logger.error(f"[API ERR] {status_code} file {path}")
            raise ApiException(message=str(e), status_code=status_code, context="file")
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error during download: {e}")
            raise NetworkException(message=str(e), original_error=e, context="file")

    def _get_file(self, url: str) -> requests.Response:
        headers = {"Accept": "*/*"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return requests.request(
            method="GET",
            url=url,
            headers=headers,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl
        )


# ==================== Singleton Instance ====================

_api_client_instance: Optional[ProjectsApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> ProjectsApiClient:
    """
    Shared ProjectsApiClient instance.

    Args:
        config: Only used on first call
    """
    global _api_client_instance

    if _api_client_instance is None:
        _api_client_instance = ProjectsApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the shared client (for tests)."""
    global _api_client_instance
    _api_client_instance = None
