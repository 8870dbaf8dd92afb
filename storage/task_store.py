from __future__ import annotations
import logging
import requests
from typing import List, Dict, Any, Optional
from core.exceptions import TaskServiceError, TaskNotFoundError, MalformedRecordError

logger = logging.getLogger(__name__)


class TaskStoreClient:
    """Blocking JSON/HTTP client for the remote task store."""

    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TaskServiceError(f"{method} {url} failed: {e}") from e
        if r.status_code == 404:
            raise TaskNotFoundError(f"{method} {url}: not found", status=404)
        if not r.ok:
            raise TaskServiceError(f"{method} {url}: {r.status_code} {r.text}", status=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise MalformedRecordError(f"{method} {url}: invalid JSON body") from e

    # ---------- tasks ----------
    def add_task(self, description: str) -> int:
        data = self._request("POST", "/api/tasks", json={"description": description})
        raw_id = data.get("id") if isinstance(data, dict) else data
        try:
            return int(str(raw_id).strip())
        except ValueError as e:
            raise MalformedRecordError(f"Create task returned an invalid id: {raw_id!r}") from e

    def get_task(self, task_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/tasks/{int(task_id)}")

    def list_tasks(self) -> List[Dict[str, Any]]:
        data = self._request("GET", "/api/tasks")
        if isinstance(data, dict):
            data = data.get("items", [])
        if not isinstance(data, list):
            raise MalformedRecordError("List tasks did not return a list")
        return data
