"""
Remote repository client for jabu.

Blocking HTTP access to a jabu repository service:
- Fetch both halves of an artifact (all or nothing)
- Publish an artifact (multipart: descriptor part first, binary second)
- List an author's artifacts and an artifact's versions
- Register an author and obtain its publishing credential

No retries, backoff or default timeout; callers that want resilience wrap
these calls themselves. Every network failure is an ``UnavailableResource``.
"""

import logging
import os
from typing import List, Optional, Tuple

import requests

from ..domain import ArtifactSpec
from ..errors import UnavailableResource

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_URL = "https://jabu-remote-repository.com"
REMOTE_URL_ENV = "JABU_REMOTE_REPO"

# The service reads upload parts by position, not by field name.
UPLOAD_PART_ORDER = ("jaburon", "jar")


def resolve_remote_url(configured: Optional[str] = None) -> str:
    """``$JABU_REMOTE_REPO``, else ``configured``, else the placeholder URL."""
    return os.environ.get(REMOTE_URL_ENV) or configured or DEFAULT_REMOTE_URL


class RemoteClient:
    """
    Client for the jabu repository service's REST API.

    Example:
        client = RemoteClient("https://repo.example.com")
        jar, descriptor = client.fetch(ArtifactSpec.parse("me:lib:1.0.0"))
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize RemoteClient.

        Args:
            base_url: Service URL (defaults to ``resolve_remote_url()``)
            timeout: HTTP timeout in seconds, None waits indefinitely
        """
        self.base_url = (base_url or resolve_remote_url()).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({'User-Agent': 'jabu'})

    def _url(self, *parts: str) -> str:
        return "/".join((self.base_url, "api") + parts)

    def _request(self, method: str, url: str, resource: str, **kwargs) -> requests.Response:
        """Issue a request, turning transport errors and non-2xx into UnavailableResource."""
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise UnavailableResource(resource, error=str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"{method} {url} returned {response.status_code}")
            raise UnavailableResource(
                resource,
                error=f"Status code of the response: {response.status_code}",
                status=response.status_code,
            )
        return response

    def fetch(self, spec: ArtifactSpec, base_url: Optional[str] = None) -> Tuple[bytes, bytes]:
        """
        Download the binary and descriptor of ``spec``.

        Both requests must succeed; nothing is returned otherwise, so a
        caller gating ``Repository.save()`` on this never stores half an
        artifact.

        Returns:
            (binary bytes, descriptor bytes)

        Raises:
            UnavailableResource: if either download fails
        """
        base = (base_url or self.base_url).rstrip("/")
        resource = str(spec)
        parts = (spec.author, spec.artifact_id, spec.version)

        binary = self._request(
            "GET", "/".join((base, "api", "get") + parts + ("jar",)), resource
        ).content
        descriptor = self._request(
            "GET", "/".join((base, "api", "get") + parts + ("jaburon",)), resource
        ).content
        return binary, descriptor

    def publish(self, spec: ArtifactSpec, credential: str, binary: bytes,
                descriptor: bytes, base_url: Optional[str] = None) -> None:
        """
        Upload an artifact under ``spec`` using the author's credential.

        The multipart body carries the descriptor first and the binary
        second; the service depends on that order.

        Raises:
            UnavailableResource: on transport failure or non-2xx status
        """
        base = (base_url or self.base_url).rstrip("/")
        url = "/".join((base, "api", "upload", spec.author, spec.artifact_id,
                        spec.version, credential))
        payloads = {"jaburon": descriptor, "jar": binary}
        files = [(name, (name, payloads[name])) for name in UPLOAD_PART_ORDER]

        self._request("POST", url, str(spec), files=files)
        logger.info(f"Published {spec}")

    def _list(self, url: str, resource: str) -> Optional[List[str]]:
        try:
            response = self._request("GET", url, resource)
        except UnavailableResource as e:
            if e.status == 404:
                return None
            raise
        try:
            data = response.json()
        except ValueError as e:
            raise UnavailableResource(resource, error=f"Malformed response: {e}") from e
        if not isinstance(data, list):
            raise UnavailableResource(resource, error="Expected a JSON array")
        return [str(item) for item in data]

    def list_author_artifacts(self, author: str) -> Optional[List[str]]:
        """Artifact ids of ``author`` on the service, None if unknown."""
        return self._list(self._url("list", author), author)

    def list_versions(self, author: str, artifact_id: str) -> Optional[List[str]]:
        """Published versions of an artifact, None if unknown."""
        return self._list(
            self._url("list-versions", author, artifact_id),
            f"{author}:{artifact_id}",
        )

    def register_author(self, author: str) -> str:
        """
        Register ``author`` on the service.

        Returns:
            The credential issued for publishing (shown only once)

        Raises:
            UnavailableResource: status 401 if the author already exists
        """
        response = self._request("POST", self._url("register-author", author), author)
        return response.text.strip()
