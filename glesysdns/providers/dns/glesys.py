"""GleSYS DNS provider implementation."""

import logging
import re
from typing import Any

import httpx

from glesysdns import __version__
from glesysdns.exceptions import NotFound, RemoteCallFailure, Unauthorized
from glesysdns.models import Domain, DomainOptions, DomainRecord, EditRecordOptions
from glesysdns.providers.dns.base import DomainRecordClient

logger = logging.getLogger(__name__)

# GleSYS reports missing objects as a 400 with a descriptive status text
_NOT_FOUND_TEXT = re.compile(r"not found|does ?n[o']t exist|no such", re.IGNORECASE)


class GlesysClient(DomainRecordClient):
    """Domain/record client for the GleSYS API."""

    BASE_URL = "https://api.glesys.com"

    def __init__(
        self,
        username: str,
        api_key: str,
        endpoint: str | None = None,
        timeout: float = 30.0,
    ):
        """Initialize the GleSYS client.

        Args:
            username: GleSYS account or API user (e.g., "cl12345")
            api_key: GleSYS API key
            endpoint: Override of the API base URL
            timeout: Per-request timeout in seconds
        """
        self.username = username
        self.endpoint = endpoint or self.BASE_URL
        self.client = httpx.Client(
            base_url=self.endpoint,
            auth=(username, api_key),
            headers={
                "Accept": "application/json",
                "User-Agent": f"glesysdns/{__version__}",
            },
            timeout=timeout,
        )

    def close(self) -> None:
        self.client.close()

    def _do(self, action: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """POST to a domain endpoint and unwrap the "response" envelope."""
        path = f"/domain/{action}/format/json"
        logger.debug("POST %s %s", path, params or {})

        try:
            response = self.client.post(path, data=params or {})
        except httpx.RequestError as e:
            raise RemoteCallFailure(f"domain/{action} failed: {e}") from e

        if response.status_code == 401:
            raise Unauthorized()

        if response.status_code >= 400:
            text = self._status_text(response)
            if response.status_code == 404 or _NOT_FOUND_TEXT.search(text):
                raise NotFound(text or "Not Found")
            raise RemoteCallFailure(
                f"domain/{action} failed: {text or response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteCallFailure(
                f"domain/{action} returned a non-JSON response",
                status_code=response.status_code,
            ) from e

        return body.get("response", {})

    @staticmethod
    def _status_text(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text.strip()
        status = body.get("response", {}).get("status", {})
        return str(status.get("text", ""))

    # --- Domains ----------------------------------------------------------

    def list_domains(self) -> set[Domain]:
        """List all domains on the account."""
        data = self._do("list")
        return {Domain.model_validate(d) for d in data.get("domains", [])}

    def get_domain(self, domain_name: str) -> Domain:
        """Get the details of a domain."""
        data = self._do("details", {"domainname": domain_name})
        if not data.get("domain"):
            raise NotFound(f"Domain {domain_name} not found")
        return Domain.model_validate(data["domain"])

    def add_domain(
        self, domain_name: str, options: DomainOptions | None = None
    ) -> Domain:
        """Create a domain."""
        params = {"domainname": domain_name}
        if options:
            params.update(options.to_params())

        data = self._do("add", params)
        return Domain.model_validate(data.get("domain") or {"domainname": domain_name})

    def edit_domain(self, domain_name: str, options: DomainOptions) -> None:
        """Apply a sparse set of overrides to a domain."""
        self._do("edit", {"domainname": domain_name, **options.to_params()})

    def delete_domain(self, domain_name: str) -> None:
        """Delete a domain."""
        self._do("delete", {"domainname": domain_name})

    # --- Records ----------------------------------------------------------

    def list_records(self, domain_name: str) -> set[DomainRecord]:
        """List all records of a domain."""
        data = self._do("listrecords", {"domainname": domain_name})
        return {DomainRecord.model_validate(r) for r in data.get("records", [])}

    def add_record(
        self,
        domain_name: str,
        host: str,
        type: str,
        data: str,
        ttl: int | None = None,
    ) -> None:
        """Add a record to a domain."""
        params: dict[str, Any] = {
            "domainname": domain_name,
            "host": host,
            "type": type,
            "data": data,
        }
        if ttl is not None:
            params["ttl"] = ttl

        self._do("addrecord", params)

    def edit_record(self, record_id: str, options: EditRecordOptions) -> None:
        """Apply a sparse set of overrides to a record."""
        self._do("updaterecord", {"recordid": record_id, **options.to_params()})

    def delete_record(self, record_id: str) -> None:
        """Delete a record by id."""
        self._do("deleterecord", {"recordid": record_id})
