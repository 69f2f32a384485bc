"""RDAP provider implementation."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from domaincheck.core.domains import domain_suffix
from domaincheck.core.exceptions import UnsupportedDomainError
from domaincheck.core.models import CheckResult
from domaincheck.core.types import CheckMethod, ProviderName, SpeedTier
from domaincheck.providers.base import AbstractProvider, ProviderConfig
from domaincheck.providers.ratelimit import RateLimiter

logger = logging.getLogger(__name__)

IANA_BOOTSTRAP_URL = "https://data.iana.org/rdap/dns.json"

# Authoritative registry RDAP servers for common suffixes
DEFAULT_RDAP_ENDPOINTS: dict[str, str] = {
    "com": "https://rdap.verisign.com/com/v1",
    "net": "https://rdap.verisign.com/net/v1",
    "org": "https://rdap.publicinterestregistry.org/rdap",
    "app": "https://pubapi.registry.google/rdap",
    "dev": "https://pubapi.registry.google/rdap",
    "xyz": "https://rdap.centralnic.com/xyz",
    "de": "https://rdap.denic.de",
    "nl": "https://rdap.sidn.nl",
    "fr": "https://rdap.nic.fr",
    "ch": "https://rdap.nic.ch",
    "eu": "https://rdap.eurid.eu",
    "cz": "https://rdap.nic.cz",
    "pl": "https://rdap.dns.pl",
    "at": "https://rdap.nic.at",
}


class RDAPProvider(AbstractProvider):
    """
    Registry RDAP lookup (keyless, suffix-keyed).

    The registry for the domain's suffix answers 404 for names that do
    not exist (available) and a domain object for registered names.

    Protocol: RFC 9082 / RFC 9083
    """

    PROVIDER_NAME: ClassVar[ProviderName] = ProviderName.RDAP
    METHOD: ClassVar[CheckMethod] = CheckMethod.RDAP
    BASE_URL: ClassVar[str] = "https://rdap.org"
    DEFAULT_SPEED: ClassVar[SpeedTier] = SpeedTier.FAST

    def __init__(
        self,
        config: ProviderConfig | None = None,
        rate_limiter: RateLimiter | None = None,
        endpoints: dict[str, str] | None = None,
    ) -> None:
        super().__init__(config, rate_limiter)
        routes = dict(DEFAULT_RDAP_ENDPOINTS)
        routes.update(endpoints or {})
        self._endpoints = {tld.lower(): url.rstrip("/") for tld, url in routes.items()}

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Accept"] = "application/rdap+json, application/json"
        return headers

    @property
    def supported_suffixes(self) -> frozenset[str]:
        return frozenset(self._endpoints)

    def endpoint_for(self, domain: str) -> str:
        """
        Resolve the RDAP base URL for a domain's suffix.

        Raises:
            UnsupportedDomainError: If no RDAP server is known for the suffix
        """
        tld = domain_suffix(domain)
        endpoint = self._endpoints.get(tld) if tld else None
        if endpoint is None:
            raise UnsupportedDomainError(
                message=f"No RDAP server for suffix: .{tld}" if tld else "Domain has no suffix",
                source=self.name.value,
                details={"domain": domain, "tld": tld},
            )
        return endpoint

    async def check_one(self, domain: str) -> CheckResult:
        """Look up a domain at its registry's RDAP server."""
        endpoint = self.endpoint_for(domain)

        response = await self._make_request("GET", f"{endpoint}/domain/{domain}")

        if response.status_code == 404:
            return self._result(domain, available=True)

        if response.status_code != 200:
            raise self._upstream_error(response)

        try:
            data = response.json()
        except ValueError as e:
            raise self._upstream_error(response, "Malformed RDAP response: invalid JSON") from e

        if not self._is_domain_object(data):
            raise self._upstream_error(
                response, "Malformed RDAP response: no domain object"
            )

        return self._result(domain, available=False)

    @staticmethod
    def _is_domain_object(data: Any) -> bool:
        """Whether an RDAP body describes a registered domain."""
        if not isinstance(data, dict):
            return False
        if data.get("objectClassName") == "domain":
            return True
        return bool(data.get("ldhName") or data.get("unicodeName"))

    async def refresh_bootstrap(self) -> int:
        """
        Merge the IANA RDAP bootstrap registry into the suffix table.

        Explicitly configured endpoints keep precedence. Returns the
        number of suffixes added.
        """
        async with self._get_client() as client:
            response = await client.get(IANA_BOOTSTRAP_URL)
        if response.status_code != 200:
            raise self._upstream_error(response, "Could not fetch RDAP bootstrap")

        try:
            data = response.json()
        except ValueError as e:
            raise self._upstream_error(response, "Malformed RDAP bootstrap") from e
        if not isinstance(data, dict):
            raise self._upstream_error(response, "Malformed RDAP bootstrap")

        services = parse_bootstrap_services(data)
        added = 0
        for tld, url in services.items():
            if tld not in self._endpoints:
                self._endpoints[tld] = url
                added += 1

        logger.info(f"RDAP bootstrap loaded: {added} new suffixes, {len(self._endpoints)} total")
        return added


def parse_bootstrap_services(data: dict[str, Any]) -> dict[str, str]:
    """
    Parse IANA bootstrap format into a TLD -> server URL mapping.

    Bootstrap format:
    {
        "services": [
            [["com", "net"], ["https://rdap.verisign.com/com/v1/"]],
            ...
        ]
    }
    """
    services: dict[str, str] = {}
    for entry in data.get("services", []):
        if len(entry) < 2 or not entry[1]:
            continue
        tlds, urls = entry[0], entry[1]
        # Prefer https servers
        url = next((u for u in urls if u.startswith("https://")), urls[0])
        for tld in tlds:
            services[tld.lower()] = url.rstrip("/")
    return services
