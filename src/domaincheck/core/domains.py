"""Domain name normalization helpers."""

import idna

from .exceptions import InvalidInputError


def normalize_domain(domain: object) -> str:
    """
    Normalize a domain name for lookup.

    Trims whitespace, lowercases, drops a trailing root dot and
    IDNA-encodes internationalized names to their ASCII form.

    Raises:
        InvalidInputError: If the value is not a usable domain string
    """
    if not isinstance(domain, str):
        raise InvalidInputError(
            "Domain must be a string",
            details={"received": type(domain).__name__},
        )

    value = domain.strip().lower().rstrip(".")
    if not value:
        raise InvalidInputError("Domain must not be empty")

    if not value.isascii():
        try:
            value = idna.encode(value, uts46=True).decode("ascii")
        except idna.IDNAError as e:
            raise InvalidInputError(
                f"Invalid internationalized domain: {domain}",
                details={"domain": domain, "idna_error": str(e)},
            ) from e

    return value


def domain_suffix(domain: str) -> str | None:
    """Return the top-level label of a domain, or None for a bare label."""
    if "." not in domain:
        return None
    return domain.rsplit(".", 1)[-1] or None
