"""Core enums and type definitions."""

from enum import StrEnum


class CheckMethod(StrEnum):
    """Which lookup path produced a check result."""

    RDAP = "rdap"
    REGISTRAR = "registrar"
    ERROR = "error"


class ProviderName(StrEnum):
    """Known upstream availability providers."""

    RDAP = "rdap"
    NAMECOM = "namecom"
    GODADDY = "godaddy"


class SpeedTier(StrEnum):
    """Declared response-time tier of a provider."""

    FAST = "fast"
    STANDARD = "standard"
    SLOW = "slow"


class NamecomEnvironment(StrEnum):
    """Name.com API environments."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


class GoDaddyEnvironment(StrEnum):
    """GoDaddy API environments."""

    OTE = "ote"  # Operational test environment
    PRODUCTION = "production"
