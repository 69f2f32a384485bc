"""Service layer for orchestrating checks and usage logging."""

from domaincheck.services.batch import BatchDispatcher
from domaincheck.services.checking import CheckService
from domaincheck.services.usage import AirtableUsageSink, UsageEvent, UsageRecord

__all__ = [
    "AirtableUsageSink",
    "BatchDispatcher",
    "CheckService",
    "UsageEvent",
    "UsageRecord",
]
