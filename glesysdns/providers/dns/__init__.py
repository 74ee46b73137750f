"""DNS provider implementations."""

from glesysdns.providers.dns.base import DomainRecordClient
from glesysdns.providers.dns.glesys import GlesysClient

__all__ = ["DomainRecordClient", "GlesysClient"]
