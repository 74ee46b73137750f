"""Abstract base class for domain/record clients."""

from abc import ABC, abstractmethod

from glesysdns.models import Domain, DomainOptions, DomainRecord, EditRecordOptions


class DomainRecordClient(ABC):
    """Abstract interface to a provider's domain and record endpoints.

    Implementations never retry. Every operation may raise
    RemoteCallFailure on transport, auth or provider errors.
    """

    @abstractmethod
    def list_domains(self) -> set[Domain]:
        """List all domains on the account."""
        pass

    @abstractmethod
    def get_domain(self, domain_name: str) -> Domain:
        """Get the details of a domain.

        Args:
            domain_name: The domain name (e.g., "example.com")

        Raises:
            NotFound: If the domain does not exist
        """
        pass

    @abstractmethod
    def add_domain(
        self, domain_name: str, options: DomainOptions | None = None
    ) -> Domain:
        """Create a domain.

        Args:
            domain_name: The domain name (e.g., "example.com")
            options: Optional SOA overrides
        """
        pass

    @abstractmethod
    def edit_domain(self, domain_name: str, options: DomainOptions) -> None:
        """Apply a sparse set of overrides to a domain."""
        pass

    @abstractmethod
    def delete_domain(self, domain_name: str) -> None:
        """Delete a domain.

        Raises:
            NotFound: If the domain does not exist
        """
        pass

    @abstractmethod
    def list_records(self, domain_name: str) -> set[DomainRecord]:
        """List all records of a domain."""
        pass

    @abstractmethod
    def add_record(
        self,
        domain_name: str,
        host: str,
        type: str,
        data: str,
        ttl: int | None = None,
    ) -> None:
        """Add a record to a domain.

        The provider assigns the record id; list the records to find it.

        Args:
            domain_name: The domain name (e.g., "example.com")
            host: The record host (e.g., "www" or "@" for root)
            type: The record type (A, CNAME, MX, ...)
            data: The record data, interpreted according to type
            ttl: Optional time to live in seconds
        """
        pass

    @abstractmethod
    def edit_record(self, record_id: str, options: EditRecordOptions) -> None:
        """Apply a sparse set of overrides to a record."""
        pass

    @abstractmethod
    def delete_record(self, record_id: str) -> None:
        """Delete a record by id."""
        pass
