"""Domain and record models for the GleSYS DNS API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Domain(BaseModel):
    """A DNS zone managed through the provider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    domain_name: str = Field(alias="domainname")
    create_time: datetime | None = Field(default=None, alias="createtime")
    record_count: int | None = Field(default=None, alias="recordcount")
    using_glesys_nameserver: bool | None = Field(
        default=None, alias="usingglesysnameserver"
    )
    primary_nameserver: str | None = Field(default=None, alias="primarynameserver")
    responsible_person: str | None = Field(default=None, alias="responsibleperson")
    ttl: int | None = None
    refresh: int | None = None
    retry: int | None = None
    expire: int | None = None
    minimum: int | None = None


class DomainRecord(BaseModel):
    """A single resource record within a domain."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="recordid")
    domain_name: str | None = Field(default=None, alias="domainname")
    host: str
    type: str
    data: str
    ttl: int | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        # GleSYS returns numeric record ids
        return str(v)


class _SparseOptions(BaseModel):
    """Base for option sets where only the fields that were set are sent."""

    model_config = ConfigDict(populate_by_name=True)

    def to_params(self) -> dict[str, Any]:
        """Return the set fields keyed by the provider's parameter names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DomainOptions(_SparseOptions):
    """Overrides accepted when adding or editing a domain."""

    primary_nameserver: str | None = Field(default=None, alias="primarynameserver")
    responsible_person: str | None = Field(default=None, alias="responsibleperson")
    ttl: int | None = None
    refresh: int | None = None
    retry: int | None = None
    expire: int | None = None
    minimum: int | None = None


class EditRecordOptions(_SparseOptions):
    """Overrides accepted when editing a record."""

    host: str | None = None
    type: str | None = None
    data: str | None = None
    ttl: int | None = None
