from datetime import datetime
from enum import Enum as PyEnum
from uuid import UUID, uuid4

from sqlalchemy import String, Text, DateTime, Enum, Index, func
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class ContractStatus(str, PyEnum):
    """Contract status enum."""
    DRAFT = "draft"
    PENDING_ANALYSIS = "pending_analysis"
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"
    ARCHIVED = "archived"


class ContractType(str, PyEnum):
    """Contract type enum."""
    NDA = "nda"
    MSA = "msa"
    SOW = "sow"
    SAAS = "saas"
    LEASE = "lease"
    EMPLOYMENT = "employment"
    PARTNERSHIP = "partnership"
    OTHER = "other"


class ContractEntity(Base):
    """SQLAlchemy model for Contract table."""
    __tablename__ = "contracts"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    enterprise_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    vendor_id: Mapped[UUID | None] = mapped_column(nullable=True)
    title: Mapped[str] = mapped_column(String(255))
    file_name: Mapped[str] = mapped_column(String(255), default="")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[ContractStatus] = mapped_column(
        Enum(ContractStatus, values_callable=lambda x: [e.value for e in x], native_enum=False),
        default=ContractStatus.DRAFT,
        nullable=False
    )
    contract_type: Mapped[ContractType | None] = mapped_column(
        Enum(ContractType, values_callable=lambda x: [e.value for e in x], native_enum=False),
        nullable=True
    )
    extracted_parties: Mapped[list[str]] = mapped_column(ARRAY(String(255)), default=list)
    extracted_scope: Mapped[str | None] = mapped_column(Text, nullable=True)
    extracted_pricing: Mapped[str | None] = mapped_column(String(255), nullable=True)
    extracted_start_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    extracted_end_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )


# Tenant-scoped reads always filter on enterprise_id, optionally with status or vendor
Index("ix_contracts_enterprise_status", ContractEntity.enterprise_id, ContractEntity.status)
Index("ix_contracts_enterprise_vendor", ContractEntity.enterprise_id, ContractEntity.vendor_id)
