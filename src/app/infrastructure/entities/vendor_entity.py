from datetime import datetime
from enum import Enum as PyEnum
from uuid import UUID, uuid4

from sqlalchemy import String, Text, DateTime, Enum, Index, func
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class VendorCategory(str, PyEnum):
    """Vendor category enum."""
    TECHNOLOGY = "technology"
    MARKETING = "marketing"
    LEGAL = "legal"
    FINANCE = "finance"
    HR = "hr"
    FACILITIES = "facilities"
    LOGISTICS = "logistics"
    MANUFACTURING = "manufacturing"
    CONSULTING = "consulting"
    OTHER = "other"


class VendorEntity(Base):
    """SQLAlchemy model for Vendor table."""
    __tablename__ = "vendors"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    enterprise_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255))
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(512), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[VendorCategory | None] = mapped_column(
        Enum(VendorCategory, values_callable=lambda x: [e.value for e in x], native_enum=False),
        nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )


Index("ix_vendors_enterprise_category", VendorEntity.enterprise_id, VendorEntity.category)
