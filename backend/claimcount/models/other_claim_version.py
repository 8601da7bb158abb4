"""OtherClaimVersion ORM — versioned details of a non-GIS claim.

Invariants:
    - Keyed by (subject_id, other_claim_no, version_date)
    - driver_subject_id is the driver at the time of loss; the driver filter matches
      either subject_id or driver_subject_id
    - Negative amounts are reversals and never counted
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import BigInteger, Date, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from claimcount.db.base import Base


class OtherClaimVersion(Base):
    __tablename__ = "other_claim_versions"

    subject_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    other_claim_no: Mapped[int] = mapped_column(Integer, primary_key=True)
    version_date: Mapped[date] = mapped_column(Date, primary_key=True)
    driver_subject_id: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    classification_code: Mapped[int] = mapped_column(Integer, nullable=False)
    claim_type_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    plan_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    loss_date: Mapped[date] = mapped_column(Date, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
