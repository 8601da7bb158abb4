"""OtherClaim ORM — non-GIS claims attached to a policy version.

Invariants:
    - Claim attributes (type, plan, loss date, amount) live on the OtherClaimVersion row,
      reached through (subject_id, other_claim_no, other_claim_version_date)
    - charge_status_code "D" marks a logically deleted claim; NULL means not deleted
"""

from datetime import date

from sqlalchemy import BigInteger, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from claimcount.db.base import Base


class OtherClaim(Base):
    __tablename__ = "other_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    policy_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    policy_version_date: Mapped[date] = mapped_column(Date, nullable=False)
    charge_location_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    subject_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    other_claim_no: Mapped[int] = mapped_column(Integer, nullable=False)
    other_claim_version_date: Mapped[date] = mapped_column(Date, nullable=False)
    application_code: Mapped[int] = mapped_column(Integer, nullable=False)
    charge_status_code: Mapped[str | None] = mapped_column(String(1), nullable=True)
