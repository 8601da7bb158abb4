"""GisClaim ORM — claims reported through the GIS system for a policy version.

Invariants:
    - subject_id links the claim directly to the driver's canonical subject
    - related_claim_no set means the claim is administratively linked to another claim
      and never counted
    - application_code decides whether the classification applies (overridden/automatic)
"""

from datetime import date

from sqlalchemy import BigInteger, Date, Integer
from sqlalchemy.orm import Mapped, mapped_column

from claimcount.db.base import Base


class GisClaim(Base):
    __tablename__ = "gis_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    policy_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    policy_version_date: Mapped[date] = mapped_column(Date, nullable=False)
    charge_location_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    subject_id: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    classification_code: Mapped[int] = mapped_column(Integer, nullable=False)
    claim_type_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    plan_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    loss_date: Mapped[date] = mapped_column(Date, nullable=False)
    application_code: Mapped[int] = mapped_column(Integer, nullable=False)
    related_claim_no: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
