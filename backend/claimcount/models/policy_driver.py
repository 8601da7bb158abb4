"""PolicyDriver ORM — driver numbers listed on a policy version.

Invariants:
    - (policy_id, version_date, driver_no) identifies at most one subject
    - driver_no is the caller-facing id; subject_id is the canonical person id on claims
"""

from datetime import date

from sqlalchemy import BigInteger, Date, Integer
from sqlalchemy.orm import Mapped, mapped_column

from claimcount.db.base import Base


class PolicyDriver(Base):
    __tablename__ = "policy_drivers"

    policy_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    version_date: Mapped[date] = mapped_column(Date, primary_key=True)
    driver_no: Mapped[int] = mapped_column(Integer, primary_key=True)
    subject_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
