"""PolicyVersion ORM — one row per version of a policy.

Invariants:
    - (policy_id, version_date) is unique
    - Claims are only counted when their policy version row exists (inner join)
"""

from datetime import date

from sqlalchemy import BigInteger, Date
from sqlalchemy.orm import Mapped, mapped_column

from claimcount.db.base import Base


class PolicyVersion(Base):
    __tablename__ = "policy_versions"

    policy_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    version_date: Mapped[date] = mapped_column(Date, primary_key=True)
