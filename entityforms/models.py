from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, DECIMAL, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from entityforms.db import Base

NAME_MAX_LENGTH = 30
EMAIL_MAX_LENGTH = 60
# INT con signo de MySQL
ID_MAX = 2**31 - 1

class Department(Base):
    __tablename__ = "department"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False, default="")
    sellers: Mapped[list["Seller"]] = relationship(back_populates="department")

class Seller(Base):
    __tablename__ = "seller"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    birth_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    base_salary: Mapped[Decimal | None] = mapped_column(DECIMAL(18, 2), nullable=True)

    department_id: Mapped[int | None] = mapped_column(ForeignKey("department.id"), index=True)
    department: Mapped["Department | None"] = relationship(back_populates="sellers")

    __table_args__ = (
        Index("ix_seller_name", "name"),
    )
