from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict

class DepartmentIn(BaseModel):
    """Departamento candidato. id None = todavía no persistido."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int | None = None
    name: str = ""

class SellerIn(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int | None = None
    name: str = ""
    email: str = ""
    birth_date: datetime | None = None
    base_salary: Decimal | None = None
    department: DepartmentIn | None = None
