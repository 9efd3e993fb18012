"""Personnel prévisionnel."""

from typing import List, Optional

from pydantic import BaseModel, Field


class YearlyStaffData(BaseModel):
    """Effectif et salaire propres à une année (remplace la base cette année-là)."""

    year: int
    count: float
    salary_brut: float


class PersonnelItem(BaseModel):
    position: str = ""
    salary_brut: float = 0.0  # salaire brut mensuel (base année 1)
    count: float = 1  # effectif de base
    months_worked: float = 12
    start_year: Optional[int] = 1  # 1ère année d'embauche (1-based)
    yearly_data: List[YearlyStaffData] = Field(default_factory=list)

    @property
    def first_year(self) -> int:
        return self.start_year or 1

    def data_for_year(self, year: int) -> Optional[YearlyStaffData]:
        """Retourne la surcharge de l'année `year` si elle existe."""
        return next((yd for yd in self.yearly_data if yd.year == year), None)
