"""Supplier entity."""

from pydantic import field_validator

from bodega.core.entities.base import DomainModel, validate_name

MAX_NAME_LENGTH = 45
RUC_LENGTH = 11


class Supplier(DomainModel):
    """A supplier identified by its 11-digit RUC (Peruvian taxpayer id)."""

    id: int
    name: str
    ruc: int

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_name(v, MAX_NAME_LENGTH, "Supplier name")

    @field_validator("ruc")
    @classmethod
    def check_ruc(cls, v: int) -> int:
        if v < 0 or len(str(v)) != RUC_LENGTH:
            raise ValueError(f"The RUC must have {RUC_LENGTH} digits")
        return v

    def rename(self, name: str) -> None:
        self.name = name

    def change_ruc(self, ruc: int) -> None:
        self.ruc = ruc
