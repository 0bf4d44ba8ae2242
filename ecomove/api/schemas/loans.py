from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecomove.domain.entities.serialization import ensure_utc


class CreateLoanBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_id: int = Field(gt=0)
    transport_id: int = Field(gt=0)
    origin_station_id: int = Field(gt=0)
    # Se valida en el caso de uso para responder con el mensaje de dominio.
    payment_method: str


class CompleteLoanBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    destination_station_id: int = Field(gt=0)
    end_date: datetime | None = None

    @field_validator("end_date")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value) if value else value
