"""Request/response models for the REST API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from application.wine.queries.get_consumption_report import ConsumptionReport
from domain.user.core.entities.user import User
from domain.wine.core.entities.wine import Wine


class ErrorResponse(BaseModel):
    """Body returned for domain errors."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    service: str
    version: str


class RegisterUserRequest(BaseModel):
    email: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    id: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(**user.to_plain_object())


class CreateWineRequest(BaseModel):
    """Payload for a wine entering the cellar."""

    user_id: str
    name: str
    vintage: int
    coupage: str
    type: str
    cellar_entry_date: datetime
    quantity: int
    alcohol_content: float
    denomination: str
    winery: str
    suggested_consumption_date: Optional[datetime] = None
    notes: Optional[str] = None


class WineResponse(BaseModel):
    id: str
    user_id: str
    name: str
    vintage: int
    coupage: str
    type: str
    cellar_entry_date: datetime
    quantity: int
    alcohol_content: float
    denomination: str
    winery: str
    suggested_consumption_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, wine: Wine) -> "WineResponse":
        data = wine.to_plain_object()
        data["type"] = wine.type.value
        return cls(**data)


class QuantityRequest(BaseModel):
    quantity: int


class BottlesRequest(BaseModel):
    amount: int


class NotesRequest(BaseModel):
    notes: str


class ConsumptionReportResponse(BaseModel):
    wine_id: str
    status: str
    is_optimal: bool
    days_until_optimal: Optional[int] = None
    suggested_consumption_date: Optional[datetime] = None

    @classmethod
    def from_report(cls, report: ConsumptionReport) -> "ConsumptionReportResponse":
        return cls(
            wine_id=report.wine_id,
            status=report.status.value,
            is_optimal=report.is_optimal,
            days_until_optimal=report.days_until_optimal,
            suggested_consumption_date=report.suggested_consumption_date,
        )
