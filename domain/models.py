"""Domain models using Pydantic v2 for the booking backend."""

from datetime import date, datetime, time
from typing import Annotated, Dict, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from .enums import ReservationStatus, UserRole


def naive_time_of_day(value: time) -> time:
    """Reject times carrying a UTC offset; shifts and slots are wall-clock times."""
    if value.tzinfo is not None:
        raise ValueError("Time must not carry a UTC offset")
    return value


WallClockTime = Annotated[time, AfterValidator(naive_time_of_day)]


class UserRecord(BaseModel):
    """User as seen by the services. The password credential never leaves the store."""

    id: int
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255)
    role: UserRole

    model_config = ConfigDict(from_attributes=True)


class ShiftWindow(BaseModel):
    """Start/end pair shared by shift records and shift requests."""

    start_time: WallClockTime = Field(..., description="Shift start")
    end_time: WallClockTime = Field(..., description="Shift end (exclusive)")

    @model_validator(mode="after")
    def check_window(self) -> "ShiftWindow":
        """Ensure the shift starts before it ends."""
        if self.start_time >= self.end_time:
            raise ValueError(
                f"Shift start {self.start_time} must be before end {self.end_time}"
            )
        return self


class ShiftRecord(ShiftWindow):
    """Working window of one staff member on one date."""

    id: Optional[int] = None
    staff_id: int
    date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ShiftUpsert(ShiftWindow):
    """Model for creating or replacing the shift of a staff member on a date."""


class ReservationRecord(BaseModel):
    """Complete reservation record."""

    id: Optional[int] = None
    customer_id: int
    staff_id: Optional[int] = None
    staff_name: Optional[str] = Field(None, description="Display name of the assigned staff member")
    date: date
    time_slot: time
    menu: Optional[str] = Field(None, max_length=100)
    status: ReservationStatus = ReservationStatus.BOOKED
    created_at: Optional[datetime] = Field(None, description="When the reservation was booked")
    updated_at: Optional[datetime] = Field(None, description="Last move, menu change or cancellation")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_cancelled(self) -> bool:
        return self.status == ReservationStatus.CANCELLED


class ReservationCreate(BaseModel):
    """Model for creating a new reservation."""

    customer_id: int = Field(..., description="Acting customer")
    staff_id: int = Field(..., description="Requested staff member")
    date: date
    time_slot: WallClockTime
    menu: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(str_strip_whitespace=True)


class ReservationUpdate(BaseModel):
    """Model for moving a reservation or changing its menu."""

    date: date
    time_slot: WallClockTime
    menu: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(str_strip_whitespace=True)


class AvailabilityResponse(BaseModel):
    """Free slots of a staff member on a date."""

    staff_id: int
    date: date
    slots: list[time]


class CountReport(BaseModel):
    """Reservation counts over an inclusive date range."""

    start_date: date
    end_date: date
    counts: Dict[str, int]
    total: int
