"""
Pydantic models for calendar components and computation results.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class DateComponents(BaseModel):
    """Calendar components of a date; fields not requested or not set are None"""

    model_config = ConfigDict(frozen=True)

    year: Optional[int] = Field(default=None, description="Calendar year")
    month: Optional[int] = Field(default=None, description="Month of the year (1-based)")
    day: Optional[int] = Field(default=None, description="Day of the month (1-based)")
    hour: Optional[int] = Field(default=None, description="Hour of the day (0-23)")
    minute: Optional[int] = Field(default=None, description="Minute of the hour")
    second: Optional[int] = Field(default=None, description="Second of the minute")
    microsecond: Optional[int] = Field(default=None, description="Sub-second part")
    weekday: Optional[int] = Field(default=None, description="Weekday, Sunday=1 ... Saturday=7", ge=1, le=7)


class ComputationResult(BaseModel):
    """Outcome of a calendar computation: a value, or the reason there is none"""

    model_config = ConfigDict(frozen=True)

    value: Optional[datetime] = Field(default=None, description="Computed date")
    error: Optional[str] = Field(default=None, description="Why no value was produced")

    @property
    def succeeded(self) -> bool:
        return self.value is not None

    def or_fallback(self, fallback: datetime) -> datetime:
        """Collapse to the computed value, or the fallback on failure."""
        return self.value if self.value is not None else fallback
