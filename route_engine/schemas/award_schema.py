from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class AwardAvailability(BaseModel):
    """One seats.aero availability row: a date and program with four cabin tiers."""

    id: str = Field(..., alias="ID")
    route_id: str = Field("", alias="RouteID")
    date: str = Field(..., alias="Date")
    source: str = Field("", alias="Source")

    # Economy
    y_available: Optional[bool] = Field(None, alias="YAvailable")
    y_mileage_cost: Optional[str] = Field(None, alias="YMileageCost")
    y_remaining_seats: Optional[int] = Field(None, alias="YRemainingSeats")

    # Premium Economy
    w_available: Optional[bool] = Field(None, alias="WAvailable")
    w_mileage_cost: Optional[str] = Field(None, alias="WMileageCost")
    w_remaining_seats: Optional[int] = Field(None, alias="WRemainingSeats")

    # Business
    j_available: Optional[bool] = Field(None, alias="JAvailable")
    j_mileage_cost: Optional[str] = Field(None, alias="JMileageCost")
    j_remaining_seats: Optional[int] = Field(None, alias="JRemainingSeats")

    # First
    f_available: Optional[bool] = Field(None, alias="FAvailable")
    f_mileage_cost: Optional[str] = Field(None, alias="FMileageCost")
    f_remaining_seats: Optional[int] = Field(None, alias="FRemainingSeats")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class AwardSearchResponse(BaseModel):
    data: List[AwardAvailability] = Field(default_factory=list)
    count: int = 0
    has_more: bool = Field(False, alias="hasMore")
    cursor: Optional[int] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
