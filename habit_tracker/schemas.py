import uuid
from datetime import datetime
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

WeekDay = Annotated[StrictInt, Field(ge=0, le=6)]


# ----- Pydantic schemas -----
class HabitCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: StrictStr = Field(..., min_length=1)
    week_days: List[WeekDay] = Field(..., alias="weekDays")


class HabitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    created_at: datetime


class DayRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    possible_habits: List[HabitRead] = Field(alias="possibleHabits")
    completed_habits: List[uuid.UUID] = Field(alias="completedHabits")


class ToggleResult(BaseModel):
    message: str


class DaySummary(BaseModel):
    """Completion counts for one day; the ratio is left to the client."""

    id: uuid.UUID
    date: datetime
    completed: float
    amount: float
