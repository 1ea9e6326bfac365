import uuid
from datetime import datetime

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


# ----- Models -----
class Habit(SQLModel, table=True):
    __tablename__ = "habits"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str
    # naive local midnights
    created_at: datetime = Field(sa_type=DateTime, index=True)


class HabitWeekDay(SQLModel, table=True):
    """One weekday (0=Sunday..6=Saturday) on which a habit applies."""

    __tablename__ = "habit_week_days"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    habit_id: uuid.UUID = Field(foreign_key="habits.id", index=True)
    week_day: int = Field(ge=0, le=6)


class Day(SQLModel, table=True):
    __tablename__ = "days"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    date: datetime = Field(sa_type=DateTime, unique=True)


class DayHabit(SQLModel, table=True):
    """Presence of a row means the habit was completed on that day."""

    __tablename__ = "day_habits"
    __table_args__ = (UniqueConstraint("day_id", "habit_id"),)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    day_id: uuid.UUID = Field(foreign_key="days.id", index=True)
    habit_id: uuid.UUID = Field(foreign_key="habits.id", index=True)
