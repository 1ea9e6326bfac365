import logging
import uuid
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .dates import get_today, start_of_day, to_local, week_day
from .db import get_session
from .models import Day, DayHabit, Habit, HabitWeekDay
from .schemas import DayRead, DaySummary, HabitCreate, HabitRead, ToggleResult

logger = logging.getLogger(__name__)

router = APIRouter()


def get_or_create_day(session: Session, date: datetime) -> Day:
    """Return the Day row for ``date``, inserting it on first use.

    The unique constraint on ``days.date`` settles concurrent inserts: the
    loser rolls back and reads the winner's row.
    """
    day = session.exec(select(Day).where(Day.date == date)).first()
    if day is not None:
        return day
    day = Day(date=date)
    session.add(day)
    try:
        session.flush()
    except IntegrityError:
        session.rollback()
        day = session.exec(select(Day).where(Day.date == date)).one()
    return day


# ----- Habit endpoints -----
@router.post("/habits", status_code=201)
def create_habit(
    habit_in: HabitCreate,
    session: Session = Depends(get_session),
    today: datetime = Depends(get_today),
):
    habit = Habit(title=habit_in.title, created_at=today)
    session.add(habit)
    session.flush()
    for day_index in habit_in.week_days:
        session.add(HabitWeekDay(habit_id=habit.id, week_day=day_index))
    session.commit()
    logger.info("Created habit %s with week days %s", habit.id, habit_in.week_days)
    return Response(status_code=201)


@router.get("/day", response_model=DayRead)
def get_day(date: datetime = Query(...), session: Session = Depends(get_session)):
    date = to_local(date)
    parsed_date = start_of_day(date)
    day_index = week_day(parsed_date)

    possible_habits = session.exec(
        select(Habit).where(
            Habit.created_at <= date,
            Habit.id.in_(select(HabitWeekDay.habit_id).where(HabitWeekDay.week_day == day_index)),
        )
    ).all()

    completed_habits: List[uuid.UUID] = []
    day = session.exec(select(Day).where(Day.date == parsed_date)).first()
    if day is not None:
        completed_habits = list(
            session.exec(select(DayHabit.habit_id).where(DayHabit.day_id == day.id)).all()
        )

    return DayRead(
        possible_habits=[HabitRead.model_validate(h) for h in possible_habits],
        completed_habits=completed_habits,
    )


@router.patch("/habits/{habit_id}/toggle", response_model=ToggleResult)
def toggle_habit(
    habit_id: uuid.UUID,
    session: Session = Depends(get_session),
    today: datetime = Depends(get_today),
):
    day = get_or_create_day(session, today)
    day_habit = session.exec(
        select(DayHabit).where(DayHabit.day_id == day.id, DayHabit.habit_id == habit_id)
    ).first()

    if day_habit is not None:
        session.delete(day_habit)
        message = "Habit completion removed"
    else:
        session.add(DayHabit(day_id=day.id, habit_id=habit_id))
        message = "Habit completion created"

    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(409, "Habit completion was changed by another request")

    logger.debug("Toggled habit %s on %s: %s", habit_id, today.date(), message)
    return ToggleResult(message=message)


# ----- Summary -----
@router.get("/summary", response_model=List[DaySummary])
def summary(session: Session = Depends(get_session)):
    days = session.exec(select(Day).order_by(Day.date)).all()
    completed_by_day = dict(
        session.exec(
            select(DayHabit.day_id, func.count(DayHabit.id)).group_by(DayHabit.day_id)
        ).all()
    )
    schedule = session.exec(
        select(Habit.created_at, HabitWeekDay.week_day).join(
            HabitWeekDay, HabitWeekDay.habit_id == Habit.id
        )
    ).all()

    result = []
    for day in days:
        day_index = week_day(day.date)
        amount = sum(
            1 for created_at, wd in schedule if wd == day_index and created_at <= day.date
        )
        result.append(
            DaySummary(
                id=day.id,
                date=day.date,
                completed=float(completed_by_day.get(day.id, 0)),
                amount=float(amount),
            )
        )
    return result
