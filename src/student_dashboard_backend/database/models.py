from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, PrimaryKeyConstraint, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
import datetime
import uuid


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class Base(DeclarativeBase):
    pass


class UserEvents(Base):
    __tablename__ = 'user_events'
    __table_args__ = (
        PrimaryKeyConstraint('id', name='user_events_pkey'),
        Index('ix_user_events_user_id', 'user_id'),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(128))
    date: Mapped[str] = mapped_column(String(10))
    description: Mapped[str] = mapped_column(Text)
    type: Mapped[str] = mapped_column(String(32), default='Other')
    remind_me: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(True), default=_utcnow)
    end_date: Mapped[Optional[str]] = mapped_column(String(10))
    updated_at: Mapped[Optional[datetime.datetime]] = mapped_column(DateTime(True), onupdate=_utcnow)


class ReminderPreferences(Base):
    __tablename__ = 'reminder_preferences'
    __table_args__ = (
        PrimaryKeyConstraint('user_id', name='reminder_preferences_pkey'),
    )

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    event_keys: Mapped[list] = mapped_column(JSON, default=list)


class TimetableSlots(Base):
    __tablename__ = 'timetable_slots'
    __table_args__ = (
        PrimaryKeyConstraint('id', name='timetable_slots_pkey'),
        Index('ix_timetable_slots_user_id', 'user_id'),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(128))
    day: Mapped[str] = mapped_column(String(16))
    start_time: Mapped[str] = mapped_column(String(5))
    end_time: Mapped[str] = mapped_column(String(5))
    course_code: Mapped[str] = mapped_column(String(50), default='')
    course_name: Mapped[str] = mapped_column(String(255), default='')
    instructor: Mapped[str] = mapped_column(String(255), default='')
    location: Mapped[str] = mapped_column(String(255), default='')
    is_custom_task: Mapped[bool] = mapped_column(Boolean, default=False)
    position: Mapped[int] = mapped_column(Integer, default=0)


class CalendarConfig(Base):
    """Single-row table holding the admin-configured calendar."""
    __tablename__ = 'calendar_config'
    __table_args__ = (
        PrimaryKeyConstraint('id', name='calendar_config_pkey'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    events: Mapped[list] = mapped_column(JSON, default=list)
    semester_name: Mapped[Optional[str]] = mapped_column(String(255))
    semester_start_date: Mapped[Optional[str]] = mapped_column(String(10))
    semester_end_date: Mapped[Optional[str]] = mapped_column(String(10))
    updated_at: Mapped[Optional[datetime.datetime]] = mapped_column(DateTime(True), onupdate=_utcnow)
