"""Record store: one row of solar data per (location, date).

The store *is* the cache. Rows are written once, after a day has been fetched
successfully from the upstream provider, and are never updated or expired.
A range of dates is "cache-complete" for a location when a row exists for
every date in it; the row contents are not inspected.

Uniqueness of (location, date) is enforced by the database. Two requests
racing to insert the same day surface as :class:`DuplicateKeyError` for the
loser, which callers may treat as "already cached".
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import (
    Date,
    DateTime,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    create_engine,
    func,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from daylight_planner.errors import DuplicateKeyError, ValidationError
from daylight_planner.timecodec import format_day_length, parse_api_time

logger = logging.getLogger(__name__)

LOCATION_MIN_LENGTH = 2
LOCATION_MAX_LENGTH = 200

#: Event columns, in the order the provider reports them.
EVENT_FIELDS = (
    "sunrise",
    "sunset",
    "solar_noon",
    "civil_twilight_begin",
    "civil_twilight_end",
    "nautical_twilight_begin",
    "nautical_twilight_end",
    "astronomical_twilight_begin",
    "astronomical_twilight_end",
)


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


class Base(DeclarativeBase):
    """Declarative base for the record store schema."""


class SolarRecord(Base):
    """One calendar day of solar data for one location."""

    __tablename__ = "sunrise_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    location: Mapped[str] = mapped_column(String(LOCATION_MAX_LENGTH), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    latitude: Mapped[float] = mapped_column(Numeric(10, 6, asdecimal=False), nullable=False)
    longitude: Mapped[float] = mapped_column(Numeric(10, 6, asdecimal=False), nullable=False)

    # Null when the event does not happen that day (polar day / night).
    sunrise: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    sunset: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    solar_noon: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    day_length: Mapped[str | None] = mapped_column(String(20))
    civil_twilight_begin: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    civil_twilight_end: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    nautical_twilight_begin: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    nautical_twilight_end: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    astronomical_twilight_begin: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))
    astronomical_twilight_end: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        UniqueConstraint("location", "date", name="index_sunrise_records_on_location_and_date"),
        Index(
            "index_sunrise_records_on_coordinates_and_date",
            "latitude",
            "longitude",
            "date",
        ),
    )

    def __repr__(self) -> str:
        return f"SolarRecord(location={self.location!r}, date={self.date.isoformat()})"


def build_record(
    location_key: str,
    latitude: float,
    longitude: float,
    day: dt.date,
    results: dict[str, Any],
) -> SolarRecord:
    """Build an unsaved record from the ``results`` object of an OK provider payload."""
    events = {name: parse_api_time(results.get(name)) for name in EVENT_FIELDS}
    return SolarRecord(
        location=location_key,
        date=day,
        latitude=latitude,
        longitude=longitude,
        day_length=format_day_length(results.get("day_length")),
        **events,
    )


def validate_record(record: SolarRecord) -> None:
    """Reject records that would violate the column constraints.

    Raises:
        ValidationError: On a bad location name, date or coordinate.
    """
    location = record.location or ""
    if not LOCATION_MIN_LENGTH <= len(location) <= LOCATION_MAX_LENGTH:
        msg = (
            f"Location must be {LOCATION_MIN_LENGTH}-{LOCATION_MAX_LENGTH} characters "
            f"(got {len(location)})"
        )
        raise ValidationError(msg)
    if record.date is None:
        raise ValidationError("Record date is required")
    if record.latitude is None or not -90 <= record.latitude <= 90:
        raise ValidationError(f"Latitude out of range: {record.latitude}")
    if record.longitude is None or not -180 <= record.longitude <= 180:
        raise ValidationError(f"Longitude out of range: {record.longitude}")


def get_engine(url: str) -> Engine:
    """Create an engine, allowing SQLite connections to cross threads."""
    connect_args: dict[str, Any] = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(url, echo=False, connect_args=connect_args)


class RecordStore:
    """Durable keyed storage of :class:`SolarRecord` rows."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, class_=Session, expire_on_commit=False)

    @classmethod
    def from_url(cls, url: str) -> RecordStore:
        """Open a store on the database at ``url``."""
        return cls(get_engine(url))

    def create_schema(self) -> None:
        """Create the ``sunrise_records`` table and its indexes if missing."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on error."""
        session = self._sessions()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # -- queries ---------------------------------------------------------------

    def count_existing(self, location_key: str, start: dt.date, end: dt.date) -> int:
        """Number of distinct dates in ``[start, end]`` stored for ``location_key``."""
        stmt = select(func.count(func.distinct(SolarRecord.date))).where(
            SolarRecord.location == location_key,
            SolarRecord.date >= start,
            SolarRecord.date <= end,
        )
        with self.session_scope() as session:
            return int(session.scalar(stmt) or 0)

    def is_range_complete(self, location_key: str, start: dt.date, end: dt.date) -> bool:
        """True iff a row exists for every date in ``[start, end]``."""
        expected = (end - start).days + 1
        return self.count_existing(location_key, start, end) == expected

    def exists_for_date(self, location_key: str, day: dt.date) -> bool:
        stmt = (
            select(SolarRecord.id)
            .where(SolarRecord.location == location_key, SolarRecord.date == day)
            .limit(1)
        )
        with self.session_scope() as session:
            return session.scalar(stmt) is not None

    def find_for_date(self, location_key: str, day: dt.date) -> SolarRecord | None:
        stmt = select(SolarRecord).where(
            SolarRecord.location == location_key, SolarRecord.date == day
        )
        with self.session_scope() as session:
            return session.scalars(stmt).first()

    def load_range(self, location_key: str, start: dt.date, end: dt.date) -> list[SolarRecord]:
        """All rows for ``location_key`` in ``[start, end]``, ascending by date."""
        stmt = (
            select(SolarRecord)
            .where(
                SolarRecord.location == location_key,
                SolarRecord.date >= start,
                SolarRecord.date <= end,
            )
            .order_by(SolarRecord.date)
        )
        with self.session_scope() as session:
            return list(session.scalars(stmt).all())

    # -- writes ----------------------------------------------------------------

    def insert(self, record: SolarRecord) -> SolarRecord:
        """Persist a new record.

        Raises:
            ValidationError: If the record fails :func:`validate_record`.
            DuplicateKeyError: If (location, date) is already stored.
        """
        validate_record(record)
        try:
            with self.session_scope() as session:
                session.add(record)
        except IntegrityError:
            if self.exists_for_date(record.location, record.date):
                raise DuplicateKeyError(record.location, record.date) from None
            raise
        logger.debug("Stored %r", record)
        return record
