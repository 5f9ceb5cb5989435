# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Attendee data access layer — pure CRUD, no business rules.

``attendance`` is stored as a JSON array, sorted and de-duplicated, so an
empty set is always the literal ``[]``.
"""

import json
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from registration_api.core.logging import get_logger
from registration_api.models.domain import Attendee

logger = get_logger(__name__)

ATTENDEE_COLS = (
    "id, first_name, last_name, phone, email, address, year, attendance, unsubscribed"
)


def _row_to_attendee(row) -> Attendee:
    return Attendee(
        id=str(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        phone=row["phone"],
        email=row["email"],
        address=row["address"],
        year=int(row["year"]),
        attendance=json.loads(row["attendance"] or "[]"),
        unsubscribed=bool(row["unsubscribed"]),
    )


def _dump_attendance(attendance: List[int]) -> str:
    return json.dumps(sorted(set(attendance)))


class AttendeeRepository:
    """Handles all direct database operations for attendees."""

    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Schema ──

    def init_schema(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(text("""
                CREATE TABLE IF NOT EXISTS attendees (
                    id           VARCHAR(36)  PRIMARY KEY,
                    first_name   TEXT,
                    last_name    TEXT,
                    phone        TEXT,
                    email        VARCHAR(320) NOT NULL UNIQUE,
                    address      TEXT,
                    year         INTEGER      NOT NULL,
                    attendance   TEXT         NOT NULL,
                    unsubscribed BOOLEAN      NOT NULL
                )
            """))
            conn.execute(text(
                "CREATE INDEX IF NOT EXISTS ix_attendees_email_year ON attendees (email, year)"
            ))
            conn.execute(text(
                "CREATE INDEX IF NOT EXISTS ix_attendees_year ON attendees (year)"
            ))
        logger.info("Attendee schema ensured")

    # ── Read ──

    def _fetch_one(self, where: str, params: Dict[str, Any]) -> Optional[Attendee]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {ATTENDEE_COLS} FROM attendees WHERE {where} LIMIT 1"),
                params,
            ).mappings().first()
        return _row_to_attendee(row) if row else None

    def _fetch_many(self, where: str, params: Dict[str, Any]) -> List[Attendee]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(f"SELECT {ATTENDEE_COLS} FROM attendees WHERE {where} ORDER BY last_name, first_name, email"),
                params,
            ).mappings().all()
        return [_row_to_attendee(r) for r in rows]

    def find_by_email(self, email: str) -> Optional[Attendee]:
        return self._fetch_one("email = :email", {"email": email})

    def find_by_email_and_year(self, email: str, year: int) -> Optional[Attendee]:
        return self._fetch_one("email = :email AND year = :year", {"email": email, "year": year})

    def find_by_id(self, attendee_id: str) -> Optional[Attendee]:
        return self._fetch_one("id = :id", {"id": attendee_id})

    def list_by_year(self, year: int) -> List[Attendee]:
        return self._fetch_many("year = :year", {"year": year})

    def list_by_session(self, session: int, year: int) -> List[Attendee]:
        # JSON containment is dialect-specific; filter the year's rows here.
        return [a for a in self.list_by_year(year) if a.has_attended(session)]

    def list_without_attendance(self, year: int) -> List[Attendee]:
        return self._fetch_many("year = :year AND attendance = '[]'", {"year": year})

    def list_subscribed(self) -> List[Attendee]:
        return self._fetch_many("unsubscribed = :flag", {"flag": False})

    def count_all(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM attendees")).scalar() or 0

    def verify_connection(self) -> int:
        return self.count_all()

    # ── Write ──

    def create(self, attendee: Attendee) -> Attendee:
        """Insert a new attendee. Raises ``IntegrityError`` on a duplicate email."""
        with self._engine.begin() as conn:
            conn.execute(
                text(f"""
                    INSERT INTO attendees ({ATTENDEE_COLS})
                    VALUES (:id, :first_name, :last_name, :phone, :email, :address,
                            :year, :attendance, :unsubscribed)
                """),
                {
                    "id": attendee.id,
                    "first_name": attendee.first_name,
                    "last_name": attendee.last_name,
                    "phone": attendee.phone,
                    "email": attendee.email,
                    "address": attendee.address,
                    "year": attendee.year,
                    "attendance": _dump_attendance(attendee.attendance),
                    "unsubscribed": attendee.unsubscribed,
                },
            )
        return attendee

    def update_attendance(self, attendee_id: str, previous: List[int], updated: List[int]) -> bool:
        """Compare-and-set the attendance set.

        Writes only if the stored set still equals ``previous``. Returns
        False when another writer changed it first.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                text("""
                    UPDATE attendees
                    SET attendance = :updated
                    WHERE id = :id AND attendance = :previous
                """),
                {
                    "id": attendee_id,
                    "previous": _dump_attendance(previous),
                    "updated": _dump_attendance(updated),
                },
            )
        return result.rowcount == 1

    def mark_unsubscribed(self, attendee_id: str) -> bool:
        with self._engine.begin() as conn:
            result = conn.execute(
                text("UPDATE attendees SET unsubscribed = :flag WHERE id = :id"),
                {"id": attendee_id, "flag": True},
            )
        return result.rowcount == 1

    def dispose(self) -> None:
        self._engine.dispose()
