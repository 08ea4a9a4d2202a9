"""
SQL Repository - users, jobs and applications in relational tables.

Hybrid schema: the columns needed for lookups (email, role, job/user ids,
status, posted date) are real columns, the rest of each record is kept as
JSON text in a `data` column so new profile fields need no migration.
"""

import json
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from hiresense.db.postgres import make_session_factory, session_scope, test_postgres_connection
from hiresense.services.repository import Repository


SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        email TEXT UNIQUE NOT NULL,
        password TEXT NOT NULL,
        role TEXT NOT NULL,
        data TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS jobs (
        id TEXT PRIMARY KEY,
        posted_date TEXT NOT NULL,
        data TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS applications (
        id TEXT PRIMARY KEY,
        job_id TEXT NOT NULL,
        user_id TEXT NOT NULL,
        status TEXT NOT NULL,
        data TEXT NOT NULL
    )
    """,
]

_USER_COLUMNS = ("id", "email", "password", "role")


def _user_from_row(row) -> dict:
    user_id, email, password, role, data = row
    return {**json.loads(data), "id": user_id, "email": email, "password": password, "role": role}


def _split_user(user: dict) -> dict:
    data = {k: v for k, v in user.items() if k not in _USER_COLUMNS}
    return {
        "id": user["id"],
        "email": user["email"],
        "password": user.get("password", ""),
        "role": user["role"],
        "data": json.dumps(data)
    }


class SqlRepository(Repository):

    name = "postgres"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)
        if engine.dialect.name != "postgresql":
            self.name = engine.dialect.name

    def init(self) -> None:
        with session_scope(self.session_factory) as db:
            for statement in SCHEMA:
                db.execute(text(statement))

    def ping(self) -> bool:
        return test_postgres_connection(self.engine)

    def _fetch_all(self, sql: str, params: dict = None) -> list:
        with session_scope(self.session_factory) as db:
            return db.execute(text(sql), params or {}).fetchall()

    # ============================================================
    # USERS
    # ============================================================

    def get_user_by_email(self, email: str) -> Optional[dict]:
        rows = self._fetch_all(
            "SELECT id, email, password, role, data FROM users WHERE LOWER(email) = LOWER(:email)",
            {"email": email}
        )
        return _user_from_row(rows[0]) if rows else None

    def get_user(self, user_id: str) -> Optional[dict]:
        rows = self._fetch_all(
            "SELECT id, email, password, role, data FROM users WHERE id = :id",
            {"id": user_id}
        )
        return _user_from_row(rows[0]) if rows else None

    def list_users(self) -> List[dict]:
        rows = self._fetch_all("SELECT id, email, password, role, data FROM users ORDER BY id")
        return [_user_from_row(r) for r in rows]

    def create_user(self, user: dict) -> dict:
        with session_scope(self.session_factory) as db:
            db.execute(
                text("""
                    INSERT INTO users (id, email, password, role, data)
                    VALUES (:id, :email, :password, :role, :data)
                """),
                _split_user(user)
            )
        return user

    def update_user(self, user_id: str, updates: dict) -> Optional[dict]:
        with session_scope(self.session_factory) as db:
            row = db.execute(
                text("SELECT id, email, password, role, data FROM users WHERE id = :id"),
                {"id": user_id}
            ).fetchone()
            if not row:
                return None

            merged = {**_user_from_row(row), **updates, "id": user_id}
            db.execute(
                text("""
                    UPDATE users SET email = :email, password = :password, role = :role, data = :data
                    WHERE id = :id
                """),
                _split_user(merged)
            )
        return merged

    # ============================================================
    # JOBS
    # ============================================================

    def list_jobs(self) -> List[dict]:
        rows = self._fetch_all("SELECT data FROM jobs ORDER BY posted_date DESC")
        return [json.loads(r[0]) for r in rows]

    def get_job(self, job_id: str) -> Optional[dict]:
        rows = self._fetch_all("SELECT data FROM jobs WHERE id = :id", {"id": job_id})
        return json.loads(rows[0][0]) if rows else None

    def create_job(self, job: dict) -> dict:
        with session_scope(self.session_factory) as db:
            db.execute(
                text("INSERT INTO jobs (id, posted_date, data) VALUES (:id, :posted_date, :data)"),
                {"id": job["id"], "posted_date": job["postedDate"], "data": json.dumps(job)}
            )
        return job

    def count_jobs(self) -> int:
        with session_scope(self.session_factory) as db:
            return db.execute(text("SELECT COUNT(*) FROM jobs")).scalar()

    # ============================================================
    # APPLICATIONS
    # ============================================================

    def list_applications(self) -> List[dict]:
        rows = self._fetch_all("SELECT status, data FROM applications ORDER BY id")
        return [{**json.loads(data), "status": status} for status, data in rows]

    def create_application(self, application: dict) -> dict:
        with session_scope(self.session_factory) as db:
            db.execute(
                text("""
                    INSERT INTO applications (id, job_id, user_id, status, data)
                    VALUES (:id, :job_id, :user_id, :status, :data)
                """),
                {
                    "id": application["id"],
                    "job_id": application["jobId"],
                    "user_id": application["userId"],
                    "status": application["status"],
                    "data": json.dumps(application)
                }
            )
        return application

    def update_application_status(self, application_id: str, status: str) -> Optional[dict]:
        with session_scope(self.session_factory) as db:
            row = db.execute(
                text("SELECT data FROM applications WHERE id = :id"),
                {"id": application_id}
            ).fetchone()
            if not row:
                return None

            application = {**json.loads(row[0]), "status": status}
            db.execute(
                text("UPDATE applications SET status = :status, data = :data WHERE id = :id"),
                {"id": application_id, "status": status, "data": json.dumps(application)}
            )
        return application
