import sqlite3
from dataclasses import dataclass

from app.infra.db import utc_now_iso


@dataclass(frozen=True)
class CandidateRecord:
    id: int
    name: str
    party: str
    alignment: str
    bio: str | None
    image_url: str | None
    created_at: str


@dataclass(frozen=True)
class CandidatePolicy:
    id: int
    candidate_id: int
    topic: str
    stance: str
    proposal: str | None
    created_at: str


def _candidate(row: sqlite3.Row) -> CandidateRecord:
    return CandidateRecord(
        id=int(row["id"]),
        name=str(row["name"]),
        party=str(row["party"]),
        alignment=str(row["alignment"]),
        bio=row["bio"],
        image_url=row["image_url"],
        created_at=str(row["created_at"]),
    )


def _policy(row: sqlite3.Row) -> CandidatePolicy:
    return CandidatePolicy(
        id=int(row["id"]),
        candidate_id=int(row["candidate_id"]),
        topic=str(row["topic"]),
        stance=str(row["stance"]),
        proposal=row["proposal"],
        created_at=str(row["created_at"]),
    )


class CandidateRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(
        self,
        name: str,
        party: str,
        alignment: str,
        bio: str | None = None,
        image_url: str | None = None,
    ) -> CandidateRecord:
        cur = self._conn.execute(
            """
            INSERT INTO candidates(name, party, alignment, bio, image_url, created_at)
            VALUES(?, ?, ?, ?, ?, ?)
            """,
            (name, party, alignment, bio, image_url, utc_now_iso()),
        )
        self._conn.commit()
        if cur.lastrowid is None:
            raise RuntimeError("Failed to create candidate: missing lastrowid")
        return self.get(int(cur.lastrowid))

    def get(self, candidate_id: int) -> CandidateRecord:
        row = self._conn.execute("SELECT * FROM candidates WHERE id = ?", (candidate_id,)).fetchone()
        if row is None:
            raise KeyError(f"Candidate not found: {candidate_id}")
        return _candidate(row)

    def list(self) -> list[CandidateRecord]:
        rows = self._conn.execute("SELECT * FROM candidates ORDER BY id ASC").fetchall()
        return [_candidate(r) for r in rows]

    def count(self) -> int:
        return int(self._conn.execute("SELECT COUNT(*) FROM candidates").fetchone()[0])

    def update(
        self,
        candidate_id: int,
        name: str,
        party: str,
        alignment: str,
        bio: str | None,
        image_url: str | None,
    ) -> CandidateRecord:
        cur = self._conn.execute(
            """
            UPDATE candidates
            SET name = ?, party = ?, alignment = ?, bio = ?, image_url = ?
            WHERE id = ?
            """,
            (name, party, alignment, bio, image_url, candidate_id),
        )
        self._conn.commit()
        if cur.rowcount == 0:
            raise KeyError(f"Candidate not found: {candidate_id}")
        return self.get(candidate_id)

    def delete(self, candidate_id: int) -> None:
        cur = self._conn.execute("DELETE FROM candidates WHERE id = ?", (candidate_id,))
        self._conn.commit()
        if cur.rowcount == 0:
            raise KeyError(f"Candidate not found: {candidate_id}")


class PolicyRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def list_for_candidate(self, candidate_id: int) -> list[CandidatePolicy]:
        rows = self._conn.execute(
            "SELECT * FROM candidate_policies WHERE candidate_id = ? ORDER BY id ASC",
            (candidate_id,),
        ).fetchall()
        return [_policy(r) for r in rows]

    def replace_for_candidate(
        self, candidate_id: int, policies: list[tuple[str, str, str | None]]
    ) -> list[CandidatePolicy]:
        self._conn.execute("DELETE FROM candidate_policies WHERE candidate_id = ?", (candidate_id,))
        now = utc_now_iso()
        self._conn.executemany(
            """
            INSERT INTO candidate_policies(candidate_id, topic, stance, proposal, created_at)
            VALUES(?, ?, ?, ?, ?)
            """,
            [(candidate_id, topic, stance, proposal, now) for topic, stance, proposal in policies],
        )
        self._conn.commit()
        return self.list_for_candidate(candidate_id)
