from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass

from app.infra.db import utc_now_iso


@dataclass(frozen=True)
class ElectoralPlan:
    id: int
    candidate_name: str
    party: str
    summary: str | None
    topics: list[str]
    proposals: str | None
    original_pdf: str | None
    had_failures: bool
    created_at: str
    updated_at: str


def _plan(row: sqlite3.Row) -> ElectoralPlan:
    topics_json = row["topics_json"]
    return ElectoralPlan(
        id=int(row["id"]),
        candidate_name=str(row["candidate_name"]),
        party=str(row["party"]),
        summary=row["summary"],
        topics=list(json.loads(topics_json)) if topics_json else [],
        proposals=row["proposals"],
        original_pdf=row["original_pdf"],
        had_failures=bool(row["had_failures"]),
        created_at=str(row["created_at"]),
        updated_at=str(row["updated_at"]),
    )


class PlanRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(
        self,
        candidate_name: str,
        party: str,
        summary: str | None,
        topics: list[str],
        proposals: str | None,
        original_pdf: str | None = None,
        had_failures: bool = False,
    ) -> ElectoralPlan:
        now = utc_now_iso()
        cur = self._conn.execute(
            """
            INSERT INTO electoral_plans(
              candidate_name, party, summary, topics_json, proposals,
              original_pdf, had_failures, created_at, updated_at
            )
            VALUES(?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                candidate_name,
                party,
                summary,
                json.dumps(topics, ensure_ascii=False),
                proposals,
                original_pdf,
                1 if had_failures else 0,
                now,
                now,
            ),
        )
        self._conn.commit()
        if cur.lastrowid is None:
            raise RuntimeError("Failed to create electoral plan: missing lastrowid")
        return self.get(int(cur.lastrowid))

    def get(self, plan_id: int) -> ElectoralPlan:
        row = self._conn.execute("SELECT * FROM electoral_plans WHERE id = ?", (plan_id,)).fetchone()
        if row is None:
            raise KeyError(f"Electoral plan not found: {plan_id}")
        return _plan(row)

    def list(self, candidate_name: str | None = None) -> list[ElectoralPlan]:
        if candidate_name is None:
            rows = self._conn.execute(
                "SELECT * FROM electoral_plans ORDER BY id DESC"
            ).fetchall()
        else:
            rows = self._conn.execute(
                "SELECT * FROM electoral_plans WHERE candidate_name = ? ORDER BY id DESC",
                (candidate_name,),
            ).fetchall()
        return [_plan(r) for r in rows]

    def latest_for_candidate(self, candidate_name: str) -> ElectoralPlan | None:
        plans = self.list(candidate_name=candidate_name)
        return plans[0] if plans else None

    def update(
        self,
        plan_id: int,
        candidate_name: str,
        party: str,
        summary: str | None,
        topics: list[str],
        proposals: str | None,
    ) -> ElectoralPlan:
        cur = self._conn.execute(
            """
            UPDATE electoral_plans
            SET candidate_name = ?, party = ?, summary = ?, topics_json = ?, proposals = ?, updated_at = ?
            WHERE id = ?
            """,
            (
                candidate_name,
                party,
                summary,
                json.dumps(topics, ensure_ascii=False),
                proposals,
                utc_now_iso(),
                plan_id,
            ),
        )
        self._conn.commit()
        if cur.rowcount == 0:
            raise KeyError(f"Electoral plan not found: {plan_id}")
        return self.get(plan_id)

    def delete(self, plan_id: int) -> None:
        cur = self._conn.execute("DELETE FROM electoral_plans WHERE id = ?", (plan_id,))
        self._conn.commit()
        if cur.rowcount == 0:
            raise KeyError(f"Electoral plan not found: {plan_id}")
