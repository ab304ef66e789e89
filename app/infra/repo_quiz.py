import sqlite3
from dataclasses import dataclass

from app.infra.db import utc_now_iso


@dataclass(frozen=True)
class QuizOption:
    id: int
    question_id: int
    option_id: str
    text: str
    alignment: str


@dataclass(frozen=True)
class QuizQuestion:
    id: int
    question: str
    position: int
    options: list[QuizOption]
    created_at: str


@dataclass(frozen=True)
class QuizResult:
    id: int
    participant: str
    result_progressive: int
    result_moderate: int
    result_conservative: int
    answered: int
    completed_at: str


class QuizRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create_question(
        self, question: str, options: list[tuple[str, str, str]], position: int | None = None
    ) -> QuizQuestion:
        if position is None:
            row = self._conn.execute("SELECT COALESCE(MAX(position), 0) FROM quiz_questions").fetchone()
            position = int(row[0]) + 1
        now = utc_now_iso()
        cur = self._conn.execute(
            "INSERT INTO quiz_questions(question, position, created_at) VALUES(?, ?, ?)",
            (question, position, now),
        )
        if cur.lastrowid is None:
            self._conn.rollback()
            raise RuntimeError("Failed to create quiz question: missing lastrowid")
        question_id = int(cur.lastrowid)
        self._insert_options(question_id, options, now)
        self._conn.commit()
        return self.get_question(question_id)

    def update_question(
        self, question_id: int, question: str, options: list[tuple[str, str, str]], position: int | None = None
    ) -> QuizQuestion:
        current = self.get_question(question_id)
        self._conn.execute(
            "UPDATE quiz_questions SET question = ?, position = ? WHERE id = ?",
            (question, current.position if position is None else position, question_id),
        )
        self._conn.execute("DELETE FROM quiz_options WHERE question_id = ?", (question_id,))
        self._insert_options(question_id, options, utc_now_iso())
        self._conn.commit()
        return self.get_question(question_id)

    def delete_question(self, question_id: int) -> None:
        cur = self._conn.execute("DELETE FROM quiz_questions WHERE id = ?", (question_id,))
        self._conn.commit()
        if cur.rowcount == 0:
            raise KeyError(f"Quiz question not found: {question_id}")

    def get_question(self, question_id: int) -> QuizQuestion:
        row = self._conn.execute("SELECT * FROM quiz_questions WHERE id = ?", (question_id,)).fetchone()
        if row is None:
            raise KeyError(f"Quiz question not found: {question_id}")
        return QuizQuestion(
            id=int(row["id"]),
            question=str(row["question"]),
            position=int(row["position"]),
            options=self._options_for(question_id),
            created_at=str(row["created_at"]),
        )

    def list_questions(self) -> list[QuizQuestion]:
        rows = self._conn.execute(
            "SELECT * FROM quiz_questions ORDER BY position ASC, id ASC"
        ).fetchall()
        return [
            QuizQuestion(
                id=int(r["id"]),
                question=str(r["question"]),
                position=int(r["position"]),
                options=self._options_for(int(r["id"])),
                created_at=str(r["created_at"]),
            )
            for r in rows
        ]

    def count_questions(self) -> int:
        return int(self._conn.execute("SELECT COUNT(*) FROM quiz_questions").fetchone()[0])

    def find_option(self, question_id: int, option_id: str) -> QuizOption | None:
        row = self._conn.execute(
            "SELECT * FROM quiz_options WHERE question_id = ? AND option_id = ?",
            (question_id, option_id),
        ).fetchone()
        return _option(row) if row else None

    def record_result(
        self, participant: str, progressive: int, moderate: int, conservative: int, answered: int
    ) -> QuizResult:
        cur = self._conn.execute(
            """
            INSERT INTO quiz_results(
              participant, result_progressive, result_moderate, result_conservative, answered, completed_at
            )
            VALUES(?, ?, ?, ?, ?, ?)
            """,
            (participant, progressive, moderate, conservative, answered, utc_now_iso()),
        )
        self._conn.commit()
        if cur.lastrowid is None:
            raise RuntimeError("Failed to record quiz result: missing lastrowid")
        row = self._conn.execute("SELECT * FROM quiz_results WHERE id = ?", (int(cur.lastrowid),)).fetchone()
        return QuizResult(
            id=int(row["id"]),
            participant=str(row["participant"]),
            result_progressive=int(row["result_progressive"]),
            result_moderate=int(row["result_moderate"]),
            result_conservative=int(row["result_conservative"]),
            answered=int(row["answered"]),
            completed_at=str(row["completed_at"]),
        )

    def _options_for(self, question_id: int) -> list[QuizOption]:
        rows = self._conn.execute(
            "SELECT * FROM quiz_options WHERE question_id = ? ORDER BY option_id ASC",
            (question_id,),
        ).fetchall()
        return [_option(r) for r in rows]

    def _insert_options(self, question_id: int, options: list[tuple[str, str, str]], now: str) -> None:
        self._conn.executemany(
            """
            INSERT INTO quiz_options(question_id, option_id, text, alignment, created_at)
            VALUES(?, ?, ?, ?, ?)
            """,
            [(question_id, option_id, text, alignment, now) for option_id, text, alignment in options],
        )


def _option(row: sqlite3.Row) -> QuizOption:
    return QuizOption(
        id=int(row["id"]),
        question_id=int(row["question_id"]),
        option_id=str(row["option_id"]),
        text=str(row["text"]),
        alignment=str(row["alignment"]),
    )
