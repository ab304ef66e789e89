import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path


@dataclass(frozen=True)
class DbConfig:
    path: Path


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def connect(cfg: DbConfig) -> sqlite3.Connection:
    cfg.path.parent.mkdir(parents=True, exist_ok=True)
    # Single shared connection across the FastAPI threadpool.
    conn = sqlite3.connect(cfg.path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def migrate(conn: sqlite3.Connection) -> None:
    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS candidates (
          id INTEGER PRIMARY KEY,
          name TEXT NOT NULL,
          party TEXT NOT NULL,
          alignment TEXT NOT NULL,
          bio TEXT,
          image_url TEXT,
          created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS candidate_policies (
          id INTEGER PRIMARY KEY,
          candidate_id INTEGER NOT NULL,
          topic TEXT NOT NULL,
          stance TEXT NOT NULL,
          proposal TEXT,
          created_at TEXT NOT NULL,
          FOREIGN KEY (candidate_id) REFERENCES candidates(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS electoral_plans (
          id INTEGER PRIMARY KEY,
          candidate_name TEXT NOT NULL,
          party TEXT NOT NULL,
          summary TEXT,
          topics_json TEXT,
          proposals TEXT,
          original_pdf TEXT,
          had_failures INTEGER NOT NULL DEFAULT 0,
          created_at TEXT NOT NULL,
          updated_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS quiz_questions (
          id INTEGER PRIMARY KEY,
          question TEXT NOT NULL,
          position INTEGER NOT NULL,
          created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS quiz_options (
          id INTEGER PRIMARY KEY,
          question_id INTEGER NOT NULL,
          option_id TEXT NOT NULL,
          text TEXT NOT NULL,
          alignment TEXT NOT NULL,
          created_at TEXT NOT NULL,
          FOREIGN KEY (question_id) REFERENCES quiz_questions(id) ON DELETE CASCADE,
          UNIQUE(question_id, option_id)
        );

        CREATE TABLE IF NOT EXISTS quiz_results (
          id INTEGER PRIMARY KEY,
          participant TEXT NOT NULL,
          result_progressive INTEGER NOT NULL,
          result_moderate INTEGER NOT NULL,
          result_conservative INTEGER NOT NULL,
          answered INTEGER NOT NULL,
          completed_at TEXT NOT NULL
        );
        """
    )
    conn.commit()
