import sqlite3

from app.infra.logger import get_logger
from app.infra.repo_candidates import CandidateRepo
from app.infra.repo_quiz import QuizRepo

log = get_logger(__name__)

DEFAULT_QUESTIONS: list[tuple[str, list[tuple[str, str, str]]]] = [
    (
        "How should healthcare be managed?",
        [
            ("a", "Universal public healthcare system for all citizens", "progressive"),
            ("b", "Mix of public and private healthcare options", "moderate"),
            ("c", "Primarily market-based healthcare with minimal government involvement", "conservative"),
        ],
    ),
    (
        "What approach to taxation do you prefer?",
        [
            ("a", "Progressive taxation with higher rates for wealthy individuals", "progressive"),
            ("b", "Moderate tax rates with targeted incentives", "moderate"),
            ("c", "Lower tax rates across the board to stimulate economic growth", "conservative"),
        ],
    ),
    (
        "How should environmental issues be addressed?",
        [
            ("a", "Aggressive regulations and investment in renewable energy", "progressive"),
            ("b", "Balanced approach with moderate regulations and market incentives", "moderate"),
            ("c", "Market-driven solutions with minimal government intervention", "conservative"),
        ],
    ),
    (
        "What is your position on education funding?",
        [
            ("a", "Significantly increase public education funding and make college free", "progressive"),
            ("b", "Moderate increases in education funding with some subsidies for higher education", "moderate"),
            ("c", "Focus on private education options and school choice", "conservative"),
        ],
    ),
    (
        "What immigration policies do you support?",
        [
            ("a", "Welcoming immigration policies with paths to citizenship", "progressive"),
            ("b", "Balanced approach to legal immigration with moderate enforcement", "moderate"),
            ("c", "Strict immigration enforcement and border security", "conservative"),
        ],
    ),
]

DEFAULT_CANDIDATES: list[tuple[str, str, str]] = [
    ("Alexandra Johnson", "Progressive Party", "progressive"),
    ("Michael Reynolds", "Conservative Alliance", "conservative"),
    ("Sophia Rodriguez", "Centrist Coalition", "moderate"),
]


def seed_defaults(conn: sqlite3.Connection) -> None:
    """Populate the quiz and the candidate roster on an empty database."""

    quiz = QuizRepo(conn)
    if quiz.count_questions() == 0:
        for position, (question, options) in enumerate(DEFAULT_QUESTIONS, start=1):
            quiz.create_question(question, options, position=position)
        log.info("seeded %d quiz questions", len(DEFAULT_QUESTIONS))

    candidates = CandidateRepo(conn)
    if candidates.count() == 0:
        for name, party, alignment in DEFAULT_CANDIDATES:
            candidates.create(name=name, party=party, alignment=alignment)
        log.info("seeded %d candidates", len(DEFAULT_CANDIDATES))
