"""Multiple-choice chemistry quizzes and storage of their results."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Optional, Sequence, Union

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_GRADE = 10

Answer = Optional[int]


@dataclass(frozen=True)
class Question:
    """A question with its possible answers and the index of the right one."""

    text: str
    choices: tuple[str, ...]
    correct: int

    def __post_init__(self) -> None:
        if not 0 <= self.correct < len(self.choices):
            raise ValueError("the correct answer must be one of the choices")

    @property
    def correct_choice(self) -> str:
        """The text of the correct answer."""
        return self.choices[self.correct]

    def is_correct(self, choice: Answer) -> bool:
        """Return True if ``choice`` is the index of the correct answer."""
        return choice == self.correct


@dataclass(frozen=True)
class Quiz:
    """A named set of questions, each answered by picking one choice."""

    name: str
    title: str
    questions: tuple[Question, ...]

    def __len__(self) -> int:
        return len(self.questions)

    def _check(self, answers: Sequence[Answer]) -> None:
        if len(answers) != len(self.questions):
            raise ValueError(
                f"expected {len(self.questions)} answers, got {len(answers)}"
            )
        for question, answer in zip(self.questions, answers):
            if answer is not None and not 0 <= answer < len(question.choices):
                raise ValueError(f"answer {answer} is not a choice of {question.text!r}")

    def score(self, answers: Sequence[Answer]) -> int:
        """Count the correct answers; ``None`` marks an unanswered question."""
        self._check(answers)
        return sum(q.is_correct(a) for q, a in zip(self.questions, answers))

    def grade(self, answers: Sequence[Answer]) -> int:
        """Return the grade on a scale up to ten, rounded down."""
        return self.score(answers) * MAX_GRADE // len(self.questions)


@dataclass(frozen=True)
class QuizResult:
    """A stored grade obtained by a user on a quiz."""

    user: str
    grade: int
    test: str
    timestamp: str


def _question(text: str, choices: Sequence[str], correct: int) -> Question:
    return Question(text, tuple(choices), correct)


_QUIZZES: dict[str, Quiz] = {
    quiz.name: quiz
    for quiz in (
        Quiz(
            "Test1",
            "Test de Chimie - Clasa a 7-a",
            (
                _question("1. Care este simbolul chimic al oxigenului?",
                          ["O", "Ox", "Og", "Om"], 0),
                _question("2. Ce stare de agregare are apa la temperatura camerei?",
                          ["Solid", "Lichid", "Gazos", "Plasmă"], 1),
                _question("3. Cum se numește schimbarea stării de la solid la lichid?",
                          ["Evaporare", "Condensare", "Topire", "Sublimare"], 2),
                _question("4. Care dintre următoarele este un metal alcalin?",
                          ["Calciu", "Litiu", "Fier", "Carbon"], 1),
                _question("5. Care este formula chimică a apei?",
                          ["H2O", "O2", "H2", "CO2"], 0),
            ),
        ),
        Quiz(
            "Test2",
            "Test de Chimie - Partea 2",
            (
                _question("1. Care este simbolul chimic al hidrogenului?",
                          ["H", "Hy", "He", "Ho"], 0),
                _question("2. Ce stare de agregare are aurul la temperatura camerei?",
                          ["Solid", "Lichid", "Gazos", "Plasmă"], 0),
                _question("3. Ce element chimic are simbolul 'Na'?",
                          ["Azot", "Natriu", "Neon", "Fosfor"], 1),
                _question("4. Care este formula chimică a dioxidului de carbon?",
                          ["CO2", "O2", "H2O", "CH4"], 0),
                _question("5. Ce gaz este esențial pentru respirație?",
                          ["Oxigen", "Azot", "Hidrogen", "Argon"], 0),
            ),
        ),
    )
}


def quiz_names() -> list[str]:
    """Return the names of the available quizzes."""
    return list(_QUIZZES)


def get_quiz(name: str) -> Quiz:
    """Return the quiz called ``name``; raise KeyError if there is none."""
    try:
        return _QUIZZES[name]
    except KeyError:
        raise KeyError(f"unknown quiz: {name}") from None


class ResultStore:
    """Quiz results kept in an SQLite database."""

    def __init__(self, path: Union[str, PathLike[str]] = ":memory:") -> None:
        self._connection = sqlite3.connect(str(path) if isinstance(path, PathLike) else path)
        with self._connection:
            self._connection.execute(
                "CREATE TABLE IF NOT EXISTS rezultate_teste ("
                "user TEXT NOT NULL, nota INTEGER NOT NULL, "
                "data TEXT NOT NULL, test TEXT NOT NULL)"
            )

    def record(
        self,
        user: str,
        grade: int,
        test: str,
        timestamp: Union[datetime, str, None] = None,
    ) -> QuizResult:
        """Store a grade; the timestamp defaults to the current local time."""
        if timestamp is None:
            timestamp = datetime.now()
        if isinstance(timestamp, datetime):
            timestamp = timestamp.strftime(TIMESTAMP_FORMAT)
        result = QuizResult(user, int(grade), test, timestamp)
        with self._connection:
            self._connection.execute(
                "INSERT INTO rezultate_teste (user, nota, data, test) VALUES (?, ?, ?, ?)",
                (result.user, result.grade, result.timestamp, result.test),
            )
        return result

    def results(self, user: Optional[str] = None) -> list[QuizResult]:
        """Return stored results in the order recorded, optionally for one user."""
        query = "SELECT user, nota, data, test FROM rezultate_teste"
        params: tuple[str, ...] = ()
        if user is not None:
            query += " WHERE user = ?"
            params = (user,)
        query += " ORDER BY rowid"
        return [
            QuizResult(row_user, grade, test, stamp)
            for row_user, grade, stamp, test in self._connection.execute(query, params)
        ]

    def close(self) -> None:
        """Close the database connection."""
        self._connection.close()

    def __enter__(self) -> "ResultStore":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()