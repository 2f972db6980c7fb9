"""Chemistry helpers for school lessons: reaction balancing, solution problems, element facts and quizzes."""

__version__ = "0.1.0"

__all__ = ["balance", "cli", "elements", "formula", "problems", "quiz"]