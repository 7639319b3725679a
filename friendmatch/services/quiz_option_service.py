"""Quiz option service - loads the quiz vocabulary from YAML and checks submissions against it.

Vocabulary rules are enforced here, at submission time only. The compatibility
engine never validates tags: a stored record with unknown tags still scores.
"""

from pathlib import Path

import yaml

from friendmatch.exceptions import InvalidQuizAnswerError
from friendmatch.schemas.quiz import QuizQuestion, QuizSubmit

DATA_FILE = Path(__file__).parent.parent / "data" / "quiz_options.yaml"


class QuizOptionService:
    def __init__(self, data_file: Path = DATA_FILE):
        self.data_file = data_file
        self._cache: dict[str, QuizQuestion] | None = None

    def load_questions(self) -> dict[str, QuizQuestion]:
        """Load all quiz questions keyed by id, in display order."""
        if self._cache is not None:
            return self._cache

        if not self.data_file.exists():
            raise FileNotFoundError(f"Quiz options file not found: {self.data_file}")

        with open(self.data_file, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        self._cache = {q["id"]: QuizQuestion(**q) for q in raw.get("questions", [])}
        return self._cache

    def list_questions(self) -> list[QuizQuestion]:
        return list(self.load_questions().values())

    def get_question(self, question_id: str) -> QuizQuestion | None:
        """Look up one question. Returns None if not found."""
        return self.load_questions().get(question_id)

    def allowed_values(self, question_id: str) -> set[str]:
        question = self.get_question(question_id)
        if question is None:
            return set()
        return {opt.value for opt in question.options}

    def validate(self, submission: QuizSubmit) -> None:
        """Raise InvalidQuizAnswerError listing every problem in a submission."""
        problems: list[str] = []

        for question in self.load_questions().values():
            allowed = {opt.value for opt in question.options}

            if question.kind == "multi":
                chosen = getattr(submission, question.id)
                unknown = [v for v in chosen if v not in allowed]
                if unknown:
                    problems.append(f"{question.id}: unknown option(s) {', '.join(unknown)}")
                count = len(set(chosen))
                if count < question.min_choices:
                    problems.append(f"{question.id}: pick at least {question.min_choices}")
                if question.max_choices is not None and count > question.max_choices:
                    problems.append(f"{question.id}: pick at most {question.max_choices}")

            elif question.kind == "single":
                chosen = getattr(submission, question.id)
                if chosen not in allowed:
                    problems.append(f"{question.id}: unknown option {chosen!r}")

            elif question.kind == "availability":
                preset = submission.availability.preset
                if preset and preset not in allowed:
                    problems.append(f"availability: unknown preset {preset!r}")

        if problems:
            raise InvalidQuizAnswerError(problems)


quiz_option_service = QuizOptionService()
