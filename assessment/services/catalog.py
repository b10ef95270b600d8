"""
The fixed question catalog and answer validation.

The catalog is read-only configuration shared by every caller. Raw score bounds
are derived from the questions, so they stay consistent if the catalog changes.
"""

from collections.abc import Sequence

from assessment.domain.errors import AnswerValidationError
from assessment.domain.models import AnswerOption, Question, QuestionKind
from assessment.domain.result import Result


DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        id=1,
        prompt="When you feel stress in your body, does it feel like excitement or like tension?",
        kind=QuestionKind.SLIDER,
        min_value=1,
        max_value=10,
        scale_labels=("Tension / anxiety / blocking", "Energy / focus / activation"),
    ),
    Question(
        id=2,
        prompt="Under a deadline, stress feels to you more like…",
        kind=QuestionKind.BINARY_CHOICE,
        options=(
            AnswerOption(value="A", label="It helps me focus", score=2),
            AnswerOption(value="B", label="It makes it harder", score=0),
        ),
    ),
    Question(
        id=3,
        prompt=(
            "When stress shows up, is your first thought usually "
            "“I can handle this” or “this is too much”?"
        ),
        kind=QuestionKind.BINARY_CHOICE,
        options=(
            AnswerOption(value="A", label="I can handle this", score=2),
            AnswerOption(value="B", label="This is too much", score=0),
        ),
    ),
    Question(
        id=4,
        prompt="Stress usually makes me feel…",
        kind=QuestionKind.MULTI_CHOICE,
        options=(
            AnswerOption(value="A", label="Active / alert", score=2),
            AnswerOption(value="B", label="Creative", score=1),
            AnswerOption(value="C", label="Insecure", score=0),
            AnswerOption(value="D", label="Drained / tired", score=0),
        ),
    ),
    Question(
        id=5,
        prompt="How fast do you usually recover after a stressful moment?",
        kind=QuestionKind.SLIDER,
        min_value=1,
        max_value=10,
        scale_labels=("Takes days", "Within one hour I feel okay again"),
    ),
)


class QuestionCatalog:
    """Ordered, immutable set of questions with their answer domains."""

    def __init__(self, questions: Sequence[Question] = DEFAULT_QUESTIONS) -> None:
        if not questions:
            raise ValueError("Question catalog cannot be empty")
        ids = [question.id for question in questions]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Question ids must be unique, got {ids}")

        self._questions: tuple[Question, ...] = tuple(sorted(questions, key=lambda q: q.id))
        self.min_raw: int = sum(question.min_score for question in self._questions)
        self.max_raw: int = sum(question.max_score for question in self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def get(self, question_id: int) -> Question:
        for question in self._questions:
            if question.id == question_id:
                return question
        raise KeyError(question_id)

    def validate(self, answers: Sequence[int]) -> Result[tuple[int, ...], AnswerValidationError]:
        """
        Check an answer set against the catalog.

        Returns:
            Result with the answers as a tuple, or the first AnswerValidationError found.
        """
        if len(answers) != len(self._questions):
            return Result.err(
                AnswerValidationError(
                    None,
                    f"expected {len(self._questions)} answers, got {len(answers)}",
                )
            )

        for question, answer in zip(self._questions, answers, strict=True):
            if isinstance(answer, bool) or not isinstance(answer, int):
                return Result.err(
                    AnswerValidationError(question.id, f"answer {answer!r} is not an integer")
                )
            if not question.accepts(answer):
                return Result.err(
                    AnswerValidationError(
                        question.id, f"score {answer} is outside the question's domain"
                    )
                )

        return Result.ok(tuple(answers))

    def score_for(self, question_id: int, choice: int | str) -> int:
        """Translate a UI selection (slider value or option letter) into its score."""
        question = self.get(question_id)

        if question.kind == QuestionKind.SLIDER:
            try:
                value = int(choice)
            except (TypeError, ValueError):
                raise AnswerValidationError(
                    question_id, f"slider value {choice!r} is not an integer"
                ) from None
            if not question.accepts(value):
                raise AnswerValidationError(
                    question_id,
                    f"slider value {value} outside [{question.min_value}, {question.max_value}]",
                )
            return value

        letter = str(choice).strip().upper()
        for option in question.options:
            if option.value == letter:
                return option.score
        valid = ", ".join(option.value for option in question.options)
        raise AnswerValidationError(question_id, f"unknown option {choice!r}, expected one of {valid}")

    def default_answers(self) -> list[int]:
        """Initial answers before the user touches the form: slider minimum, 0 otherwise."""
        return [
            question.min_value if question.kind == QuestionKind.SLIDER else 0  # type: ignore[misc]
            for question in self._questions
        ]
