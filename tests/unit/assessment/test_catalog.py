"""
Tests for the question catalog.

Covers:
- The default five-question catalog and its derived raw bounds
- Answer set validation (length, type, domain)
- Translating UI selections into scores
"""

import pytest

from assessment.domain.errors import AnswerValidationError
from assessment.domain.models import AnswerOption, Question, QuestionKind
from assessment.services.catalog import DEFAULT_QUESTIONS, QuestionCatalog


@pytest.fixture
def catalog() -> QuestionCatalog:
    return QuestionCatalog()


class TestDefaultCatalog:
    def test_has_five_questions_in_id_order(self, catalog: QuestionCatalog) -> None:
        assert [q.id for q in catalog.questions()] == [1, 2, 3, 4, 5]
        assert len(catalog) == 5

    def test_question_kinds(self, catalog: QuestionCatalog) -> None:
        kinds = [q.kind for q in catalog.questions()]
        assert kinds == [
            QuestionKind.SLIDER,
            QuestionKind.BINARY_CHOICE,
            QuestionKind.BINARY_CHOICE,
            QuestionKind.MULTI_CHOICE,
            QuestionKind.SLIDER,
        ]

    def test_choice_scores(self, catalog: QuestionCatalog) -> None:
        scores = [[o.score for o in q.options] for q in catalog.questions()]
        assert scores == [[], [2, 0], [2, 0], [2, 1, 0, 0], []]

    def test_derived_raw_bounds(self, catalog: QuestionCatalog) -> None:
        assert catalog.min_raw == 2
        assert catalog.max_raw == 26

    def test_bounds_follow_catalog_changes(self) -> None:
        catalog = QuestionCatalog(DEFAULT_QUESTIONS[:2])
        assert catalog.min_raw == 1
        assert catalog.max_raw == 12

    def test_default_answers(self, catalog: QuestionCatalog) -> None:
        assert catalog.default_answers() == [1, 0, 0, 0, 1]


class TestCatalogConstruction:
    def test_rejects_empty_catalog(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            QuestionCatalog([])

    def test_rejects_duplicate_ids(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            QuestionCatalog([DEFAULT_QUESTIONS[0], DEFAULT_QUESTIONS[0]])

    def test_orders_questions_by_id(self) -> None:
        catalog = QuestionCatalog(list(reversed(DEFAULT_QUESTIONS)))
        assert [q.id for q in catalog.questions()] == [1, 2, 3, 4, 5]


class TestValidate:
    @pytest.mark.parametrize(
        "answers",
        [
            [1, 0, 0, 0, 1],
            [10, 2, 2, 2, 10],
            [6, 2, 0, 1, 5],
        ],
    )
    def test_accepts_valid_answers(self, catalog: QuestionCatalog, answers: list[int]) -> None:
        result = catalog.validate(answers)
        assert result.is_ok()
        assert result.unwrap() == tuple(answers)

    @pytest.mark.parametrize("answers", [[], [1, 0, 0, 0], [1, 0, 0, 0, 1, 1]])
    def test_rejects_wrong_length(self, catalog: QuestionCatalog, answers: list[int]) -> None:
        result = catalog.validate(answers)
        assert result.is_err()
        error = result.unwrap_err()
        assert error.question_id is None
        assert "expected 5 answers" in error.reason

    @pytest.mark.parametrize(
        "answers,question_id",
        [
            ([0, 0, 0, 0, 1], 1),  # slider below min
            ([11, 0, 0, 0, 1], 1),  # slider above max
            ([1, 1, 0, 0, 1], 2),  # not an option score
            ([1, 0, 3, 0, 1], 3),
            ([1, 0, 0, 3, 1], 4),
            ([1, 0, 0, 0, 11], 5),
        ],
    )
    def test_rejects_out_of_domain_answer(
        self, catalog: QuestionCatalog, answers: list[int], question_id: int
    ) -> None:
        result = catalog.validate(answers)
        assert result.is_err()
        assert result.unwrap_err().question_id == question_id
        assert "outside" in result.unwrap_err().reason

    def test_rejects_non_integer_answers(self, catalog: QuestionCatalog) -> None:
        result = catalog.validate([1, 0, 0, True, 1])  # type: ignore[list-item]
        assert result.is_err()
        assert result.unwrap_err().question_id == 4

        result = catalog.validate([1.5, 0, 0, 0, 1])  # type: ignore[list-item]
        assert result.unwrap_err().question_id == 1

    def test_reports_first_invalid_question(self, catalog: QuestionCatalog) -> None:
        result = catalog.validate([1, 1, 1, 1, 1])
        assert result.unwrap_err().question_id == 2


class TestScoreFor:
    def test_slider_value_is_its_score(self, catalog: QuestionCatalog) -> None:
        assert catalog.score_for(1, 7) == 7
        assert catalog.score_for(5, "3") == 3

    @pytest.mark.parametrize(
        "question_id,choice,score",
        [(2, "A", 2), (2, "b", 0), (3, "A", 2), (4, "A", 2), (4, "B", 1), (4, "C", 0), (4, "D", 0)],
    )
    def test_option_letter_maps_to_score(
        self, catalog: QuestionCatalog, question_id: int, choice: str, score: int
    ) -> None:
        assert catalog.score_for(question_id, choice) == score

    def test_unknown_option(self, catalog: QuestionCatalog) -> None:
        with pytest.raises(AnswerValidationError, match="unknown option"):
            catalog.score_for(2, "C")

    def test_slider_out_of_range(self, catalog: QuestionCatalog) -> None:
        with pytest.raises(AnswerValidationError, match="outside"):
            catalog.score_for(1, 0)

    def test_slider_not_a_number(self, catalog: QuestionCatalog) -> None:
        with pytest.raises(AnswerValidationError, match="not an integer"):
            catalog.score_for(5, "fast")

    def test_unknown_question(self, catalog: QuestionCatalog) -> None:
        with pytest.raises(KeyError):
            catalog.score_for(9, 1)


class TestQuestionModel:
    def test_slider_requires_range(self) -> None:
        with pytest.raises(ValueError, match="min_value and max_value"):
            Question(id=1, prompt="How?", kind=QuestionKind.SLIDER)

    def test_slider_range_order(self) -> None:
        with pytest.raises(ValueError, match="min_value > max_value"):
            Question(id=1, prompt="How?", kind=QuestionKind.SLIDER, min_value=5, max_value=1)

    def test_binary_needs_two_options(self) -> None:
        with pytest.raises(ValueError, match="exactly two"):
            Question(
                id=2,
                prompt="Yes?",
                kind=QuestionKind.BINARY_CHOICE,
                options=(AnswerOption(value="A", label="Yes", score=1),),
            )

    def test_questions_are_immutable(self, catalog: QuestionCatalog) -> None:
        with pytest.raises(ValueError, match="frozen"):
            catalog.questions()[0].prompt = "changed"  # type: ignore[misc]
