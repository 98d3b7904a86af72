"""Tests for open question business logic."""

from __future__ import annotations

import pytest

from world_canon.errors import MissingFieldError, NotFoundError, StorageError
from world_canon.repositories import DocumentStore, MetaRepository, QuestionRepository
from world_canon.services import questions as questions_svc
from world_canon.storage import MemoryStorage

TODAY = "2026-03-14"


@pytest.fixture
def questions_repo(storage: MemoryStorage) -> QuestionRepository:
    return QuestionRepository(storage)


@pytest.fixture
def meta_repo(storage: MemoryStorage) -> MetaRepository:
    return MetaRepository(storage)


class TestQuestionQueries:
    """Test reading the ledger."""

    def test_list_returns_all(self, questions_repo: QuestionRepository) -> None:
        """Verify every question is listed in file order."""
        ids = [q["id"] for q in questions_svc.list_questions(questions_repo)]
        assert ids == ["OQ-1", "OQ-2"]

    def test_list_without_file_is_empty(self, storage: MemoryStorage) -> None:
        """Verify a missing ledger reads as empty rather than failing."""
        storage.delete("open-questions.yaml")

        assert questions_svc.list_questions(QuestionRepository(storage)) == []

    def test_get_returns_question(self, questions_repo: QuestionRepository) -> None:
        """Verify get returns the matching record."""
        question = questions_svc.get_question("OQ-2", questions_repo)
        assert question["name"] == "Retention"

    def test_get_unknown_lists_available(self, questions_repo: QuestionRepository) -> None:
        """Verify the not-found error names the existing ids."""
        with pytest.raises(NotFoundError) as exc_info:
            questions_svc.get_question("OQ-9", questions_repo)

        assert exc_info.value.context == {"available": ["OQ-1", "OQ-2"]}


class TestCreateQuestion:
    """Test question creation."""

    def test_create_uses_next_id_and_defaults(
        self,
        questions_repo: QuestionRepository,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify the third question is OQ-3 with default fields."""
        question = questions_svc.create_question(
            "Handoff", "Who acts when the user is away?", questions_repo, meta_repo
        )

        assert question == {
            "id": "OQ-3",
            "name": "Handoff",
            "status": "open",
            "domain": "architecture",
            "question": "Who acts when the user is away?",
            "notes": "",
            "created": TODAY,
        }
        assert questions_svc.list_questions(questions_repo)[-1] == question
        assert meta_repo.get().last_modified == TODAY

    def test_create_keeps_domain_and_notes(
        self,
        questions_repo: QuestionRepository,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify optional fields are stored when given."""
        question = questions_svc.create_question(
            "Handoff",
            "Who acts?",
            questions_repo,
            meta_repo,
            domain="agency",
            notes="Raised in review",
        )

        assert question["domain"] == "agency"
        assert question["notes"] == "Raised in review"

    def test_create_skips_malformed_ids(
        self,
        storage: MemoryStorage,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify OQ-1 and OQ-corrupt lead to OQ-2."""
        DocumentStore(storage).write(
            "open-questions.yaml",
            {"questions": [{"id": "OQ-1"}, {"id": "OQ-corrupt"}]},
        )

        question = questions_svc.create_question(
            "Next", "What next?", QuestionRepository(storage), meta_repo
        )

        assert question["id"] == "OQ-2"

    def test_create_starts_a_new_ledger(
        self,
        storage: MemoryStorage,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify the first question is OQ-1 when no ledger exists."""
        storage.delete("open-questions.yaml")

        question = questions_svc.create_question(
            "First", "Where to begin?", QuestionRepository(storage), meta_repo
        )

        assert question["id"] == "OQ-1"
        assert DocumentStore(storage).read("open-questions.yaml") == {"questions": [question]}

    @pytest.mark.parametrize(("name", "text"), [("", "Why?"), ("Why", None)])
    def test_create_requires_name_and_question(
        self,
        questions_repo: QuestionRepository,
        meta_repo: MetaRepository,
        name: str,
        text: str | None,
    ) -> None:
        """Verify name and question are required."""
        with pytest.raises(MissingFieldError):
            questions_svc.create_question(name, text, questions_repo, meta_repo)


class TestUpdateAndDelete:
    """Test question updates and deletion."""

    def test_update_replaces_record_and_forces_id(
        self,
        questions_repo: QuestionRepository,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify the record is replaced wholesale with the path id."""
        updated = questions_svc.update_question(
            "OQ-1",
            {"id": "OQ-99", "name": "Consent", "status": "resolved"},
            questions_repo,
            meta_repo,
        )

        assert updated == {"id": "OQ-1", "name": "Consent", "status": "resolved"}
        assert questions_svc.get_question("OQ-1", questions_repo) == updated
        assert meta_repo.get().last_modified == TODAY

    def test_update_unknown_raises_not_found(
        self,
        questions_repo: QuestionRepository,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify updating a missing question fails."""
        with pytest.raises(NotFoundError):
            questions_svc.update_question("OQ-9", {"name": "x"}, questions_repo, meta_repo)

    def test_delete_removes_question(
        self,
        questions_repo: QuestionRepository,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify a deleted question is no longer listed."""
        questions_svc.delete_question("OQ-1", questions_repo, meta_repo)

        assert [q["id"] for q in questions_svc.list_questions(questions_repo)] == ["OQ-2"]
        with pytest.raises(NotFoundError):
            questions_svc.get_question("OQ-1", questions_repo)

    def test_delete_unknown_raises_not_found(
        self,
        questions_repo: QuestionRepository,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify deleting a missing question fails."""
        with pytest.raises(NotFoundError):
            questions_svc.delete_question("OQ-9", questions_repo, meta_repo)

    def test_delete_without_ledger_raises_not_found(
        self,
        storage: MemoryStorage,
        meta_repo: MetaRepository,
    ) -> None:
        """Verify deleting from a missing ledger fails."""
        storage.delete("open-questions.yaml")

        with pytest.raises(NotFoundError) as exc_info:
            questions_svc.delete_question("OQ-1", QuestionRepository(storage), meta_repo)

        assert exc_info.value.message == "Questions file not found"


class TestMalformedLedger:
    """Test ledgers that do not have the expected shape."""

    LIST_LEDGER = "- id: OQ-7\n  name: Custody\n  question: Who keeps the keys?\n"

    def test_create_refuses_to_overwrite_list_ledger(
        self, storage: MemoryStorage, meta_repo: MetaRepository
    ) -> None:
        """Verify a top-level list ledger is reported, not replaced."""
        storage.write("open-questions.yaml", self.LIST_LEDGER)

        with pytest.raises(StorageError):
            questions_svc.create_question(
                "Handoff", "Who acts?", QuestionRepository(storage), meta_repo
            )

        assert storage.read("open-questions.yaml") == self.LIST_LEDGER

    def test_list_reports_wrong_shaped_questions(self, storage: MemoryStorage) -> None:
        """Verify a non-list questions entry is a storage failure."""
        storage.write("open-questions.yaml", "questions: OQ-1\n")

        with pytest.raises(StorageError):
            questions_svc.list_questions(QuestionRepository(storage))

    def test_non_mapping_records_are_skipped(
        self, storage: MemoryStorage, meta_repo: MetaRepository
    ) -> None:
        """Verify stray scalar records neither match ids nor break numbering."""
        storage.write(
            "open-questions.yaml",
            "questions:\n- Remember to sort these\n- id: OQ-4\n  name: Custody\n",
        )
        repo = QuestionRepository(storage)

        with pytest.raises(NotFoundError) as exc_info:
            questions_svc.get_question("OQ-9", repo)
        record = questions_svc.create_question("Handoff", "Who acts?", repo, meta_repo)

        assert exc_info.value.context["available"] == ["", "OQ-4"]
        assert record["id"] == "OQ-5"
        assert questions_svc.list_questions(repo)[0] == "Remember to sort these"
