"""Unit tests for the in-memory book repository."""

import pytest

from booklibrary.domain.entities.book import Book
from booklibrary.domain.enums.genre import Genre
from booklibrary.domain.exceptions import DuplicateIdError, InvalidEntityError, NotFoundError
from booklibrary.infrastructure.repositories.memory import InMemoryBookRepository


def ids(books):
    return [book.id for book in books]


class TestAttach:
    def test_attach_appends_at_the_end(self, seeded_repository, catcher):
        seeded_repository.attach(catcher)

        assert len(seeded_repository) == 7
        assert seeded_repository[-1] is catcher
        assert ids(seeded_repository) == [1, 2, 3, 4, 5, 6, 7]

    def test_duplicate_id_is_rejected(self, seeded_repository, catcher):
        seeded_repository.attach(catcher)
        before = seeded_repository.data

        with pytest.raises(DuplicateIdError) as exc_info:
            seeded_repository.attach(catcher.model_copy())

        assert exc_info.value.entity_id == 7
        assert seeded_repository.data == before

    def test_duplicate_check_comes_before_validation(self, seeded_repository):
        with pytest.raises(DuplicateIdError):
            seeded_repository.attach(Book(id=1))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": ""},
            {"title": "   "},
            {"author": ""},
            {"year_published": 0},
            {"year_published": -5},
        ],
    )
    def test_invalid_book_is_rejected(self, seeded_repository, catcher, overrides):
        before = seeded_repository.data
        invalid = catcher.model_copy(update=overrides)

        with pytest.raises(InvalidEntityError) as exc_info:
            seeded_repository.attach(invalid)

        assert exc_info.value.entity_id == 7
        assert seeded_repository.data == before
        assert seeded_repository.find_by_id(7) is None

    def test_initial_entities_go_through_attach(self, catcher):
        with pytest.raises(DuplicateIdError):
            InMemoryBookRepository([catcher, catcher.model_copy()])


class TestFindById:
    def test_returns_resident_entity(self, seeded_repository):
        book = seeded_repository.find_by_id(3)

        assert book is not None
        assert book.author == "George Orwell"
        assert book is seeded_repository[2]

    def test_missing_id_returns_none(self, seeded_repository):
        assert seeded_repository.find_by_id(42) is None

    def test_empty_repository(self, empty_repository):
        assert empty_repository.find_by_id(1) is None


class TestModernize:
    def test_overwrites_fields_but_keeps_id(self, seeded_repository):
        replacement = Book(
            id=4,
            title="Sense and Sensibility",
            author="Jane Austen",
            genre=Genre.ROMANCE,
            year_published=1811,
        )

        seeded_repository.modernize(replacement)

        stored = seeded_repository.find_by_id(4)
        assert stored is not replacement
        assert stored.id == 4
        assert stored.title == "Sense and Sensibility"
        assert stored.year_published == 1811
        assert ids(seeded_repository) == [1, 2, 3, 4, 5, 6]

    def test_local_edit_of_found_entity(self, seeded_repository):
        book = seeded_repository.find_by_id(2)
        book.title = "Updated Title"

        seeded_repository.modernize(book)

        assert seeded_repository.find_by_id(2).title == "Updated Title"

    def test_absent_id_raises(self, seeded_repository, catcher):
        before = seeded_repository.data

        with pytest.raises(NotFoundError) as exc_info:
            seeded_repository.modernize(catcher)

        assert exc_info.value.entity_id == 7
        assert seeded_repository.data == before


class TestRemove:
    def test_value_equal_copy_is_removed(self, seeded_repository):
        copy = seeded_repository.find_by_id(5).model_copy()

        assert seeded_repository.remove(copy) is True
        assert ids(seeded_repository) == [1, 2, 3, 4, 6]

    def test_same_id_different_fields_is_not_removed(self, seeded_repository):
        impostor = seeded_repository.find_by_id(5).model_copy(update={"title": "The Silmarillion"})
        before = seeded_repository.data

        assert seeded_repository.remove(impostor) is False
        assert seeded_repository.data == before

    def test_unknown_entity_returns_false(self, seeded_repository, catcher):
        assert seeded_repository.remove(catcher) is False
        assert len(seeded_repository) == 6

    def test_contains_uses_value_equality(self, seeded_repository):
        assert seeded_repository.find_by_id(1).model_copy() in seeded_repository
        assert Book(id=1) not in seeded_repository


class TestExplore:
    def test_matches_author(self, seeded_repository):
        results = seeded_repository.explore("George")

        assert ids(results) == [3]

    def test_matches_every_field(self, seeded_repository):
        assert ids(seeded_repository.explore("SciFi")) == [3]
        assert ids(seeded_repository.explore("2011")) == [6]
        assert ids(seeded_repository.explore("5")) == [1, 5]
        assert ids(seeded_repository.explore("Hobbit")) == [5]

    def test_is_case_sensitive(self, seeded_repository):
        assert seeded_repository.explore("george") == []

    def test_results_sorted_by_title(self, seeded_repository):
        results = seeded_repository.explore("19")

        titles = [book.title for book in results]
        assert titles == sorted(titles)
        assert titles == [
            "1984",
            "The Great Gatsby",
            "The Hobbit",
            "To Kill a Mockingbird",
        ]

    def test_empty_query_returns_everything_sorted(self, seeded_repository):
        results = seeded_repository.explore("")

        assert len(results) == 6
        assert [book.title for book in results] == sorted(book.title for book in seeded_repository)

    def test_order_independent_of_insertion(self, seeded_repository):
        reversed_repository = InMemoryBookRepository(
            [book.model_copy() for book in reversed(seeded_repository.data)]
        )

        assert seeded_repository.explore("e") == reversed_repository.explore("e")

    def test_repeated_query_is_identical(self, seeded_repository):
        first = seeded_repository.explore("o")
        second = seeded_repository.explore("o")

        assert [book.render() for book in first] == [book.render() for book in second]

    def test_title_ties_keep_insertion_order(self, empty_repository):
        for book_id in (3, 1, 2):
            empty_repository.attach(
                Book(id=book_id, title="Same", author="Author", year_published=2000)
            )

        assert ids(empty_repository.explore("Same")) == [3, 1, 2]

    def test_parallel_scan_matches_sequential(self, seeded_repository):
        parallel = InMemoryBookRepository(
            [book.model_copy() for book in seeded_repository], search_max_workers=4
        )

        for query in ("", "e", "19", "George", "missing"):
            assert parallel.explore(query) == seeded_repository.explore(query)

    def test_no_match(self, seeded_repository):
        assert seeded_repository.explore("Tolstoy") == []


class TestIteration:
    def test_iterates_in_insertion_order(self, seeded_repository, catcher):
        seeded_repository.attach(catcher)

        assert ids(seeded_repository) == [1, 2, 3, 4, 5, 6, 7]

    def test_iteration_is_restartable(self, seeded_repository):
        assert list(seeded_repository) == list(seeded_repository)

    def test_iteration_is_lazy_and_live(self, seeded_repository, catcher):
        iterator = iter(seeded_repository)
        assert next(iterator).id == 1

        seeded_repository.attach(catcher)

        assert [book.id for book in iterator] == [2, 3, 4, 5, 6, 7]

    def test_data_is_a_snapshot(self, seeded_repository, catcher):
        snapshot = seeded_repository.data
        seeded_repository.attach(catcher)

        assert len(snapshot) == 6
        assert len(seeded_repository.data) == 7


class TestDispose:
    def test_dispose_clears_and_is_idempotent(self, seeded_repository):
        seeded_repository.dispose()
        seeded_repository.dispose()

        assert len(seeded_repository) == 0
        assert list(seeded_repository) == []

    def test_context_manager_disposes(self, seeded_repository):
        with seeded_repository as books:
            assert books is seeded_repository
            assert len(books) == 6

        assert len(seeded_repository) == 0

    def test_repository_usable_after_dispose(self, seeded_repository, catcher):
        seeded_repository.dispose()
        seeded_repository.attach(catcher)

        assert ids(seeded_repository) == [7]


def test_rejects_non_positive_worker_count():
    with pytest.raises(ValueError):
        InMemoryBookRepository(search_max_workers=0)


def test_library_walkthrough(seeded_repository, catcher):
    """Attach, reject a duplicate, update, remove, then search."""
    seeded_repository.attach(catcher)
    assert len(seeded_repository) == 7

    with pytest.raises(DuplicateIdError):
        seeded_repository.attach(catcher.model_copy())
    assert len(seeded_repository) == 7

    b2 = seeded_repository.find_by_id(2)
    assert b2.id == 2
    b2.title = "Updated Title"
    seeded_repository.modernize(b2)
    assert seeded_repository.find_by_id(2).title == "Updated Title"

    assert seeded_repository.remove(b2) is True
    assert len(seeded_repository) == 6

    results = seeded_repository.explore("George")
    assert ids(results) == [3]
