"""Unit tests for projections between payloads and entities."""

from uuid import UUID

from src.library_api.core.models.book import BookForCreation, BookForUpdate
from src.library_api.core.services import mapping
from src.library_api.entities import Book, BookTable


class TestBookProjections:
    def test_book_from_payload_generates_id(self):
        book = mapping.book_from_payload(
            BookForCreation(title="Dune", description="Spice"), author_id="a1"
        )

        UUID(book.id)  # Raises ValueError if invalid
        assert book.author_id == "a1"
        assert book.title == "Dune"
        assert book.description == "Spice"

    def test_book_from_payload_uses_supplied_id(self):
        book = mapping.book_from_payload(
            BookForUpdate(title="Dune", description="Spice"),
            author_id="a1",
            book_id="client-id",
        )
        assert book.id == "client-id"

    def test_update_view_holds_only_mutable_fields(self):
        book = Book(id="b1", author_id="a1", title="Dune", description="Spice")
        assert mapping.update_view(book) == {"title": "Dune", "description": "Spice"}

    def test_apply_payload_keeps_identity(self):
        book = Book(id="b1", author_id="a1", title="Dune", description="Spice")
        updated = mapping.apply_payload(BookForUpdate(title="Emma", description=""), book)

        assert updated.id == "b1"
        assert updated.author_id == "a1"
        assert updated.title == "Emma"
        assert updated.description == ""
        assert book.title == "Dune"

    def test_row_round_trip(self):
        book = Book(id="b1", author_id="a1", title="Dune", description="Spice")
        row = mapping.book_to_row(book)

        assert isinstance(row, BookTable)
        assert mapping.book_from_row(row) == book

    def test_book_to_dto_has_no_links(self):
        dto = mapping.book_to_dto(Book(id="b1", author_id="a1", title="Dune"))
        assert dto.id == "b1"
        assert dto.description == ""
        assert dto.links == []
