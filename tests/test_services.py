# =============================================================================
# tests/test_services.py - Service Layer Tests
# =============================================================================
# Business rules enforced by AuthorService / BlogPostService, and how store
# failures are translated.
#
# Run with: pytest tests/test_services.py -v
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from app.exceptions import (
    AuthorNotFoundError,
    DuplicateUsernameError,
    IdMismatchError,
    MissingFieldError,
    RecordNotFoundError,
    StorageFault,
)
from core.database import BlogRepository
from core.services import AuthorService, BlogPostService
from lib.document_store import StoreError


# =============================================================================
# Author Service Tests
# =============================================================================

class TestAuthorService:
    """Tests for AuthorService."""

    def test_create_author(self, author_service, repository, ada_payload):
        author = author_service.create_author(ada_payload)

        assert repository.get_author(author.id) == author

    def test_duplicate_user_name(self, author_service, repository, ada_payload):
        author_service.create_author(ada_payload)

        with pytest.raises(DuplicateUsernameError):
            author_service.create_author({**ada_payload, "firstName": "Augusta"})

        assert len(repository.list_authors()) == 1

    def test_duplicate_caught_by_unique_index(self, author_service, repository, ada_payload):
        # Another request inserted "ada" between the check and the insert
        with patch.object(repository, "find_author_by_user_name", return_value=None):
            author_service.create_author(ada_payload)
            with pytest.raises(DuplicateUsernameError):
                author_service.create_author(ada_payload)

    def test_missing_field_checked_before_store(self, ada_payload):
        repository = MagicMock()
        service = AuthorService(repository)

        with pytest.raises(MissingFieldError):
            service.create_author({"firstName": "Ada", "lastName": "Lovelace"})

        repository.find_author_by_user_name.assert_not_called()
        repository.create_author.assert_not_called()

    def test_update_author(self, author_service, make_author):
        ada = make_author()

        updated = author_service.update_author(ada.id, {"id": ada.id, "firstName": "Augusta"})

        assert updated.first_name == "Augusta"
        assert updated.last_name == "Lovelace"

    def test_update_to_taken_user_name(self, author_service, make_author):
        make_author(user_name="ada")
        alan = make_author(first="Alan", last="Turing", user_name="alan")

        with pytest.raises(DuplicateUsernameError):
            author_service.update_author(alan.id, {"id": alan.id, "userName": "ada"})

    def test_update_keeping_own_user_name(self, author_service, make_author):
        ada = make_author()

        updated = author_service.update_author(ada.id, {"id": ada.id, "userName": "ada"})

        assert updated.user_name == "ada"

    @pytest.mark.parametrize("field", ["firstName", "lastName", "userName"])
    def test_update_with_null_leaves_author_unchanged(self, author_service, repository, make_author, field):
        ada = make_author()

        with pytest.raises(ValidationError):
            author_service.update_author(ada.id, {"id": ada.id, field: None})

        assert repository.get_author(ada.id) == ada

    def test_delete_normalizes_path_id(self, author_service, repository, make_author, make_blogpost):
        ada = make_author()
        make_blogpost(ada.id)

        removed = author_service.delete_author(f" {ada.id} ")

        assert removed == 1
        assert repository.get_author(ada.id) is None

    def test_update_id_mismatch(self, author_service, make_author):
        ada = make_author()

        with pytest.raises(IdMismatchError):
            author_service.update_author(ada.id, {"id": "other", "firstName": "X"})

    def test_update_missing_author(self, author_service):
        with pytest.raises(RecordNotFoundError):
            author_service.update_author("ghost", {"id": "ghost", "firstName": "X"})

    def test_delete_cascades(self, author_service, repository, make_author, make_blogpost):
        ada = make_author()
        alan = make_author(first="Alan", last="Turing", user_name="alan")
        make_blogpost(ada.id)
        make_blogpost(ada.id)
        kept = make_blogpost(alan.id)

        removed = author_service.delete_author(ada.id)

        assert removed == 2
        assert repository.get_author(ada.id) is None
        assert [p.id for p in repository.list_blogposts()] == [kept.id]

    def test_delete_removes_posts_before_author(self):
        repository = MagicMock()
        calls = []
        repository.delete_blogposts_by_author.side_effect = lambda _id: calls.append("posts") or 0
        repository.delete_author.side_effect = lambda _id: calls.append("author") or True

        AuthorService(repository).delete_author("a1")

        assert calls == ["posts", "author"]

    def test_store_failure_becomes_storage_fault(self):
        repository = MagicMock()
        repository.list_authors.side_effect = StoreError("connection refused")

        with pytest.raises(StorageFault) as exc_info:
            AuthorService(repository).list_authors()

        assert exc_info.value.status_code == 500
        assert exc_info.value.details["error"] == "connection refused"

    def test_delete_failure_names_operation(self):
        repository = MagicMock()
        repository.delete_blogposts_by_author.side_effect = StoreError("timeout")

        with pytest.raises(StorageFault) as exc_info:
            AuthorService(repository).delete_author("a1")

        assert exc_info.value.details["operation"] == "deleting author"
        repository.delete_author.assert_not_called()

    def test_other_store_error_on_create_is_fault(self, ada_payload):
        repository = MagicMock()
        repository.find_author_by_user_name.return_value = None
        repository.create_author.side_effect = StoreError("boom", code="INSERT_FAILED")

        with pytest.raises(StorageFault):
            AuthorService(repository).create_author(ada_payload)


# =============================================================================
# Blog Post Service Tests
# =============================================================================

class TestBlogPostService:
    """Tests for BlogPostService."""

    def test_create_returns_post_with_author(self, blogpost_service, make_author):
        ada = make_author()

        post = blogpost_service.create_blogpost({"title": "T", "content": "C", "author_id": ada.id})

        assert post.author == ada
        assert post.author_id == ada.id

    def test_create_with_unknown_author_persists_nothing(self, blogpost_service, repository):
        with pytest.raises(AuthorNotFoundError):
            blogpost_service.create_blogpost({"title": "T", "content": "C", "author_id": "ghost"})

        assert repository.list_blogposts() == []

    def test_create_checks_author_once(self, make_author):
        ada = make_author()
        repository = MagicMock()
        repository.get_author.return_value = ada
        service = BlogPostService(repository)

        service.create_blogpost({"title": "T", "content": "C", "author_id": ada.id})

        repository.get_author.assert_called_once_with(ada.id)
        repository.create_blogpost.assert_called_once()

    def test_create_stores_canonical_author_id(self, blogpost_service, repository, make_author):
        ada = make_author()

        post = blogpost_service.create_blogpost(
            {"title": "T", "content": "C", "author_id": f"\t{ada.id}  "}
        )

        assert post.author_id == ada.id
        assert repository.get_blogpost(post.id).author_id == ada.id

    def test_update_with_null_title_rejected(self, blogpost_service, repository, make_author, make_blogpost):
        post = make_blogpost(make_author().id)

        with pytest.raises(ValidationError):
            blogpost_service.update_blogpost(post.id, {"id": post.id, "title": None})

        assert repository.get_blogpost(post.id).title == "T"

    def test_delete_normalizes_path_id(self, blogpost_service, repository, make_author, make_blogpost):
        post = make_blogpost(make_author().id)

        assert blogpost_service.delete_blogpost(f" {post.id}") is True
        assert repository.get_blogpost(post.id) is None

    def test_create_missing_field(self, blogpost_service):
        with pytest.raises(MissingFieldError) as exc_info:
            blogpost_service.create_blogpost({"content": "C", "author_id": "a1"})

        assert exc_info.value.field == "title"

    def test_get_missing_post(self, blogpost_service):
        with pytest.raises(RecordNotFoundError) as exc_info:
            blogpost_service.get_blogpost("ghost")

        assert exc_info.value.status_code == 404

    def test_get_and_list_resolve_identically(self, blogpost_service, make_author, make_blogpost):
        ada = make_author()
        post = make_blogpost(ada.id)

        single = blogpost_service.get_blogpost(post.id)
        listed = blogpost_service.list_blogposts()

        assert single.author == listed[0].author == ada

    def test_update_id_mismatch_leaves_record(self, blogpost_service, repository, make_author, make_blogpost):
        ada = make_author()
        post = make_blogpost(ada.id, title="Original")

        with pytest.raises(IdMismatchError):
            blogpost_service.update_blogpost(post.id, {"id": "other", "title": "Changed"})

        assert repository.get_blogpost(post.id).title == "Original"

    def test_update_ignores_author_and_comments(self, blogpost_service, repository, make_author, make_blogpost):
        ada = make_author()
        post = make_blogpost(ada.id)

        blogpost_service.update_blogpost(
            post.id,
            {"id": post.id, "content": "New", "author_id": "other", "comments": [{"content": "x"}]},
        )

        stored = repository.get_blogpost(post.id)
        assert stored.content == "New"
        assert stored.author_id == ada.id
        assert stored.comments == []

    def test_update_missing_post(self, blogpost_service):
        with pytest.raises(RecordNotFoundError):
            blogpost_service.update_blogpost("ghost", {"id": "ghost", "title": "x"})

    def test_delete_missing_post_is_noop(self, blogpost_service):
        assert blogpost_service.delete_blogpost("ghost") is False

    def test_list_failure_names_operation(self):
        store = MagicMock()
        store.find.side_effect = StoreError("timeout")

        with pytest.raises(StorageFault) as exc_info:
            BlogPostService(BlogRepository(store)).list_blogposts()

        assert exc_info.value.details["operation"] == "listing blogposts"

    def test_store_failure_on_get(self):
        store = MagicMock()
        store.get.side_effect = StoreError("timeout")
        service = BlogPostService(BlogRepository(store))

        with pytest.raises(StorageFault):
            service.get_blogpost("p1")
