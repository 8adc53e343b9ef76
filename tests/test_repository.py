# =============================================================================
# tests/test_repository.py - BlogRepository Tests
# =============================================================================
# Run with: pytest tests/test_repository.py -v
# =============================================================================

from core.models import AuthorCreate, BlogPostCreate


def _author(repository, user_name="ada", first="Ada", last="Lovelace"):
    return repository.create_author(
        AuthorCreate(first_name=first, last_name=last, user_name=user_name)
    )


def _post(repository, author_id, title="T"):
    return repository.create_blogpost(
        BlogPostCreate(title=title, content="C", author_id=author_id)
    )


class TestAuthorOperations:
    """Tests for author storage operations."""

    def test_create_and_list(self, repository):
        ada = _author(repository)

        assert repository.list_authors() == [ada]

    def test_find_by_user_name(self, repository):
        ada = _author(repository)

        assert repository.find_author_by_user_name("ada") == ada
        assert repository.find_author_by_user_name("nobody") is None

    def test_get_author_missing_or_blank(self, repository):
        assert repository.get_author("ghost") is None
        assert repository.get_author(None) is None
        assert repository.get_author("  ") is None

    def test_get_authors_by_ids(self, repository):
        ada = _author(repository)
        alan = _author(repository, user_name="alan", first="Alan", last="Turing")

        found = repository.get_authors_by_ids([ada.id, alan.id, "ghost", None])

        assert found == {ada.id: ada, alan.id: alan}

    def test_update_author_partial(self, repository):
        ada = _author(repository)

        updated = repository.update_author(ada.id, {"last_name": "King"})

        assert updated.first_name == "Ada"
        assert updated.last_name == "King"
        assert updated.user_name == "ada"

    def test_update_missing_author(self, repository):
        assert repository.update_author("ghost", {"last_name": "x"}) is None

    def test_delete_author(self, repository):
        ada = _author(repository)

        assert repository.delete_author(ada.id) is True
        assert repository.get_author(ada.id) is None


class TestBlogPostOperations:
    """Tests for blog post storage operations."""

    def test_create_sets_created_and_empty_comments(self, repository):
        ada = _author(repository)

        post = _post(repository, ada.id)

        assert post.comments == []
        assert post.created is not None
        assert post.author is None

    def test_get_without_resolution(self, repository):
        ada = _author(repository)
        post = _post(repository, ada.id)

        fetched = repository.get_blogpost(post.id)

        assert fetched.author is None
        assert fetched.author_id == ada.id

    def test_get_with_resolution(self, repository):
        ada = _author(repository)
        post = _post(repository, ada.id)

        fetched = repository.get_blogpost(post.id, resolve_author=True)

        assert fetched.author == ada

    def test_get_missing(self, repository):
        assert repository.get_blogpost("ghost", resolve_author=True) is None

    def test_list_with_resolution(self, repository):
        ada = _author(repository)
        _post(repository, ada.id, title="one")
        _post(repository, ada.id, title="two")

        posts = repository.list_blogposts(resolve_author=True)

        assert [p.title for p in posts] == ["one", "two"]
        assert all(p.author == ada for p in posts)

    def test_update_keeps_created(self, repository):
        ada = _author(repository)
        post = _post(repository, ada.id)

        updated = repository.update_blogpost(post.id, {"title": "New"})

        assert updated.title == "New"
        assert updated.content == "C"
        assert updated.created == post.created

    def test_delete_by_author(self, repository):
        ada = _author(repository)
        alan = _author(repository, user_name="alan")
        _post(repository, ada.id)
        _post(repository, ada.id)
        keep = _post(repository, alan.id)

        assert repository.delete_blogposts_by_author(ada.id) == 2
        assert [p.id for p in repository.list_blogposts()] == [keep.id]

    def test_custom_collection_names(self, store):
        from core.database import BlogRepository

        repo = BlogRepository(store, authors_collection="writers", blogposts_collection="posts")
        ada = _author(repo)

        assert store.get("writers", ada.id) is not None
        assert store.find("authors") == []
