"""Unit tests for the ArticleService."""

from datetime import datetime, timezone

import pytest

from blog.application.schemas import ArticleCreate, ArticleUpdate
from blog.application.services import ArticleService
from blog.domain.entities import Category, Comment, User
from blog.domain.exceptions import EntityNotFoundError, PageNotFoundError

from tests.fakes import (
    FIXED_NOW,
    FakeArticleRepository,
    FakeCategoryRepository,
    FakeUserRepository,
    fixed_dates,
    make_article,
)

TRAVEL = Category(id=1, name="Travel")
MUSIC = Category(id=2, name="Music")


def _form(**overrides) -> dict:
    form = {
        "title": "An article title that is comfortably over thirty characters",
        "announce": "An announce that is also comfortably over thirty characters",
        "categories": [1],
        "created_date": "01.02.2024",
    }
    form.update(overrides)
    return form


def _service(articles=None) -> tuple[ArticleService, FakeArticleRepository]:
    repository = FakeArticleRepository(articles)
    service = ArticleService(
        repository,
        FakeCategoryRepository([TRAVEL, MUSIC]),
        FakeUserRepository([User(id=7, first_name="Anna", last_name="Smith", email="a@b.c", password_hash="x")]),
        fixed_dates(),
    )
    return service, repository


@pytest.mark.asyncio
async def test_create_article_stores_canonical_date():
    service, _ = _service()
    article = await service.create_article(ArticleCreate.model_validate(_form()))
    assert article.id is not None
    assert article.created_date == datetime(2024, 2, 1, tzinfo=timezone.utc)
    assert article.categories == [TRAVEL]
    assert article.comments == []


@pytest.mark.asyncio
async def test_create_article_today_uses_current_instant():
    service, _ = _service()
    article = await service.create_article(ArticleCreate.model_validate(_form(created_date="21.03.2024")))
    assert article.created_date == FIXED_NOW


@pytest.mark.asyncio
async def test_create_article_with_unknown_category():
    service, repository = _service()
    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.create_article(ArticleCreate.model_validate(_form(categories=[1, 99])))
    assert exc_info.value.entity_type == "Category"
    assert exc_info.value.entity_id == 99
    assert "create" not in repository.calls


@pytest.mark.asyncio
async def test_get_article_not_found():
    service, _ = _service()
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_list_page_returns_bounds():
    service, _ = _service([make_article(article_id=i) for i in range(1, 11)])
    page = await service.list_page(2)
    assert page.articles_count == 10
    assert page.pages_count == 2
    assert len(page.articles) == 2


@pytest.mark.asyncio
async def test_list_page_past_the_end():
    service, _ = _service([make_article(article_id=i) for i in range(1, 11)])
    with pytest.raises(PageNotFoundError) as exc_info:
        await service.list_page(5)
    assert str(exc_info.value) == "Page 5 not found"


@pytest.mark.asyncio
async def test_first_page_of_empty_feed():
    service, _ = _service()
    page = await service.list_page(1)
    assert page.articles == []
    assert page.pages_count == 0


@pytest.mark.asyncio
async def test_category_page_requires_existing_category():
    service, repository = _service()
    with pytest.raises(EntityNotFoundError):
        await service.list_category_page(42, 1)
    assert "get_page_by_category" not in repository.calls


@pytest.mark.asyncio
async def test_category_page_filters_articles():
    service, _ = _service([
        make_article(article_id=1, categories=[TRAVEL]),
        make_article(article_id=2, categories=[MUSIC]),
    ])
    category, page = await service.list_category_page(2, 1)
    assert category == MUSIC
    assert [a.id for a in page.articles] == [2]


@pytest.mark.asyncio
async def test_update_article():
    service, repository = _service([make_article(article_id=1, categories=[TRAVEL])])
    article = await service.get_article(1)
    updated = await service.update_article(
        article, ArticleUpdate.model_validate(_form(title="A brand new title that is long enough", categories=[2]))
    )
    assert updated.title == "A brand new title that is long enough"
    assert updated.categories == [MUSIC]
    assert repository.calls.count("get_by_id") == 1


@pytest.mark.asyncio
async def test_delete_article_returns_deleted_entity():
    service, _ = _service([make_article(article_id=3)])
    deleted = await service.delete_article(3)
    assert deleted.id == 3
    with pytest.raises(EntityNotFoundError):
        await service.get_article(3)


@pytest.mark.asyncio
async def test_list_by_author_requires_user():
    service, _ = _service()
    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.list_by_author(8)
    assert exc_info.value.entity_type == "User"


@pytest.mark.asyncio
async def test_list_commented_by_author_skips_uncommented():
    comment = Comment(id=1, article_id=1, text="Great read, thanks a lot!")
    service, _ = _service([
        make_article(article_id=1, author_id=7, comments=[comment]),
        make_article(article_id=2, author_id=7, comments=[]),
        make_article(article_id=3, author_id=8, comments=[comment]),
    ])
    articles = await service.list_commented_by_author(7)
    assert [a.id for a in articles] == [1]


@pytest.mark.asyncio
async def test_most_discussed_counts_comments():
    comments = [Comment(id=i, article_id=1, text="...") for i in range(3)]
    service, _ = _service([
        make_article(article_id=1, comments=comments),
        make_article(article_id=2, comments=comments[:1]),
        make_article(article_id=3, comments=[]),
    ])
    articles = await service.list_most_discussed(4)
    assert [(a.id, a.comments_count) for a in articles] == [(1, 3), (2, 1)]


@pytest.mark.asyncio
async def test_unaddressable_page_never_reaches_storage():
    service, repository = _service([make_article(article_id=1)])
    with pytest.raises(PageNotFoundError) as exc_info:
        await service.list_page(10**20)
    assert str(exc_info.value) == "Page 100000000000000000000 not found"
    assert "get_page" not in repository.calls
