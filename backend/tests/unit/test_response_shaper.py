"""Unit tests for ResponseShaper: display projections never touch the entities."""

from datetime import datetime, timezone

from blog.application.pipeline import ResponseShaper
from blog.domain.entities import Category, Comment

from tests.fakes import fixed_dates, make_article

CREATED = datetime(2024, 2, 1, 9, 5, tzinfo=timezone.utc)
COMMENTED = datetime(2024, 2, 2, 18, 45, tzinfo=timezone.utc)


def _shaper() -> ResponseShaper:
    return ResponseShaper(fixed_dates())


def test_project_formats_article_and_comment_dates():
    article = make_article(
        article_id=1,
        created_date=CREATED,
        comments=[Comment(id=5, article_id=1, text="Nice", created_date=COMMENTED)],
    )

    view = _shaper().project(article)

    assert view.created_date == "01.02.2024, 09:05"
    assert view.comments[0].created_date == "02.02.2024, 18:45"


def test_project_does_not_mutate_input():
    comment = Comment(id=5, article_id=1, text="Nice", created_date=COMMENTED)
    article = make_article(article_id=1, created_date=CREATED, comments=[comment])

    view = _shaper().project(article)

    assert article.created_date == CREATED
    assert article.comments[0].created_date == COMMENTED
    assert article.comments[0] is comment
    assert view.comments[0] is not comment


def test_single_article_without_comments_gets_empty_list():
    view = _shaper().project(make_article(article_id=1, comments=None))
    assert view.comments == []


def test_list_elements_keep_absent_comments_absent():
    views = _shaper().project([make_article(article_id=1, comments=None)])
    assert views[0].comments is None


def test_project_list_applies_per_element():
    articles = [
        make_article(article_id=1, created_date=CREATED, comments=[]),
        make_article(article_id=2, created_date=COMMENTED, comments=[]),
    ]

    views = _shaper().project(articles)

    assert [v.created_date for v in views] == ["01.02.2024, 09:05", "02.02.2024, 18:45"]
    assert all(isinstance(a.created_date, datetime) for a in articles)


def test_categories_are_copied():
    category = Category(id=3, name="Travel")
    view = _shaper().project(make_article(article_id=1, categories=[category]))

    view.categories[0].name = "Changed"

    assert category.name == "Travel"


def test_project_comments():
    comments = [Comment(id=1, article_id=2, text="First!", user_id=9, created_date=COMMENTED)]
    views = _shaper().project_comments(comments)
    assert views[0].created_date == "02.02.2024, 18:45"
    assert views[0].user_id == 9
