"""
Shared fixtures.

Every test that touches storage gets a fresh in-memory SQLite database
(aiosqlite driver) holding the canonical news fixture: 3 topics,
4 users, 12 articles and 18 comments.
"""

import os
from datetime import datetime, timezone

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import httpx  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy import insert  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.infrastructure.database import configure_engine, create_session_factory  # noqa: E402
from app.infrastructure.news.tables import articles, comments, metadata, topics, users  # noqa: E402
from app.main import create_app  # noqa: E402


def _article_date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, 12, 21, 54, tzinfo=timezone.utc)


def _comment_date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, 12, 36, 3, tzinfo=timezone.utc)


TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

_ARTICLE_ROWS = [
    (1, "Living in the shadow of a great man", "mitch", "butter_bridge",
     "I find this existence challenging", _article_date(2018, 11, 15), 100),
    (2, "Sony Vaio; or, The Laptop", "mitch", "icellusedkars",
     "Call me Mitchell.", _article_date(2014, 11, 16), 0),
    (3, "Eight pug gifs that remind me of mitch", "mitch", "icellusedkars",
     "some gifs", _article_date(2010, 11, 17), 0),
    (4, "Student SUES Mitch!", "mitch", "rogersop",
     "We all love Mitch and his wonderful, unique typing style.", _article_date(2006, 11, 18), 0),
    (5, "UNCOVERED: catspiracy to bring down democracy", "cats", "rogersop",
     "Bastet walks amongst us, and the cats are taking arms!", _article_date(2002, 11, 19), 0),
    (6, "A", "mitch", "icellusedkars", "Delicious tin of cat food", _article_date(1998, 11, 20), 0),
    (7, "Z", "mitch", "icellusedkars", "I was hungry.", _article_date(1994, 11, 21), 0),
    (8, "Does Mitch predate civilisation?", "mitch", "icellusedkars",
     "Archaeologists have uncovered a gigantic statue.", _article_date(1990, 11, 22), 0),
    (9, "They're not exactly dogs, are they?", "mitch", "butter_bridge",
     "Well? Think about it.", _article_date(1986, 11, 23), 0),
    (10, "Seven inspirational thought leaders from Manchester UK", "mitch", "rogersop",
     "Who are we kidding, there is only one, and it's Mitch!", _article_date(1982, 11, 24), 0),
    (11, "Am I a cat?", "mitch", "icellusedkars",
     "Having run out of ideas for articles, I am staring at the wall.", _article_date(1978, 11, 25), 0),
    (12, "Moustache", "mitch", "butter_bridge", "Have you seen the size of that thing?",
     _article_date(1974, 11, 26), 0),
]

ARTICLES = [
    dict(zip(("article_id", "title", "topic", "author", "body", "created_at", "votes"), row))
    for row in _ARTICLE_ROWS
]

_COMMENT_ROWS = [
    (1, 9, "butter_bridge", 16, 2017,
     "Oh, I've got compassion running out of my nose, pal! I'm the Sultan of Sentiment!"),
    (2, 1, "butter_bridge", 14, 2016,
     "The beautiful thing about treasure is that it exists. Got to find out what kind of "
     "sheets these are; not cotton, not rayon, silky."),
    (3, 1, "icellusedkars", 100, 2015,
     "Replacing the quiet elegance of the dark suit and tie with the casual indifference "
     "of these muted earth tones is a form of fashion suicide."),
    (4, 1, "icellusedkars", -100, 2014, " I carry a log, yes. Is it funny to you? It is not to me."),
    (5, 1, "icellusedkars", 0, 2013, "I hate streaming noses"),
    (6, 1, "icellusedkars", 0, 2012, "I hate streaming eyes even more"),
    (7, 1, "icellusedkars", 0, 2011, "Lobster pot"),
    (8, 1, "icellusedkars", 0, 2010, "Delicious crackerbreads"),
    (9, 1, "icellusedkars", 0, 2009, "Superficially charming"),
    (10, 1, "icellusedkars", 0, 2008, "git push origin master"),
    (11, 1, "icellusedkars", 0, 2007, "Ambidextrous marsupial"),
    (12, 1, "icellusedkars", 0, 2006, "Massive intercranial brain haemorrhage"),
    (13, 1, "icellusedkars", 0, 2005, "Fruit pastilles"),
    (14, 5, "icellusedkars", 16, 2004, "What do you see? I have no idea where this will lead us."),
    (15, 5, "butter_bridge", 1, 2003, "I am 100% sure that we're not completely sure."),
    (16, 6, "butter_bridge", 1, 2002, "This is a bad article name"),
    (17, 9, "icellusedkars", 20, 2001, "The owls are not what they seem."),
    (18, 1, "butter_bridge", 16, 2000, "This morning, I showered for nine minutes."),
]

COMMENTS = [
    {
        "comments_id": comments_id,
        "article_id": article_id,
        "author": author,
        "votes": votes,
        "created_at": _comment_date(year, 11, 22),
        "body": body,
    }
    for comments_id, article_id, author, votes, year, body in _COMMENT_ROWS
]


@pytest_asyncio.fixture
async def engine():
    """An in-memory database with the schema created and the fixture loaded."""
    engine = configure_engine(
        create_async_engine(
            "sqlite+aiosqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(insert(topics), TOPICS)
        await conn.execute(insert(users), USERS)
        await conn.execute(insert(articles), ARTICLES)
        await conn.execute(insert(comments), COMMENTS)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    async with create_session_factory(engine)() as session:
        yield session


@pytest_asyncio.fixture
async def client(engine):
    """An HTTP client talking to an app bound to the seeded database."""
    app = create_app(engine=engine)
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
