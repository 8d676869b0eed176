"""
Table bootstrap for the Postgres store.
"""

from __future__ import annotations

import logging

from core.db import Database

logger = logging.getLogger(__name__)

USERS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS users
(
    id UUID NOT NULL,
    name varchar,
    email varchar,

    PRIMARY KEY (id),
    UNIQUE (email)
)
"""

POSTS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS posts
(
    id UUID NOT NULL,
    user_id UUID NOT NULL,
    title varchar NOT NULL,
    content TEXT,

    PRIMARY KEY (id),
    FOREIGN KEY (user_id) REFERENCES users (id) ON DELETE CASCADE ON UPDATE CASCADE
)
"""

POSTS_USER_INDEX_DDL = "CREATE INDEX IF NOT EXISTS idx_user_id ON posts(user_id)"


async def ensure_tables(database: Database) -> None:
    logger.info("ensure_table table=users")
    await database.execute(USERS_TABLE_DDL)

    logger.info("ensure_table table=posts")
    await database.execute(POSTS_TABLE_DDL)
    await database.execute(POSTS_USER_INDEX_DDL)


async def drop_tables(database: Database) -> None:
    # posts first: it references users.
    logger.info("drop_tables tables=posts,users")
    await database.execute("DROP TABLE IF EXISTS posts")
    await database.execute("DROP TABLE IF EXISTS users")
