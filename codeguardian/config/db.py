from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from codeguardian.utils.logger import logger


class Database:
    """Owns the SQLAlchemy engine for the lifetime of the process.

    Constructed once at startup and handed to whatever needs a session;
    there is no module-level engine.
    """

    def __init__(self, database_url: str, echo: bool = False):
        connect_args = {}
        engine_kwargs = {}
        if database_url.startswith("sqlite"):
            logger.info("Using SQLite database.")
            # Sessions are opened from background task threads.
            connect_args["check_same_thread"] = False
            if ":memory:" in database_url or database_url == "sqlite://":
                # Every connection must see the same in-memory database.
                engine_kwargs["poolclass"] = StaticPool
        else:
            logger.info("Using a non-SQLite database (e.g., PostgreSQL).")

        self.url = database_url
        self.engine = create_engine(
            database_url, echo=echo, connect_args=connect_args, **engine_kwargs
        )
        logger.info("Database engine created successfully.")

    def create_all(self):
        # Import the table models so they are registered on the metadata.
        from codeguardian.models import monitored_repository, review_record, user  # noqa: F401

        SQLModel.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session

    def dispose(self):
        self.engine.dispose()
