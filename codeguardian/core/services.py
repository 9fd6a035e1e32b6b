from dataclasses import dataclass

from codeguardian.config import settings
from codeguardian.config.db import Database
from codeguardian.core.publisher import Publisher
from codeguardian.core.review_pipeline import ReviewPipeline
from codeguardian.events.dispatcher import EventDispatcher
from codeguardian.integrations.github.github import GitHub
from codeguardian.llms.llm_factory import create_llm
from codeguardian.llms.llm_interface import LLMInterface
from codeguardian.utils.encryption import CredentialCipher
from codeguardian.utils.logger import logger
from codeguardian.utils.review_store import ReviewStore


@dataclass
class Services:
    """Process-wide clients, built once at startup and torn down at shutdown."""

    database: Database
    store: ReviewStore
    github: GitHub
    llm: LLMInterface
    dispatcher: EventDispatcher

    @classmethod
    def from_settings(cls) -> "Services":
        database = Database(settings.DATABASE_URL, echo=settings.DEBUG_MODE)
        database.create_all()
        store = ReviewStore(database)
        github = GitHub(api_url=settings.GITHUB_API_URL, timeout=settings.HTTP_TIMEOUT)
        llm = create_llm(settings.LLM)
        publisher = Publisher(
            store=store, provider=github, cipher=CredentialCipher(settings.ENCRYPTION_KEY)
        )
        pipeline = ReviewPipeline(
            provider=github,
            llm=llm,
            publisher=publisher,
            max_diff_length=settings.MAX_DIFF_LENGTH,
            notify_on_oversized_diff=settings.NOTIFY_ON_OVERSIZED_DIFF,
        )
        logger.info("Services initialized.")
        return cls(
            database=database,
            store=store,
            github=github,
            llm=llm,
            dispatcher=EventDispatcher(pipeline),
        )

    def close(self):
        self.github.close()
        self.database.dispose()
        logger.info("Services closed.")
