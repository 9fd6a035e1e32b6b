import os
from unittest.mock import MagicMock

import pytest
from cryptography.fernet import Fernet

# Required settings must exist before any codeguardian module is imported.
os.environ.setdefault("WEBHOOK_SECRET", "test_secret")
os.environ.setdefault("ENCRYPTION_KEY", Fernet.generate_key().decode())
os.environ.setdefault("SA_API_KEY", "test_api_key")
os.environ.setdefault("GEMINI_API_KEY", "dummy-key-for-testing")
os.environ.setdefault("LOG_DRIVER", "console")

from codeguardian.config.db import Database  # noqa: E402
from codeguardian.core.publisher import Publisher  # noqa: E402
from codeguardian.core.review_pipeline import ReviewPipeline  # noqa: E402
from codeguardian.events.dispatcher import EventDispatcher  # noqa: E402
from codeguardian.integrations.github.github import GitHub  # noqa: E402
from codeguardian.llms.llm_interface import LLMInterface  # noqa: E402
from codeguardian.models.monitored_repository import MonitoredRepository  # noqa: E402
from codeguardian.models.user import User  # noqa: E402
from codeguardian.models.webhook_event import WebhookEvent  # noqa: E402
from codeguardian.utils.encryption import CredentialCipher  # noqa: E402
from codeguardian.utils.review_store import ReviewStore  # noqa: E402

from codeguardian.tests.unit.helpers import PLAIN_ACCESS_TOKEN, REPO_FULL_NAME  # noqa: E402


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def store(database):
    return ReviewStore(database)


@pytest.fixture
def cipher():
    return CredentialCipher(Fernet.generate_key().decode())


@pytest.fixture
def owner(database, cipher):
    user = User(
        github_id="583231",
        username="octocat",
        access_token=cipher.encrypt(PLAIN_ACCESS_TOKEN),
    )
    with database.session() as session:
        session.add(user)
        session.commit()
        session.refresh(user)
    return user


@pytest.fixture
def monitored_repository(database, owner):
    repository = MonitoredRepository(
        github_repo_id="1296269",
        full_name=REPO_FULL_NAME,
        owner_id=owner.id,
        webhook_id="12345678",
    )
    with database.session() as session:
        session.add(repository)
        session.commit()
        session.refresh(repository)
    return repository


@pytest.fixture
def github():
    mock_github = MagicMock(spec=GitHub)
    mock_github.get_diff.return_value = "diff --git a/app.py b/app.py\n" + "+x\n" * 10
    mock_github.post_review.return_value = {"id": 1}
    mock_github.post_comment.return_value = {"id": 2}
    return mock_github


@pytest.fixture
def llm():
    mock_llm = MagicMock(spec=LLMInterface)
    mock_llm.model_name = "gemini-test"
    mock_llm.generate_review.return_value = "Looks good to me!"
    return mock_llm


@pytest.fixture
def publisher(store, github, cipher):
    return Publisher(store=store, provider=github, cipher=cipher)


@pytest.fixture
def pipeline(github, llm, publisher):
    return ReviewPipeline(provider=github, llm=llm, publisher=publisher)


@pytest.fixture
def dispatcher(pipeline):
    return EventDispatcher(pipeline)


@pytest.fixture
def event():
    return WebhookEvent(
        action="opened",
        repository_full_name=REPO_FULL_NAME,
        number=42,
        title="Add greeting endpoint",
        url=f"https://github.com/{REPO_FULL_NAME}/pull/42",
        diff_url=f"https://github.com/{REPO_FULL_NAME}/pull/42.diff",
    )
