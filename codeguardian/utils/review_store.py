from typing import List, Optional

from sqlmodel import select, col

from codeguardian.config.db import Database
from codeguardian.models.monitored_repository import MonitoredRepository
from codeguardian.models.review_record import ReviewRecord
from codeguardian.models.user import User
from codeguardian.utils.logger import logger


class ReviewStore:
    """Database reads and writes used by the review pipeline and the history API.

    Monitored repositories and users are only read here; their rows are
    written by the activation flow. Review records are append-only.
    """

    def __init__(self, database: Database):
        self.database = database

    def get_active_repository(self, full_name: str) -> Optional[MonitoredRepository]:
        with self.database.session() as session:
            statement = (
                select(MonitoredRepository)
                .where(MonitoredRepository.full_name == full_name)
                .where(MonitoredRepository.is_active == True)  # noqa: E712
                .limit(1)
            )
            return session.exec(statement).first()

    def get_repository(self, repository_id: int) -> Optional[MonitoredRepository]:
        with self.database.session() as session:
            return session.get(MonitoredRepository, repository_id)

    def get_user(self, user_id: int) -> Optional[User]:
        with self.database.session() as session:
            return session.get(User, user_id)

    def save_review_record(
        self,
        repository_id: int,
        pull_request_title: str,
        pull_request_number: int,
        pull_request_url: str,
        review_content: str,
    ) -> ReviewRecord:
        record = ReviewRecord(
            repository_id=repository_id,
            pull_request_title=pull_request_title,
            pull_request_number=pull_request_number,
            pull_request_url=pull_request_url,
            review_content=review_content,
        )
        with self.database.session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
        logger.info(
            f"Saved review record {record.id} for repository {repository_id} PR #{pull_request_number}"
        )
        return record

    def list_reviews(self, repository_id: int) -> List[ReviewRecord]:
        with self.database.session() as session:
            statement = (
                select(ReviewRecord)
                .where(ReviewRecord.repository_id == repository_id)
                .order_by(col(ReviewRecord.created_at).desc(), col(ReviewRecord.id).desc())
            )
            return list(session.exec(statement).all())
