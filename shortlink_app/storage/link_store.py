import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import delete, or_, select, text, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shortlink_app.exceptions import DuplicateCode, NotFound, StorageError
from shortlink_app.models.link import Link, utcnow

logger = logging.getLogger(__name__)


class LinkStore:
    """
    Persistence for Link rows on top of a SQLAlchemy session.

    The session comes from the shared connection pool and is injected, so
    tests can hand in a session bound to a throw-away database.

    Guarantees:
    - create: the unique constraint on `code` decides conflicts, not the
      caller's pre-check
    - redirect_and_increment: one UPDATE ... RETURNING, so concurrent
      redirects serialize in the database and no increment is lost
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _transaction(self, operation: str, commit: bool = True):
        """Commit writes on success; roll back and wrap driver errors on failure."""
        try:
            yield
            if commit:
                self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"{operation}: {exc}") from exc

    def exists(self, code: str) -> bool:
        """Cheap existence check. Racy by nature; only an early exit."""
        with self._transaction("exists", commit=False):
            found = self.db.execute(
                select(Link.id).where(Link.code == code)
            ).first()
        return found is not None

    def create(self, code: str, url: str) -> Link:
        """
        Insert a new link with zero clicks.

        Raises:
            DuplicateCode: a row with this code already exists
            StorageError: any other database failure
        """
        link = Link(code=code, url=url, click_count=0, created_at=utcnow())
        try:
            self.db.add(link)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Code %s rejected by unique constraint", code)
            raise DuplicateCode() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"create: {exc}") from exc

        with self._transaction("create", commit=False):
            self.db.refresh(link)
        return link

    def redirect_and_increment(self, code: str) -> str:
        """
        Record a click and return the target URL in a single statement.

        Raises:
            NotFound: no link has this code (nothing is written)
        """
        stmt = (
            update(Link)
            .where(Link.code == code)
            .values(
                click_count=Link.click_count + 1,
                last_clicked_at=utcnow()
            )
            .returning(Link.url)
            .execution_options(synchronize_session=False)
        )
        with self._transaction("redirect"):
            url = self.db.execute(stmt).scalar_one_or_none()

        if url is None:
            raise NotFound()
        return url

    def delete(self, code: str) -> None:
        """
        Hard-delete the link.

        Raises:
            NotFound: no link has this code, including a repeated delete
        """
        stmt = (
            delete(Link)
            .where(Link.code == code)
            .returning(Link.id)
            .execution_options(synchronize_session=False)
        )
        with self._transaction("delete"):
            deleted_id = self.db.execute(stmt).scalar_one_or_none()

        if deleted_id is None:
            raise NotFound()

    def get(self, code: str) -> Link:
        with self._transaction("get", commit=False):
            link = self.db.execute(
                select(Link).where(Link.code == code)
                .execution_options(populate_existing=True)
            ).scalar_one_or_none()

        if link is None:
            raise NotFound()
        return link

    def list(self, query: Optional[str] = None) -> List[Link]:
        """All links, newest first, optionally filtered by code/url substring."""
        stmt = (
            select(Link)
            .order_by(Link.created_at.desc(), Link.id.desc())
            .execution_options(populate_existing=True)
        )
        if query:
            pattern = f"%{query}%"
            stmt = stmt.where(or_(Link.code.ilike(pattern), Link.url.ilike(pattern)))

        with self._transaction("list", commit=False):
            links = list(self.db.execute(stmt).scalars().all())
        return links

    def ping(self) -> None:
        """Round-trip to the database; raises StorageError if unreachable."""
        with self._transaction("ping", commit=False):
            self.db.execute(text("SELECT 1"))
