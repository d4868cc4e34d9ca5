import logging
from typing import List, Optional

from shortlink_app.config import settings
from shortlink_app.exceptions import DuplicateCode, NotFound, ValidationError
from shortlink_app.models.link import Link
from shortlink_app.services.short_code_strategies import (
    RandomShortCodeStrategy,
    ShortCodeStrategy
)
from shortlink_app.services.validators import is_valid_code, is_valid_url, normalize_url
from shortlink_app.storage.link_store import LinkStore

logger = logging.getLogger(__name__)


def default_code_strategy() -> ShortCodeStrategy:
    return RandomShortCodeStrategy(
        length=settings.code_length,
        max_attempts=settings.code_max_attempts,
        fallback_length=settings.fallback_code_length
    )


class LinkService:
    """
    Orchestrates validation, code allocation and storage.

    Dependencies are injected:
    - store: LinkStore bound to the request's session
    - code_strategy: how codes are generated when the client gives none

    Validation always happens before the first storage call.
    """

    def __init__(
        self,
        store: LinkStore,
        code_strategy: Optional[ShortCodeStrategy] = None
    ):
        self.store = store
        self.code_strategy = code_strategy or default_code_strategy()

    def create_link(self, url: str, code: Optional[str] = None) -> Link:
        """Create a link, generating a code if none was supplied.

        Raises:
            ValidationError: missing/invalid URL or badly formatted code
            DuplicateCode: the code is already in use
        """
        if not url or not isinstance(url, str):
            raise ValidationError("URL is required")
        if not is_valid_url(url):
            raise ValidationError("Invalid URL format")

        target = normalize_url(url)

        if code:
            if not is_valid_code(code):
                raise ValidationError("Code must match [A-Za-z0-9]{6,8}")
            # Early exit only; the unique constraint is authoritative
            if self.store.exists(code):
                raise DuplicateCode()
        else:
            code = self.code_strategy.generate(self.store)

        link = self.store.create(code, target)
        logger.info("Created link %s -> %s", link.code, link.url)
        return link

    def resolve(self, code: str) -> str:
        """Record a click and return the target URL.

        Strings that cannot be codes are reported as unknown without a query.
        """
        if not is_valid_code(code):
            raise NotFound()
        url = self.store.redirect_and_increment(code)
        logger.debug("Redirecting %s -> %s", code, url)
        return url

    def delete_link(self, code: str) -> None:
        self.store.delete(code)
        logger.info("Deleted link %s", code)

    def get_link(self, code: str) -> Link:
        return self.store.get(code)

    def list_links(self, query: Optional[str] = None) -> List[Link]:
        return self.store.list(query=query)
