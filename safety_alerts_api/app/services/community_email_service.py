"""
Community email: e-mail addresses of every resident of a city.
"""

import logging
from typing import List

from ..core.datastore import DataStore

logger = logging.getLogger(__name__)


class CommunityEmailService:

    @classmethod
    def get_emails_by_city(cls, store: DataStore, city: str) -> List[str]:
        """E-mails of the persons whose city equals ``city``, ignoring case.

        Duplicates are kept, in store order.
        """
        logger.info("Request received for city: %s", city)
        wanted = city.casefold()
        with store.lock:
            emails = [person.email for person in store.persons if person.city.casefold() == wanted]
        if not emails:
            logger.warning("No emails found for city: %s", city)
        return emails
