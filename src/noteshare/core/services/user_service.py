"""User lookup for the collaborator picker."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..pagination import clamp_page_size
from ..repositories.user_repository import UserRepository
from ..schemas.users import UserSummary
from .interfaces import IUserService


class UserService(IUserService):
    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = get_settings()
        self.user_repo = UserRepository(session)

    async def search_users(self, query: Optional[str], limit: Optional[int] = None) -> List[UserSummary]:
        """Match ``query`` against names and emails. A blank query matches nobody."""
        query = (query or "").strip()
        if not query:
            return []
        limit = clamp_page_size(
            limit, self.settings.user_search_default_limit, self.settings.user_search_max_limit
        )
        users = await self.user_repo.search(query, limit)
        return [UserSummary.model_validate(u) for u in users]
