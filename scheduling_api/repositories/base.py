from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import Executable
from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """
    Shared plumbing for repositories bound to one request's AsyncSession.

    Statements are SQLAlchemy constructs, so caller values always travel as bound
    parameters.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable) -> Result:
        return await self.session.execute(statement)

    async def fetch_all(self, statement: Executable) -> List[Any]:
        """Run `statement` and return the first column of every row."""
        result = await self.execute(statement)
        return list(result.scalars())

    async def fetch_one(self, statement: Executable) -> Optional[Any]:
        """Run `statement` and return the single row's first column, or None."""
        result = await self.execute(statement)
        return result.scalar_one_or_none()

    async def commit(self) -> None:
        await self.session.commit()
