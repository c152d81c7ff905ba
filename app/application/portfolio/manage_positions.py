"""
Use cases: Portfolio positions.

Create, list, update and delete a user's positions. Positions never
expire on their own.
Failure cases: CompanyNotFoundError on create, PositionNotFoundError on
update and delete.
"""

import logging

from app.application.portfolio.dtos import CreatePositionCommand, UpdatePositionCommand
from app.domain.portfolio.entities import PortfolioPosition
from app.domain.portfolio.errors import CompanyNotFoundError, PositionNotFoundError
from app.domain.portfolio.ports import CompanyRepository, PositionRepository

logger = logging.getLogger(__name__)


class ListPositionsUseCase:
    def __init__(self, position_repo: PositionRepository) -> None:
        self._position_repo = position_repo

    def execute(self, user_id: int) -> list[PortfolioPosition]:
        return self._position_repo.list_for_user(user_id)


class CreatePositionUseCase:
    """Opens a position in a known company."""

    def __init__(
        self,
        position_repo: PositionRepository,
        company_repo: CompanyRepository,
    ) -> None:
        self._position_repo = position_repo
        self._company_repo = company_repo

    def execute(self, command: CreatePositionCommand) -> PortfolioPosition:
        """Persist a new position.

        Raises:
            CompanyNotFoundError: If ``company_id`` is unknown.
        """
        if self._company_repo.get(command.company_id) is None:
            raise CompanyNotFoundError(str(command.company_id))

        position = self._position_repo.create(
            user_id=command.user_id,
            company_id=command.company_id,
            shares=command.shares,
            average_cost=command.average_cost,
            purchase_currency=command.purchase_currency,
        )
        logger.info(
            "Opened position id=%d user=%d company=%d",
            position.id,
            position.user_id,
            position.company_id,
        )
        return position


class UpdatePositionUseCase:
    def __init__(self, position_repo: PositionRepository) -> None:
        self._position_repo = position_repo

    def execute(self, command: UpdatePositionCommand) -> PortfolioPosition:
        position = self._position_repo.update(
            command.position_id, command.shares, command.average_cost
        )
        if position is None:
            raise PositionNotFoundError(command.position_id)
        return position


class DeletePositionUseCase:
    def __init__(self, position_repo: PositionRepository) -> None:
        self._position_repo = position_repo

    def execute(self, position_id: int) -> None:
        if not self._position_repo.delete(position_id):
            raise PositionNotFoundError(position_id)
        logger.info("Deleted position id=%d", position_id)
