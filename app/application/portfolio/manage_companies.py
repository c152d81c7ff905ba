"""
Use cases: Company catalog.

List, create and update the financials of watchlist companies.
Failure cases: CompanyNotFoundError on update of an unknown id.
"""

import logging

from app.application.portfolio.dtos import CreateCompanyCommand, UpdateFinancialsCommand
from app.domain.portfolio.entities import Company
from app.domain.portfolio.errors import CompanyNotFoundError
from app.domain.portfolio.ports import CompanyRepository

logger = logging.getLogger(__name__)


class ListCompaniesUseCase:
    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def execute(self) -> list[Company]:
        return self._company_repo.list_all()


class CreateCompanyUseCase:
    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def execute(self, command: CreateCompanyCommand) -> Company:
        company = self._company_repo.create(
            name=command.name,
            ticker=command.ticker,
            sector=command.sector,
            currency=command.currency,
            financials=command.financials,
        )
        logger.info("Created company id=%d ticker=%s", company.id, company.ticker)
        return company


class UpdateCompanyFinancialsUseCase:
    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def execute(self, command: UpdateFinancialsCommand) -> Company:
        """Replace the financials of a company.

        Raises:
            CompanyNotFoundError: If the company does not exist.
        """
        company = self._company_repo.update_financials(
            command.company_id, command.financials
        )
        if company is None:
            raise CompanyNotFoundError(str(command.company_id))
        return company
