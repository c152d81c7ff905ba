"""
Use cases: Executive profiles.

List profiles with their company and add new ones.
"""

from app.application.portfolio.dtos import CEOProfileView, CreateCEOProfileCommand
from app.domain.portfolio.entities import CEOProfile
from app.domain.portfolio.ports import CEOProfileRepository, CompanyRepository


class ListCEOProfilesUseCase:
    def __init__(
        self,
        profile_repo: CEOProfileRepository,
        company_repo: CompanyRepository,
    ) -> None:
        self._profile_repo = profile_repo
        self._company_repo = company_repo

    def execute(self) -> list[CEOProfileView]:
        companies = {c.id: c for c in self._company_repo.list_all()}
        return [
            CEOProfileView(profile=p, company=companies.get(p.company_id))
            for p in self._profile_repo.list_all()
        ]


class CreateCEOProfileUseCase:
    def __init__(self, profile_repo: CEOProfileRepository) -> None:
        self._profile_repo = profile_repo

    def execute(self, command: CreateCEOProfileCommand) -> CEOProfile:
        return self._profile_repo.create(
            company_id=command.company_id,
            name=command.name,
            title=command.title,
            tenure=command.tenure,
            religion=command.religion,
            strategy=command.strategy,
            leadership=command.leadership,
            photo_url=command.photo_url,
        )
