"""Application service: List Assets use case (query)."""

from __future__ import annotations

from sweetorya.application.dto import AssetLineDTO, asset_to_dto
from sweetorya.domain.exceptions import EntityNotFoundError
from sweetorya.domain.model.asset import Asset
from sweetorya.domain.repository.asset_repository import AssetRepository


def find_asset(asset_repo: AssetRepository, asset_id: str) -> Asset:
    for asset in asset_repo.list_all():
        if asset.id == asset_id:
            return asset
    raise EntityNotFoundError(f"Asset '{asset_id}' not found")


class ListAssetsHandler:

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    def handle(self, search: str = "") -> list[AssetLineDTO]:
        return [asset_to_dto(a) for a in self._asset_repo.list_all(search)]
