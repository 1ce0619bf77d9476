"""Application service: Delete Asset use case.

Meant for correcting entry mistakes; a broken or lost asset should get a
condition change instead so its cost stays in the books.
"""

from __future__ import annotations

import logging

from sweetorya.domain.repository.asset_repository import AssetRepository

logger = logging.getLogger(__name__)


class DeleteAssetHandler:

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    def handle(self, asset_id: str) -> None:
        self._asset_repo.delete(asset_id)
        logger.info("Deleted asset '%s'", asset_id)
