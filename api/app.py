# Path: api/app.py
# Purpose: Expose a FastAPI application for sermon index, search, and vocabulary operations.
# Layer: api.
# Details: Provides health checks, cached index access, filtered search, statistics, and vault-data editing.

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config import AppSettings
from core.errors import IndexBuildError, VaultDataError
from core.indexing import IndexCache, extract_filter_options
from core.models.domain import FileFormat, SearchFilter, SermonIndexSnapshot
from core.search import SearchPipeline, sort_by_date
from core.vault import VOCABULARIES, VaultDataStore


class SearchRequest(BaseModel):
    """Search body accepted in camelCase or snake_case; omitted fields impose no constraint."""

    model_config = ConfigDict(populate_by_name=True)

    query_text: Optional[str] = Field(default=None, alias="queryText")
    file_formats: Optional[List[FileFormat]] = Field(default=None, alias="fileFormats")
    locations: Optional[List[str]] = None
    services: Optional[List[str]] = None
    series: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    year_from: Optional[int] = Field(default=None, alias="yearFrom")
    year_to: Optional[int] = Field(default=None, alias="yearTo")
    sort: Optional[str] = Field(default=None, description="'newest' or 'oldest'; input order when omitted.")

    def to_filter(self) -> SearchFilter:
        return SearchFilter(
            query_text=self.query_text,
            file_formats=self.file_formats,
            locations=self.locations,
            services=self.services,
            series=self.series,
            tags=self.tags,
            year_from=self.year_from,
            year_to=self.year_to,
        )


class VocabularyItem(BaseModel):
    value: str


def create_app(
    cache: IndexCache,
    settings: AppSettings,
    vault_data: Optional[VaultDataStore] = None,
    pipeline: Optional[SearchPipeline] = None,
):  # type: ignore[override]
    """Create a FastAPI app instance serving the vault configured in ``settings``."""

    from fastapi import FastAPI, HTTPException

    app = FastAPI(title="Sermon Vault API", version="0.1.0")
    pipeline = pipeline or SearchPipeline()
    vault_data = vault_data or VaultDataStore(settings.vault_data_path)
    state: Dict[str, Optional[SermonIndexSnapshot]] = {"snapshot": None}

    def vault_root():
        if settings.vault_path is None:
            raise HTTPException(status_code=400, detail="Sermon vault path is not configured.")
        return settings.vault_path

    def rebuild() -> SermonIndexSnapshot:
        try:
            state["snapshot"] = cache.rebuild(vault_root())
        except IndexBuildError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return state["snapshot"]

    def current_snapshot() -> SermonIndexSnapshot:
        snapshot = state["snapshot"]
        if snapshot is None:
            snapshot = cache.load(vault_root())
        if snapshot is None or cache.is_stale(snapshot, settings.stale_after_seconds):
            return rebuild()
        state["snapshot"] = snapshot
        return snapshot

    @app.get("/health")
    def health() -> Dict[str, str]:
        """Return a simple health status payload."""

        return {"status": "ok"}

    @app.get("/index")
    def get_index() -> Dict[str, Any]:
        """Return the cached index, rebuilding it when absent or stale."""

        return current_snapshot().to_dict()

    @app.post("/index/rebuild")
    def rebuild_index() -> Dict[str, Any]:
        """Force a full rescan of the vault."""

        return rebuild().to_dict()

    @app.post("/search")
    def search(payload: SearchRequest) -> Dict[str, Any]:
        """Run a filtered search over the current index."""

        # core/search/pipeline.py::SearchPipeline.search - applies every present clause.
        results = pipeline.search(current_snapshot().records, payload.to_filter())
        if payload.sort in ("newest", "oldest"):
            results = sort_by_date(results, descending=payload.sort == "newest")
        return {"results": [record.to_dict() for record in results], "count": len(results)}

    @app.get("/stats")
    def stats() -> Dict[str, Any]:
        snapshot = current_snapshot()
        return {"totalCount": snapshot.total_count, "stats": snapshot.stats.to_dict()}

    @app.get("/filters")
    def filters() -> Dict[str, Any]:
        return extract_filter_options(current_snapshot().records).to_dict()

    @app.get("/vault-data")
    def get_vault_data() -> Dict[str, List[str]]:
        return vault_data.load().to_dict()

    @app.post("/vault-data/{vocabulary}")
    def add_vocabulary_item(vocabulary: str, item: VocabularyItem) -> Dict[str, List[str]]:
        if vocabulary not in VOCABULARIES:
            raise HTTPException(status_code=404, detail=f"Unknown vocabulary: {vocabulary}")
        try:
            return vault_data.add(vocabulary, item.value).to_dict()
        except VaultDataError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.delete("/vault-data/{vocabulary}/{value}")
    def remove_vocabulary_item(vocabulary: str, value: str) -> Dict[str, List[str]]:
        if vocabulary not in VOCABULARIES:
            raise HTTPException(status_code=404, detail=f"Unknown vocabulary: {vocabulary}")
        try:
            return vault_data.remove(vocabulary, value).to_dict()
        except VaultDataError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app
