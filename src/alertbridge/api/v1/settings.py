from __future__ import annotations

from fastapi import APIRouter

from alertbridge.dependencies import SettingsStoreDep
from alertbridge.schemas.notification import PrimaryBaseURL
from alertbridge.services.settings_service import GENERAL, PRIMARY_BASE_URL

router = APIRouter()


@router.get("/primary-base-url", response_model=PrimaryBaseURL)
async def get_primary_base_url(store: SettingsStoreDep) -> PrimaryBaseURL:
    """Get the primary base URL used for dashboard links."""
    return PrimaryBaseURL(primary_base_url=await store.get(PRIMARY_BASE_URL))


@router.put("/primary-base-url", response_model=PrimaryBaseURL)
async def update_primary_base_url(
    data: PrimaryBaseURL,
    store: SettingsStoreDep,
) -> PrimaryBaseURL:
    """Set or clear the primary base URL."""
    await store.set(PRIMARY_BASE_URL, data.primary_base_url, GENERAL)
    return data
