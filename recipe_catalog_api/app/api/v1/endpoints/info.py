"""
Information endpoint for API v1.

Returns the service name and version together with the number of
recipes in the catalog.  Publicly accessible.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from recipe_catalog_api.app.api.deps import get_container
from recipe_catalog_api.app.container import ServiceContainer

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
def get_info(container: ServiceContainer = Depends(get_container)) -> Dict[str, Any]:
    return {
        "name": container.settings.project_name,
        "version": container.settings.api_version,
        "recipes": container.recipe_service.repository.count(),
    }
