# 📄 File: app/modules/plant_catalog/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for the plant catalog: browsing, filtering and searching
# plants, and letting administrators add, change and delete them with photos.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /plant endpoints over PlantService with multipart create/update, attribute filters,
# public name search and admin-only writes.
#
# 🔗 Dependencies:
# - FastAPI router, Form/File/Query parameters
# - app.modules.plant_catalog.domain.services.PlantService
# - app.shared.core.dependencies, app.shared.utils.pagination
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/plant)

"""
Plants API Endpoints

Endpoints:
- GET /: List plants (paginated, default 5000 per page; filters exp, water, light, type)
- GET /search/{name}: Public name search
- GET /{plant_id}: Get one plant
- POST /: Create a plant (admin, multipart)
- PUT /{plant_id}: Update a plant (admin, multipart)
- DELETE /{plant_id}: Delete a plant (admin)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from app.modules.plant_catalog.domain.services import PlantService
from app.modules.plant_catalog.presentation.api.schemas import PlantResponse
from app.shared.core.care_levels import ExperienceLevel, LightLevel, PlantType, WaterLevel, parse_form_value
from app.shared.core.dependencies import CurrentUser, get_current_admin, get_current_user
from app.shared.infrastructure.storage import ImageStorage
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

logger = logging.getLogger(__name__)

plants_router = APIRouter()

CATALOG_PAGE_SIZE = 5000


def _optional(enum_cls, value: Optional[str], field: str):
    if value is None or not value.strip():
        return None
    return parse_form_value(enum_cls, value, field)


@plants_router.get(
    "",
    response_model=PageResponse[PlantResponse],
    summary="List plants",
    responses={204: {"description": "No plants on this page"}},
)
async def list_plants(
    params: PageParams = Depends(page_params(default_limit=CATALOG_PAGE_SIZE)),
    exp: Optional[str] = Query(None, description="Suggested experience level"),
    water: Optional[str] = Query(None, description="Water needs"),
    light: Optional[str] = Query(None, description="Luminosity needed"),
    plant_type: Optional[str] = Query(None, alias="type", description="Plant type"),
    current_user: CurrentUser = Depends(get_current_user),
    plant_service: PlantService = Depends(),
):
    plants, total = await plant_service.list_plants(
        params,
        exp=_optional(ExperienceLevel, exp, "exp"),
        water=_optional(WaterLevel, water, "water"),
        light=_optional(LightLevel, light, "light"),
        plant_type=_optional(PlantType, plant_type, "type"),
    )
    return paginated_response(plants, total)


@plants_router.get("/search/{name}", response_model=PageResponse[PlantResponse], summary="Search plants by name")
async def search_plants(name: str, plant_service: PlantService = Depends()):
    """Public search; always answers with ``{data, total}``, even when nothing matches."""
    plants = await plant_service.search_plants(name)
    return {"data": plants, "total": len(plants)}


@plants_router.get("/{plant_id}", response_model=PlantResponse, summary="Get plant")
async def get_plant(
    plant_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    plant_service: PlantService = Depends(),
):
    return await plant_service.get_plant(plant_id)


@plants_router.post("", response_model=PlantResponse, status_code=status.HTTP_201_CREATED, summary="Create plant")
async def create_plant(
    name: str = Form(...),
    plant_type: str = Form(..., alias="type"),
    exp_suggested: str = Form(..., alias="expSuggested"),
    water_needs: str = Form(..., alias="waterNeeds"),
    luminosity_needed: str = Form(..., alias="luminosityNeeded"),
    description: Optional[str] = Form(None),
    admin_id: Optional[int] = Form(None, alias="adminId"),
    plant_image: Optional[UploadFile] = File(None, alias="plantImage"),
    current_admin: CurrentUser = Depends(get_current_admin),
    plant_service: PlantService = Depends(),
):
    return await plant_service.create_plant(
        admin_id=admin_id or current_admin.person_id,
        name=name,
        plant_type=parse_form_value(PlantType, plant_type, "type"),
        exp_suggested=parse_form_value(ExperienceLevel, exp_suggested, "expSuggested"),
        water_needs=parse_form_value(WaterLevel, water_needs, "waterNeeds"),
        luminosity_needed=parse_form_value(LightLevel, luminosity_needed, "luminosityNeeded"),
        description=description,
        image=plant_image if ImageStorage.has_file(plant_image) else None,
    )


@plants_router.put("/{plant_id}", response_model=PlantResponse, summary="Update plant")
async def update_plant(
    plant_id: int,
    name: str = Form(...),
    plant_type: str = Form(..., alias="type"),
    exp_suggested: str = Form(..., alias="expSuggested"),
    water_needs: str = Form(..., alias="waterNeeds"),
    luminosity_needed: str = Form(..., alias="luminosityNeeded"),
    description: Optional[str] = Form(None),
    plant_image: Optional[UploadFile] = File(None, alias="plantImage"),
    current_admin: CurrentUser = Depends(get_current_admin),
    plant_service: PlantService = Depends(),
):
    return await plant_service.update_plant(
        plant_id,
        name=name,
        plant_type=parse_form_value(PlantType, plant_type, "type"),
        exp_suggested=parse_form_value(ExperienceLevel, exp_suggested, "expSuggested"),
        water_needs=parse_form_value(WaterLevel, water_needs, "waterNeeds"),
        luminosity_needed=parse_form_value(LightLevel, luminosity_needed, "luminosityNeeded"),
        description=description,
        image=plant_image if ImageStorage.has_file(plant_image) else None,
    )


@plants_router.delete("/{plant_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete plant")
async def delete_plant(
    plant_id: int,
    current_admin: CurrentUser = Depends(get_current_admin),
    plant_service: PlantService = Depends(),
) -> Response:
    await plant_service.delete_plant(plant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
