# 📄 File: app/modules/advertising/presentation/api/v1/ads.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for advertisements: the app asks for a random running banner, and administrators
# upload, change and remove banners.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /ad endpoints over AdService: paginated listing, single-field lookups, counts,
# public random selection and admin-only multipart writes.
#
# 🔗 Dependencies:
# - FastAPI router, Form/File parameters
# - app.modules.advertising.domain.services.AdService
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/ad)

"""
Ads API Endpoints

Endpoints:
- GET /: List ads (paginated)
- GET /count: Total and active ad counts
- GET /random: A random ad currently showing (public, 204 when none)
- GET /start/{ad_id}, /end/{ad_id}: Window boundaries
- GET /creator/{ad_id}: Admin who created the ad
- GET /{ad_id}: Get one ad
- POST /, PUT /{ad_id}: Create or update an ad (admin, multipart)
- DELETE /{ad_id}: Delete an ad and its file (admin)
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from app.modules.advertising.domain.services import AdService
from app.modules.advertising.presentation.api.schemas import AdCountResponse, AdResponse
from app.shared.core.dependencies import CurrentUser, get_current_admin, get_current_user
from app.shared.infrastructure.storage import ImageStorage
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

logger = logging.getLogger(__name__)

ads_router = APIRouter()


@ads_router.get(
    "",
    response_model=PageResponse[AdResponse],
    summary="List ads",
    responses={204: {"description": "No ads on this page"}},
)
async def list_ads(
    params: PageParams = Depends(page_params()),
    current_user: CurrentUser = Depends(get_current_user),
    ad_service: AdService = Depends(),
):
    ads, total = await ad_service.list_ads(params)
    return paginated_response(ads, total)


@ads_router.get("/count", response_model=AdCountResponse, summary="Count ads")
async def count_ads(
    current_user: CurrentUser = Depends(get_current_user),
    ad_service: AdService = Depends(),
):
    return await ad_service.counts()


@ads_router.get(
    "/random",
    response_model=AdResponse,
    summary="Random showing ad",
    responses={204: {"description": "No ad is currently showing"}},
)
async def random_ad(ad_service: AdService = Depends()):
    ad = await ad_service.random_showing_ad()
    if ad is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return ad


@ads_router.get("/start/{ad_id}", response_model=datetime, summary="Ad start date")
async def get_start_date(
    ad_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    ad_service: AdService = Depends(),
):
    return (await ad_service.get_ad(ad_id)).start_date


@ads_router.get("/end/{ad_id}", response_model=datetime, summary="Ad end date")
async def get_end_date(
    ad_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    ad_service: AdService = Depends(),
):
    return (await ad_service.get_ad(ad_id)).end_date


@ads_router.get("/creator/{ad_id}", response_model=int, summary="Ad creator")
async def get_creator(
    ad_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    ad_service: AdService = Depends(),
):
    return (await ad_service.get_ad(ad_id)).admin_id


@ads_router.get("/{ad_id}", response_model=AdResponse, summary="Get ad")
async def get_ad(
    ad_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    ad_service: AdService = Depends(),
):
    return await ad_service.get_ad(ad_id)


@ads_router.post("", response_model=AdResponse, status_code=status.HTTP_201_CREATED, summary="Create ad")
async def create_ad(
    start_date: datetime = Form(..., alias="startDate"),
    end_date: datetime = Form(..., alias="endDate"),
    is_active: bool = Form(False, alias="isActive"),
    admin_id: Optional[int] = Form(None, alias="adminId"),
    ad_file: Optional[UploadFile] = File(None, alias="adFile"),
    current_admin: CurrentUser = Depends(get_current_admin),
    ad_service: AdService = Depends(),
):
    return await ad_service.create_ad(
        admin_id=admin_id or current_admin.person_id,
        is_active=is_active,
        start_date=start_date,
        end_date=end_date,
        ad_file=ad_file if ImageStorage.has_file(ad_file) else None,
    )


@ads_router.put("/{ad_id}", response_model=AdResponse, summary="Update ad")
async def update_ad(
    ad_id: int,
    start_date: datetime = Form(..., alias="startDate"),
    end_date: datetime = Form(..., alias="endDate"),
    is_active: bool = Form(False, alias="isActive"),
    admin_id: Optional[int] = Form(None, alias="adminId"),
    ad_file: Optional[UploadFile] = File(None, alias="adFile"),
    current_admin: CurrentUser = Depends(get_current_admin),
    ad_service: AdService = Depends(),
):
    return await ad_service.update_ad(
        ad_id,
        admin_id=admin_id or current_admin.person_id,
        is_active=is_active,
        start_date=start_date,
        end_date=end_date,
        ad_file=ad_file if ImageStorage.has_file(ad_file) else None,
    )


@ads_router.delete("/{ad_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete ad")
async def delete_ad(
    ad_id: int,
    current_admin: CurrentUser = Depends(get_current_admin),
    ad_service: AdService = Depends(),
) -> Response:
    await ad_service.delete_ad(ad_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
