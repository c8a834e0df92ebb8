# 📄 File: app/modules/payments/presentation/api/v1/payments.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for payment receipts.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /payment endpoints over PaymentService; all operations require authentication.
#
# 🔗 Dependencies:
# - FastAPI router, PaymentService, get_current_user
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/payment)

from fastapi import APIRouter, Depends, Response, status

from app.modules.payments.domain.services import PaymentService
from app.modules.payments.presentation.api.schemas import PaymentRequest, PaymentResponse
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

payments_router = APIRouter()


@payments_router.get(
    "",
    response_model=PageResponse[PaymentResponse],
    summary="List payments",
    responses={204: {"description": "No payments on this page"}},
)
async def list_payments(
    params: PageParams = Depends(page_params()),
    current_user: CurrentUser = Depends(get_current_user),
    payment_service: PaymentService = Depends(),
):
    payments, total = await payment_service.list_payments(params)
    return paginated_response(payments, total)


@payments_router.get("/user/{user_id}", response_model=PageResponse[PaymentResponse], summary="Payments of a user")
async def payments_of_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    payment_service: PaymentService = Depends(),
):
    """Always answers with ``{data, total}``, even for users without payments."""
    payments = await payment_service.payments_of_user(user_id)
    return {"data": payments, "total": len(payments)}


@payments_router.get("/{payment_id}", response_model=PaymentResponse, summary="Get payment")
async def get_payment(
    payment_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    payment_service: PaymentService = Depends(),
):
    return await payment_service.get_payment(payment_id)


@payments_router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED,
                      summary="Record a payment")
async def create_payment(
    request: PaymentRequest,
    current_user: CurrentUser = Depends(get_current_user),
    payment_service: PaymentService = Depends(),
):
    return await payment_service.record_payment(request.user_id, request.title, request.creation_date)


@payments_router.put("/{payment_id}", response_model=PaymentResponse, summary="Update a payment")
async def update_payment(
    payment_id: int,
    request: PaymentRequest,
    current_user: CurrentUser = Depends(get_current_user),
    payment_service: PaymentService = Depends(),
):
    return await payment_service.update_payment(payment_id, request.user_id, request.title, request.creation_date)


@payments_router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a payment")
async def delete_payment(
    payment_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    payment_service: PaymentService = Depends(),
) -> Response:
    await payment_service.delete_payment(payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
