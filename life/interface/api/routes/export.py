"""Data export routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from fastapi.responses import JSONResponse

from life.application.usecase.auth import GetCurrentUserUseCase
from life.application.usecase.export import ExportDataRequest, ExportDataUseCase
from life.interface.api.session import require_profile

router = APIRouter(prefix="/export", tags=["export"], route_class=DishkaRoute)


@router.get("")
async def export_data(
    export_use_case: FromDishka[ExportDataUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Download everything the caller owns as a JSON file.

    Example:
        GET /export

        Response headers:
        Content-Disposition: attachment; filename="life-export-2026-10-19.json"
    """
    profile = await require_profile(get_current_user_use_case, auth_token)
    result = await export_use_case.execute(ExportDataRequest(identity_id=profile.id))
    return JSONResponse(
        content=result.snapshot.model_dump(mode="json"),
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"'
        },
    )
