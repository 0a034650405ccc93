"""User routes."""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import (
    consumption_report_query,
    get_user_query,
    register_user_command,
)
from api.schemas import RegisterUserRequest, UserResponse, WineResponse
from application.user.commands.register_user import RegisterUserCommand
from application.user.queries.get_user import GetUserQuery
from application.wine.queries.get_consumption_report import GetConsumptionReportQuery

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
async def register_user(
    body: RegisterUserRequest,
    command: RegisterUserCommand = Depends(register_user_command),
) -> UserResponse:
    user = await command.execute(body.email)
    return UserResponse.from_entity(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, query: GetUserQuery = Depends(get_user_query)
) -> UserResponse:
    user = await query.by_id(user_id)
    return UserResponse.from_entity(user)


@router.get("/{user_id}/wines/ready", response_model=List[WineResponse])
async def ready_to_drink(
    user_id: str,
    query: GetConsumptionReportQuery = Depends(consumption_report_query),
) -> List[WineResponse]:
    """Wines in their drinking window with bottles left."""
    wines = await query.ready_to_drink(user_id)
    return [WineResponse.from_entity(w) for w in wines]
