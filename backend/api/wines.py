"""Wine routes."""

from typing import List

from fastapi import APIRouter, Depends, Query, Response

from api.dependencies import (
    add_wine_command,
    adjust_stock_command,
    consumption_report_query,
    delete_wine_command,
    get_wine_query,
    list_wines_query,
    refresh_consumption_date_command,
    update_notes_command,
)
from api.schemas import (
    BottlesRequest,
    ConsumptionReportResponse,
    CreateWineRequest,
    NotesRequest,
    QuantityRequest,
    WineResponse,
)
from application.wine.commands.add_wine import AddWineCommand, AddWineInput
from application.wine.commands.adjust_stock import AdjustStockCommand
from application.wine.commands.delete_wine import DeleteWineCommand
from application.wine.commands.refresh_consumption_date import (
    RefreshConsumptionDateCommand,
)
from application.wine.commands.update_notes import UpdateNotesCommand
from application.wine.queries.get_consumption_report import GetConsumptionReportQuery
from application.wine.queries.get_wine import GetWineQuery
from application.wine.queries.list_wines import ListWinesQuery

router = APIRouter(prefix="/api/wines", tags=["wines"])


@router.post("", response_model=WineResponse, status_code=201)
async def add_wine(
    body: CreateWineRequest,
    command: AddWineCommand = Depends(add_wine_command),
) -> WineResponse:
    wine = await command.execute(AddWineInput(**body.model_dump()))
    return WineResponse.from_entity(wine)


@router.get("", response_model=List[WineResponse])
async def list_wines(
    user_id: str = Query(...),
    include_empty: bool = Query(True),
    query: ListWinesQuery = Depends(list_wines_query),
) -> List[WineResponse]:
    wines = await query.by_user(user_id, include_empty=include_empty)
    return [WineResponse.from_entity(w) for w in wines]


@router.get("/{wine_id}", response_model=WineResponse)
async def get_wine(
    wine_id: str, query: GetWineQuery = Depends(get_wine_query)
) -> WineResponse:
    return WineResponse.from_entity(await query.by_id(wine_id))


@router.delete("/{wine_id}", status_code=204)
async def delete_wine(
    wine_id: str, command: DeleteWineCommand = Depends(delete_wine_command)
) -> Response:
    await command.execute(wine_id)
    return Response(status_code=204)


@router.put("/{wine_id}/quantity", response_model=WineResponse)
async def set_quantity(
    wine_id: str,
    body: QuantityRequest,
    command: AdjustStockCommand = Depends(adjust_stock_command),
) -> WineResponse:
    return WineResponse.from_entity(await command.set(wine_id, body.quantity))


@router.post("/{wine_id}/bottles/add", response_model=WineResponse)
async def add_bottles(
    wine_id: str,
    body: BottlesRequest,
    command: AdjustStockCommand = Depends(adjust_stock_command),
) -> WineResponse:
    return WineResponse.from_entity(await command.add(wine_id, body.amount))


@router.post("/{wine_id}/bottles/remove", response_model=WineResponse)
async def remove_bottles(
    wine_id: str,
    body: BottlesRequest,
    command: AdjustStockCommand = Depends(adjust_stock_command),
) -> WineResponse:
    return WineResponse.from_entity(await command.remove(wine_id, body.amount))


@router.patch("/{wine_id}/notes", response_model=WineResponse)
async def update_notes(
    wine_id: str,
    body: NotesRequest,
    command: UpdateNotesCommand = Depends(update_notes_command),
) -> WineResponse:
    return WineResponse.from_entity(await command.execute(wine_id, body.notes))


@router.post("/{wine_id}/suggested-consumption-date", response_model=WineResponse)
async def refresh_suggested_date(
    wine_id: str,
    command: RefreshConsumptionDateCommand = Depends(refresh_consumption_date_command),
) -> WineResponse:
    """Recompute the heuristic drink-by date and store it."""
    return WineResponse.from_entity(await command.execute(wine_id))


@router.get("/{wine_id}/consumption", response_model=ConsumptionReportResponse)
async def consumption_status(
    wine_id: str,
    query: GetConsumptionReportQuery = Depends(consumption_report_query),
) -> ConsumptionReportResponse:
    return ConsumptionReportResponse.from_report(await query.for_wine(wine_id))
