"""FastAPI dependencies wiring use cases to the configured repositories."""

from fastapi import Depends

from application.user.commands.register_user import RegisterUserCommand
from application.user.queries.get_user import GetUserQuery
from application.wine.commands.add_wine import AddWineCommand
from application.wine.commands.adjust_stock import AdjustStockCommand
from application.wine.commands.delete_wine import DeleteWineCommand
from application.wine.commands.refresh_consumption_date import (
    RefreshConsumptionDateCommand,
)
from application.wine.commands.update_notes import UpdateNotesCommand
from application.wine.queries.get_consumption_report import GetConsumptionReportQuery
from application.wine.queries.get_wine import GetWineQuery
from application.wine.queries.list_wines import ListWinesQuery
from domain.user.core.ports.user_repository import IUserRepository
from domain.wine.core.ports.wine_repository import IWineRepository
from infrastructure.persistence.factory import get_user_repository, get_wine_repository


def wine_repository() -> IWineRepository:
    return get_wine_repository()


def user_repository() -> IUserRepository:
    return get_user_repository()


def register_user_command(
    users: IUserRepository = Depends(user_repository),
) -> RegisterUserCommand:
    return RegisterUserCommand(users)


def get_user_query(users: IUserRepository = Depends(user_repository)) -> GetUserQuery:
    return GetUserQuery(users)


def add_wine_command(
    wines: IWineRepository = Depends(wine_repository),
    users: IUserRepository = Depends(user_repository),
) -> AddWineCommand:
    return AddWineCommand(wines, users)


def adjust_stock_command(
    wines: IWineRepository = Depends(wine_repository),
) -> AdjustStockCommand:
    return AdjustStockCommand(wines)


def update_notes_command(
    wines: IWineRepository = Depends(wine_repository),
) -> UpdateNotesCommand:
    return UpdateNotesCommand(wines)


def refresh_consumption_date_command(
    wines: IWineRepository = Depends(wine_repository),
) -> RefreshConsumptionDateCommand:
    return RefreshConsumptionDateCommand(wines)


def delete_wine_command(
    wines: IWineRepository = Depends(wine_repository),
) -> DeleteWineCommand:
    return DeleteWineCommand(wines)


def get_wine_query(wines: IWineRepository = Depends(wine_repository)) -> GetWineQuery:
    return GetWineQuery(wines)


def list_wines_query(wines: IWineRepository = Depends(wine_repository)) -> ListWinesQuery:
    return ListWinesQuery(wines)


def consumption_report_query(
    wines: IWineRepository = Depends(wine_repository),
) -> GetConsumptionReportQuery:
    return GetConsumptionReportQuery(wines)
