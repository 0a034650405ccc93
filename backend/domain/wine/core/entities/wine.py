"""Wine entity - bottles of one wine held in a user's cellar."""

from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional, Union

from domain.shared.errors import DomainError
from domain.shared.types import ensure_utc, utc_now
from domain.wine.core.value_objects.wine_type import WineType


@dataclass(frozen=True)
class WineProps:
    """Snapshot of every Wine attribute.

    Immutable: the entity swaps in a new snapshot on each successful
    mutation, so a failed call never leaves a half-applied state. The type
    is coerced to WineType and naive datetimes are read as UTC whichever
    way the snapshot is built.
    """

    id: str
    user_id: str
    name: str
    vintage: int
    coupage: str
    type: WineType
    cellar_entry_date: datetime
    quantity: int
    alcohol_content: float
    denomination: str
    winery: str
    created_at: datetime
    updated_at: datetime
    suggested_consumption_date: Optional[datetime] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        try:
            wine_type = WineType(self.type)
        except ValueError:
            raise DomainError.invalid_data(
                "Wine", f"unknown wine type '{self.type}'"
            ) from None
        object.__setattr__(self, "type", wine_type)

        for key in ("cellar_entry_date", "created_at", "updated_at"):
            object.__setattr__(self, key, ensure_utc(getattr(self, key)))
        if self.suggested_consumption_date is not None:
            object.__setattr__(
                self,
                "suggested_consumption_date",
                ensure_utc(self.suggested_consumption_date),
            )


class Wine:
    """
    Entity: a wine and how many bottles of it are in the cellar.

    Invariants:
    - quantity >= 0 at all times
    - updated_at is refreshed by every successful mutation and by nothing else
    - vintage is not validated against the current year

    Construction goes through ``create`` (new wine, timestamps stamped now)
    or ``reconstitute`` (loaded from storage, timestamps kept verbatim).

    Example:
        >>> wine = Wine.create(
        ...     id="w1", user_id="u1", name="Priorat", vintage=2019,
        ...     coupage="Garnacha, Cariñena", type="red",
        ...     cellar_entry_date=datetime(2020, 1, 1, tzinfo=timezone.utc),
        ...     quantity=3, alcohol_content=14.5,
        ...     denomination="DOQ Priorat", winery="Clos Mogador",
        ... )
        >>> wine.remove_bottles(3)
        >>> wine.is_empty()
        True
    """

    __slots__ = ("_props",)

    def __init__(self, props: WineProps) -> None:
        # Use create() or reconstitute()
        if props.quantity < 0:
            raise DomainError.invalid_quantity()
        self._props = props

    @classmethod
    def create(
        cls,
        *,
        id: str,
        user_id: str,
        name: str,
        vintage: int,
        coupage: str,
        type: Union[WineType, str],
        cellar_entry_date: datetime,
        quantity: int,
        alcohol_content: float,
        denomination: str,
        winery: str,
        suggested_consumption_date: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> "Wine":
        """Create a new wine, stamping created_at and updated_at to now.

        Raises:
            DomainError: INVALID_QUANTITY if quantity is negative,
                INVALID_DATA if type is not a known wine type
        """
        now = utc_now()
        return cls(WineProps(
            id=id,
            user_id=user_id,
            name=name,
            vintage=vintage,
            coupage=coupage,
            type=type,
            cellar_entry_date=cellar_entry_date,
            quantity=quantity,
            alcohol_content=alcohol_content,
            denomination=denomination,
            winery=winery,
            suggested_consumption_date=suggested_consumption_date,
            notes=notes,
            created_at=now,
            updated_at=now,
        ))

    @classmethod
    def reconstitute(
        cls,
        *,
        id: str,
        user_id: str,
        name: str,
        vintage: int,
        coupage: str,
        type: Union[WineType, str],
        cellar_entry_date: datetime,
        quantity: int,
        alcohol_content: float,
        denomination: str,
        winery: str,
        created_at: datetime,
        updated_at: datetime,
        suggested_consumption_date: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> "Wine":
        """Rebuild a stored wine; timestamps are passed through unchanged."""
        return cls(WineProps(
            id=id,
            user_id=user_id,
            name=name,
            vintage=vintage,
            coupage=coupage,
            type=type,
            cellar_entry_date=cellar_entry_date,
            quantity=quantity,
            alcohol_content=alcohol_content,
            denomination=denomination,
            winery=winery,
            suggested_consumption_date=suggested_consumption_date,
            notes=notes,
            created_at=created_at,
            updated_at=updated_at,
        ))

    # Read accessors

    @property
    def id(self) -> str:
        return self._props.id

    @property
    def user_id(self) -> str:
        return self._props.user_id

    @property
    def name(self) -> str:
        return self._props.name

    @property
    def vintage(self) -> int:
        return self._props.vintage

    @property
    def coupage(self) -> str:
        return self._props.coupage

    @property
    def type(self) -> WineType:
        return self._props.type

    @property
    def cellar_entry_date(self) -> datetime:
        return self._props.cellar_entry_date

    @property
    def quantity(self) -> int:
        return self._props.quantity

    @property
    def alcohol_content(self) -> float:
        return self._props.alcohol_content

    @property
    def denomination(self) -> str:
        return self._props.denomination

    @property
    def winery(self) -> str:
        return self._props.winery

    @property
    def suggested_consumption_date(self) -> Optional[datetime]:
        return self._props.suggested_consumption_date

    @property
    def notes(self) -> Optional[str]:
        return self._props.notes

    @property
    def created_at(self) -> datetime:
        return self._props.created_at

    @property
    def updated_at(self) -> datetime:
        return self._props.updated_at

    @property
    def age(self) -> int:
        """Years since the vintage, by calendar year (UTC)."""
        return utc_now().year - self._props.vintage

    # Business methods

    def update_quantity(self, new_quantity: int) -> None:
        """Set the bottle count to exactly ``new_quantity``.

        Raises:
            DomainError: INVALID_QUANTITY if new_quantity < 0
        """
        if new_quantity < 0:
            raise DomainError.invalid_quantity()
        self._apply(quantity=new_quantity)

    def add_bottles(self, amount: int) -> None:
        """Add ``amount`` bottles.

        Raises:
            DomainError: INVALID_AMOUNT if amount <= 0
        """
        if amount <= 0:
            raise DomainError.invalid_amount()
        self._apply(quantity=self._props.quantity + amount)

    def remove_bottles(self, amount: int) -> None:
        """Remove ``amount`` bottles, all or nothing.

        Raises:
            DomainError: INVALID_AMOUNT if amount <= 0,
                INSUFFICIENT_STOCK if amount > quantity
        """
        if amount <= 0:
            raise DomainError.invalid_amount()
        if amount > self._props.quantity:
            raise DomainError.insufficient_stock()
        self._apply(quantity=self._props.quantity - amount)

    def update_notes(self, notes: str) -> None:
        self._apply(notes=notes)

    def update_suggested_consumption_date(self, date: datetime) -> None:
        """Replace the suggested date. Not checked against cellar entry or vintage."""
        self._apply(suggested_consumption_date=date)

    def is_ready_to_consume(self) -> bool:
        suggested = self._props.suggested_consumption_date
        if suggested is None:
            return False
        return utc_now() >= suggested

    def is_empty(self) -> bool:
        return self._props.quantity == 0

    def to_plain_object(self) -> Dict[str, Any]:
        """Snapshot of all attributes as a plain dict."""
        return asdict(self._props)

    def _apply(self, **changes: Any) -> None:
        self._props = replace(self._props, updated_at=utc_now(), **changes)

    def __eq__(self, other: object) -> bool:
        """Equality based on wine id (entity identity)."""
        if not isinstance(other, Wine):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"Wine(id={self.id!r}, name={self.name!r}, vintage={self.vintage}, "
            f"type={self.type.value}, quantity={self.quantity})"
        )
