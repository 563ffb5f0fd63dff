"""
Dashboard Store

The single owner of the in-memory dataset. Readers get immutable projections
(tuples of frozen records); writers go through ``dispatch``, which routes each
command to exactly one handler. A handler replaces one record (or appends or
removes one) in one collection and swaps the whole collection in a single
assignment, so readers never observe a half-applied mutation.

Handlers addressing a key that does not exist are no-ops and return ``None``.
Every dispatched command is logged and recorded in the journal.
"""

import random
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import structlog

from fulfillo.domain.enums import InquiryStatus, OrderStatus
from fulfillo.domain.exceptions import FulfilloError, InvalidTransitionError
from fulfillo.domain.models import (
    Brand,
    Customer,
    InventoryItem,
    InventoryView,
    Order,
    OrderView,
    PartnerInquiry,
    UserAccount,
)
from fulfillo.domain.transitions import can_transition
from fulfillo.store import seed
from fulfillo.store.commands import (
    AddBrand,
    AddOrder,
    AdjustStock,
    AdvanceOrderStatus,
    Command,
    DeleteBrand,
    ReceiveStock,
    ReconcileBrandBalance,
    RegisterUser,
    RenameBrand,
    SetBrandIntegration,
    SubmitInquiry,
    ToggleUserActive,
    UpdateInquiryStatus,
    UpdateOrderStatus,
    UpdateUser,
)

logger = structlog.get_logger(__name__)


# Brand colors assigned round-robin by current brand count
BRAND_PALETTE: Tuple[str, ...] = (
    "#2563eb",
    "#7c3aed",
    "#db2777",
    "#dc2626",
    "#16a34a",
    "#d97706",
)

MANUAL_ORDER_SOURCE = "Manual"


@dataclass(frozen=True)
class JournalEntry:
    """Record of one dispatched command"""
    sequence: int
    command: str
    target: Optional[str]
    applied: bool
    at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _replace(records: Sequence[Any], key: str, key_attr: str, updated: Any) -> List[Any]:
    return [updated if getattr(r, key_attr) == key else r for r in records]


def _find(records: Iterable[Any], key: str, key_attr: str = "id") -> Optional[Any]:
    return next((r for r in records if getattr(r, key_attr) == key), None)


class DashboardStore:
    """
    In-memory store for users, brands, orders, inventory, customers and
    partner inquiries.

    Example:
        >>> store = DashboardStore.seeded()
        >>> store.update_order_status("#ORD-7720", OrderStatus.PACKED)
    """

    def __init__(
        self,
        users: Optional[Iterable[UserAccount]] = None,
        brands: Optional[Iterable[Brand]] = None,
        orders: Optional[Iterable[Order]] = None,
        inventory: Optional[Iterable[InventoryItem]] = None,
        customers: Optional[Iterable[Customer]] = None,
        inquiries: Optional[Iterable[PartnerInquiry]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], date] = date.today,
    ):
        self._users: List[UserAccount] = list(users or [])
        self._brands: List[Brand] = list(brands or [])
        self._orders: List[Order] = list(orders or [])
        self._inventory: List[InventoryItem] = list(inventory or [])
        self._customers: List[Customer] = list(customers or [])
        self._inquiries: List[PartnerInquiry] = list(inquiries or [])
        self._rng = rng or random.Random()
        self._clock = clock
        self._journal: List[JournalEntry] = []

        self._handlers: Dict[type, Callable[[Any], Any]] = {
            UpdateOrderStatus: self._update_order_status,
            AdvanceOrderStatus: self._advance_order_status,
            AddOrder: self._add_order,
            AdjustStock: self._adjust_stock,
            ReceiveStock: self._receive_stock,
            AddBrand: self._add_brand,
            DeleteBrand: self._delete_brand,
            RenameBrand: self._rename_brand,
            ReconcileBrandBalance: self._reconcile_brand_balance,
            SetBrandIntegration: self._set_brand_integration,
            RegisterUser: self._register_user,
            UpdateUser: self._update_user,
            ToggleUserActive: self._toggle_user_active,
            SubmitInquiry: self._submit_inquiry,
            UpdateInquiryStatus: self._update_inquiry_status,
        }

    @classmethod
    def seeded(cls, **kwargs) -> "DashboardStore":
        """Create a store loaded with the demo seed data"""
        return cls(
            users=seed.seed_users(),
            brands=seed.seed_brands(),
            orders=seed.seed_orders(),
            inventory=seed.seed_inventory(),
            customers=seed.seed_customers(),
            inquiries=seed.seed_inquiries(),
            **kwargs,
        )

    # =========================================================================
    # READ-ONLY PROJECTIONS
    # =========================================================================

    @property
    def users(self) -> Tuple[UserAccount, ...]:
        return tuple(self._users)

    @property
    def brands(self) -> Tuple[Brand, ...]:
        return tuple(self._brands)

    @property
    def orders(self) -> Tuple[Order, ...]:
        return tuple(self._orders)

    @property
    def inventory(self) -> Tuple[InventoryItem, ...]:
        return tuple(self._inventory)

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return tuple(self._customers)

    @property
    def inquiries(self) -> Tuple[PartnerInquiry, ...]:
        return tuple(self._inquiries)

    @property
    def journal(self) -> Tuple[JournalEntry, ...]:
        return tuple(self._journal)

    def get_user(self, email: str) -> Optional[UserAccount]:
        return _find(self._users, email, "email")

    def get_brand(self, brand_id: str) -> Optional[Brand]:
        return _find(self._brands, brand_id)

    def find_brand_by_name(self, name: str) -> Optional[Brand]:
        return _find(self._brands, name, "name")

    def get_order(self, order_id: str) -> Optional[Order]:
        return _find(self._orders, order_id)

    def get_item(self, item_id: str) -> Optional[InventoryItem]:
        return _find(self._inventory, item_id)

    def get_inquiry(self, inquiry_id: str) -> Optional[PartnerInquiry]:
        return _find(self._inquiries, inquiry_id)

    def brand_name(self, brand_id: str) -> str:
        """Display name for a brand reference; the raw id if the brand is gone"""
        brand = self.get_brand(brand_id)
        return brand.name if brand else brand_id

    def today(self) -> date:
        return self._clock()

    def order_views(self, orders: Optional[Iterable[Order]] = None) -> List[OrderView]:
        """Orders with brand names resolved"""
        names = {b.id: b.name for b in self._brands}
        source = self._orders if orders is None else orders
        return [
            OrderView(**o.model_dump(), brand=names.get(o.brand_id, o.brand_id))
            for o in source
        ]

    def inventory_views(self, items: Optional[Iterable[InventoryItem]] = None) -> List[InventoryView]:
        """Inventory items with brand names resolved"""
        names = {b.id: b.name for b in self._brands}
        source = self._inventory if items is None else items
        return [
            InventoryView(**i.model_dump(), brand=names.get(i.brand_id, i.brand_id))
            for i in source
        ]

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def dispatch(self, command: Command) -> Any:
        """
        Apply a command to the store.

        Returns:
            The created, updated or removed record, or None if the command
            addressed a record that does not exist.

        Raises:
            InvalidTransitionError: For a rejected validated status advance
            TypeError: For an unknown command type
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"No handler registered for {command.name}")

        result = handler(command)
        applied = result is not None

        self._journal.append(JournalEntry(
            sequence=len(self._journal) + 1,
            command=command.name,
            target=command.target,
            applied=applied,
        ))

        if applied:
            logger.info("Command applied", command=command.name, target=command.target)
        else:
            logger.warning("Command matched no record", command=command.name, target=command.target)

        return result

    # Convenience entry points -------------------------------------------------

    def update_order_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        return self.dispatch(UpdateOrderStatus(order_id, OrderStatus(status)))

    def advance_order_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        return self.dispatch(AdvanceOrderStatus(order_id, OrderStatus(status)))

    def bulk_update_order_status(
        self, order_ids: Iterable[str], status: OrderStatus
    ) -> Tuple[List[Order], List[str]]:
        """
        Force-set one status on several orders, one command per id.

        Returns:
            Tuple of (updated orders, ids that matched no order)
        """
        updated, missing = [], []
        for order_id in dict.fromkeys(order_ids):
            order = self.update_order_status(order_id, status)
            if order is None:
                missing.append(order_id)
            else:
                updated.append(order)
        return updated, missing

    def adjust_stock(self, item_id: str, stock: int) -> Optional[InventoryItem]:
        return self.dispatch(AdjustStock(item_id, stock))

    def increment_stock(self, item_id: str) -> Optional[InventoryItem]:
        item = self.get_item(item_id)
        if item is None:
            return None
        return self.adjust_stock(item_id, item.stock + 1)

    def decrement_stock(self, item_id: str) -> Optional[InventoryItem]:
        """Decrease stock by one, never below zero"""
        item = self.get_item(item_id)
        if item is None:
            return None
        return self.adjust_stock(item_id, max(0, item.stock - 1))

    def receive_stock(self, item_id: str, quantity: int) -> Optional[InventoryItem]:
        return self.dispatch(ReceiveStock(item_id, quantity))

    def add_order(self, fields) -> Order:
        return self.dispatch(AddOrder(fields))

    def add_brand(self, fields) -> Brand:
        return self.dispatch(AddBrand(fields))

    def delete_brand(self, brand_id: str) -> Optional[Brand]:
        return self.dispatch(DeleteBrand(brand_id))

    def rename_brand(self, brand_id: str, name: str) -> Optional[Brand]:
        return self.dispatch(RenameBrand(brand_id, name))

    def reconcile_brand_balance(self, brand_id: str, amount: Decimal) -> Optional[Brand]:
        return self.dispatch(ReconcileBrandBalance(brand_id, Decimal(str(amount))))

    def set_brand_integration(self, brand_id: str, integrated: bool) -> Optional[Brand]:
        return self.dispatch(SetBrandIntegration(brand_id, integrated))

    def register_user(self, fields) -> Optional[UserAccount]:
        return self.dispatch(RegisterUser(fields))

    def update_user(self, email: str, patch) -> Optional[UserAccount]:
        return self.dispatch(UpdateUser(email, patch))

    def toggle_user_active(self, email: str) -> Optional[UserAccount]:
        return self.dispatch(ToggleUserActive(email))

    def submit_inquiry(self, fields) -> PartnerInquiry:
        return self.dispatch(SubmitInquiry(fields))

    def update_inquiry_status(self, inquiry_id: str, status: InquiryStatus) -> Optional[PartnerInquiry]:
        return self.dispatch(UpdateInquiryStatus(inquiry_id, InquiryStatus(status)))

    # =========================================================================
    # ID GENERATION
    # =========================================================================

    def _random_id(self, template: str, existing: Iterable[str]) -> str:
        """Draw a four-digit id from ``template`` that is not already taken"""
        taken = set(existing)
        candidates = 9000
        prefix, suffix = template.split("{}")
        pattern = re.compile(re.escape(prefix) + r"[1-9]\d{3}" + re.escape(suffix))
        if sum(1 for key in taken if pattern.fullmatch(key)) >= candidates:
            raise FulfilloError(f"Identifier space exhausted for {template}")
        while True:
            key = template.format(self._rng.randint(1000, 9999))
            if key not in taken:
                return key

    def _next_brand_id(self) -> str:
        taken = {b.id for b in self._brands}
        n = len(self._brands) + 1
        while f"b{n}" in taken:
            n += 1
        return f"b{n}"

    # =========================================================================
    # HANDLERS
    # =========================================================================

    def _update_order_status(self, command: UpdateOrderStatus) -> Optional[Order]:
        order = self.get_order(command.order_id)
        if order is None:
            return None
        updated = order.model_copy(update={"status": command.status})
        self._orders = _replace(self._orders, order.id, "id", updated)
        return updated

    def _advance_order_status(self, command: AdvanceOrderStatus) -> Optional[Order]:
        order = self.get_order(command.order_id)
        if order is None:
            return None
        if not can_transition(order.status, command.status):
            raise InvalidTransitionError(order.id, order.status.value, command.status.value)
        updated = order.model_copy(update={"status": command.status})
        self._orders = _replace(self._orders, order.id, "id", updated)
        return updated

    def _add_order(self, command: AddOrder) -> Order:
        fields = command.fields
        order = Order(
            id=self._random_id("#ORD-{}", (o.id for o in self._orders)),
            brand_id=fields.brand_id,
            customer=fields.customer,
            status=OrderStatus.NEW,
            total=fields.total,
            created=self._clock(),
            source=MANUAL_ORDER_SOURCE,
            carrier=fields.carrier,
            phone=fields.phone,
            address=fields.address,
            city=fields.city,
        )
        self._orders = [order] + self._orders
        return order

    def _adjust_stock(self, command: AdjustStock) -> Optional[InventoryItem]:
        item = self.get_item(command.item_id)
        if item is None:
            return None
        # model_copy does not re-validate
        if command.stock < 0:
            raise ValueError("Stock cannot be negative")
        updated = item.model_copy(update={"stock": command.stock})
        self._inventory = _replace(self._inventory, item.id, "id", updated)
        return updated

    def _receive_stock(self, command: ReceiveStock) -> Optional[InventoryItem]:
        item = self.get_item(command.item_id)
        if item is None:
            return None
        if command.quantity <= 0:
            raise ValueError("Received quantity must be positive")
        updated = item.model_copy(update={"stock": item.stock + command.quantity})
        self._inventory = _replace(self._inventory, item.id, "id", updated)
        return updated

    def _add_brand(self, command: AddBrand) -> Brand:
        fields = command.fields
        brand = Brand(
            id=self._next_brand_id(),
            name=fields.name,
            category=fields.category,
            color=BRAND_PALETTE[len(self._brands) % len(BRAND_PALETTE)],
            admin_email=fields.admin_email,
            admin_phone=fields.admin_phone,
            description=fields.description,
            brand_password=fields.brand_password,
        )
        self._brands = self._brands + [brand]
        return brand

    def _delete_brand(self, command: DeleteBrand) -> Optional[Brand]:
        brand = self.get_brand(command.brand_id)
        if brand is None:
            return None
        # Orders, inventory and users referencing the brand are left in place
        self._brands = [b for b in self._brands if b.id != brand.id]
        return brand

    def _rename_brand(self, command: RenameBrand) -> Optional[Brand]:
        brand = self.get_brand(command.brand_id)
        if brand is None:
            return None
        updated = brand.model_copy(update={"name": command.new_name})
        self._brands = _replace(self._brands, brand.id, "id", updated)
        return updated

    def _reconcile_brand_balance(self, command: ReconcileBrandBalance) -> Optional[Brand]:
        brand = self.get_brand(command.brand_id)
        if brand is None:
            return None
        updated = brand.model_copy(
            update={"previous_balance": brand.previous_balance + command.amount}
        )
        self._brands = _replace(self._brands, brand.id, "id", updated)
        return updated

    def _set_brand_integration(self, command: SetBrandIntegration) -> Optional[Brand]:
        brand = self.get_brand(command.brand_id)
        if brand is None:
            return None
        updated = brand.model_copy(update={"integrated": command.integrated})
        self._brands = _replace(self._brands, brand.id, "id", updated)
        return updated

    def _register_user(self, command: RegisterUser) -> Optional[UserAccount]:
        if self.get_user(command.fields.email) is not None:
            return None
        user = UserAccount(**command.fields.model_dump(), active=True)
        self._users = self._users + [user]
        return user

    def _update_user(self, command: UpdateUser) -> Optional[UserAccount]:
        user = self.get_user(command.email)
        if user is None:
            return None
        updated = user.model_copy(update=command.patch.model_dump(exclude_none=True))
        self._users = _replace(self._users, user.email, "email", updated)
        return updated

    def _toggle_user_active(self, command: ToggleUserActive) -> Optional[UserAccount]:
        user = self.get_user(command.email)
        if user is None:
            return None
        updated = user.model_copy(update={"active": not user.active})
        self._users = _replace(self._users, user.email, "email", updated)
        return updated

    def _submit_inquiry(self, command: SubmitInquiry) -> PartnerInquiry:
        inquiry = PartnerInquiry(
            id=self._random_id("INQ-{}", (i.id for i in self._inquiries)),
            status=InquiryStatus.NEW,
            **command.fields.model_dump(),
        )
        self._inquiries = [inquiry] + self._inquiries
        return inquiry

    def _update_inquiry_status(self, command: UpdateInquiryStatus) -> Optional[PartnerInquiry]:
        inquiry = self.get_inquiry(command.inquiry_id)
        if inquiry is None:
            return None
        updated = inquiry.model_copy(update={"status": command.status})
        self._inquiries = _replace(self._inquiries, inquiry.id, "id", updated)
        return updated
