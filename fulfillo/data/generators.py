"""
Synthetic Data Generator

Generates a realistic demo dataset for the dashboard store:
- Brands with contact details and opening balances
- Inventory items per brand
- Customers
- Orders spread over the recent past, with carriers and tracking numbers
  for orders that have left the warehouse
"""

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional

from faker import Faker
import structlog

from fulfillo.domain.enums import OrderStatus, UserRole
from fulfillo.domain.models import Brand, Customer, InventoryItem, Order, UserAccount
from fulfillo.store import BRAND_PALETTE, DashboardStore
from fulfillo.store import seed

logger = structlog.get_logger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

CATEGORIES = [
    ("Skincare", ["Serum", "Cleanser", "Moisturizer", "Sunscreen", "Toner"]),
    ("Electronics", ["Keyboard", "Mouse", "Headset", "Charger", "Speaker"]),
    ("Fashion", ["Abaya", "Scarf", "Sneakers", "Handbag", "Watch"]),
    ("Home", ["Candle", "Diffuser", "Mug", "Cushion", "Lamp"]),
    ("Fragrance", ["Oud Oil", "Perfume", "Bakhoor", "Body Mist", "Musk"]),
]

CARRIERS = ["SMSA Express", "Aramex", "DHL", "Naqel", "SPL"]
SOURCES = ["Shopify", "Salla", "Zid", "WooCommerce", "Manual"]
CITIES = ["Riyadh", "Jeddah", "Dammam", "Mecca", "Medina", "Khobar", "Tabuk", "Abha"]

ORDER_STATUSES = [
    (OrderStatus.NEW, 0.15),
    (OrderStatus.PACKAGING, 0.10),
    (OrderStatus.PACKED, 0.10),
    (OrderStatus.SHIPPED, 0.15),
    (OrderStatus.DELIVERED, 0.40),
    (OrderStatus.RETURNED, 0.05),
    (OrderStatus.EXCHANGE, 0.05),
]

# Statuses at which a carrier has been booked
_DISPATCHED = {
    OrderStatus.PACKED,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
    OrderStatus.RETURNED,
    OrderStatus.EXCHANGE,
}

# Four-digit order numbers
MAX_ORDERS = 9000


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2))).quantize(Decimal("0.01"))


# =============================================================================
# GENERATOR
# =============================================================================

class DemoDataGenerator:
    """
    Seeded generator for dashboard entities.

    The same seed always produces the same dataset.

    Example:
        >>> generator = DemoDataGenerator(seed=7)
        >>> store = generator.build_store(brands=4, orders=200)
    """

    def __init__(self, seed: Optional[int] = 42, today: Optional[date] = None):
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self.rng = random.Random(seed)
        self.today = today or date.today()
        self._clock = (lambda: today) if today else date.today

    def brands(self, n: int = 5) -> List[Brand]:
        """Generate n brands with ids b1..bn"""
        brands = []
        names = set()
        for i in range(n):
            category, _ = self.rng.choice(CATEGORIES)
            name = self.fake.company().split(" ")[0].strip(",")
            while name in names:
                name = self.fake.company().split(" ")[0].strip(",")
            names.add(name)
            slug = "".join(ch for ch in name.lower() if ch.isalnum()) or f"brand{i + 1}"
            brands.append(Brand(
                id=f"b{i + 1}",
                name=name,
                category=category,
                color=BRAND_PALETTE[i % len(BRAND_PALETTE)],
                previous_balance=_money(self.rng.uniform(0, 20000)),
                admin_email=f"admin@{slug}.com",
                admin_phone=self.fake.numerify("+9665########"),
                description=self.fake.catch_phrase(),
                brand_password=self.fake.password(length=12),
                integrated=self.rng.random() < 0.5,
            ))
        return brands

    def inventory(self, brands: List[Brand], per_brand: int = 4) -> List[InventoryItem]:
        """Generate products for each brand; a share of them runs low on stock"""
        items = []
        for brand in brands:
            subcategories = dict(CATEGORIES).get(brand.category, CATEGORIES[0][1])
            prefix = "".join(ch for ch in brand.name.upper() if ch.isalpha())[:2] or "XX"
            for _ in range(per_brand):
                low = self.rng.random() < 0.25
                items.append(InventoryItem(
                    id=str(len(items) + 1),
                    name=f"{self.fake.word().title()} {self.rng.choice(subcategories)}",
                    sku=f"{prefix}-{self.rng.randint(1, 999):03d}",
                    stock=self.rng.randint(0, 9) if low else self.rng.randint(10, 500),
                    price=_money(self.rng.uniform(10, 400)),
                    brand_id=brand.id,
                ))
        return items

    def customers(self, n: int = 50) -> List[Customer]:
        """Generate n customers with unique names"""
        return [
            Customer(
                id=f"C-{i + 1}",
                name=self.fake.unique.name(),
                email=self.fake.unique.email(),
            )
            for i in range(n)
        ]

    def orders(
        self,
        n: int,
        brands: List[Brand],
        customers: List[Customer],
        days: int = 60,
    ) -> List[Order]:
        """Generate n orders, newest first"""
        if n > MAX_ORDERS:
            raise ValueError(f"At most {MAX_ORDERS} orders can be generated")

        numbers = self.rng.sample(range(1000, 10000), n)
        orders = []
        for number in numbers:
            status = self.rng.choices(
                [s[0] for s in ORDER_STATUSES],
                weights=[s[1] for s in ORDER_STATUSES],
            )[0]
            dispatched = status in _DISPATCHED
            carrier = self.rng.choice(CARRIERS) if dispatched or self.rng.random() < 0.3 else None

            orders.append(Order(
                id=f"#ORD-{number}",
                brand_id=self.rng.choice(brands).id,
                customer=self.rng.choice(customers).name,
                status=status,
                total=_money(self.rng.uniform(15, 600)),
                created=self.today - timedelta(days=self.rng.randint(0, days)),
                source=self.rng.choice(SOURCES),
                carrier=carrier,
                tracking=self.fake.bothify("??#########").upper() if dispatched else None,
                phone=self.fake.numerify("05########"),
                address=self.fake.street_address(),
                city=self.rng.choice(CITIES),
            ))

        orders.sort(key=lambda o: o.created, reverse=True)
        return orders

    def brand_owners(self, brands: List[Brand]) -> List[UserAccount]:
        """One brand-owner account per brand, using the brand's admin email"""
        return [
            UserAccount(
                email=b.admin_email,
                password=b.brand_password,
                name=f"{b.name} Owner",
                role=UserRole.BRAND_OWNER,
                department="Brand Partner",
                brand_id=b.id,
            )
            for b in brands
        ]

    def build_store(
        self,
        brands: int = 5,
        orders: int = 200,
        customers: int = 50,
        items_per_brand: int = 4,
    ) -> DashboardStore:
        """A store with the staff seed accounts plus a generated dataset"""
        brand_list = self.brands(brands)
        customer_list = self.customers(customers)
        staff = [u for u in seed.seed_users() if u.role != UserRole.BRAND_OWNER]

        store = DashboardStore(
            users=staff + self.brand_owners(brand_list),
            brands=brand_list,
            orders=self.orders(orders, brand_list, customer_list),
            inventory=self.inventory(brand_list, items_per_brand),
            customers=customer_list,
            inquiries=seed.seed_inquiries(),
            rng=self.rng,
            clock=self._clock,
        )
        logger.info(
            "Generated demo dataset",
            brands=len(store.brands),
            orders=len(store.orders),
            inventory=len(store.inventory),
            customers=len(store.customers),
        )
        return store
