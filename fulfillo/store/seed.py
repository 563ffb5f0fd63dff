"""
Seed Data

Initial collections loaded into a fresh dashboard store. Every process start
begins from this state; nothing is persisted.
"""

from datetime import date
from decimal import Decimal
from typing import List

from fulfillo.domain.enums import InquiryStatus, OrderStatus, UserRole
from fulfillo.domain.models import (
    Brand,
    Customer,
    InventoryItem,
    Order,
    PartnerInquiry,
    UserAccount,
)


def seed_users() -> List[UserAccount]:
    return [
        UserAccount(
            email="admin@fulfillo.com",
            password="admin-unique-7721",
            name="Majed Al-Otaibi",
            role=UserRole.ADMIN,
            department="Headquarters",
        ),
        UserAccount(
            email="ops@fulfillo.com",
            password="ops-secure-991",
            name="Sarah Miller",
            role=UserRole.OPERATIONS,
            department="Ops Control",
        ),
        UserAccount(
            email="pack@fulfillo.com",
            password="warehouse-key-5",
            name="John Ware",
            role=UserRole.PACKAGING,
            department="Warehouse A",
        ),
        UserAccount(
            email="glowskin@brand.com",
            password="glow-brand-secure",
            name="Lina Glow",
            role=UserRole.BRAND_OWNER,
            department="GlowSkin",
            brand_id="b1",
        ),
    ]


def seed_brands() -> List[Brand]:
    return [
        Brand(
            id="b1",
            name="GlowSkin",
            category="Cosmetics",
            color="#2563eb",
            previous_balance=Decimal("12500.00"),
            admin_email="support@glowskin.me",
            admin_phone="+966 50 111 2222",
            description="Premium organic skin repair serums.",
            brand_password="GLOW-ACCESS-88",
            integrated=True,
        ),
        Brand(
            id="b2",
            name="TechGear",
            category="Electronics",
            color="#f59e0b",
            previous_balance=Decimal("4200.50"),
            admin_email="ops@techgear.com",
            admin_phone="+966 55 999 8888",
            description="Mechanical keyboards.",
            brand_password="TECH-SECRET-99",
            integrated=False,
        ),
    ]


def seed_orders() -> List[Order]:
    return [
        Order(
            id="#ORD-7721",
            brand_id="b1",
            customer="Ahmed Ali",
            status=OrderStatus.NEW,
            total=Decimal("120.00"),
            created=date(2023, 10, 25),
            source="Shopify",
            carrier="SMSA Express",
        ),
        Order(
            id="#ORD-7720",
            brand_id="b2",
            customer="Sarah Connor",
            status=OrderStatus.PACKAGING,
            total=Decimal("45.50"),
            created=date(2023, 10, 25),
            source="Manual",
            carrier="DHL",
        ),
    ]


def seed_inventory() -> List[InventoryItem]:
    return [
        InventoryItem(
            id="1",
            name="Skin Repair Serum",
            sku="GS-001",
            stock=45,
            price=Decimal("25.00"),
            brand_id="b1",
        ),
        InventoryItem(
            id="2",
            name="Tech Keyboard Pro",
            sku="TG-99",
            stock=12,
            price=Decimal("89.00"),
            brand_id="b2",
        ),
    ]


def seed_customers() -> List[Customer]:
    return [
        Customer(id="C-1", name="Ahmed Ali", email="ahmed@example.com"),
    ]


def seed_inquiries() -> List[PartnerInquiry]:
    return [
        PartnerInquiry(
            id="INQ-001",
            brand="EcoThreads",
            email="hello@ecothreads.co",
            phone="+966 54 333 2222",
            shipping="Aramex",
            products="Sustainable apparel.",
            status=InquiryStatus.NEW,
        ),
    ]
