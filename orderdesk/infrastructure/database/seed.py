"""
Demo data for local development.

Wipes users, products and orders, then inserts one admin, two regular
users, a small catalog and a few orders in assorted statuses.
"""
import logging
from decimal import Decimal
from typing import Dict, List

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orderdesk.data.models import OrderItemModel, OrderModel, ProductModel, UserModel
from orderdesk.domain.enums import OrderStatus, UserRole

logger = logging.getLogger(__name__)


SEED_USERS = [
    {"key": "admin", "name": "Admin User", "email": "juma@jumatech.com",
     "role": UserRole.ADMIN, "address": "123 Admin Street, Adminville"},
    {"key": "john", "name": "John Doe", "email": "john@example.com",
     "role": UserRole.USER, "address": "456 User Lane, Usertown"},
    {"key": "jane", "name": "Jane Smith", "email": "jane@example.com",
     "role": UserRole.USER, "address": "789 Customer Road, Clientville"},
]

# (owner key, name, description, price, stock)
SEED_PRODUCTS = [
    ("admin", "Premium Laptop", "High-end laptop with the latest specifications", "1299.99", 15),
    ("admin", "Ergonomic Office Chair", "Comfortable chair with lumbar support", "249.99", 30),
    ("admin", "Wireless Headphones", "Noise-cancelling wireless headphones", "179.99", 50),
    ("john", "Smartphone Case", "Protective case for popular smartphone models", "19.99", 100),
    ("john", "Wireless Charging Pad", "Fast wireless charging for compatible devices", "39.99", 45),
    ("jane", "Smart Watch", "Fitness tracker and smartwatch with health monitoring", "199.99", 25),
    ("jane", "Bluetooth Speaker", "Portable speaker with 20-hour battery life", "89.99", 35),
]

# (owner key, status, [(product name, quantity)])
SEED_ORDERS = [
    ("john", OrderStatus.DELIVERED, [("Premium Laptop", 1), ("Wireless Headphones", 2)]),
    ("jane", OrderStatus.PENDING, [("Ergonomic Office Chair", 1)]),
    ("jane", OrderStatus.PROCESSING, [("Smartphone Case", 3), ("Wireless Charging Pad", 1)]),
    ("admin", OrderStatus.DELIVERED, [("Smart Watch", 1), ("Bluetooth Speaker", 1)]),
]


async def seed_database(session_factory: async_sessionmaker[AsyncSession]) -> List[UserModel]:
    """
    Replace all data with the demo dataset.

    Returns:
        Seeded users (admin first)
    """
    async with session_factory() as session:
        async with session.begin():
            logger.info("Cleaning up existing data...")
            for model in (OrderItemModel, OrderModel, ProductModel, UserModel):
                await session.execute(delete(model))

            users: Dict[str, UserModel] = {}
            for data in SEED_USERS:
                user = UserModel(
                    name=data["name"],
                    email=data["email"],
                    role=data["role"].value,
                    address=data["address"],
                )
                session.add(user)
                users[data["key"]] = user
            await session.flush()
            logger.info(f"Created {len(users)} users")

            products: Dict[str, ProductModel] = {}
            for owner_key, name, description, price, stock in SEED_PRODUCTS:
                product = ProductModel(
                    name=name,
                    description=description,
                    price=Decimal(price),
                    stock=stock,
                    user_id=users[owner_key].id,
                )
                session.add(product)
                products[name] = product
            await session.flush()
            logger.info(f"Created {len(products)} products")

            for owner_key, status, lines in SEED_ORDERS:
                order = OrderModel(user_id=users[owner_key].id, status=status.value)
                order.items = [
                    OrderItemModel(product_id=products[name].id, quantity=quantity)
                    for name, quantity in lines
                ]
                session.add(order)
            logger.info(f"Created {len(SEED_ORDERS)} orders")

    return [users[data["key"]] for data in SEED_USERS]
