"""SQLite-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import closing, contextmanager
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import RepositoryError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# AUTOINCREMENT keeps ids of deleted rows from being handed out again.
_SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    price TEXT NOT NULL
)
"""


class SqliteProductRepository(ProductRepository):

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._ensure_schema()

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> Product:
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO products (name, price) VALUES (?, ?)",
                (product.name, str(product.price.amount)),
            )
            product.id = cursor.lastrowid
        return product

    def get_by_id(self, product_id: int) -> Product | None:
        with self._cursor() as cursor:
            cursor.execute(
                "SELECT id, name, price FROM products WHERE id = ?", (product_id,)
            )
            row = cursor.fetchone()
        return self._to_product(row) if row else None

    def list_all(self) -> list[Product]:
        with self._cursor() as cursor:
            cursor.execute("SELECT id, name, price FROM products ORDER BY id")
            rows = cursor.fetchall()
        return [self._to_product(row) for row in rows]

    def update(self, product: Product) -> None:
        with self._cursor() as cursor:
            cursor.execute(
                "UPDATE products SET name = ?, price = ? WHERE id = ?",
                (product.name, str(product.price.amount), product.id),
            )

    def delete(self, product_id: int) -> None:
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM products WHERE id = ?", (product_id,))

    # --- Connection helpers ---------------------------------------------------

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor on a fresh connection, committing on success."""
        try:
            with closing(sqlite3.connect(self._db_path)) as conn:
                conn.row_factory = sqlite3.Row
                with conn:
                    yield conn.cursor()
        except sqlite3.Error as exc:
            logger.exception("SQLite operation failed on %s", self._db_path)
            raise RepositoryError(f"Database error: {exc}") from exc

    def _ensure_schema(self) -> None:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._cursor() as cursor:
            cursor.execute(_SCHEMA)

    @staticmethod
    def _to_product(row: sqlite3.Row) -> Product:
        return Product(
            id=row["id"], name=row["name"], price=Money(Decimal(row["price"]))
        )
