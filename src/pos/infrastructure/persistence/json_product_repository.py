"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from pos.domain.model.product import Product
from pos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from pos.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._from_record(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_record(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    @staticmethod
    def _from_record(item: dict) -> Product:
        currency = item.get("currency", DEFAULT_CURRENCY)

        def money(key: str) -> Money | None:
            value = item.get(key)
            return Money(Decimal(value), currency) if value is not None else None

        return Product(
            id=item["id"],
            name=item["name"],
            retail_price=Money(Decimal(item["retail_price"]), currency),
            unit_cost=money("unit_cost"),
            promo_active=bool(item.get("promo_active", False)),
            promo_price=money("promo_price"),
            wholesale_price=money("wholesale_price"),
            wholesale_min_qty=item.get("wholesale_min_qty"),
        )

    @staticmethod
    def _to_record(p: Product) -> dict:
        def amount(value: Money | None) -> str | None:
            return str(value.amount) if value is not None else None

        return {
            "id": p.id,
            "name": p.name,
            "currency": p.retail_price.currency,
            "retail_price": str(p.retail_price.amount),
            "unit_cost": amount(p.unit_cost),
            "promo_active": p.promo_active,
            "promo_price": amount(p.promo_price),
            "wholesale_price": amount(p.wholesale_price),
            "wholesale_min_qty": p.wholesale_min_qty,
        }
