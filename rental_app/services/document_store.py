"""
Adaptateur de stockage documentaire / Document store adapter.

Expose un contrat CRUD de type collection (find / find_one / insert_one /
update_one / delete_one, plus count et sum) au-dessus d'une session
SQLAlchemy async. Les filtres suivent la syntaxe Mongo :

    {"status": "reserved"}
    {"status": {"$in": ["reserved", "rented"]}, "return_date": {"$lt": "2024-06-10"}}

Collection-style CRUD contract over an async SQLAlchemy session. The
session is passed explicitly: there is no process-wide store handle.
Every SQLAlchemy failure is re-raised as StoreError.
"""

import logging
from contextlib import contextmanager
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rental_app.exceptions import StoreError, ValidationError
from rental_app.models import AuditLog, Car, Client, Expense, Rental

logger = logging.getLogger(__name__)

COLLECTIONS: dict[str, type] = {
    "cars": Car,
    "clients": Client,
    "rentals": Rental,
    "expenses": Expense,
    "audit_logs": AuditLog,
}

_OPERATORS = {
    "$in": lambda col, v: col.in_(list(v)),
    "$nin": lambda col, v: col.not_in(list(v)),
    "$ne": lambda col, v: col != v,
    "$lt": lambda col, v: col < v,
    "$lte": lambda col, v: col <= v,
    "$gt": lambda col, v: col > v,
    "$gte": lambda col, v: col >= v,
}


@contextmanager
def store_errors(operation: str, collection: str):
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Store %s on %s failed: %s", operation, collection, exc)
        raise StoreError(operation, collection, str(exc.__class__.__name__)) from exc


class DocumentStore:
    """Stockage documentaire sur SQLAlchemy / Document store over SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # --- Helpers ---

    @staticmethod
    def model_for(collection: str) -> type:
        """Modele ORM d'une collection / ORM model of a collection."""
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValidationError(f"Unknown collection: {collection}", field="collection")

    @staticmethod
    def _column(model: type, field: str):
        column = model.__table__.columns.get(field)
        if column is None:
            raise ValidationError(f"Unknown field {field} on {model.__tablename__}", field=field)
        return getattr(model, field)

    def _conditions(self, model: type, filter: dict | None) -> list:
        conditions = []
        for field, value in (filter or {}).items():
            col = self._column(model, field)
            if isinstance(value, dict):
                for op, operand in value.items():
                    if op not in _OPERATORS:
                        raise ValidationError(f"Unsupported filter operator: {op}", field=field)
                    conditions.append(_OPERATORS[op](col, operand))
            else:
                conditions.append(col == value)
        return conditions

    def _order_by(self, model: type, sort: list[tuple[str, int]] | None) -> list:
        clauses = []
        for field, direction in sort or []:
            col = self._column(model, field)
            clauses.append(col.desc() if direction < 0 else col.asc())
        return clauses

    # --- Lecture / Read ---

    async def find(
        self,
        collection: str,
        filter: dict | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int | None = None,
        skip: int = 0,
    ) -> list[Any]:
        """Lister les enregistrements / List matching records."""
        model = self.model_for(collection)
        query = select(model).where(*self._conditions(model, filter))
        order = self._order_by(model, sort)
        if order:
            query = query.order_by(*order)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        with store_errors("find", collection):
            result = await self.session.execute(query)
            return list(result.scalars().all())

    async def find_one(self, collection: str, filter: dict) -> Any | None:
        """Premier enregistrement ou None / First matching record or None."""
        records = await self.find(collection, filter, limit=1)
        return records[0] if records else None

    async def count(self, collection: str, filter: dict | None = None) -> int:
        model = self.model_for(collection)
        query = select(func.count()).select_from(model).where(*self._conditions(model, filter))
        with store_errors("count", collection):
            return (await self.session.scalar(query)) or 0

    async def sum(self, collection: str, field: str, filter: dict | None = None) -> float:
        """Somme d'un champ, 0 si vide / Sum of a field, 0 over an empty set."""
        model = self.model_for(collection)
        col = self._column(model, field)
        query = select(func.coalesce(func.sum(col), 0)).where(*self._conditions(model, filter))
        with store_errors("sum", collection):
            total = await self.session.scalar(query)
        return float(total or 0)

    # --- Ecriture / Write ---

    async def insert_one(self, collection: str, record: dict) -> int:
        """Inserer et retourner l'identifiant genere / Insert and return the generated id."""
        model = self.model_for(collection)
        for field in record:
            self._column(model, field)
        obj = model(**record)
        with store_errors("insert_one", collection):
            self.session.add(obj)
            await self.session.flush()
            await self.session.refresh(obj)
        return obj.id

    async def update_one(self, collection: str, filter: dict, patch: dict) -> bool:
        """Mettre a jour le premier enregistrement / Update the first matching record."""
        model = self.model_for(collection)
        for field in patch:
            self._column(model, field)
        target = await self.find_one(collection, filter)
        if target is None:
            return False
        with store_errors("update_one", collection):
            for key, value in patch.items():
                setattr(target, key, value)
            await self.session.flush()
        return True

    async def delete_one(self, collection: str, filter: dict) -> bool:
        """Supprimer le premier enregistrement / Delete the first matching record."""
        target = await self.find_one(collection, filter)
        if target is None:
            return False
        with store_errors("delete_one", collection):
            await self.session.delete(target)
            await self.session.flush()
        return True
