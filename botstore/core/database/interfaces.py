"""
Table descriptor interfaces.

A table descriptor knows the name of one database table and how to bring it
into existence. Descriptors are instantiated with the shared
``DatabaseEngine`` handle right before they are bootstrapped, while the name
is a class attribute so it can be checked without a connection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Type

from sqlmodel import SQLModel

from .helpers import DatabaseEngine


class Table(ABC):
    """Declarative description of one table and its creation logic."""

    name: ClassVar[str]

    def __init__(self, db: DatabaseEngine) -> None:
        self.db = db

    @abstractmethod
    async def bootstrap(self) -> bool:
        """Ensure the table exists.

        Returns:
            True if the table was created by this call
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name})"


class ModelTable(Table):
    """Table descriptor backed by a SQLModel entity.

    Subclasses set ``model``; the table name is taken from the entity's
    ``__tablename__``. Override ``after_create`` to seed rows the first time
    the table is created.
    """

    model: ClassVar[Type[SQLModel]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        model = cls.__dict__.get("model")
        if model is not None:
            cls.name = model.__tablename__

    async def bootstrap(self) -> bool:
        created = await self.db.create_table_if_not_exists(self.model.__table__)
        if created:
            await self.after_create()
        return created

    async def after_create(self) -> None:
        return None
