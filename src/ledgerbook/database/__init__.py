"""Database layer for ledgerbook: journal source and chart of accounts provider."""

from ledgerbook.database.base import Database
from ledgerbook.database.factories import DB_PATH_ENV_VAR, create_sqlite_database
from ledgerbook.database.sqlalchemy_db import SQLAlchemyDatabase

__all__ = ["Database", "SQLAlchemyDatabase", "DB_PATH_ENV_VAR", "create_sqlite_database"]
