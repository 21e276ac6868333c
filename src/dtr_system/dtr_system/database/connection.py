from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, values: dict) -> "DBConfig":
        return cls(
            host=str(values["host"]),
            port=int(values.get("port", 3306)),
            user=str(values["user"]),
            password=str(values["password"]),
            database=str(values["database"]),
        )


class DatabaseConnection:
    """DB connection factory.

    Note: We create short-lived connections per operation. One factory exists
    per database (HR records and the biometric punch store may differ).
    """

    _instances: dict = {}

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        key = (config.host, int(config.port), config.database, config.user)
        instance: Optional[DatabaseConnection] = cls._instances.get(key)
        if instance is None:
            instance = DatabaseConnection(config)
            cls._instances[key] = instance
        return instance

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def describe(self) -> str:
        return f"{self._config.user}@{self._config.host}:{self._config.port}/{self._config.database}"
