"""edvault configuration: plain frozen dataclass, no pydantic.

The host application constructs this from its own settings and passes it
to ``edvault.stores.create_provider``. ``from_env`` covers the common
case of a process configured through environment variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from edvault.constants import DatabaseType


@dataclass(frozen=True)
class EdvConfig:
    database_type: str = DatabaseType.MEMSTORE.value
    database_url: str | None = None
    connect_timeout: float = 5.0
    read_timeout: float = 15.0
    write_timeout: float = 10.0
    pool_timeout: float = 5.0

    @property
    def timeout(self) -> httpx.Timeout:
        """Timeout applied to every remote backend call."""
        return httpx.Timeout(
            connect=self.connect_timeout,
            read=self.read_timeout,
            write=self.write_timeout,
            pool=self.pool_timeout,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EdvConfig:
        """Build a config from ``EDV_DATABASE_TYPE``, ``EDV_DATABASE_URL`` and ``EDV_TIMEOUT``.

        ``EDV_TIMEOUT`` (seconds) overrides both the read and write timeouts.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if env.get("EDV_DATABASE_TYPE"):
            kwargs["database_type"] = env["EDV_DATABASE_TYPE"]
        if env.get("EDV_DATABASE_URL"):
            kwargs["database_url"] = env["EDV_DATABASE_URL"]
        if env.get("EDV_TIMEOUT"):
            try:
                seconds = float(env["EDV_TIMEOUT"])
            except ValueError:
                raise ValueError(
                    f"EDV_TIMEOUT must be a number of seconds, got {env['EDV_TIMEOUT']!r}"
                ) from None
            kwargs["read_timeout"] = seconds
            kwargs["write_timeout"] = seconds
        return cls(**kwargs)  # type: ignore[arg-type]
