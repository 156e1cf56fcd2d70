# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""asyncpg connection glue.

Hands a resolved ConnectionDescriptor to ``asyncpg.connect``. libpq
parameter names are translated to asyncpg keywords by ``to_asyncpg_kwargs``;
server-side settings (``application_name``, ``timezone``, ``-c`` pairs in
``options``, ...) travel as ``server_settings``.

The returned connection is owned by the caller until ``disconnect`` is
awaited. ``connection`` wraps both in an async context manager.

Security Policy - Credential Protection:
    Connection parameters are never logged or included in error messages
    beyond host, port and database name. Driver errors are passed through
    ``sanitize_error_message`` before they reach a message.
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Final
from uuid import uuid4

import asyncpg

from pgconn.errors import (
    ConfigurationError,
    DatabaseAuthenticationError,
    DatabaseConnectionError,
    ModelPgConnErrorContext,
    PgConnError,
)
from pgconn.runtime.connection_args import resolve_connection_args
from pgconn.runtime.model_pgconn_settings import ModelPgConnSettings
from pgconn.types import ConnectionDescriptor, PathInput
from pgconn.utils import sanitize_error_message

logger = logging.getLogger(__name__)

# libpq names that asyncpg.connect accepts under the same keyword
_DIRECT_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "host",
        "user",
        "password",
        "passfile",
        "target_session_attrs",
        "krbsrvname",
        "gsslib",
    }
)

# libpq names that asyncpg.connect accepts under a different keyword
_RENAMED_KEYWORDS: Final[dict[str, str]] = {
    "dbname": "database",
    "sslmode": "ssl",
}

# libpq client-side parameters with no asyncpg.connect keyword
_UNSUPPORTED_CLIENT_PARAMETERS: Final[frozenset[str]] = frozenset(
    {
        "hostaddr",
        "require_auth",
        "channel_binding",
        "keepalives",
        "keepalives_idle",
        "keepalives_interval",
        "keepalives_count",
        "tcp_user_timeout",
        "replication",
        "gssencmode",
        "requiressl",
        "sslnegotiation",
        "sslcompression",
        "sslcert",
        "sslkey",
        "sslpassword",
        "sslcertmode",
        "sslrootcert",
        "sslcrl",
        "sslcrldir",
        "sslsni",
        "requirepeer",
        "ssl_min_protocol_version",
        "ssl_max_protocol_version",
        "gssdelegation",
        "service",
        "load_balance_hosts",
    }
)

# "-c name=value" or "--name=value" inside the libpq options parameter
_OPTIONS_SETTING_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:-c\s*|--)([A-Za-z_][\w.]*)=(\S+)"
)


def parse_options_setting(options: str) -> dict[str, str]:
    """Extract server settings from a libpq ``options`` value.

    Example:
        >>> parse_options_setting("-c search_path=app -c statement_timeout=5000")
        {'search_path': 'app', 'statement_timeout': '5000'}
    """
    settings = dict(_OPTIONS_SETTING_PATTERN.findall(options))
    if not settings:
        logger.warning("Ignoring 'options' parameter with no '-c name=value' settings")
    return settings


def to_asyncpg_kwargs(descriptor: ConnectionDescriptor) -> dict[str, object]:
    """Translate a ConnectionDescriptor into ``asyncpg.connect`` keywords.

    Args:
        descriptor: Parsed connection parameters.

    Returns:
        Keyword arguments for ``asyncpg.connect``. ``port`` becomes ``int``,
        ``connect_timeout`` becomes ``timeout`` (float seconds), and every
        parameter asyncpg does not take directly is sent as a server setting.

    Example:
        >>> to_asyncpg_kwargs({"host": "db", "port": "5432", "dbname": "app"})
        {'host': 'db', 'port': 5432, 'database': 'app'}
    """
    kwargs: dict[str, object] = {}
    server_settings: dict[str, str] = {}
    dropped: list[str] = []

    for key, value in descriptor.items():
        if key in _DIRECT_KEYWORDS:
            kwargs[key] = value
        elif key in _RENAMED_KEYWORDS:
            kwargs[_RENAMED_KEYWORDS[key]] = value
        elif key == "port":
            kwargs["port"] = int(value)
        elif key == "connect_timeout":
            try:
                kwargs["timeout"] = float(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"connect_timeout must be a number of seconds, got {value!r}",
                    context=ModelPgConnErrorContext.with_correlation(
                        operation="to_asyncpg_kwargs",
                        target_name="connect_timeout",
                    ),
                ) from e
        elif key == "options":
            server_settings.update(parse_options_setting(value))
        elif key == "fallback_application_name":
            server_settings.setdefault("application_name", value)
        elif key in _UNSUPPORTED_CLIENT_PARAMETERS:
            dropped.append(key)
        else:
            server_settings[key] = value

    if dropped:
        logger.warning(
            "Dropping connection parameters not supported by asyncpg: %s",
            ", ".join(sorted(dropped)),
            extra={"parameters": sorted(dropped)},
        )
    if server_settings:
        kwargs["server_settings"] = server_settings
    return kwargs


async def connect(
    cfg: str | None = None,
    db: str | None = None,
    *,
    cfg_path: PathInput | None = None,
    opt_path: PathInput | None = None,
    settings: ModelPgConnSettings | None = None,
    **driver_kwargs: object,
) -> asyncpg.Connection:
    """Open a connection with arguments from a named config or the environment.

    Args:
        cfg: Name of a config in ``config.yml``; ``None`` reads
            ``PGCONN_CONN_STRING``.
        db: Database name (required with ``cfg``).
        cfg_path: Alternative config file.
        opt_path: Alternative options file.
        settings: Settings override.
        **driver_kwargs: Extra ``asyncpg.connect`` keywords, applied last.

    Returns:
        An open asyncpg connection owned by the caller.

    Raises:
        ConfigurationError: If arguments cannot be resolved or the database
            does not exist.
        DatabaseAuthenticationError: If the server rejects the credentials.
        DatabaseConnectionError: If the server cannot be reached.
        PgConnError: For any other driver failure.
    """
    descriptor = resolve_connection_args(
        cfg, db, cfg_path=cfg_path, opt_path=opt_path, settings=settings
    )
    kwargs = to_asyncpg_kwargs(descriptor)
    kwargs.update(driver_kwargs)

    correlation_id = uuid4()
    ctx = ModelPgConnErrorContext(
        operation="connect",
        target_name=descriptor.get("host", "default"),
        correlation_id=correlation_id,
    )
    logger.info(
        "Opening database connection",
        extra={
            "host": descriptor.get("host"),
            "port": descriptor.get("port"),
            "database": descriptor.get("dbname"),
            "correlation_id": str(correlation_id),
        },
    )

    try:
        conn = await asyncpg.connect(**kwargs)
    except (
        asyncpg.InvalidPasswordError,
        asyncpg.InvalidAuthorizationSpecificationError,
    ) as e:
        raise DatabaseAuthenticationError(
            "Database authentication failed - check credentials", context=ctx
        ) from e
    except asyncpg.InvalidCatalogNameError as e:
        raise ConfigurationError(
            "Database not found - check database name",
            context=ctx,
            database=descriptor.get("dbname"),
        ) from e
    except (OSError, TimeoutError) as e:
        raise DatabaseConnectionError(
            "Failed to connect to database - check host and port",
            context=ctx,
            host=descriptor.get("host"),
            port=descriptor.get("port"),
        ) from e
    except Exception as e:
        raise PgConnError(
            f"Failed to connect to database: {sanitize_error_message(e)}",
            context=ctx,
        ) from e

    logger.info(
        "Database connection established",
        extra={"correlation_id": str(correlation_id)},
    )
    return conn


async def disconnect(conn: asyncpg.Connection) -> None:
    """Close a connection opened by ``connect``."""
    await conn.close()
    logger.info("Database connection closed")


@asynccontextmanager
async def connection(
    cfg: str | None = None,
    db: str | None = None,
    **kwargs: object,
) -> AsyncIterator[asyncpg.Connection]:
    """Async context manager around ``connect`` and ``disconnect``.

    Example:
        >>> async with connection("local", "mydb") as conn:
        ...     await conn.fetchval("SELECT 1")
    """
    conn = await connect(cfg, db, **kwargs)  # type: ignore[arg-type]
    try:
        yield conn
    finally:
        await disconnect(conn)


__all__: list[str] = [
    "connect",
    "connection",
    "disconnect",
    "parse_options_setting",
    "to_asyncpg_kwargs",
]
