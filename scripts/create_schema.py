#!/usr/bin/env python3
"""Create the Agora tables in the configured PostgreSQL database."""

import asyncio
import sys

import logfire

from agora.config import Settings
from agora.persistence.database import create_engine
from agora.persistence.tables import metadata
from agora.util.observability import configure_logfire


async def create_schema(settings: Settings) -> None:
    """Create every table that does not exist yet."""
    engine = create_engine(settings)
    try:
        async with engine.begin() as connection:
            await connection.run_sync(metadata.create_all)
    finally:
        await engine.dispose()


def main() -> int:
    """Create the schema and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Creating database schema")
        asyncio.run(create_schema(settings))
        logfire.info("Database schema created", tables=sorted(metadata.tables))
        return 0

    except Exception as e:
        logfire.error(
            "Schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
