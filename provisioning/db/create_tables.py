"""Create or drop the customers, accounts, cards and loans tables.

The app calls ``create_all`` on startup when ``AUTO_CREATE_SCHEMA`` is on;
run ``python -m provisioning.db.create_tables [--drop]`` to manage the schema
of ``DATABASE_URL`` by hand.
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the tables on Base.metadata

logger = logging.getLogger(__name__)


def create_all(engine: Optional[Engine] = None) -> None:
    """Create every provisioning table that does not exist yet."""
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Provisioning schema ready on %s", engine.url.render_as_string(hide_password=True))


def drop_all(engine: Optional[Engine] = None) -> None:
    """Drop the provisioning tables, accounts before customers."""
    engine = engine or get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.info("Provisioning schema dropped on %s", engine.url.render_as_string(hide_password=True))


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Manage the provisioning schema")
    parser.add_argument("--drop", action="store_true", help="drop the tables before creating them again")
    args = parser.parse_args(argv)
    try:
        if args.drop:
            drop_all()
        create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to prepare provisioning tables: {exc}") from exc
    print("Provisioning tables are ready.")


if __name__ == "__main__":
    main()
