"""Optional SQLAlchemy integration for selectionlib profiles"""

from typing import Any
from sqlalchemy import create_engine, event, Engine
from selectionlib.connection.base import BaseConnector, MEMORY_DATABASE, pragma_statements


def create_engine_from_profile(
    profile: str = "default",
    **engine_kwargs: Any
) -> Engine:
    """Create SQLAlchemy engine from selectionlib profile, applying its PRAGMAs on every connection"""
    connector = BaseConnector(profile)
    cfg = connector._cfg
    database = connector.database

    if database == MEMORY_DATABASE:
        url = "sqlite://"
    elif cfg.get("uri", False):
        separator = "&" if "?" in database else "?"
        url = f"sqlite:///{database}{separator}uri=true"
    else:
        url = f"sqlite:///{database}"

    connect_args = {}
    for key in ["timeout", "detect_types", "check_same_thread"]:
        if key in cfg:
            connect_args[key] = cfg[key]

    engine = create_engine(url, connect_args=connect_args, **engine_kwargs)

    statements = pragma_statements(connector.pragmas)
    if statements:
        @event.listens_for(engine, "connect")
        def _apply_pragmas(dbapi_connection: Any, connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            for statement in statements:
                cursor.execute(statement)
            cursor.close()

    return engine
