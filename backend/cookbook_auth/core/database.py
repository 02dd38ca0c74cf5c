import logging

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from .config import Settings, settings

logger = logging.getLogger(__name__)


def build_engine(config: Settings = settings) -> Engine:
    url = make_url(config.database_url)
    # Bind values (password hashes) stay out of error messages and echo output.
    kwargs = {"echo": config.db_echo, "pool_pre_ping": True, "hide_parameters": True}
    connect_args = {}

    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees an empty database.
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_size"] = config.db_pool_size
        if config.db_ssl_ca:
            connect_args["ssl"] = {"ca": config.db_ssl_ca}

    return create_engine(url, connect_args=connect_args, **kwargs)


def init_db(engine: Engine) -> None:
    # IMPORTANT: Import models so metadata contains tables
    import cookbook_auth.models  # noqa: F401
    SQLModel.metadata.create_all(engine)
    logger.info("Table check complete (users)")
