"""
autoorder.db

Engine factory for the two Postgres stores the auto-order job talks to:
- the lead-recycling registry (campaigns, campaign_cities, client_city_claims)
- the GMaps tracker (jobs_batch)

Unlike the single global engine most flows use, this job needs one engine per
store, created at run start and disposed exactly once at run end. Nothing here
connects at import time.
"""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine


def normalize_database_url(raw: str) -> str:
    """
    Normalize DATABASE_URL variants to something SQLAlchemy can reliably use.

    Normalizations:
    - postgres://  -> postgresql://
    - postgresql+psycopg:// -> postgresql+psycopg2://
    """
    url = (raw or "").strip()

    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://") :]

    if url.startswith("postgresql+psycopg://"):
        url = "postgresql+psycopg2://" + url[len("postgresql+psycopg://") :]

    return url


def make_engine(url: str, *, ssl: bool = True, connect_timeout_s: int = 15) -> Engine:
    """
    Build an engine for one store.

    ssl=False is for the self-hosted tracker box, which does not terminate TLS.
    """
    connect_args = {
        "sslmode": "require" if ssl else "disable",
        "connect_timeout": int(connect_timeout_s),
    }
    return create_engine(
        normalize_database_url(url),
        future=True,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
