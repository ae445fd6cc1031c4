"""
PostgreSQL connection and schema management.

Connects to PostgreSQL using DATABASE_URL (preferred) or individual
PGHOST/PGPORT/PGUSER/PGPASSWORD/PGDATABASE environment variables.
"""

import os
import logging
import psycopg2
from psycopg2.extras import RealDictCursor
from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)

# Variables required when DATABASE_URL is not set (PGPORT defaults to 5432)
REQUIRED_PG_VARIABLES = ('PGHOST', 'PGUSER', 'PGPASSWORD', 'PGDATABASE')

KEY_VALUE_SCHEMA = """
    CREATE TABLE IF NOT EXISTS key_value (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMPTZ DEFAULT NOW()
    )
"""


def is_configured() -> bool:
    """True when get_connection_string() can build a connection string."""
    if os.getenv('DATABASE_URL'):
        return True
    return all(os.getenv(name) for name in REQUIRED_PG_VARIABLES)


def is_partially_configured() -> bool:
    """True when some, but not all, of the required PG* variables are set."""
    return any(os.getenv(name) for name in REQUIRED_PG_VARIABLES) and not is_configured()


def get_connection_string() -> str:
    """
    Get the PostgreSQL connection string.

    Priority:
    1. DATABASE_URL environment variable
    2. Individual PG* environment variables (PGHOST, PGPORT, PGUSER, PGPASSWORD, PGDATABASE)

    Returns:
        Connection string for PostgreSQL

    Raises:
        ValueError: If no valid connection configuration is found
    """
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    pghost = os.getenv('PGHOST')
    pgport = os.getenv('PGPORT', '5432')
    pguser = os.getenv('PGUSER')
    pgpassword = os.getenv('PGPASSWORD')
    pgdatabase = os.getenv('PGDATABASE')

    if all((pghost, pguser, pgpassword, pgdatabase)):
        return f"postgresql://{pguser}:{pgpassword}@{pghost}:{pgport}/{pgdatabase}"

    raise ValueError(
        "Database connection not configured. "
        "Set DATABASE_URL or PGHOST/PGUSER/PGPASSWORD/PGDATABASE environment variables."
    )


def get_connection():
    """
    Get a database connection to PostgreSQL.

    Returns:
        psycopg2 connection with RealDictCursor (returns rows as dictionaries)
    """
    try:
        return psycopg2.connect(get_connection_string(), cursor_factory=RealDictCursor)
    except Exception as e:
        logger.error(f"Failed to connect to PostgreSQL: {e}")
        raise


def init_database() -> None:
    """
    Create the key_value table if it does not exist yet.
    """
    conn = get_connection()
    cursor = conn.cursor()
    try:
        cursor.execute(KEY_VALUE_SCHEMA)
        conn.commit()
        logger.info("key_value table ready")
    except Exception as e:
        conn.rollback()
        logger.error(f"Error initializing PostgreSQL schema: {e}")
        raise
    finally:
        cursor.close()
        conn.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("Initializing PostgreSQL schema...")
    init_database()
