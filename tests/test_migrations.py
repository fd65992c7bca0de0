"""
Test that the Alembic migration builds the same schema as the models.
"""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parents[1]


def test_upgrade_creates_all_tables(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    config = Config()
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", url)

    command.upgrade(config, "head")

    inspector = inspect(create_engine(url))
    tables = set(inspector.get_table_names())
    assert {"users", "chat_sessions", "chat_history", "medical_reports"} <= tables

    history_columns = {c["name"] for c in inspector.get_columns("chat_history")}
    assert history_columns == {
        "id",
        "user_id",
        "session_id",
        "role",
        "content",
        "created_at",
    }
    foreign_keys = inspector.get_foreign_keys("chat_history")
    assert {fk["referred_table"] for fk in foreign_keys} == {"users", "chat_sessions"}
