"""Initial schema — the url table.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # Identity values are never handed out twice, even after a delete.
    op.execute("""
        CREATE TABLE url (
            id     BIGINT GENERATED ALWAYS AS IDENTITY PRIMARY KEY,
            alias  TEXT   NOT NULL,
            url    TEXT   NOT NULL,

            CONSTRAINT url_alias_key UNIQUE (alias)
        )
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS url")
