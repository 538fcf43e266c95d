"""create league documents

Revision ID: 5b2e0c91a7d4
Revises:
Create Date: 2026-02-21 19:12:08.114203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b2e0c91a7d4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # One row per whole document ("predictions", "results")
    op.create_table(
        "league_documents",
        sa.Column("name", sa.String(), primary_key=True),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.now()),
    )

def downgrade() -> None:
    op.drop_table("league_documents")
