"""Initial database schema for the M-Pesa Statement Importer.

Revision ID: 001_initial
Revises: 
Create Date: 2025-10-26

This migration creates the core tables:
- categories: User-owned and system default transaction categories
- transactions: Income/expense records, optionally linked to a category
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial schema with categories and transactions tables."""

    # Create categories table
    categories = op.create_table(
        'categories',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(255)),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text),
        sa.Column('color', sa.String(20)),
        sa.Column('icon', sa.String(50)),
        sa.Column('is_default', sa.Boolean, nullable=False, server_default=sa.text('FALSE')),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    op.create_index('idx_categories_user_id', 'categories', ['user_id'])

    # Create transactions table
    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('amount', sa.Numeric(15, 2), nullable=False),
        sa.Column('date', sa.Date, nullable=False),
        sa.Column('type', sa.String(10), nullable=False),
        sa.Column('category_id', sa.Integer),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='SET NULL'),
        sa.CheckConstraint("amount > 0", name='transactions_amount_check'),
        sa.CheckConstraint("type IN ('INCOME', 'EXPENSE')", name='transactions_type_check')
    )

    # Duplicate lookups filter on user and date
    op.create_index('idx_transactions_user_date', 'transactions', ['user_id', 'date'])
    op.create_index('idx_transactions_category_id', 'transactions', ['category_id'])

    # Seed system default category for imported statements
    op.bulk_insert(categories, [
        {
            'user_id': None,
            'name': 'M-Pesa',
            'description': 'Imported M-Pesa transactions',
            'color': '#4CAF50',
            'icon': 'smartphone',
            'is_default': True,
        }
    ])

    op.execute("""
        COMMENT ON TABLE transactions IS 'Income and expense records per user'
    """)
    op.execute("""
        COMMENT ON COLUMN categories.user_id IS 'NULL for system default categories'
    """)


def downgrade() -> None:
    """Drop all tables."""

    op.drop_index('idx_transactions_category_id', table_name='transactions')
    op.drop_index('idx_transactions_user_date', table_name='transactions')
    op.drop_index('idx_categories_user_id', table_name='categories')

    op.drop_table('transactions')
    op.drop_table('categories')
