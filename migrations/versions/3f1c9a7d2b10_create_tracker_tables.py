"""Create users, countries and visited_countries tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 10:12:41.508213

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c9a7d2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=15), nullable=False),
        sa.Column('color', sa.String(length=15), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_table('countries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('country_code', sa.String(length=2), nullable=False),
        sa.Column('country_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('countries', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_countries_country_code'), ['country_code'], unique=False)

    op.create_table('visited_countries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('country_code', sa.String(length=2), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'country_code', name='uq_visited_countries_user_country')
    )
    with op.batch_alter_table('visited_countries', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_visited_countries_user_id'), ['user_id'], unique=False)


def downgrade():
    with op.batch_alter_table('visited_countries', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_visited_countries_user_id'))

    op.drop_table('visited_countries')
    with op.batch_alter_table('countries', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_countries_country_code'))

    op.drop_table('countries')
    op.drop_table('users')
