"""create user, question and game tables

Revision ID: 3c1d9e7a2b10
Revises:
Create Date: 2025-10-02 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1d9e7a2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('password_hash', sa.String(length=256), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)

    op.create_table(
        'question',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('game_date', sa.Date(), nullable=True),
        sa.Column('category', sa.String(length=128), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('clue', sa.Text(), nullable=False),
        sa.Column('answer', sa.String(length=256), nullable=False),
        sa.Column('value', sa.Integer(), nullable=True),
        sa.Column('is_daily_double', sa.Boolean(), nullable=False),
        sa.Column('is_final', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_question_game_date'), 'question', ['game_date'], unique=False)

    op.create_table(
        'game',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('game_date', sa.Date(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_game_user_id'), 'game', ['user_id'], unique=False)
    op.create_index(op.f('ix_game_game_date'), 'game', ['game_date'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_game_game_date'), table_name='game')
    op.drop_index(op.f('ix_game_user_id'), table_name='game')
    op.drop_table('game')
    op.drop_index(op.f('ix_question_game_date'), table_name='question')
    op.drop_table('question')
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_table('user')
