"""create player, word, game_in_progress and game tables

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'player' not in existing_tables:
        op.create_table(
            'player',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=64), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )

    if 'word' not in existing_tables:
        op.create_table(
            'word',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('text', sa.String(length=64), nullable=False),
            sa.Column('used', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('text'),
        )
        op.create_index('ix_word_used', 'word', ['used'])

    if 'game_in_progress' not in existing_tables:
        op.create_table(
            'game_in_progress',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('player_id', sa.Integer(), sa.ForeignKey('player.id'), nullable=False),
            sa.Column('word_id', sa.Integer(), sa.ForeignKey('word.id'), nullable=False),
            sa.Column('attempted_letters', sa.String(length=128), nullable=False, server_default=''),
            sa.Column('remaining_attempts', sa.Integer(), nullable=False),
            sa.Column('started_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_game_in_progress_player_id', 'game_in_progress', ['player_id'])

    if 'game' not in existing_tables:
        op.create_table(
            'game',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('player_id', sa.Integer(), sa.ForeignKey('player.id'), nullable=False),
            sa.Column('word_id', sa.Integer(), sa.ForeignKey('word.id'), nullable=False),
            sa.Column('outcome', sa.String(length=8), nullable=False),
            sa.Column('score', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('played_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_game_player_id', 'game', ['player_id'])


def downgrade():
    op.drop_index('ix_game_player_id', table_name='game')
    op.drop_table('game')
    op.drop_index('ix_game_in_progress_player_id', table_name='game_in_progress')
    op.drop_table('game_in_progress')
    op.drop_index('ix_word_used', table_name='word')
    op.drop_table('word')
    op.drop_table('player')
