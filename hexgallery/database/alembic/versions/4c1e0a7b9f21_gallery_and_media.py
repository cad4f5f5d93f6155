"""gallery, media and gallery_has_media

Revision ID: 4c1e0a7b9f21
Revises:
Create Date: 2026-10-19 10:12:03.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from hexgallery.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '4c1e0a7b9f21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema
_json = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def _fk(table: str) -> str:
    return f"{SCHEMA}.{table}.id" if SCHEMA else f"{table}.id"


def _service_object_columns() -> list:
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', _json, nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'media',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('enabled', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('context', sa.String(length=64), nullable=True),
        sa.Column('copyright', sa.String(length=255), nullable=True),
        sa.Column('author_name', sa.String(length=255), nullable=True),
        sa.Column('provider_name', sa.String(length=255), nullable=True),
        sa.Column('provider_reference', sa.String(length=255), nullable=True),
        sa.Column('provider_metadata', _json, nullable=True),
        sa.Column('content_type', sa.String(length=255), nullable=True),
        sa.Column('size', sa.BigInteger(), nullable=True),
        sa.Column('width', sa.Integer(), nullable=True),
        sa.Column('height', sa.Integer(), nullable=True),
        sa.Column('length', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_media')),
        schema=SCHEMA,
    )

    op.create_table(
        'gallery',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('context', sa.String(length=64), server_default=sa.text("'default'"), nullable=False),
        sa.Column('default_format', sa.String(length=255), server_default=sa.text("'reference'"), nullable=False),
        sa.Column('enabled', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_gallery')),
        schema=SCHEMA,
    )
    op.create_index('ix_gallery_enabled', 'gallery', ['enabled'], unique=False, schema=SCHEMA)

    op.create_table(
        'gallery_has_media',
        *_service_object_columns(),
        sa.Column('gallery_id', sa.Uuid(), nullable=False),
        sa.Column('media_id', sa.Uuid(), nullable=False),
        sa.Column('position', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('sequence', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('enabled', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.CheckConstraint('position >= 0', name=op.f('ck_gallery_has_media_position_non_negative')),
        sa.ForeignKeyConstraint(['gallery_id'], [_fk('gallery')],
                                name=op.f('fk_gallery_has_media_gallery_id_gallery'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['media_id'], [_fk('media')],
                                name=op.f('fk_gallery_has_media_media_id_media'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_gallery_has_media')),
        sa.UniqueConstraint('gallery_id', 'media_id', name='uq_gallery_has_media_gallery_media'),
        sa.UniqueConstraint('gallery_id', 'sequence', name='uq_gallery_has_media_gallery_sequence'),
        schema=SCHEMA,
    )
    op.create_index('ix_gallery_has_media_media_id', 'gallery_has_media', ['media_id'],
                    unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_gallery_has_media_media_id', table_name='gallery_has_media', schema=SCHEMA)
    op.drop_table('gallery_has_media', schema=SCHEMA)
    op.drop_index('ix_gallery_enabled', table_name='gallery', schema=SCHEMA)
    op.drop_table('gallery', schema=SCHEMA)
    op.drop_table('media', schema=SCHEMA)
