"""initial_schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17

Creates the recommendation engine tables:
- user_profiles: Student profiles (keyed by auth user id)
- colleges: College catalog
- recommendations: Engine output, unique per (user_id, college_id)
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profile, catalog and recommendation tables."""

    op.create_table(
        'user_profiles',
        sa.Column('id', sa.UUID(), nullable=False, primary_key=True),
        sa.Column('full_name', sa.String(100), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('gpa', sa.Float(), nullable=True),
        sa.Column('sat_score', sa.Integer(), nullable=True),
        sa.Column('act_score', sa.Integer(), nullable=True),
        sa.Column('preferred_majors', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('interests', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('career_goals', sa.Text(), nullable=True),
        sa.Column('preferred_locations', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('budget_max', sa.Float(), nullable=True),
        sa.Column('extracurriculars', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.CheckConstraint('gpa >= 0 AND gpa <= 4', name='ck_user_profiles_gpa'),
        sa.CheckConstraint('sat_score >= 400 AND sat_score <= 1600', name='ck_user_profiles_sat'),
        sa.CheckConstraint('act_score >= 1 AND act_score <= 36', name='ck_user_profiles_act'),
        sa.CheckConstraint('budget_max >= 0', name='ck_user_profiles_budget'),
    )

    op.create_table(
        'colleges',
        sa.Column('id', sa.UUID(), nullable=False, primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('country', sa.String(100), nullable=False, server_default='United States'),
        sa.Column('state', sa.String(100), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('acceptance_rate', sa.Float(), nullable=True),
        sa.Column('avg_gpa', sa.Float(), nullable=False),
        sa.Column('sat_range_min', sa.Integer(), nullable=True),
        sa.Column('sat_range_max', sa.Integer(), nullable=True),
        sa.Column('act_range_min', sa.Integer(), nullable=True),
        sa.Column('act_range_max', sa.Integer(), nullable=True),
        sa.Column('tuition_in_state', sa.Float(), nullable=True),
        sa.Column('tuition_out_state', sa.Float(), nullable=True),
        sa.Column('majors_offered', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('specializations', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('ranking', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('website', sa.String(255), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.CheckConstraint(
            'acceptance_rate >= 0 AND acceptance_rate <= 100',
            name='ck_colleges_acceptance_rate',
        ),
        sa.CheckConstraint('ranking >= 1', name='ck_colleges_ranking'),
    )
    op.create_index('ix_colleges_name', 'colleges', ['name'], unique=True)

    op.create_table(
        'recommendations',
        sa.Column('id', sa.UUID(), nullable=False, primary_key=True),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column(
            'college_id',
            sa.UUID(),
            sa.ForeignKey('colleges.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('match_score', sa.Integer(), nullable=False),
        sa.Column('fit_category', sa.String(20), nullable=False),
        sa.Column('reasoning', sa.Text(), nullable=False),
        sa.Column('strengths', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('concerns', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('ai_insights', sa.JSON(), nullable=False, server_default='{}'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('match_score >= 0 AND match_score <= 100', name='ck_recommendations_match_score'),
        sa.CheckConstraint(
            "fit_category IN ('Safety', 'Target', 'Reach')",
            name='ck_recommendations_fit_category',
        ),
        sa.UniqueConstraint('user_id', 'college_id', name='uq_recommendations_user_college'),
    )
    op.create_index('ix_recommendations_user_id', 'recommendations', ['user_id'])
    op.create_index('ix_recommendations_college_id', 'recommendations', ['college_id'])


def downgrade() -> None:
    """Remove recommendation engine tables."""
    op.drop_index('ix_recommendations_college_id', table_name='recommendations')
    op.drop_index('ix_recommendations_user_id', table_name='recommendations')
    op.drop_table('recommendations')
    op.drop_index('ix_colleges_name', table_name='colleges')
    op.drop_table('colleges')
    op.drop_table('user_profiles')
