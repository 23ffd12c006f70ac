"""Initial schema - create all translation platform tables.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-18

This migration creates the complete schema:
- users, user_system_roles, auth_sessions, auth_keys: identity and auth
- languages, language_member_roles, language_import_jobs: target languages
- books, verses, words, lemmas, lemma_forms: the fixed biblical text
- glosses, gloss_history_entries, machine_glosses: word translations
- translator_notes, footnotes: authored notes per word and language

It also creates:
- ENUM types for text direction, gloss state/source, roles, email status
- All indexes and constraints
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


ENUMS: dict[str, tuple[str, ...]] = {
    "text_direction": ("ltr", "rtl"),
    "gloss_state": ("APPROVED", "UNAPPROVED"),
    "gloss_source": ("USER", "IMPORT"),
    "email_status": ("UNVERIFIED", "VERIFIED", "BOUNCED", "COMPLAINED"),
    "language_role": ("ADMIN", "TRANSLATOR", "VIEWER"),
    "system_role": ("ADMIN",),
}


def enum(name: str) -> postgresql.ENUM:
    """Reference an ENUM type created at the start of the upgrade."""
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def upgrade() -> None:
    """Create all tables, enums, indexes, and constraints."""

    # ==========================================================================
    # Create ENUM types
    # ==========================================================================
    for name, values in ENUMS.items():
        postgresql.ENUM(*values, name=name).create(op.get_bind(), checkfirst=True)

    # ==========================================================================
    # Identity
    # ==========================================================================

    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False, comment="Login email, lowercased"),
        sa.Column("name", sa.String(length=200), nullable=True, comment="Display name"),
        sa.Column(
            "email_status",
            enum("email_status"),
            server_default="UNVERIFIED",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "user_system_roles",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", enum("system_role"), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_user_system_roles_user_id_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("user_id", "role", name="pk_user_system_roles"),
    )

    op.create_table(
        "auth_sessions",
        sa.Column("id", sa.String(length=127), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "active_expires",
            sa.BigInteger(),
            nullable=False,
            comment="Epoch ms until which the session is active",
        ),
        sa.Column(
            "idle_expires",
            sa.BigInteger(),
            nullable=False,
            comment="Epoch ms until which an idle session can be renewed",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_auth_sessions_user_id_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_auth_sessions"),
    )
    op.create_index("ix_auth_sessions_user_id", "auth_sessions", ["user_id"])

    op.create_table(
        "auth_keys",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_auth_keys_user_id_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_auth_keys"),
    )
    op.create_index("ix_auth_keys_user_id", "auth_keys", ["user_id"])

    # ==========================================================================
    # Languages
    # ==========================================================================

    op.create_table(
        "languages",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("code", sa.String(length=8), nullable=False, comment="Short language code used in URLs"),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("font", sa.String(length=100), server_default="Noto Sans", nullable=False),
        sa.Column("text_direction", enum("text_direction"), server_default="ltr", nullable=False),
        sa.Column(
            "bible_translation_ids",
            postgresql.ARRAY(sa.String(length=64)),
            server_default=sa.text("'{}'"),
            nullable=False,
            comment="External Bible translations shown for reference",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_languages"),
        sa.UniqueConstraint("code", name="uq_languages_code"),
    )

    op.create_table(
        "language_member_roles",
        sa.Column("language_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", enum("language_role"), nullable=False),
        sa.ForeignKeyConstraint(
            ["language_id"],
            ["languages.id"],
            name="fk_language_member_roles_language_id_languages",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_language_member_roles_user_id_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("language_id", "user_id", "role", name="pk_language_member_roles"),
    )
    op.create_index("ix_language_member_roles_user_id", "language_member_roles", ["user_id"])

    op.create_table(
        "language_import_jobs",
        sa.Column("language_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("succeeded", sa.Boolean(), nullable=True),
        sa.ForeignKeyConstraint(
            ["language_id"],
            ["languages.id"],
            name="fk_language_import_jobs_language_id_languages",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_language_import_jobs_user_id_users",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("language_id", name="pk_language_import_jobs"),
    )

    # ==========================================================================
    # Reference text
    # ==========================================================================

    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_books"),
        sa.UniqueConstraint("name", name="uq_books_name"),
    )

    op.create_table(
        "lemmas",
        sa.Column("id", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_lemmas"),
    )

    op.create_table(
        "lemma_forms",
        sa.Column("id", sa.String(length=30), nullable=False),
        sa.Column("grammar", sa.String(length=100), nullable=False, comment="Morphological parsing of the form"),
        sa.Column("lemma_id", sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(["lemma_id"], ["lemmas.id"], name="fk_lemma_forms_lemma_id_lemmas"),
        sa.PrimaryKeyConstraint("id", name="pk_lemma_forms"),
    )
    op.create_index("ix_lemma_forms_lemma_id", "lemma_forms", ["lemma_id"])

    op.create_table(
        "verses",
        sa.Column("id", sa.String(length=8), nullable=False),
        sa.Column("book_id", sa.Integer(), nullable=False),
        sa.Column("chapter", sa.Integer(), nullable=False),
        sa.Column("number", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["book_id"], ["books.id"], name="fk_verses_book_id_books"),
        sa.PrimaryKeyConstraint("id", name="pk_verses"),
        sa.UniqueConstraint("book_id", "chapter", "number", name="uq_verses_book_chapter_number"),
    )
    op.create_index("ix_verses_book_id", "verses", ["book_id"])

    op.create_table(
        "words",
        sa.Column("id", sa.String(length=10), nullable=False),
        sa.Column("verse_id", sa.String(length=8), nullable=False),
        sa.Column("text", sa.Text(), nullable=False, comment="Surface text of the word"),
        sa.Column(
            "form_id",
            sa.String(length=30),
            nullable=False,
            comment="The inflected form this word is an instance of",
        ),
        sa.ForeignKeyConstraint(["form_id"], ["lemma_forms.id"], name="fk_words_form_id_lemma_forms"),
        sa.ForeignKeyConstraint(["verse_id"], ["verses.id"], name="fk_words_verse_id_verses"),
        sa.PrimaryKeyConstraint("id", name="pk_words"),
    )
    op.create_index("ix_words_verse_id", "words", ["verse_id"])
    op.create_index("ix_words_form_id", "words", ["form_id"])

    # ==========================================================================
    # Translation content - one row per (word, language)
    # ==========================================================================

    def word_language_columns(table: str) -> list[sa.SchemaItem]:
        return [
            sa.Column("word_id", sa.String(length=10), nullable=False),
            sa.Column("language_id", sa.UUID(), nullable=False),
            sa.ForeignKeyConstraint(["word_id"], ["words.id"], name=f"fk_{table}_word_id_words"),
            sa.ForeignKeyConstraint(
                ["language_id"],
                ["languages.id"],
                name=f"fk_{table}_language_id_languages",
                ondelete="CASCADE",
            ),
            sa.PrimaryKeyConstraint("word_id", "language_id", name=f"pk_{table}"),
        ]

    def authored_columns(table: str) -> list[sa.SchemaItem]:
        return [
            sa.Column("author_id", sa.UUID(), nullable=False),
            sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
            sa.Column("content", sa.Text(), nullable=False),
            sa.ForeignKeyConstraint(
                ["author_id"],
                ["users.id"],
                name=f"fk_{table}_author_id_users",
                ondelete="CASCADE",
            ),
        ]

    op.create_table(
        "glosses",
        *word_language_columns("glosses"),
        sa.Column("gloss", sa.Text(), nullable=True),
        sa.Column("state", enum("gloss_state"), server_default="UNAPPROVED", nullable=False),
    )
    op.create_index("ix_glosses_language_id", "glosses", ["language_id"])

    op.create_table(
        "machine_glosses",
        *word_language_columns("machine_glosses"),
        sa.Column("gloss", sa.Text(), nullable=True),
    )

    op.create_table(
        "translator_notes",
        *word_language_columns("translator_notes"),
        *authored_columns("translator_notes"),
    )

    op.create_table(
        "footnotes",
        *word_language_columns("footnotes"),
        *authored_columns("footnotes"),
    )

    op.create_table(
        "gloss_history_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("word_id", sa.String(length=10), nullable=False),
        sa.Column("language_id", sa.UUID(), nullable=False),
        sa.Column("gloss", sa.Text(), nullable=True),
        sa.Column("state", enum("gloss_state"), nullable=True),
        sa.Column(
            "timestamp",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("source", enum("gloss_source"), nullable=False),
        sa.ForeignKeyConstraint(
            ["word_id"],
            ["words.id"],
            name="fk_gloss_history_entries_word_id_words",
        ),
        sa.ForeignKeyConstraint(
            ["language_id"],
            ["languages.id"],
            name="fk_gloss_history_entries_language_id_languages",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_gloss_history_entries_user_id_users",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_gloss_history_entries"),
    )
    op.create_index(
        "ix_gloss_history_entries_word_language_timestamp",
        "gloss_history_entries",
        ["word_id", "language_id", "timestamp"],
    )


def downgrade() -> None:
    """Drop all tables and enums in reverse dependency order."""
    op.drop_index("ix_gloss_history_entries_word_language_timestamp", table_name="gloss_history_entries")
    op.drop_table("gloss_history_entries")
    op.drop_table("footnotes")
    op.drop_table("translator_notes")
    op.drop_table("machine_glosses")
    op.drop_index("ix_glosses_language_id", table_name="glosses")
    op.drop_table("glosses")

    op.drop_index("ix_words_form_id", table_name="words")
    op.drop_index("ix_words_verse_id", table_name="words")
    op.drop_table("words")
    op.drop_index("ix_verses_book_id", table_name="verses")
    op.drop_table("verses")
    op.drop_index("ix_lemma_forms_lemma_id", table_name="lemma_forms")
    op.drop_table("lemma_forms")
    op.drop_table("lemmas")
    op.drop_table("books")

    op.drop_table("language_import_jobs")
    op.drop_index("ix_language_member_roles_user_id", table_name="language_member_roles")
    op.drop_table("language_member_roles")
    op.drop_table("languages")

    op.drop_index("ix_auth_keys_user_id", table_name="auth_keys")
    op.drop_table("auth_keys")
    op.drop_index("ix_auth_sessions_user_id", table_name="auth_sessions")
    op.drop_table("auth_sessions")
    op.drop_table("user_system_roles")
    op.drop_table("users")

    for name in reversed(ENUMS):
        postgresql.ENUM(name=name).drop(op.get_bind(), checkfirst=True)
