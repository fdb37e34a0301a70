"""
Migration: Enforce one subscriber row per email.

Older deployments created email_subscribers with a plain index on email, so a
double submit could leave two rows for the same address. This collapses
duplicates (keeping the earliest subscribed_at, with access granted if any
copy had it) and swaps the plain index for a unique one.
"""
from sqlalchemy import create_engine, text
import os

# Use same DB URL pattern as main app
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql://{os.getenv('USER', 'postgres')}@localhost:5432/ecom_fixes"
)

def run_migration():
    """Deduplicate subscribers by email and add a unique index."""
    engine = create_engine(DATABASE_URL)

    with engine.connect() as conn:
        result = conn.execute(text("""
            SELECT indexname
            FROM pg_indexes
            WHERE tablename = 'email_subscribers'
              AND indexname = 'ix_email_subscribers_email'
              AND indexdef LIKE 'CREATE UNIQUE INDEX%'
        """))

        if result.fetchone():
            print("Unique email index already exists")
            return

        # Carry access over to the surviving row before dropping duplicates
        conn.execute(text("""
            UPDATE email_subscribers AS keep
            SET access_granted = TRUE
            WHERE EXISTS (
                SELECT 1 FROM email_subscribers AS dup
                WHERE dup.email = keep.email
                  AND dup.id <> keep.id
                  AND dup.access_granted = TRUE
            )
        """))

        result = conn.execute(text("""
            DELETE FROM email_subscribers
            WHERE id IN (
                SELECT id FROM (
                    SELECT id,
                           ROW_NUMBER() OVER (
                               PARTITION BY email ORDER BY subscribed_at ASC, id ASC
                           ) AS position
                    FROM email_subscribers
                ) ranked
                WHERE ranked.position > 1
            )
        """))
        print(f"Removed {result.rowcount} duplicate subscriber rows")

        conn.execute(text("DROP INDEX IF EXISTS ix_email_subscribers_email"))
        conn.execute(text("""
            CREATE UNIQUE INDEX ix_email_subscribers_email
            ON email_subscribers (email)
        """))
        print("Created unique index ix_email_subscribers_email")

        conn.commit()

if __name__ == "__main__":
    run_migration()
