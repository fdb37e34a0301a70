#!/usr/bin/env python3
"""
Audit Application Export Script
Prints every free audit application as CSV, oldest first.

Usage:
    python -m scripts.export_applications [status] > applications.csv

Example:
    python -m scripts.export_applications pending
"""
import csv
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session
from app.database import SessionLocal, init_db
from app.models.db_models import ApplicationStatus
from app.services.access_store import AccessStore, AccessStoreError

COLUMNS = ["id", "submitted_at", "status", "name", "brand", "store_url", "monthly_ad_spend", "email"]


def export_applications(out, status: str = None) -> int:
    """Write applications as CSV to out. Returns the number of rows written."""
    init_db()

    db: Session = SessionLocal()
    try:
        applications = AccessStore(db).list_applications(status=status)
    finally:
        db.close()

    writer = csv.writer(out)
    writer.writerow(COLUMNS)
    for application in applications:
        writer.writerow([
            application.id,
            application.submitted_at.isoformat() if application.submitted_at else "",
            application.status,
            application.name,
            application.brand,
            application.store_url,
            application.monthly_ad_spend,
            application.email,
        ])
    return len(applications)


def main():
    if len(sys.argv) > 2:
        print(__doc__, file=sys.stderr)
        sys.exit(1)

    status = sys.argv[1] if len(sys.argv) == 2 else None
    if status is not None and status not in [s.value for s in ApplicationStatus]:
        print(f"Error: unknown status '{status}'", file=sys.stderr)
        sys.exit(1)

    try:
        count = export_applications(sys.stdout, status)
    except AccessStoreError as e:
        print(f"Error exporting applications: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Exported {count} applications", file=sys.stderr)


if __name__ == "__main__":
    main()
