"""Cleanup orphan managed images and stale raw uploads.

Usage:
  python scripts/cleanup_managed_images.py            # dry-run
  python scripts/cleanup_managed_images.py --apply    # delete orphan files
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal
from app.logging_config import setup_logging
from app.services import managed_image_service


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Actually delete orphan files")
    args = parser.parse_args()

    setup_logging()
    db = SessionLocal()
    try:
        result = managed_image_service.cleanup_orphan_images(db, dry_run=not args.apply)
    finally:
        db.close()

    print("Managed image cleanup result")
    print(f"  dry_run: {result['dry_run']}")
    print(f"  referenced_count: {result['referenced_count']}")
    print(f"  processed_count: {result['processed_count']}")
    print(f"  orphan_count: {result['orphan_count']}")
    print(f"  stale_upload_count: {result['stale_upload_count']}")
    print(f"  deleted_count: {result['deleted_count']}")
    if result["orphan_urls"]:
        print("  orphan_urls:")
        for url in result["orphan_urls"]:
            print(f"    - {url}")
    if result["stale_uploads"]:
        print("  stale_uploads:")
        for name in result["stale_uploads"]:
            print(f"    - {name}")


if __name__ == "__main__":
    main()
