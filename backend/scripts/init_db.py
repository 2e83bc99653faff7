"""Initialize the database - creates all tables and the upload directory."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.database import engine, Base
import app.models  # noqa: F401 - registers all models


def init_db():
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    print(f"Upload directory: {os.path.abspath(settings.UPLOAD_DIR)}")
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
