"""Seed the database with sample content. Images go through the same transform as uploads."""
import sys
import os
import uuid
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from PIL import Image

from app.config import settings
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.project import Project
from app.models.client import Client
from app.models.contact import Contact
from app.models.newsletter import Newsletter
from app.services.image_lifecycle_service import ImageLifecycle
from app.utils.helpers import UploadedFile


def _placeholder_image(lifecycle: ImageLifecycle, size, color) -> str:
    os.makedirs(lifecycle.upload_dir, exist_ok=True)
    raw_name = f"{uuid.uuid4().hex}.png"
    raw_path = os.path.join(lifecycle.upload_dir, raw_name)
    Image.new("RGB", size, color).save(raw_path, format="PNG")

    upload = UploadedFile(
        path=raw_path,
        filename=raw_name,
        original_filename=raw_name,
        content_type="image/png",
        size=os.path.getsize(raw_path),
    )
    filename = lifecycle.processed_filename(upload)
    lifecycle.transformer.crop_and_resize(raw_path, os.path.join(lifecycle.upload_dir, filename))
    return lifecycle.public_url(filename)


def seed():
    Base.metadata.create_all(bind=engine)
    lifecycle = ImageLifecycle.from_settings()
    db = SessionLocal()
    try:
        if db.query(Project).count() > 0:
            print("Database already seeded. Skipping.")
            return

        projects = [
            Project(name="Consultation", description="Project consultation and planning",
                    image=_placeholder_image(lifecycle, (1200, 600), (52, 101, 164))),
            Project(name="Design", description="Interior and architecture design",
                    image=_placeholder_image(lifecycle, (800, 1000), (204, 102, 0))),
            Project(name="Marketing & Design", description="Brand identity and campaigns",
                    image=_placeholder_image(lifecycle, (450, 350), (78, 154, 6))),
        ]
        db.add_all(projects)

        clients = [
            Client(name="Rowhan Smith", designation="CEO, Foreclosure", description="Great partner to work with.",
                   image=_placeholder_image(lifecycle, (600, 600), (117, 80, 123))),
            Client(name="Shipra Kayak", designation="Brand Designer", description="Delivered ahead of schedule.",
                   image=_placeholder_image(lifecycle, (640, 480), (193, 125, 17))),
        ]
        db.add_all(clients)

        db.add(Contact(full_name="John Doe", email="john@example.com", mobile="5551234567",
                       city="Springfield", message="Interested in a consultation."))
        db.add(Newsletter(email="subscriber@example.com"))

        db.commit()
        print(f"Seeded {len(projects)} projects and {len(clients)} clients into {settings.DATABASE_URL}")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
