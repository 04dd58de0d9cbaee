from sitebuilder.extensions import db
from .base import BaseModel


class Page(BaseModel):
    __tablename__ = "pages"

    site_id = db.Column(db.String(36), db.ForeignKey("sites.id"), nullable=False, index=True)
    slug = db.Column(db.String(100), nullable=False)
    title = db.Column(db.String(200), nullable=True)
    # Ordered list of blocks, replaced wholesale on save
    content = db.Column(db.JSON, nullable=False, default=list)
    published = db.Column(db.Boolean, nullable=False, default=False)

    site = db.relationship("Site", back_populates="pages")

    __table_args__ = (
        db.UniqueConstraint("site_id", "slug", name="uq_page_slug_per_site"),
    )
