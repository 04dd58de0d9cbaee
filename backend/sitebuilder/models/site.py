from sitebuilder.extensions import db
from .base import BaseModel


class Site(BaseModel):
    __tablename__ = "sites"

    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    # Globally unique; the database constraint is authoritative
    subdomain = db.Column(db.String(30), unique=True, nullable=False, index=True)
    custom_domain = db.Column(db.String(255), unique=True, nullable=True)
    logo = db.Column(db.String(512), nullable=True)
    description = db.Column(db.Text, nullable=True)

    owner = db.relationship("User", back_populates="sites")
    pages = db.relationship(
        "Page",
        back_populates="site",
        order_by="Page.created_at.desc()",
        lazy="select",
    )
