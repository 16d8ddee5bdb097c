"""
CMS Models — static pages, navigation menus, banners, blog / knowledge-base
categories and articles, promotional materials and support canned responses.
"""

from app.models import db
from app.models.base import TimestampMixin


class Page(TimestampMixin, db.Model):
    __tablename__ = "pages"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False)
    content = db.Column(db.Text)
    status = db.Column(db.String(20), default="draft")  # draft, published


class Menu(TimestampMixin, db.Model):
    __tablename__ = "menus"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)  # header, footer, user-sidebar, ...

    items = db.relationship(
        "MenuItem", back_populates="menu", lazy="dynamic",
        cascade="all, delete-orphan", order_by="MenuItem.display_order",
    )


class MenuItem(db.Model):
    __tablename__ = "menu_items"

    id = db.Column(db.Integer, primary_key=True)
    menu_id = db.Column(db.Integer, db.ForeignKey("menus.id", ondelete="CASCADE"), nullable=False)
    label = db.Column(db.String(100), nullable=False)
    url = db.Column(db.String(255), nullable=False)
    display_order = db.Column(db.Integer, default=0)

    __table_args__ = (
        db.UniqueConstraint("menu_id", "label", name="uq_menu_item_label"),
    )

    menu = db.relationship("Menu", back_populates="items")


class Banner(TimestampMixin, db.Model):
    __tablename__ = "banners"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), unique=True, nullable=False)
    subtitle = db.Column(db.String(255))
    image_url = db.Column(db.String(255))
    link_url = db.Column(db.String(255))
    placement = db.Column(db.String(50), default="home_hero")
    display_order = db.Column(db.Integer, default=0)
    is_active = db.Column(db.Boolean, default=True)


class BlogCategory(TimestampMixin, db.Model):
    __tablename__ = "blog_categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)
    display_order = db.Column(db.Integer, default=0)


class KbCategory(TimestampMixin, db.Model):
    __tablename__ = "kb_categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)
    display_order = db.Column(db.Integer, default=0)

    articles = db.relationship("KbArticle", back_populates="category", lazy="dynamic")


class KbArticle(TimestampMixin, db.Model):
    __tablename__ = "kb_articles"

    id = db.Column(db.Integer, primary_key=True)
    kb_category_id = db.Column(
        db.Integer, db.ForeignKey("kb_categories.id", ondelete="CASCADE"), nullable=False
    )
    author_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"))
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False)
    summary = db.Column(db.String(255))
    content = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), default="draft")  # draft, published
    published_at = db.Column(db.DateTime)
    last_updated = db.Column(db.Date)

    category = db.relationship("KbCategory", back_populates="articles")


class PromotionalMaterial(TimestampMixin, db.Model):
    """Downloadable marketing asset for referrers."""
    __tablename__ = "promotional_materials"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), unique=True, nullable=False)
    description = db.Column(db.Text)
    category = db.Column(db.String(50), nullable=False)  # banners, social, videos, documents, presentations
    material_type = db.Column(db.String(20), nullable=False)  # image, video, document
    file_url = db.Column(db.String(255), nullable=False)
    file_name = db.Column(db.String(255))
    file_size = db.Column(db.Integer)
    dimensions = db.Column(db.String(20))
    is_active = db.Column(db.Boolean, default=True)


class CannedResponse(TimestampMixin, db.Model):
    __tablename__ = "canned_responses"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), unique=True, nullable=False)
    content = db.Column(db.Text, nullable=False)
