"""
Communication Models — email and SMS templates.

Bodies use ``{{variable}}`` placeholders; ``variables`` lists every name a
sender must supply when rendering the template.
"""

from app.models import db
from app.models.base import TimestampMixin


class EmailTemplate(TimestampMixin, db.Model):
    __tablename__ = "email_templates"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)
    subject = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    variables = db.Column(db.JSON, default=list)
    is_active = db.Column(db.Boolean, default=True)


class SmsTemplate(TimestampMixin, db.Model):
    __tablename__ = "sms_templates"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)
    body = db.Column(db.String(500), nullable=False)
    variables = db.Column(db.JSON, default=list)
    is_active = db.Column(db.Boolean, default=True)
