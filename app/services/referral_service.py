"""
Referral Service — referral multiplier tiers.

A referrer's multiplier is driven by how many of their referrals have
completed, using the ``referral_tier_{n}_threshold`` /
``referral_tier_{n}_multiplier`` settings.
"""

import logging
from decimal import Decimal

from app.models import db
from app.models.auth import User
from app.models.configuration import Setting
from app.models.investment import Referral

logger = logging.getLogger(__name__)

BASE_MULTIPLIER = Decimal("1.0")


def referral_tiers():
    """Return [(threshold, multiplier), ...] sorted by threshold.

    Tiers whose threshold or multiplier setting is missing are skipped.
    """
    rows = {
        s.key: s.value
        for s in Setting.query.filter(Setting.key.like("referral_tier_%")).all()
    }
    tiers = []
    n = 1
    while f"referral_tier_{n}_threshold" in rows or f"referral_tier_{n}_multiplier" in rows:
        threshold = rows.get(f"referral_tier_{n}_threshold")
        multiplier = rows.get(f"referral_tier_{n}_multiplier")
        if threshold is not None and multiplier is not None:
            tiers.append((int(float(threshold)), Decimal(str(multiplier))))
        n += 1
    return sorted(tiers)


def multiplier_for(count: int, tiers=None) -> Decimal:
    """Highest tier multiplier whose threshold ``count`` has reached."""
    tiers = referral_tiers() if tiers is None else tiers
    result = BASE_MULTIPLIER
    for threshold, multiplier in tiers:
        if count >= threshold:
            result = multiplier
    return result


def completed_referral_count(user: User) -> int:
    return Referral.query.filter_by(referrer_id=user.id, status="completed").count()


def recompute_multiplier(user: User) -> Decimal:
    """Recalculate and store ``user.referral_multiplier``."""
    count = completed_referral_count(user)
    multiplier = multiplier_for(count)
    if user.referral_multiplier is None or Decimal(str(user.referral_multiplier)) != multiplier:
        logger.debug("Referral multiplier for %s: %s (%d completed)", user.username, multiplier, count)
    user.referral_multiplier = multiplier
    db.session.flush()
    return multiplier
