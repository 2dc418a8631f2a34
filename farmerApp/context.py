"""
Resolve which farmer a request acts on behalf of.

The farmer is looked up, in order, from the authenticated user, the
``X-Farmer-Id`` header and finally the configured demo farmer, which is
created the first time it is needed. The header is only honoured when
``TRUST_FARMER_HEADER`` is on (development) or for staff users.
"""
import logging

from django.conf import settings

from .models import Farmer

logger = logging.getLogger(__name__)

FARMER_HEADER = 'X-Farmer-Id'


def get_default_farmer():
    farmer, created = Farmer.objects.get_or_create(
        id=settings.DEFAULT_FARMER_ID,
        defaults=dict(settings.DEFAULT_FARMER),
    )
    if created:
        logger.info(f"Created default farmer {farmer.id}")
    return farmer


def header_allowed(user):
    if settings.TRUST_FARMER_HEADER:
        return True
    return user is not None and user.is_authenticated and user.is_staff


def resolve_farmer(request):
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        farmer = Farmer.objects.filter(user=user).first()
        if farmer is not None:
            return farmer

    farmer_id = request.headers.get(FARMER_HEADER)
    if farmer_id:
        if not header_allowed(user):
            logger.warning(f"Ignoring {FARMER_HEADER} header from a non-staff caller")
        else:
            farmer = Farmer.objects.filter(id=farmer_id).first()
            if farmer is not None:
                return farmer
            logger.warning(f"Unknown farmer id in {FARMER_HEADER} header: {farmer_id}")

    return get_default_farmer()
