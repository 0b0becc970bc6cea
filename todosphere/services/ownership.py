"""Garde de propriété partagée par tous les services."""

import logging
from todosphere.core.errors import NotFoundError, ForbiddenError

logger = logging.getLogger(__name__)


def ensure_owner(resource, requester_id: int, label: str):
    """Vérifie que `resource` existe et appartient à `requester_id`.

    - ressource absente -> NotFoundError("<label> not found")
    - ressource d'un autre user -> ForbiddenError("Not authorized")

    Les deux cas restent distincts: le client voit 404 ou 401.
    Retourne la ressource pour pouvoir chaîner.
    """
    if resource is None:
        raise NotFoundError(f"{label} not found")

    if resource.user_id != requester_id:
        logger.warning(f"User {requester_id} denied access to {label.lower()} {resource.id}")
        raise ForbiddenError("Not authorized")

    return resource
