# apps/pos/services.py
"""
POS domain service.

Single entry point for reading and writing POS records. Views validate the
payload with PosSerializer and hand the validated data here; every write runs
in its own transaction.
"""

import logging

from django.db import IntegrityError, transaction

from .models import Pos

logger = logging.getLogger(__name__)


class PosServiceError(Exception):
    pass


class PosNotFoundError(PosServiceError):
    pass


class DuplicatePosNameError(PosServiceError):
    pass


class PosIdMismatchError(PosServiceError):
    pass


def list_pos():
    """All POS records in insertion order."""
    return Pos.objects.all().order_by('id')


def get_pos(pos_id):
    try:
        return Pos.objects.get(pk=pos_id)
    except Pos.DoesNotExist:
        logger.warning(f"POS with ID {pos_id} not found")
        raise PosNotFoundError(f"POS with ID {pos_id} does not exist.")


def get_pos_by_name(name):
    try:
        return Pos.objects.get(name=name)
    except Pos.DoesNotExist:
        logger.warning(f"POS with name {name!r} not found")
        raise PosNotFoundError(f"POS with name '{name}' does not exist.")


def _name_clash(names, exclude_pk=None):
    """True if the names repeat among themselves or belong to another POS."""
    if len(set(names)) < len(names):
        return True
    return Pos.objects.filter(name__in=names).exclude(pk=exclude_pk).exists()


def _build(data):
    return Pos(**{field: data[field] for field in Pos.MUTABLE_FIELDS if field in data})


def create_pos(data):
    """Persist one POS built from validated serializer data."""
    return create_pos_batch([data])[0]


def create_pos_batch(items):
    """
    Persist several POS in one transaction.

    Either every record is created or none is; a clash on the unique name
    rolls back the whole batch.
    """
    created = []
    try:
        with transaction.atomic():
            for data in items:
                pos = _build(data)
                pos.save()
                created.append(pos)
    except IntegrityError as e:
        names = [data.get('name') for data in items]
        if not _name_clash(names):
            raise
        logger.warning(f"Rejected POS batch {names}: {e}")
        raise DuplicatePosNameError(
            f"POS names must be unique; rejected batch: {', '.join(names)}"
        ) from e

    logger.info(f"Created {len(created)} POS: {[pos.id for pos in created]}")
    return created


def update_pos(pos_id, data, body_id=None):
    """
    Replace every mutable field of an existing POS.

    `body_id` is the id carried in the request body, if any; it must match
    the id being updated.
    """
    if body_id is not None and str(body_id) != str(pos_id):
        raise PosIdMismatchError(
            f"POS ID in path ({pos_id}) does not match ID in body ({body_id})."
        )

    try:
        with transaction.atomic():
            pos = Pos.objects.select_for_update().filter(pk=pos_id).first()
            if pos is None:
                logger.warning(f"Cannot update POS {pos_id}: not found")
                raise PosNotFoundError(f"POS with ID {pos_id} does not exist.")

            for field in Pos.MUTABLE_FIELDS:
                if field == 'description':
                    pos.description = data.get('description', '')
                else:
                    setattr(pos, field, data[field])
            pos.save()
    except IntegrityError as e:
        if not _name_clash([data.get('name')], exclude_pk=pos_id):
            raise
        logger.warning(f"Rejected update of POS {pos_id}: {e}")
        raise DuplicatePosNameError(
            f"A POS with name '{data.get('name')}' already exists."
        ) from e

    logger.info(f"Updated POS {pos.id} ({pos.name})")
    return pos


def clear():
    """Delete every POS. Test support only."""
    deleted, _ = Pos.objects.all().delete()
    logger.info(f"Cleared {deleted} POS")
    return deleted
