"""
apps/groups/capacity.py

Group occupancy rules.

    max_companies = 0  → unlimited, never full, remaining = None
    max_companies > 0  → full once registered_count >= max_companies

registered_count is always a live count of Company rows pointing at the
group. reserve_slot() re-counts under a row lock so two concurrent
registrations can never overfill a group.
"""

import logging
from typing import Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Count

from core.exceptions import GroupFullException, ValidationException
from .models import Group
from .signals import group_changed

logger = logging.getLogger("apps.registration")


def remaining_slots(max_companies: int, registered_count: int) -> Optional[int]:
    if not max_companies or max_companies <= 0:
        return None
    return max(0, max_companies - registered_count)


def is_full(max_companies: int, registered_count: int) -> bool:
    return bool(max_companies) and max_companies > 0 and registered_count >= max_companies


def with_registered_count(queryset=None):
    queryset = Group.objects.all() if queryset is None else queryset
    return queryset.annotate(registered_count=Count("companies", distinct=True))


def registered_count_for(group: Group) -> int:
    count = getattr(group, "registered_count", None)
    if count is None:
        count = group.companies.count()
    return count


def ensure_group_accepts(group: Group) -> None:
    count = registered_count_for(group)
    if is_full(group.max_companies, count):
        raise GroupFullException(
            f"Group '{group.name}' is full ({count}/{group.max_companies}). Please choose another group."
        )


def reserve_slot(group_id, exclude_company_id=None) -> Group:
    """
    Lock the group row and verify it still has room.

    Must be called inside transaction.atomic(); the caller attaches the
    company to the returned group before the transaction commits, which is
    what makes the check-then-insert atomic. exclude_company_id leaves a
    company already attached to this group out of the count (re-saving an
    existing registration must not count against itself).
    """
    if not transaction.get_connection().in_atomic_block:
        raise RuntimeError("reserve_slot() must run inside transaction.atomic()")

    try:
        group = Group.objects.select_for_update().get(pk=group_id)
    except (Group.DoesNotExist, DjangoValidationError, ValueError):
        raise ValidationException("Selected group does not exist.")

    companies = group.companies.all()
    if exclude_company_id is not None:
        companies = companies.exclude(pk=exclude_company_id)
    group.registered_count = companies.count()

    ensure_group_accepts(group)

    logger.info(
        f"Slot reserved in group '{group.name}' "
        f"({group.registered_count + 1}/{group.max_companies or '∞'})"
    )
    transaction.on_commit(
        lambda: group_changed.send(sender=Group, group_id=group.pk, action="slot_reserved")
    )
    return group
