import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger("apps.registration")

# sender=Group, kwargs: group_id, action ("created" | "updated" | "deleted" | "slot_reserved")
group_changed = Signal()


@receiver(group_changed)
def log_group_change(sender, group_id=None, action="", **kwargs):
    logger.info(f"Group {group_id} {action}")
