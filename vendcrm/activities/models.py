from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Activity(models.Model):
    """A logged customer interaction: call, email, meeting or site visit.

    Rows are append-only from the realtime feed's point of view; the relay
    polls them by ``(created_at, id)``.
    """

    class Type(models.TextChoices):
        CALL = "call", _("Call")
        EMAIL = "email", _("Email")
        MEETING = "meeting", _("Meeting")
        SITE_VISIT = "site_visit", _("Site visit")
        OTHER = "other", _("Other")

    customer = models.ForeignKey(
        "customers.Customer", on_delete=models.CASCADE, related_name="activities"
    )
    opportunity = models.ForeignKey(
        "sales.Opportunity",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="activities",
    )
    type = models.CharField(max_length=20, choices=Type.choices)
    description = models.TextField()
    outcome = models.TextField(blank=True, default="")
    next_steps = models.TextField(blank=True, default="")
    contact_method = models.CharField(max_length=50, blank=True, default="")
    contacted_by = models.CharField(max_length=255, blank=True, default="")
    due_date = models.DateTimeField(null=True, blank=True)
    completed = models.BooleanField(default=False)

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "id"]
        verbose_name_plural = "activities"
        indexes = [
            models.Index(fields=["created_at", "id"], name="activity_feed_cursor_idx"),
        ]

    def __str__(self):
        return f"{self.get_type_display()} with {self.customer_id} at {self.created_at:%Y-%m-%d %H:%M}"
