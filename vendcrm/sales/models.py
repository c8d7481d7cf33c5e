from decimal import Decimal

from django.core.validators import MaxValueValidator
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Opportunity(models.Model):
    class Stage(models.TextChoices):
        PROSPECTING = "prospecting", _("Prospecting")
        QUALIFICATION = "qualification", _("Qualification")
        PROPOSAL = "proposal", _("Proposal")
        CLOSED_WON = "closed-won", _("Closed Won")
        CLOSED_LOST = "closed-lost", _("Closed Lost")

    CLOSED_STAGES = (Stage.CLOSED_WON, Stage.CLOSED_LOST)

    customer = models.ForeignKey(
        "customers.Customer", on_delete=models.CASCADE, related_name="opportunities"
    )
    product = models.ForeignKey(
        "inventory.Product", on_delete=models.PROTECT, related_name="opportunities"
    )
    stage = models.CharField(
        max_length=20, choices=Stage.choices, default=Stage.PROSPECTING, db_index=True
    )
    value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    probability = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MaxValueValidator(100)],
        help_text=_("Win probability in percent"),
    )
    expected_close_date = models.DateField(null=True, blank=True)
    close_date = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True, default="")
    assigned_to = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name_plural = "opportunities"

    def __str__(self):
        return f"{self.customer} / {self.product} ({self.stage})"

    @property
    def status(self) -> str:
        if self.stage == self.Stage.CLOSED_WON:
            return "won"
        if self.stage == self.Stage.CLOSED_LOST:
            return "lost"
        return "open"

    @property
    def is_closed(self) -> bool:
        return self.stage in self.CLOSED_STAGES
