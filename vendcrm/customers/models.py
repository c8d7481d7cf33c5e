from django.db import models
from django.utils.translation import gettext_lazy as _


class Customer(models.Model):
    """A vending-service account: the operator plus the sites it runs."""

    name = models.CharField(max_length=255, help_text=_("Primary contact name"))
    company = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=50)
    address = models.TextField()
    website = models.URLField(blank=True, default="")
    notes = models.TextField(blank=True, default="")
    machine_types = models.JSONField(
        default=list,
        blank=True,
        help_text=_("Machine types placed with this customer"),
    )
    state = models.CharField(max_length=100, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")
    business_locations = models.TextField(blank=True, default="")
    service_territory = models.CharField(
        max_length=100, blank=True, default="", db_index=True
    )
    service_hours = models.CharField(max_length=255, blank=True, default="")
    contract_terms = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["company", "name"]

    def __str__(self):
        return f"{self.company} ({self.name})"

    @property
    def machine_count(self) -> int:
        return len(self.machine_types or [])


class LoyaltyTransaction(models.Model):
    class Kind(models.TextChoices):
        EARN = "earn", _("Earn")
        REDEEM = "redeem", _("Redeem")

    customer = models.ForeignKey(
        Customer, on_delete=models.CASCADE, related_name="loyalty_transactions"
    )
    kind = models.CharField(max_length=10, choices=Kind.choices)
    # Positive for earn, negative for redeem.
    points = models.IntegerField()
    source = models.CharField(max_length=100, blank=True, default="")
    description = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.customer_id}: {self.points:+d} ({self.kind})"
