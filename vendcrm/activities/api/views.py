import logging

from rest_framework import mixins
from rest_framework import viewsets

from vendcrm.activities.api.serializers import ActivitySerializer
from vendcrm.activities.models import Activity

logger = logging.getLogger(__name__)


class ActivityViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """Customer interactions.

    Creating an activity does not push anything itself; the activity relay
    picks new rows up on its next poll.
    """

    queryset = Activity.objects.select_related("customer")
    serializer_class = ActivitySerializer
    filterset_fields = ["customer", "type", "completed", "opportunity"]
    search_fields = ["description", "outcome", "contacted_by"]
    ordering_fields = ["created_at", "due_date"]

    def perform_create(self, serializer):
        if not serializer.validated_data.get("contacted_by"):
            user = self.request.user
            name = getattr(user, "display_name", "") or getattr(user, "username", "")
            serializer.validated_data["contacted_by"] = name
        activity = serializer.save()
        logger.info(
            "Activity %s logged for customer %s (%s)",
            activity.pk,
            activity.customer_id,
            activity.type,
        )
