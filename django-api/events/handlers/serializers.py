"""Serializers for request parsing and for rendering domain models.

Wire names are camelCase; money is always rendered as a decimal string.
"""

from datetime import datetime, timezone

from rest_framework import serializers

from events.domain import Capacity, EventPatch, EventStatus, ReportType


class EventDateField(serializers.DateTimeField):
    """ISO 8601 datetime, or epoch milliseconds as sent by older clients."""

    def to_internal_value(self, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                self.fail("invalid", format="epoch milliseconds or ISO 8601")
        return super().to_internal_value(value)


# Input


class EventCreateSerializer(serializers.Serializer):
    name = serializers.CharField()
    description = serializers.CharField()
    eventDate = EventDateField(source="event_date")
    location = serializers.CharField()
    totalCapacity = serializers.IntegerField(source="total_capacity", min_value=1)
    adminId = serializers.CharField(source="admin_id")


class EventUpdateSerializer(serializers.Serializer):
    """Allow-list of fields an update may touch; other keys are ignored."""

    name = serializers.CharField(required=False)
    description = serializers.CharField(required=False)
    eventDate = EventDateField(source="event_date", required=False)
    location = serializers.CharField(required=False)
    totalCapacity = serializers.IntegerField(
        source="total_capacity", min_value=1, required=False
    )

    def to_patch(self) -> EventPatch:
        data = dict(self.validated_data)
        if "total_capacity" in data:
            data["total_capacity"] = Capacity(data["total_capacity"])
        return EventPatch(**data)


class EventStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[s.value for s in EventStatus])


class TicketSaleSerializer(serializers.Serializer):
    amount = serializers.CharField()


class ReportCreateSerializer(serializers.Serializer):
    reportType = serializers.ChoiceField(
        source="report_type", choices=[t.value for t in ReportType]
    )
    createdBy = serializers.CharField(source="created_by")


# Output


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    eventDate = serializers.DateTimeField(source="event_date")
    location = serializers.CharField()
    totalCapacity = serializers.IntegerField(source="total_capacity.value")
    ticketsIssued = serializers.IntegerField(source="tickets_issued")
    ticketsSold = serializers.IntegerField(source="tickets_sold")
    revenue = serializers.CharField()
    status = serializers.CharField(source="status.value")
    adminId = serializers.CharField(source="admin_id")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventStatsSerializer(serializers.Serializer):
    """Serializer for EventStats domain model."""

    eventId = serializers.CharField(source="event_id")
    totalTickets = serializers.IntegerField(source="total_tickets")
    ticketsSold = serializers.IntegerField(source="tickets_sold")
    ticketsUsed = serializers.IntegerField(source="tickets_used")
    totalRevenue = serializers.CharField(source="total_revenue")
    averageTicketPrice = serializers.CharField(source="average_ticket_price")
    attendanceRate = serializers.FloatField(source="attendance_rate")
    selloutRate = serializers.FloatField(source="sellout_rate")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class ConversionFunnelSerializer(serializers.Serializer):
    pageViews = serializers.IntegerField(source="page_views")
    addToCart = serializers.IntegerField(source="add_to_cart")
    checkoutInitiated = serializers.IntegerField(source="checkout_initiated")
    completed = serializers.IntegerField()


class TicketTypeCountSerializer(serializers.Serializer):
    type = serializers.CharField()
    count = serializers.IntegerField()


class AnalyticsSerializer(serializers.Serializer):
    """Serializer for Analytics domain model."""

    eventId = serializers.CharField(source="event_id")
    hourlyRevenue = serializers.SerializerMethodField()
    userAcquisitionRate = serializers.FloatField(source="user_acquisition_rate")
    repeatCustomerRate = serializers.FloatField(source="repeat_customer_rate")
    topTicketTypes = TicketTypeCountSerializer(source="top_ticket_types", many=True)
    geographicDistribution = serializers.DictField(
        source="geographic_distribution", child=serializers.IntegerField()
    )
    deviceTypes = serializers.DictField(
        source="device_types", child=serializers.IntegerField()
    )
    conversionFunnel = ConversionFunnelSerializer(source="conversion_funnel")

    def get_hourlyRevenue(self, analytics) -> dict[str, str]:
        return {str(hour): str(amount) for hour, amount in analytics.hourly_revenue.items()}


class AnalyticsSummarySerializer(serializers.Serializer):
    userAcquisitionRate = serializers.FloatField(source="user_acquisition_rate")
    repeatCustomerRate = serializers.FloatField(source="repeat_customer_rate")
    conversionFunnel = ConversionFunnelSerializer(source="conversion_funnel")


class ReportPeriodSerializer(serializers.Serializer):
    startDate = serializers.DateTimeField(source="start_date")
    endDate = serializers.DateTimeField(source="end_date")


class ReportSerializer(serializers.Serializer):
    """Serializer for Report domain model."""

    id = serializers.CharField()
    eventId = serializers.CharField(source="event_id")
    reportType = serializers.CharField(source="report_type.value")
    generatedAt = serializers.DateTimeField(source="generated_at")
    period = ReportPeriodSerializer()
    data = serializers.SerializerMethodField()
    createdBy = serializers.CharField(source="created_by")

    def get_data(self, report) -> dict:
        return {
            "event": EventSerializer(report.event).data if report.event else None,
            "stats": EventStatsSerializer(report.stats).data if report.stats else None,
            "analytics": AnalyticsSummarySerializer(report.analytics).data,
        }
