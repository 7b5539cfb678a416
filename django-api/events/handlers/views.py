"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler in ``errors.py``
- Never contain business logic
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.dependencies import (
    get_analytics_provider,
    get_event_service,
    get_report_service,
)
from events.domain import EventStatus, ReportType
from events.domain.errors import EventNotFoundError
from events.handlers.serializers import (
    AnalyticsSerializer,
    EventCreateSerializer,
    EventSerializer,
    EventStatsSerializer,
    EventStatusSerializer,
    EventUpdateSerializer,
    ReportCreateSerializer,
    ReportSerializer,
    TicketSaleSerializer,
)
from events.services.event_service import parse_event_id


class EventListView(APIView):
    """Handler for GET/POST /events"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(**serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(event_id, serializer.to_patch())
        return Response(EventSerializer(event).data)


class AdminEventListView(APIView):
    """Handler for GET /events/admin/{admin_id}"""

    def get(self, request: Request, admin_id: str) -> Response:
        events = get_event_service().list_admin_events(admin_id)
        return Response(EventSerializer(events, many=True).data)


class EventStatusView(APIView):
    """Handler for PATCH /events/{event_id}/status"""

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = EventStatus(serializer.validated_data["status"])
        event = get_event_service().update_status(event_id, new_status)
        return Response(EventSerializer(event).data)


class TicketSaleView(APIView):
    """Handler for POST /events/{event_id}/ticket-sale"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = TicketSaleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().record_ticket_sale(
            event_id, serializer.validated_data["amount"]
        )
        return Response(EventSerializer(event).data)


class EventStatsView(APIView):
    """Handler for GET /events/{event_id}/stats"""

    def get(self, request: Request, event_id: str) -> Response:
        stats = get_event_service().get_stats(event_id)
        return Response(EventStatsSerializer(stats).data)


class EventAnalyticsView(APIView):
    """Handler for GET /events/{event_id}/analytics"""

    def get(self, request: Request, event_id: str) -> Response:
        parsed = parse_event_id(event_id)
        if parsed is None:
            raise EventNotFoundError(event_id)
        analytics = get_analytics_provider().get_analytics(parsed)
        return Response(AnalyticsSerializer(analytics).data)


class EventReportListView(APIView):
    """Handler for GET/POST /events/{event_id}/reports"""

    def get(self, request: Request, event_id: str) -> Response:
        reports = get_report_service().list_event_reports(event_id)
        return Response(ReportSerializer(reports, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = ReportCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        report = get_report_service().generate_report(
            event_id,
            ReportType(serializer.validated_data["report_type"]),
            serializer.validated_data["created_by"],
        )
        return Response(ReportSerializer(report).data, status=status.HTTP_201_CREATED)


class ReportListView(APIView):
    """Handler for GET /events/reports"""

    def get(self, request: Request) -> Response:
        reports = get_report_service().list_reports()
        return Response(ReportSerializer(reports, many=True).data)


class ReportDetailView(APIView):
    """Handler for GET /events/reports/{report_id}"""

    def get(self, request: Request, report_id: str) -> Response:
        report = get_report_service().get_report(report_id)
        return Response(ReportSerializer(report).data)


class HealthView(APIView):
    """Handler for GET /health"""

    def get(self, request: Request) -> Response:
        return Response({"status": "ok", "service": settings.SERVICE_NAME})
