from __future__ import annotations

from typing import Iterable

from booking_grid.schemas.event import EventStatus, Service

DEFAULT_SERVICE_COLOR = "#333"

_STATUS_CLASSES = {
    EventStatus.SCHEDULED: "bg-blue-100 text-blue-800 border-blue-300",
    EventStatus.COMPLETED: "bg-green-100 text-green-800 border-green-300",
    EventStatus.CANCELLED: "bg-red-100 text-red-800 border-red-300",
    EventStatus.NO_SHOW: "bg-amber-100 text-amber-800 border-amber-300",
}
_UNKNOWN_STATUS_CLASSES = "bg-gray-100 text-gray-800 border-gray-300"


class ServiceColorLookup:
    """
    Resolves event tint colours from a list of services.

    Build one per render pass: the services are indexed once, so each lookup
    is a dict access instead of a scan of the service list.
    """

    def __init__(
        self,
        services: Iterable[Service],
        default_color: str = DEFAULT_SERVICE_COLOR,
    ):
        self.default_color = default_color
        # Later duplicates win, same as rebuilding the index from scratch.
        self._by_id = {service.id: service for service in services}

    def service_for(self, service_id: str) -> Service | None:
        return self._by_id.get(service_id)

    def color_for(self, service_id: str) -> str:
        """
        Colour of the referenced service, or the default colour when the
        reference dangles or the service has no colour.
        """
        service = self._by_id.get(service_id)
        if service is None or not service.color:
            return self.default_color
        return service.color


def status_classes(status: EventStatus | str) -> str:
    """
    Badge style classes for a booking status; neutral grey for unknown values.
    """
    try:
        return _STATUS_CLASSES[EventStatus(status)]
    except ValueError:
        return _UNKNOWN_STATUS_CLASSES
