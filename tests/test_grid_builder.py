from datetime import date

from booking_grid.schemas.event import Event
from booking_grid.schemas.grid import CalendarView
from booking_grid.services.grid_builder import build_grid


def _event(event_id: str, start: str, end: str, service_id: str = "svc-1") -> Event:
    return Event(
        id=event_id,
        title=event_id,
        serviceId=service_id,
        start=start,
        end=end,
    )


def _cell(grid, day, hour):
    return next(c for c in grid.cells if c.day == day and c.hour == hour)


def test_week_grid_places_event_in_its_start_cell(consultation, services):
    grid = build_grid([consultation], services, date(2025, 5, 10), CalendarView.WEEK)

    assert grid.days[0] == date(2025, 5, 4)
    assert grid.hours == list(range(24))
    assert len(grid.cells) == 7 * 24

    cell = _cell(grid, date(2025, 5, 10), 10)
    assert cell.day_index == 6
    assert len(cell.events) == 1
    placed = cell.events[0]
    assert placed.event == consultation
    assert placed.color == "#10b981"
    assert placed.position.top == 600
    assert placed.position.height == 90


def test_event_is_drawn_only_from_its_start_hour(services):
    long_event = _event("long", "2025-05-10T09:00:00", "2025-05-10T12:00:00")

    grid = build_grid([long_event], services, date(2025, 5, 10), "day")

    populated = [c.hour for c in grid.cells if c.events]
    assert populated == [9]


def test_dangling_service_gets_default_color(services):
    orphan = _event("o", "2025-05-10T08:00:00", "2025-05-10T09:00:00", service_id="gone")

    grid = build_grid([orphan], services, date(2025, 5, 10), "day")

    assert _cell(grid, date(2025, 5, 10), 8).events[0].color == "#333"


def test_overlapping_events_share_full_width_by_default(services):
    first = _event("a", "2025-05-10T09:00", "2025-05-10T10:00")
    second = _event("b", "2025-05-10T09:30", "2025-05-10T10:30")

    grid = build_grid([first, second], services, date(2025, 5, 10), "day")

    positions = [p.position for p in _cell(grid, date(2025, 5, 10), 9).events]
    assert [(p.left, p.width) for p in positions] == [(0, 100), (0, 100)]


def test_overlapping_events_packed_on_request(services):
    first = _event("a", "2025-05-10T09:00", "2025-05-10T10:00")
    second = _event("b", "2025-05-10T09:30", "2025-05-10T10:30")

    grid = build_grid(
        [first, second], services, date(2025, 5, 10), "day", pack_overlaps=True
    )

    positions = {p.event.id: p.position for p in _cell(grid, date(2025, 5, 10), 9).events}
    assert (positions["a"].left, positions["a"].width) == (0, 50)
    assert (positions["b"].left, positions["b"].width) == (50, 50)


def test_month_grid_has_day_cells(consultation, services):
    grid = build_grid([consultation], services, date(2025, 5, 20), "month")

    assert len(grid.cells) == 42
    assert grid.hours == []
    assert all(c.hour is None for c in grid.cells)

    cell = next(c for c in grid.cells if c.day == date(2025, 5, 10))
    assert [p.event.id for p in cell.events] == ["evt-1"]
    assert cell.events[0].position is None
    assert cell.in_current_month is True

    assert grid.cells[0].day == date(2025, 4, 27)
    assert grid.cells[0].in_current_month is False


def test_grid_navigation_and_title(services):
    grid = build_grid([], services, date(2025, 5, 10), "month")

    assert grid.title == "May 2025"
    assert grid.previous_anchor == date(2025, 4, 10)
    assert grid.next_anchor == date(2025, 6, 10)


def test_custom_scale(consultation, services):
    grid = build_grid(
        [consultation], services, date(2025, 5, 10), "day", pixels_per_hour=30
    )

    position = _cell(grid, date(2025, 5, 10), 10).events[0].position
    assert position.top == 300
    assert position.height == 45


def test_placed_events_carry_service_status_and_style(consultation, services):
    orphan = _event("o", "2025-05-10T08:00:00", "2025-05-10T09:00:00", service_id="gone")

    grid = build_grid([consultation, orphan], services, date(2025, 5, 10), "day")

    placed = _cell(grid, date(2025, 5, 10), 10).events[0]
    assert placed.service_name == "Business Consultation"
    assert placed.status_classes == "bg-blue-100 text-blue-800 border-blue-300"
    assert placed.style == {"top": "600px", "height": "90px", "left": "0%", "width": "100%"}

    assert _cell(grid, date(2025, 5, 10), 8).events[0].service_name is None


def test_month_cells_have_badge_but_no_style(consultation, services):
    grid = build_grid([consultation], services, date(2025, 5, 10), "month")

    placed = next(c for c in grid.cells if c.day == date(2025, 5, 10)).events[0]
    assert placed.style is None
    assert "blue" in placed.status_classes


def test_pack_overlaps_with_differing_offsets(services):
    first = _event("a", "2025-05-10T09:00:00+02:00", "2025-05-10T10:00:00")
    second = _event("b", "2025-05-10T09:30:00Z", "2025-05-10T10:30:00+05:00")

    grid = build_grid([first, second], services, date(2025, 5, 10), "day", pack_overlaps=True)

    widths = [p.position.width for p in _cell(grid, date(2025, 5, 10), 9).events]
    assert widths == [50, 50]
