"""Tests des services (logique pure) / Service tests (pure logic)."""

from datetime import date
from types import SimpleNamespace

import pytest

from rental_app.exceptions import ValidationError
from rental_app.models import CarStatus
from rental_app.schemas.rental import RentalWithJoinedNames
from rental_app.services.car_status import CarStatusSynchronizer
from rental_app.services.finance_service import FinanceService
from rental_app.services.notification_service import derive_notifications
from rental_app.utils.validation import parse_amount, parse_iso_date, require_fields


def _rental(id, status, start_date="2024-06-01", return_date="2024-06-20"):
    return RentalWithJoinedNames(
        id=id,
        car_id=1,
        client_id=1,
        start_date=start_date,
        return_date=return_date,
        rental_price=100,
        status=status,
        created_at="2024-06-01T08:00:00.000000+00:00",
        car_model="Renault Clio",
        plate_number="150-TUN-42",
        client_name="Karim Haddad",
    )


def test_car_status_for():
    assert CarStatusSynchronizer.car_status_for("reserved") == CarStatus.RESERVED
    assert CarStatusSynchronizer.car_status_for("rented") == CarStatus.RENTED
    assert CarStatusSynchronizer.car_status_for("returned") == CarStatus.AVAILABLE


def test_car_status_for_invalid():
    with pytest.raises(ValidationError):
        CarStatusSynchronizer.car_status_for("lost")


def test_pick_current_rental_newest_wins():
    rentals = [
        SimpleNamespace(id=1, status="reserved", created_at="2024-06-01T10:00:00"),
        SimpleNamespace(id=2, status="rented", created_at="2024-06-02T10:00:00"),
        SimpleNamespace(id=3, status="returned", created_at="2024-06-03T10:00:00"),
    ]
    assert CarStatusSynchronizer.pick_current_rental(rentals).id == 2


def test_pick_current_rental_tie_break_on_id():
    rentals = [
        SimpleNamespace(id=4, status="reserved", created_at="2024-06-01T10:00:00"),
        SimpleNamespace(id=5, status="reserved", created_at="2024-06-01T10:00:00"),
    ]
    assert CarStatusSynchronizer.pick_current_rental(rentals).id == 5


def test_pick_current_rental_none():
    assert CarStatusSynchronizer.pick_current_rental([]) is None
    assert CarStatusSynchronizer.pick_current_rental(
        [SimpleNamespace(id=1, status="returned", created_at="x")]
    ) is None


def test_notifications_scenario():
    today = date(2024, 6, 10)
    a = _rental(1, "reserved", start_date="2024-06-10", return_date="2024-06-15")
    b = _rental(2, "rented", start_date="2024-06-01", return_date="2024-06-05")
    c = _rental(3, "returned", start_date="2024-06-01", return_date="2024-06-05")

    notices = derive_notifications([a, b, c], today)

    assert len(notices) == 2
    by_id = {n.rental.id: n for n in notices}
    assert by_id[1].type.value == "start_today"
    assert by_id[1].severity.value == "warning"
    assert by_id[2].type.value == "overdue"
    assert by_id[2].severity.value == "danger"
    assert 3 not in by_id


def test_notifications_tomorrow_and_return_today():
    today = date(2024, 6, 30)
    notices = derive_notifications([
        _rental(1, "reserved", start_date="2024-07-01", return_date="2024-07-05"),
        _rental(2, "rented", start_date="2024-06-20", return_date="2024-06-30"),
        _rental(3, "rented", start_date="2024-06-20", return_date="2024-07-02"),
        _rental(4, "reserved", start_date="2024-07-02", return_date="2024-07-05"),
    ], today)

    kinds = {n.rental.id: (n.type.value, n.severity.value) for n in notices}
    assert kinds == {1: ("start_tomorrow", "info"), 2: ("return_today", "warning")}


def test_notification_snapshot():
    [notice] = derive_notifications([_rental(1, "reserved", start_date="2024-06-10")], date(2024, 6, 10))
    assert notice.rental.model == "Renault Clio"
    assert notice.rental.plate_number == "150-TUN-42"
    assert notice.rental.full_name == "Karim Haddad"
    assert notice.rental.start_date == "2024-06-10"
    assert notice.rental.return_date == "2024-06-20"


def test_reserved_rental_past_start_is_silent():
    assert derive_notifications([_rental(1, "reserved", start_date="2024-06-01")], date(2024, 6, 10)) == []


def test_profit():
    assert FinanceService.profit(150, 40) == 110
    assert FinanceService.profit(100, 250.5) == -150.5
    assert FinanceService.profit(0, 0) == 0


def test_parse_amount():
    assert parse_amount("12.5", "rental_price") == 12.5
    assert parse_amount(100, "rental_price") == 100.0
    assert parse_amount("abc", "rental_price") == 0.0
    assert parse_amount(None, "rental_price") == 0.0
    assert parse_amount("", "rental_price") == 0.0
    with pytest.raises(ValidationError):
        parse_amount(-1, "rental_price")


def test_parse_amount_numeric_prefix():
    assert parse_amount("350 MAD", "rental_price") == 350.0
    assert parse_amount("  12.5abc", "rental_price") == 12.5
    assert parse_amount("1e3x", "rental_price") == 1000.0
    assert parse_amount(".5", "rental_price") == 0.5
    assert parse_amount("MAD 350", "rental_price") == 0.0
    assert parse_amount("nan", "rental_price") == 0.0
    with pytest.raises(ValidationError):
        parse_amount("-20 EUR", "amount")


def test_parse_iso_date():
    assert parse_iso_date("2024-06-10", "start_date") == "2024-06-10"
    for bad in ("2024-6-1", "10/06/2024", "20240610", "tomorrow"):
        with pytest.raises(ValidationError):
            parse_iso_date(bad, "start_date")


def test_require_fields():
    require_fields(a=1, b="x")
    with pytest.raises(ValidationError) as exc:
        require_fields(a=1, b="", c=None)
    assert exc.value.field == "b"
