"""Tests des modèles / Model tests."""

from rental_app.models import ACTIVE_RENTAL_STATUSES, Car, CarStatus, Client, Expense, Rental, RentalStatus
from rental_app.schemas.notification import NoticeSeverity, NoticeType


def test_car_repr():
    c = Car(id=1, model="Kia Picanto", plate_number="200-TUN-1", status="available")
    assert "200-TUN-1" in repr(c)


def test_client_and_expense_repr():
    assert "Amina" in repr(Client(id=1, full_name="Amina"))
    assert "fuel" in repr(Expense(id=1, category="fuel", amount=40, car_id=None))


def test_rental_repr():
    r = Rental(id=7, car_id=1, client_id=2, status="reserved")
    assert "car=1" in repr(r)
    assert "reserved" in repr(r)


def test_enums():
    assert CarStatus.AVAILABLE.value == "available"
    assert CarStatus.RESERVED.value == "reserved"
    assert RentalStatus.RETURNED.value == "returned"
    assert NoticeType.OVERDUE.value == "overdue"
    assert NoticeSeverity.DANGER.value == "danger"


def test_active_statuses():
    assert set(ACTIVE_RENTAL_STATUSES) == {"reserved", "rented"}
    assert "returned" not in ACTIVE_RENTAL_STATUSES
