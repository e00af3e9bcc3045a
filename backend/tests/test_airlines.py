import copy

import pytest

from tripdesk.core.airlines import CanadaFlightReservation, TurkishFlightReservation
from tripdesk.models import FoundFlightInfo, PassengerInfo
from tripdesk.vendors import air_canada


@pytest.mark.parametrize("adapter_cls", [CanadaFlightReservation, TurkishFlightReservation])
@pytest.mark.parametrize("adults,children,infants,price", [
    (1, 0, 0, 200.0),
    (2, 1, 0, 250.0),
    (3, 2, 1, 199.5),
    (0, 0, 0, 300.0),
])
def test_cost_is_price_times_passengers(adapter_cls, adults, children, infants, price):
    criteria = PassengerInfo(origin="A", destination="B", adults=adults, children=children, infants=infants)
    flight = FoundFlightInfo(airline=adapter_cls.brand.value, price=price)
    reservation = adapter_cls(criteria, flight)
    assert reservation.get_cost() == pytest.approx(price * (adults + children + infants))


def test_default_adapter_is_empty_not_none():
    reservation = CanadaFlightReservation()
    assert reservation.get_cost() == 0
    assert reservation.customer_info.from_city == ""


def test_available_flights_are_tagged_with_brand():
    canada = CanadaFlightReservation().get_available_flights()
    turkish = TurkishFlightReservation().get_available_flights()
    assert [f.price for f in canada] == [200, 250]
    assert [f.price for f in turkish] == [200, 250]
    assert {f.airline for f in canada} == {"Canada"}
    assert {f.airline for f in turkish} == {"Turkish"}


def test_available_flights_returns_fresh_list():
    adapter = CanadaFlightReservation()
    first = adapter.get_available_flights()
    first.clear()
    assert len(adapter.get_available_flights()) == 2


def test_setters_translate_to_vendor_fields(passenger):
    reservation = TurkishFlightReservation()
    reservation.set_customer_info(passenger)
    reservation.set_chosen_flight(FoundFlightInfo(airline="Turkish", price=250, from_date="d1", to_date="d2"))
    assert reservation.customer_info.departure_city == "Toronto"
    assert reservation.customer_info.arrival_city == "Istanbul"
    assert reservation.chosen_flight.cost == 250
    assert reservation.chosen_flight.datetime_from == "d1"


def test_details(passenger):
    reservation = CanadaFlightReservation(passenger, FoundFlightInfo(airline="Canada", price=200))
    assert reservation.details() == (
        "Airline Reservation / AirCanada Airline:\n"
        "From: Toronto  on: 2025-01-25  To: Istanbul  on: 2025-02-10\n"
        "\t\tAdults: 2  -  Children: 1  -  Infants: 0\n"
        "\t\tFlight Cost: 600.00\n"
    )
    assert str(reservation) == reservation.details()


@pytest.mark.parametrize("adapter_cls", [CanadaFlightReservation, TurkishFlightReservation])
def test_clone_is_equal_and_independent(adapter_cls, passenger):
    original = adapter_cls(passenger, FoundFlightInfo(airline=adapter_cls.brand.value, price=250))
    clone = original.clone()

    assert type(clone) is adapter_cls
    assert clone.get_cost() == original.get_cost() == 750
    assert clone.details() == original.details()

    clone.customer_info.adults = 10
    clone.chosen_flight = type(clone.chosen_flight)()
    assert original.get_cost() == 750


def test_copy_module_goes_through_clone(passenger):
    original = CanadaFlightReservation(passenger, FoundFlightInfo(airline="Canada", price=200))
    for duplicate in (copy.copy(original), copy.deepcopy(original)):
        assert duplicate is not original
        assert duplicate.customer_info is not original.customer_info
        assert duplicate.get_cost() == original.get_cost()


def test_make_and_cancel_return_vendor_result(passenger):
    canada = CanadaFlightReservation(passenger, FoundFlightInfo(airline="Canada", price=200))
    turkish = TurkishFlightReservation(passenger, FoundFlightInfo(airline="Turkish", price=200))
    assert canada.make_reservation() is True
    assert turkish.make_reservation() is True
    # Neither airline accepts online cancellation
    assert canada.cancel_reservation() is False
    assert turkish.cancel_reservation() is False


def test_vendor_failure_is_reported_not_raised(monkeypatch, passenger):
    monkeypatch.setattr(air_canada, "reserve_flight", lambda flight, info: False)
    reservation = CanadaFlightReservation(passenger, FoundFlightInfo(airline="Canada", price=200))
    assert reservation.make_reservation() is False
