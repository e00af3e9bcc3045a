import io

from tripdesk.cli import Manager
from tripdesk.config import Settings
from tripdesk.core.itinerary_builder import ItineraryBuilder
from tripdesk.core.make_reservation import MakeReservation
from tripdesk.vendors import turkish

SIGN_UP = ("1", "ana", "pw", "ana@example.com")
SIGN_IN = ("2", "ana", "pw")
FLIGHT = ("1", "Toronto", "2025-01-25", "Istanbul", "2025-02-10", "2", "1", "0")
HOTEL = ("2", "Turkey", "Istanbul", "2025-01-29", "2025-02-01", "2", "1", "2", "3")
CARD = ("1", "Ana", "Main-St", "4111", "12/27", "123")


def make_manager(input_fn):
    out = io.StringIO()
    manager = Manager(input_fn=input_fn, out=out,
                      builder=ItineraryBuilder(MakeReservation(Settings())))
    return manager, out


def test_book_and_pay_full_itinerary(scripted):
    script = (
        SIGN_UP + SIGN_IN
        + ("2",)                 # make itinerary
        + FLIGHT + ("1",)        # Canada @ 200
        + HOTEL + ("2",)         # Hilton City View @ 300
        + ("3",) + CARD          # save and pay
        + ("3",)                 # list itineraries
        + ("4",)                 # logout
        + ("3",)                 # exit
    )
    manager, out = make_manager(scripted(*script))
    manager.run()

    text = out.getvalue()
    user = manager.users.users[0]
    assert len(user.itineraries) == 1
    assert user.itineraries[0].get_cost() == 2400
    assert manager.builder.check_itinerary()
    assert manager.users.logged_user is None
    assert "Your Payment is successfully made." in text
    assert "1- Airline: Canada - Price: 200.00" in text
    assert "Total Cost for All Itineraries: 2400.00" in text


def test_payment_charges_itinerary_cost(scripted):
    charged = []

    class RecordingPayment:
        def pay(self, info):
            charged.append((info.method, info.money))
            return True

    script = SIGN_UP + SIGN_IN + ("2",) + FLIGHT + ("2",) + ("3",) + CARD
    manager, _ = make_manager(scripted(*script))
    manager.payment = RecordingPayment()
    manager.run()

    assert charged == [("paypal", 750.0)]


def test_save_empty_itinerary(scripted):
    manager, out = make_manager(scripted(*(SIGN_UP + SIGN_IN + ("2", "3"))))
    manager.run()
    assert "Empty Itinerary." in out.getvalue()
    assert manager.users.users[0].itineraries == []


def test_cancel_payment_keeps_working_itinerary(scripted):
    script = SIGN_UP + SIGN_IN + ("2",) + FLIGHT + ("1",) + ("3", "1", "Ana", "e")
    manager, _ = make_manager(scripted(*script))
    manager.run()

    assert manager.users.users[0].itineraries == []
    assert manager.builder.get_itinerary().get_cost() == 600


def test_cancel_menu_clears_itinerary(scripted):
    script = SIGN_UP + SIGN_IN + ("2",) + FLIGHT + ("1",) + ("4",)
    manager, _ = make_manager(scripted(*script))
    manager.run()
    assert manager.builder.check_itinerary()


def test_cancelled_flight_choice(scripted):
    script = SIGN_UP + SIGN_IN + ("2",) + FLIGHT + ("-1",)
    manager, out = make_manager(scripted(*script))
    manager.run()
    assert "No flight added." in out.getvalue()
    assert manager.builder.check_itinerary()


def test_non_numeric_count_is_reprompted(scripted):
    flight = ("1", "Toronto", "2025-01-25", "Istanbul", "2025-02-10", "two", "2", "1", "0", "1")
    manager, out = make_manager(scripted(*(SIGN_UP + SIGN_IN + ("2",) + flight)))
    manager.run()
    assert "'two' is not a number." in out.getvalue()
    assert manager.builder.get_itinerary().get_cost() == 600


def test_duplicate_sign_up_and_bad_sign_in(scripted):
    script = SIGN_UP + SIGN_UP + ("2", "ana", "nope", "3")
    manager, out = make_manager(scripted(*script))
    manager.run()
    text = out.getvalue()
    assert "Username or email already registered." in text
    assert "Wrong username or password." in text
    assert len(manager.users.users) == 1


def test_negative_adults_is_reprompted(scripted):
    flight = ("1", "Toronto", "2025-01-25", "Istanbul", "2025-02-10", "-1", "2", "1", "0", "1")
    manager, out = make_manager(scripted(*(SIGN_UP + SIGN_IN + ("2",) + flight)))
    manager.run()
    assert "Enter a number of at least 0." in out.getvalue()
    assert manager.builder.get_itinerary().get_cost() == 600


def test_negative_nights_and_zero_rooms_are_reprompted(scripted):
    hotel = ("2", "Turkey", "Istanbul", "2025-01-29", "2025-02-01", "2", "1", "0", "2", "-3", "3", "2")
    manager, out = make_manager(scripted(*(SIGN_UP + SIGN_IN + ("2",) + hotel)))
    manager.run()
    text = out.getvalue()
    assert "Enter a number of at least 1." in text
    assert "Enter a number of at least 0." in text
    assert manager.builder.get_itinerary().get_cost() == 1800
    assert len(manager.users.users) == 1


def test_cancel_menu_releases_bookings(monkeypatch, scripted):
    released = []
    monkeypatch.setattr(turkish, "cancel_reserved_flight", lambda info, flight: released.append(flight.cost) or True)
    script = SIGN_UP + SIGN_IN + ("2",) + FLIGHT + ("4",) + ("4",)
    manager, _ = make_manager(scripted(*script))
    manager.run()
    assert released == [250]
    assert manager.builder.check_itinerary()


def test_logout_releases_unsaved_bookings(monkeypatch, scripted):
    released = []
    monkeypatch.setattr(turkish, "cancel_reserved_flight", lambda info, flight: released.append(flight.cost) or True)
    # declined payment keeps the booking until the user logs out
    script = SIGN_UP + SIGN_IN + ("2",) + FLIGHT + ("3",) + ("3",) + CARD + ("4",)
    manager, out = make_manager(scripted(*script))
    manager.payment = type("Declining", (), {"pay": lambda self, info: False})()
    manager.run()
    assert "Payment is not made !!. (Try Again)" in out.getvalue()
    assert released == [200]
    assert manager.users.logged_user is None
