"""
Console front end for tripdesk.

Menus:
- Main: sign up, sign in, exit
- Account: profile, make itinerary, list itineraries, logout
- Itinerary: add flight, add hotel, save (pay), cancel
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from tripdesk.config import settings
from tripdesk.core.itinerary_builder import ItineraryBuilder
from tripdesk.core.payments import MakePayment
from tripdesk.core.users import UserManager
from tripdesk.models import CustomerInfo, FoundFlightInfo, FoundRoomInfo, PassengerInfo, TransactionInfo

logger = logging.getLogger(__name__)

PAYMENT_CHOICES = {"1": "paypal", "2": "stripe", "3": "square"}
CANCEL_KEYS = ("e", "E")

class Manager:

    def __init__(self, input_fn: Callable[[], str] = input, out: TextIO = sys.stdout,
                 users: Optional[UserManager] = None, builder: Optional[ItineraryBuilder] = None,
                 payment: Optional[MakePayment] = None):
        self.input_fn = input_fn
        self.out = out
        self.users = users or UserManager()
        self.builder = builder or ItineraryBuilder()
        self.payment = payment or MakePayment()

    # --- prompt helpers ---

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self.out.write(prompt)
        return self.input_fn().strip()

    def _ask_int(self, prompt: str, minimum: Optional[int] = None) -> int:
        while True:
            raw = self._ask(prompt)
            try:
                value = int(raw)
            except ValueError:
                self._say(f"'{raw}' is not a number.")
                continue
            if minimum is not None and value < minimum:
                self._say(f"Enter a number of at least {minimum}.")
                continue
            return value

    def _ask_cancellable(self, prompt: str) -> Optional[str]:
        answer = self._ask(f"{prompt} (to cancel Enter e/E): ")
        return None if answer in CANCEL_KEYS else answer

    # --- reservations ---

    def _choose_flight(self, offers: List[FoundFlightInfo]) -> int:
        for i, flight in enumerate(offers, start=1):
            self._say(f"{i}- Airline: {flight.airline} - Price: {flight.price:.2f} - "
                      f"Departure Date: {flight.from_date} - Arrival Date: {flight.to_date}")
        return self._ask_int(f"Choose what suits you ({settings.CANCEL_CHOICE} to cancel): ")

    def _choose_room(self, offers: List[FoundRoomInfo]) -> int:
        for i, room in enumerate(offers, start=1):
            self._say(f"{i}- Hotel: {room.hotel} - Room: {room.view_type} ({room.how_many} left) - "
                      f"Price: {room.price_for_night:.2f} - From: {room.from_date} - To: {room.to_date}")
        return self._ask_int(f"Choose what suits you ({settings.CANCEL_CHOICE} to cancel): ")

    def add_flight(self) -> None:
        origin = self._ask("From which city: ")
        from_date = self._ask(f"Desired departure date from {origin}: ")
        destination = self._ask("To which city: ")
        to_date = self._ask(f"Date to {destination}: ")
        criteria = PassengerInfo(
            origin=origin,
            destination=destination,
            from_date=from_date,
            to_date=to_date,
            adults=self._ask_int("Number of adults: ", minimum=0),
            children=self._ask_int("Number of children (5 - 16): ", minimum=0),
            infants=self._ask_int("Number of infants: ", minimum=0),
        )
        if self.builder.add_flight(criteria, self._choose_flight) is None:
            self._say("No flight added.")

    def add_hotel(self) -> None:
        criteria = CustomerInfo(
            country=self._ask("Country: "),
            city=self._ask("City: "),
            from_date=self._ask("Date from: "),
            to_date=self._ask("Date to: "),
            adults=self._ask_int("Number of adults: ", minimum=0),
            children=self._ask_int("Number of children: ", minimum=0),
            needed_rooms=self._ask_int("Number of rooms: ", minimum=1),
            number_of_nights=self._ask_int("Number of nights: ", minimum=0),
        )
        if self.builder.add_hotel(criteria, self._choose_room) is None:
            self._say("No room added.")

    # --- payment ---

    def collect_transaction(self) -> Optional[TransactionInfo]:
        choice = self._ask_cancellable("\nChoose your payment method:\n1- PayPal\n2- Stripe\n3- Square\n")
        if choice is None:
            return None
        fields = {}
        for key, prompt in (("name", "Enter your name on card"),
                            ("address", "Enter your address"),
                            ("card_id", "Enter your card ID number"),
                            ("expire_date", "Enter your card expire date"),
                            ("ccv", "Enter your ccv")):
            answer = self._ask_cancellable(prompt)
            if answer is None:
                return None
            fields[key] = answer
        try:
            ccv = int(fields.pop("ccv"))
        except ValueError:
            self._say("Invalid ccv.")
            return None
        return TransactionInfo(method=PAYMENT_CHOICES.get(choice, ""), ccv=ccv, **fields)

    def save(self) -> None:
        if self.builder.check_itinerary():
            self._say("Empty Itinerary.")
            return
        info = self.collect_transaction()
        if info is None:
            return
        itinerary = self.builder.get_itinerary()
        info = info.model_copy(update={"money": itinerary.get_cost()})
        if not self.payment.pay(info):
            self._say("Payment is not made !!. (Try Again)")
            return
        self._say("Your Payment is successfully made.")
        self.users.add_itinerary_to_user(itinerary)
        self.builder.clear_itinerary()

    # --- menus ---

    def itinerary_menu(self) -> None:
        while True:
            choice = self._ask("1- Add Flight.\n2- Add Hotel.\n3- Save.\n4- Cancel.\n")
            if choice == "1":
                self.add_flight()
            elif choice == "2":
                self.add_hotel()
            elif choice == "3":
                self.save()
                return
            elif choice == "4":
                self.builder.cancel_itinerary()
                return

    def account_menu(self) -> None:
        while self.users.logged_user:
            choice = self._ask("1- View Profile.\n2- Make Itinerary.\n3- List My Itineraries.\n4- Logout.\n")
            if choice == "1":
                self.users.view_user_profile(self.out)
            elif choice == "2":
                self.itinerary_menu()
            elif choice == "3":
                self.users.view_user_itineraries(self.out)
            elif choice == "4":
                self.users.logout()
                self.builder.cancel_itinerary()

    def run(self) -> None:
        try:
            while True:
                choice = self._ask("1- Sign Up.\n2- Sign In.\n3- Exit.\n")
                if choice == "1":
                    username = self._ask("Enter user's name: ")
                    password = self._ask("Enter password: ")
                    email = self._ask("Enter email: ")
                    if not self.users.sign_up(username, password, email):
                        self._say("Username or email already registered.")
                elif choice == "2":
                    username = self._ask("Enter user's name: ")
                    password = self._ask("Enter password: ")
                    if not self.users.sign_in(username, password):
                        self._say("Wrong username or password.")
                elif choice == "3":
                    return
                self.account_menu()
        except EOFError:
            logger.info("Input closed, exiting")

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="tripdesk travel booking console")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s:%(name)s:%(message)s")
    Manager().run()

if __name__ == "__main__":
    main()
