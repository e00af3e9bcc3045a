"""
In-memory user accounts. Each user keeps private copies of the itineraries
they paid for; nothing here survives the process.
"""
import logging
from typing import List, Optional, TextIO

from pydantic import SecretStr

from tripdesk.core.itinerary import Itinerary
from tripdesk.core.reservation import format_cost

logger = logging.getLogger(__name__)

class User:

    def __init__(self, username: str, password: str, email: str):
        self.username = username
        self.password = SecretStr(password)
        self.email = email
        self.itineraries: List[Itinerary] = []

    def check_password(self, password: str) -> bool:
        return self.password.get_secret_value() == password

    def add_itinerary(self, itinerary: Itinerary) -> None:
        self.itineraries.append(itinerary.clone())

    def remove_itinerary(self, index: int) -> None:
        del self.itineraries[index]

    def get_total_cost(self) -> float:
        return sum((it.get_cost() for it in self.itineraries), 0.0)

    def view_profile(self, sink: TextIO) -> None:
        sink.write("\nUser's Profile:\n")
        sink.write("----------------------\n\n")
        sink.write(f"Name: {self.username}\n")
        sink.write(f"Email: {self.email}\n\n")

    def view_itineraries(self, sink: TextIO) -> None:
        for itinerary in self.itineraries:
            itinerary.get_details(sink)
        sink.write(f"\nTotal Cost for All Itineraries: {format_cost(self.get_total_cost())}\n\n")

class UserManager:

    def __init__(self):
        self.users: List[User] = []
        self.logged_user: Optional[User] = None

    def username_exists(self, username: str) -> bool:
        return any(u.username == username for u in self.users)

    def email_exists(self, email: str) -> bool:
        return any(u.email == email for u in self.users)

    def sign_up(self, username: str, password: str, email: str) -> bool:
        if self.username_exists(username) or self.email_exists(email):
            logger.warning(f"Sign up rejected, '{username}' or '{email}' already registered")
            return False
        self.users.append(User(username, password, email))
        logger.info(f"Registered user {username}")
        return True

    def sign_in(self, username: str, password: str) -> bool:
        for user in self.users:
            if user.username == username and user.check_password(password):
                self.logged_user = user
                logger.info(f"User {username} signed in")
                return True
        logger.warning(f"Sign in failed for {username}")
        return False

    def logout(self) -> None:
        self.logged_user = None

    def view_user_profile(self, sink: TextIO) -> None:
        if self.logged_user:
            self.logged_user.view_profile(sink)

    def view_user_itineraries(self, sink: TextIO) -> None:
        if self.logged_user:
            self.logged_user.view_itineraries(sink)

    def add_itinerary_to_user(self, itinerary: Itinerary) -> None:
        if self.logged_user:
            self.logged_user.add_itinerary(itinerary)

    def remove_itinerary_from_user(self, index: int) -> None:
        if self.logged_user:
            self.logged_user.remove_itinerary(index)
