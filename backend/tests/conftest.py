import pytest

from tripdesk.models import CustomerInfo, PassengerInfo


@pytest.fixture
def passenger():
    return PassengerInfo(
        origin="Toronto",
        destination="Istanbul",
        from_date="2025-01-25",
        to_date="2025-02-10",
        adults=2,
        children=1,
        infants=0,
    )


@pytest.fixture
def customer():
    return CustomerInfo(
        country="Turkey",
        city="Istanbul",
        from_date="2025-01-29",
        to_date="2025-02-01",
        adults=2,
        children=1,
        needed_rooms=2,
        number_of_nights=3,
    )


@pytest.fixture
def scripted():
    """Build an input() replacement that raises EOFError once the script runs out."""

    def _make(*answers):
        it = iter(answers)

        def _input():
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return _input

    return _make
