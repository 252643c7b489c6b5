from datetime import datetime
from decimal import Decimal
import pytest
from flightdb.db import make_engine, make_session_factory, init_db
from flightdb.models import Airline, Airport, Flight

@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path}/flights.db"

@pytest.fixture
def engine(db_url):
    engine = make_engine(db_url)
    init_db(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def Session(engine):
    return make_session_factory(engine)

@pytest.fixture
def session(Session):
    with Session() as s:
        yield s

@pytest.fixture
def reference_data(session):
    """American Airlines plus JFK and LAX."""
    session.add_all([
        Airline(airline_code="AA", airline_name="American Airlines"),
        Airport(
            airport_code="JFK",
            airport_name="John F. Kennedy International Airport",
            city="New York",
            state="NY",
            latitude=Decimal("40.639722"),
            longitude=Decimal("-73.778889"),
        ),
        Airport(
            airport_code="LAX",
            airport_name="Los Angeles International Airport",
            city="Los Angeles",
            state="CA",
            latitude=Decimal("33.942500"),
            longitude=Decimal("-118.408056"),
        ),
    ])
    session.commit()

@pytest.fixture
def flight(session, reference_data):
    f = Flight(
        flight_number="AA100",
        airline_code="AA",
        origin_airport="JFK",
        dest_airport="LAX",
        scheduled_departure=datetime(2024, 1, 15, 8, 30),
        scheduled_arrival=datetime(2024, 1, 15, 11, 45),
        distance=2475,
    )
    session.add(f)
    session.commit()
    return f
