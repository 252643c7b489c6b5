from __future__ import annotations
from sqlalchemy import (
    Column, String, Integer, Numeric, Date, DateTime, Boolean, ForeignKey, Index, false, text
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

class Airline(Base):
    __tablename__ = "airlines"
    airline_code = Column(String(3), primary_key=True)  # 'AA', 'DL'
    airline_name = Column(String(100), nullable=False)
    country = Column(String(50), server_default="United States")

    flights = relationship("Flight", back_populates="airline", passive_deletes="all")

    def __repr__(self):
        return f"<Airline({self.airline_code!r}, {self.airline_name!r})>"

class Airport(Base):
    __tablename__ = "airports"
    airport_code = Column(String(3), primary_key=True)  # IATA
    airport_name = Column(String(100), nullable=False)
    city = Column(String(50), nullable=False)
    state = Column(String(2), nullable=True)  # NULL outside the US
    latitude = Column(Numeric(10, 6), nullable=True)
    longitude = Column(Numeric(10, 6), nullable=True)

    departures = relationship(
        "Flight", foreign_keys="Flight.origin_airport", back_populates="origin", passive_deletes="all"
    )
    arrivals = relationship(
        "Flight", foreign_keys="Flight.dest_airport", back_populates="destination", passive_deletes="all"
    )
    weather_observations = relationship("WeatherObservation", back_populates="airport", passive_deletes="all")

    def __repr__(self):
        return f"<Airport({self.airport_code!r}, {self.city!r})>"

class Flight(Base):
    __tablename__ = "flights"
    flight_id = Column(Integer, primary_key=True, autoincrement=True)
    flight_number = Column(String(10), nullable=False)
    airline_code = Column(String(3), ForeignKey("airlines.airline_code", ondelete="RESTRICT"), nullable=False)
    origin_airport = Column(String(3), ForeignKey("airports.airport_code", ondelete="RESTRICT"), nullable=False)
    dest_airport = Column(String(3), ForeignKey("airports.airport_code", ondelete="RESTRICT"), nullable=False)
    scheduled_departure = Column(DateTime, nullable=False)
    scheduled_arrival = Column(DateTime, nullable=False)
    distance = Column(Integer, nullable=True)  # miles

    airline = relationship("Airline", back_populates="flights")
    origin = relationship("Airport", foreign_keys=[origin_airport], back_populates="departures")
    destination = relationship("Airport", foreign_keys=[dest_airport], back_populates="arrivals")
    delays = relationship("FlightDelay", back_populates="flight", passive_deletes="all")

    __table_args__ = (
        Index("idx_flight_scheduled_departure", "scheduled_departure"),
        Index("idx_flight_airline", "airline_code"),
        Index("idx_flight_origin", "origin_airport"),
        Index("idx_flight_dest", "dest_airport"),
    )

    def __repr__(self):
        return f"<Flight(id={self.flight_id}, {self.flight_number!r}, {self.origin_airport}->{self.dest_airport})>"

class FlightDelay(Base):
    __tablename__ = "flight_delays"
    delay_id = Column(Integer, primary_key=True, autoincrement=True)
    flight_id = Column(Integer, ForeignKey("flights.flight_id", ondelete="RESTRICT"), nullable=False)
    # NULL when the flight was cancelled
    actual_departure = Column(DateTime, nullable=True)
    actual_arrival = Column(DateTime, nullable=True)
    # minutes; positive = late, negative = early
    departure_delay = Column(Integer, server_default=text("0"))
    arrival_delay = Column(Integer, server_default=text("0"))
    delay_reason = Column(String(50), nullable=True)  # 'Weather', 'Carrier', 'Late Aircraft', ...
    cancelled = Column(Boolean, server_default=false())
    diverted = Column(Boolean, server_default=false())

    flight = relationship("Flight", back_populates="delays")

    __table_args__ = (
        Index("idx_delay_reason", "delay_reason"),
    )

class WeatherObservation(Base):
    __tablename__ = "weather"
    weather_id = Column(Integer, primary_key=True, autoincrement=True)
    airport_code = Column(String(3), ForeignKey("airports.airport_code", ondelete="RESTRICT"), nullable=False)
    date = Column(Date, nullable=False)
    temperature = Column(Integer, nullable=True)  # °F
    precipitation = Column(Numeric(5, 2), server_default=text("0.00"))  # inches
    wind_speed = Column(Integer, server_default=text("0"))  # mph
    visibility = Column(Numeric(5, 2), server_default=text("10.00"))  # miles
    condition = Column(String(50), nullable=True)  # 'Clear', 'Rain', 'Snow', 'Fog'

    airport = relationship("Airport", back_populates="weather_observations")

    __table_args__ = (
        Index("idx_weather_date_airport", "date", "airport_code"),
    )
