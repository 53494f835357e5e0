"""Domain objects of the booking system: times, seats, cars, trains and tickets."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Time:
    """A clock time of day stored as hour and minute."""

    hour: int = 0
    minute: int = 0

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass
class Seat:
    """A single seat in a car, identified by its number."""

    number: int = 1
    reserved: bool = False

    def reserve(self) -> None:
        """Mark the seat reserved; raise ValueError if it already is."""
        if self.reserved:
            raise ValueError("A hely mar foglalt!")
        self.reserved = True

    def cancel(self) -> None:
        """Release the reservation; raise ValueError if there was none."""
        if not self.reserved:
            raise ValueError("Nem volt foglalt!")
        self.reserved = False

    def __str__(self) -> str:
        return f"A {self.number}, hely foglalt-e: {int(self.reserved)}"


@dataclass
class Car:
    """A railway car holding a fixed number of seats numbered from zero."""

    number: int = 0
    seat_count: int = 0
    seats: list[Seat] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.seats = [Seat(i) for i in range(self.seat_count)]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.seat_count:
            raise IndexError("Rossz index")

    def seat(self, index: int) -> Seat:
        """Return the seat at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.seats):
            raise IndexError("Rossz index")
        return self.seats[index]

    @property
    def reserved_count(self) -> int:
        """Number of seats currently reserved."""
        return sum(seat.reserved for seat in self.seats)

    def has_free_seat(self) -> bool:
        """True while at least one seat is still free."""
        return self.reserved_count < self.seat_count

    def reserve(self, index: int) -> None:
        """Reserve the seat at ``index``.

        Raises IndexError for a seat that does not exist and ValueError
        for one that is already taken.
        """
        self._check_index(index)
        seat = self.seats[index]
        if seat.reserved:
            raise ValueError("Mar foglalt")
        seat.reserve()

    def free_seat_count(self) -> int:
        """Number of seats still free."""
        return self.seat_count - self.reserved_count


@dataclass(eq=False)
class Train:
    """A train running between two stations, made up of cars."""

    number: str = ""
    departure_station: str = ""
    arrival_station: str = ""
    departure: Time = field(default_factory=Time)
    arrival: Time = field(default_factory=Time)
    delay: int = 0
    car_count: int = 0
    seats_per_car: int = 50
    cars: list[Car] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.cars = [Car(i, self.seats_per_car) for i in range(self.car_count)]

    def car(self, index: int) -> Car:
        """Return the car at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.cars):
            raise IndexError("Rossz index")
        return self.cars[index]

    def car_seat_count(self, index: int) -> int:
        """Number of seats in the car at ``index``."""
        return self.car(index).seat_count

    def describe(self) -> str:
        """Human-readable summary of the train."""
        return "\n".join(
            (
                f"Vonatszam: {self.number}",
                f"Indulasi allomas: {self.departure_station}, "
                f"indulasi idopont: {self.departure}",
                f"Erkezesi allomas: {self.arrival_station}, "
                f"erkezesi idopont: {self.arrival}",
                f"Aktualis keses: {self.delay}",
                f"Kocsik szama: {self.car_count}",
            )
        )

    def __eq__(self, other: object) -> bool:
        """Trains are equal when their numbers match; a bare number compares too."""
        if isinstance(other, Train):
            return self.number == other.number
        if isinstance(other, str):
            return self.number == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class Ticket:
    """A ticket for one seat on one train."""

    departure_station: str = ""
    arrival_station: str = ""
    departure: Time = field(default_factory=Time)
    arrival: Time = field(default_factory=Time)
    train_number: str = ""
    car_number: int = 0
    seat_number: int = 0
    ticket_id: int = 0

    def describe(self) -> str:
        """Human-readable summary of the ticket."""
        return "\n".join(
            (
                f"Vonatszam: {self.train_number}",
                f"Honnan?{self.departure_station}, mikor?  {self.departure}",
                f"Hova? {self.arrival_station}, mikor? {self.arrival}",
                f"Kocsi: {self.car_number}, hely: {self.seat_number}",
                f"Azonosito: {self.ticket_id}",
            )
        )

    def __eq__(self, other: object) -> bool:
        """Tickets are identified by their id alone."""
        if isinstance(other, Ticket):
            return self.ticket_id == other.ticket_id
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]