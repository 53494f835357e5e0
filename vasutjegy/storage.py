"""Reading and writing the train and ticket data files."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Iterable, Iterator
from typing import Union

from vasutjegy.models import Car, Ticket, Time, Train

PathLike = Union[str, "os.PathLike[str]"]

_TRAINS_MISSING = "Nem talalhato a vonatok.txt fajl, kerem hozza letre!"
_TICKETS_MISSING = "Nem talalhato a jegyek.txt fajl, kerem hozza letre!"


class DataFileError(RuntimeError):
    """A data file is missing, unwritable or malformed."""


def _read(path: PathLike, missing_message: str) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise DataFileError(missing_message) from exc


def _write(path: PathLike, text: str, missing_message: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise DataFileError(missing_message) from exc


def _next_int(tokens: Iterator[str]) -> int:
    return int(next(tokens))


def load_trains(path: PathLike) -> list[Train]:
    """Read every train, with its cars and reserved seats, from ``path``.

    Reservations naming a seat that does not exist, or one already
    reserved, are ignored.
    """
    tokens = iter(_read(path, _TRAINS_MISSING).split())
    trains: list[Train] = []
    try:
        for _ in range(_next_int(tokens)):
            number = next(tokens)
            departure_station = next(tokens)
            arrival_station = next(tokens)
            departure = Time(_next_int(tokens), _next_int(tokens))
            arrival = Time(_next_int(tokens), _next_int(tokens))
            delay = _next_int(tokens)
            car_count = _next_int(tokens)
            train = Train(
                number,
                departure_station,
                arrival_station,
                departure,
                arrival,
                delay,
                car_count,
            )
            for car_index in range(car_count):
                car = Car(car_index, _next_int(tokens))
                for _ in range(_next_int(tokens)):
                    seat_index = _next_int(tokens)
                    with contextlib.suppress(IndexError, ValueError):
                        car.reserve(seat_index)
                train.cars[car_index] = car
            trains.append(train)
    except (StopIteration, ValueError) as exc:
        raise DataFileError(f"Hibas vonat adatfajl: {path}") from exc
    return trains


def _parse_time(line: str) -> Time:
    hour, minute = line.split()
    return Time(int(hour), int(minute))


def load_tickets(path: PathLike) -> list[Ticket]:
    """Read every ticket stored in ``path``."""
    lines = iter(_read(path, _TICKETS_MISSING).splitlines())
    tickets: list[Ticket] = []
    try:
        count = int(next(lines))
        for _ in range(count):
            departure_station = next(lines)
            arrival_station = next(lines)
            departure = _parse_time(next(lines))
            arrival = _parse_time(next(lines))
            train_number = next(lines)
            if not train_number:
                train_number = next(lines)
            car_number, seat_number, ticket_id = (int(v) for v in next(lines).split())
            tickets.append(
                Ticket(
                    departure_station,
                    arrival_station,
                    departure,
                    arrival,
                    train_number,
                    car_number,
                    seat_number,
                    ticket_id,
                )
            )
    except (StopIteration, ValueError) as exc:
        raise DataFileError(f"Hibas jegy adatfajl: {path}") from exc
    return tickets


def _train_lines(train: Train) -> Iterator[str]:
    yield (
        f"{train.number} {train.departure_station} {train.arrival_station} "
        f"{train.departure.hour} {train.departure.minute} "
        f"{train.arrival.hour} {train.arrival.minute} "
        f"{train.delay} {train.car_count}"
    )
    for car in train.cars:
        reserved = [seat.number for seat in car.seats if seat.reserved]
        yield f"{car.seat_count} {len(reserved)}"
        yield "".join(f"{number} " for number in reserved)


def save_trains(path: PathLike, trains: Iterable[Train]) -> None:
    """Write ``trains`` to ``path`` in the format that load_trains reads."""
    trains = list(trains)
    lines = [str(len(trains))]
    for train in trains:
        lines.extend(_train_lines(train))
    _write(path, "".join(f"{line}\n" for line in lines), _TRAINS_MISSING)


def save_tickets(path: PathLike, tickets: Iterable[Ticket]) -> None:
    """Write ``tickets`` to ``path`` in the format that load_tickets reads."""
    tickets = list(tickets)
    lines = [str(len(tickets))]
    for ticket in tickets:
        lines.extend(
            (
                ticket.departure_station,
                ticket.arrival_station,
                f"{ticket.departure.hour} {ticket.departure.minute}",
                f"{ticket.arrival.hour} {ticket.arrival.minute}",
                ticket.train_number,
                f"{ticket.car_number} {ticket.seat_number} {ticket.ticket_id}",
            )
        )
    _write(path, "".join(f"{line}\n" for line in lines), _TICKETS_MISSING)