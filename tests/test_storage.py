import pytest

from vasutjegy.models import Ticket, Time, Train
from vasutjegy.storage import (
    DataFileError,
    load_tickets,
    load_trains,
    save_tickets,
    save_trains,
)

TRAINS_TEXT = (
    "2\n"
    "IC500 Budapest Szeged 8 5 10 30 15 2\n"
    "10 2\n"
    "0 3 \n"
    "5 0\n"
    "\n"
    "R12 Gyor Pecs 12 0 16 45 0 1\n"
    "4 1\n"
    "2 \n"
)

TICKETS_TEXT = (
    "1\n"
    "Budapest Keleti\n"
    "Szeged\n"
    "8 5\n"
    "10 30\n"
    "IC500\n"
    "1 4 12345\n"
)


@pytest.fixture
def trains_file(tmp_path):
    path = tmp_path / "vonatok.txt"
    path.write_text(TRAINS_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def tickets_file(tmp_path):
    path = tmp_path / "jegyek.txt"
    path.write_text(TICKETS_TEXT, encoding="utf-8")
    return path


def test_load_trains_reads_existing_file(trains_file):
    trains = load_trains(trains_file)
    assert [t.number for t in trains] == ["IC500", "R12"]


def test_load_trains_missing_file_raises(tmp_path):
    with pytest.raises(DataFileError):
        load_trains(tmp_path / "random123456789.txt")


def test_load_tickets_reads_existing_file(tickets_file):
    tickets = load_tickets(tickets_file)
    assert len(tickets) == 1


def test_load_tickets_missing_file_raises(tmp_path):
    with pytest.raises(DataFileError):
        load_tickets(tmp_path / "random123456789.txt")


def test_missing_file_error_is_runtime_error(tmp_path):
    with pytest.raises(RuntimeError, match="vonatok.txt"):
        load_trains(tmp_path / "nope.txt")


def test_load_trains_fields(trains_file):
    first = load_trains(trains_file)[0]
    assert first.departure_station == "Budapest"
    assert first.arrival_station == "Szeged"
    assert (first.departure.hour, first.departure.minute) == (8, 5)
    assert (first.arrival.hour, first.arrival.minute) == (10, 30)
    assert first.delay == 15
    assert first.car_count == 2


def test_load_trains_cars_and_reservations(trains_file):
    first, second = load_trains(trains_file)
    assert first.car(0).seat_count == 10
    assert first.car(0).seat(0).reserved
    assert first.car(0).seat(3).reserved
    assert not first.car(0).seat(1).reserved
    assert first.car(0).free_seat_count() == 8
    assert first.car(1).seat_count == 5
    assert first.car(1).free_seat_count() == 5
    assert second.car(0).seat(2).reserved
    assert second.car_seat_count(0) == 4


def test_load_trains_ignores_invalid_reservations(tmp_path):
    path = tmp_path / "vonatok.txt"
    path.write_text("1\nX1 A B 1 2 3 4 0 1\n3 3\n1 1 7 \n", encoding="utf-8")
    (train,) = load_trains(path)
    assert train.car(0).free_seat_count() == 2
    assert train.car(0).seat(1).reserved


def test_load_trains_truncated_raises(tmp_path):
    path = tmp_path / "vonatok.txt"
    path.write_text("2\nX1 A B 1 2 3 4 0 0\n", encoding="utf-8")
    with pytest.raises(DataFileError):
        load_trains(path)


def test_load_trains_non_numeric_raises(tmp_path):
    path = tmp_path / "vonatok.txt"
    path.write_text("1\nX1 A B one 2 3 4 0 0\n", encoding="utf-8")
    with pytest.raises(DataFileError):
        load_trains(path)


def test_load_tickets_fields(tickets_file):
    (ticket,) = load_tickets(tickets_file)
    assert ticket.departure_station == "Budapest Keleti"
    assert ticket.arrival_station == "Szeged"
    assert (ticket.departure.hour, ticket.departure.minute) == (8, 5)
    assert (ticket.arrival.hour, ticket.arrival.minute) == (10, 30)
    assert ticket.train_number == "IC500"
    assert ticket.car_number == 1
    assert ticket.seat_number == 4
    assert ticket.ticket_id == 12345


def test_load_tickets_truncated_raises(tmp_path):
    path = tmp_path / "jegyek.txt"
    path.write_text("1\nA\nB\n1 2\n", encoding="utf-8")
    with pytest.raises(DataFileError):
        load_tickets(path)


def test_save_trains_format(tmp_path):
    train = Train("V1", "A", "B", Time(12, 12), Time(13, 13), 60, 1, 3)
    train.car(0).reserve(1)
    path = tmp_path / "vonatok.txt"
    save_trains(path, [train])
    assert path.read_text(encoding="utf-8") == (
        "1\nV1 A B 12 12 13 13 60 1\n3 1\n1 \n"
    )


def test_save_tickets_format(tmp_path):
    ticket = Ticket("A", "B", Time(12, 12), Time(13, 13), "V1", 1, 2, 99)
    path = tmp_path / "jegyek.txt"
    save_tickets(path, [ticket])
    assert path.read_text(encoding="utf-8") == (
        "1\nA\nB\n12 12\n13 13\nV1\n1 2 99\n"
    )


def test_save_empty_lists(tmp_path):
    trains_path = tmp_path / "vonatok.txt"
    tickets_path = tmp_path / "jegyek.txt"
    save_trains(trains_path, [])
    save_tickets(tickets_path, [])
    assert trains_path.read_text(encoding="utf-8") == "0\n"
    assert load_trains(trains_path) == []
    assert load_tickets(tickets_path) == []


def test_trains_round_trip(trains_file, tmp_path):
    original = load_trains(trains_file)
    out = tmp_path / "copy.txt"
    save_trains(out, original)
    assert out.read_text(encoding="utf-8") == TRAINS_TEXT
    reloaded = load_trains(out)
    assert [t.number for t in reloaded] == [t.number for t in original]
    assert reloaded[0].car(0).free_seat_count() == 8


def test_tickets_round_trip(tickets_file, tmp_path):
    original = load_tickets(tickets_file)
    out = tmp_path / "copy.txt"
    save_tickets(out, original)
    assert out.read_text(encoding="utf-8") == TICKETS_TEXT
    (reloaded,) = load_tickets(out)
    assert reloaded.departure_station == "Budapest Keleti"
    assert reloaded.ticket_id == 12345


def test_save_to_unwritable_path_raises(tmp_path):
    with pytest.raises(DataFileError):
        save_trains(tmp_path / "missing_dir" / "vonatok.txt", [])
    with pytest.raises(DataFileError):
        save_tickets(tmp_path / "missing_dir" / "jegyek.txt", [])