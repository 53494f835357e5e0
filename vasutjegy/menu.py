"""Interactive console menu of the train ticket booking system."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from vasutjegy.models import Ticket, Time, Train
from vasutjegy.storage import (
    DataFileError,
    load_tickets,
    load_trains,
    save_tickets,
    save_trains,
)

TRAINS_FILE = "vonatok.txt"
TICKETS_FILE = "jegyek.txt"

_LOGO = (
    "",
    "___________   _______________________________________^__ ",
    " ___   ___ |||  ___   ___   ___    ___ ___  |   __  ,----\\ ",
    "|   | |   |||| |   | |   | |   |  |   |   | |  |  | |_____\\ ",
    "|___| |___|||| |___| |___| |___|  | O | O | |  |  |        \\ ",
    "           |||                    |___|___| |  |__|         ) ",
    "___________|||______________________________|______________/ ",
    "           |||                                        /-------- ",
    "-----------'''---------------------------------------' ",
    "            VASUTI JEGYFOGLALASI RENDSZER               ",
    "",
)


class _Reader:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        if not self._pending:
            self._pending = self._stream.readline()
        return bool(self._pending)

    def peek(self) -> str:
        """The next character without consuming it, or '' at end of input."""
        return self._pending[:1] if self._fill() else ""

    def skip(self) -> None:
        """Drop the next character."""
        if self._fill():
            self._pending = self._pending[1:]

    def word(self) -> str:
        """Skip leading whitespace and return the next word."""
        while True:
            if not self._fill():
                raise EOFError("Nincs tobb bemenet")
            stripped = self._pending.lstrip()
            if stripped:
                break
            self._pending = ""
        end = next(
            (i for i, ch in enumerate(stripped) if ch.isspace()), len(stripped)
        )
        self._pending = stripped[end:]
        return stripped[:end]

    def line(self) -> str:
        """Return the rest of the current line without its newline."""
        if not self._fill():
            raise EOFError("Nincs tobb bemenet")
        text, _, rest = self._pending.partition("\n")
        self._pending = rest
        return text

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"Hibas szam: {token}") from None


class Menu:
    """Drives the program: holds the trains and tickets and talks to the user."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        data_dir: Union[str, "os.PathLike[str]", None] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.data_dir = Path(data_dir) if data_dir is not None else Path(".")
        self.trains: list[Train] = []
        self.tickets: list[Ticket] = []

    @property
    def stdin(self) -> TextIO:
        return self._stdin

    @stdin.setter
    def stdin(self, stream: TextIO) -> None:
        self._stdin = stream
        self._input = _Reader(stream)

    def _say(self, *parts: object) -> None:
        print(*parts, sep="", file=self.stdout)

    @property
    def _trains_path(self) -> Path:
        return self.data_dir / TRAINS_FILE

    @property
    def _tickets_path(self) -> Path:
        return self.data_dir / TICKETS_FILE

    def _save(self) -> None:
        save_tickets(self._tickets_path, self.tickets)
        save_trains(self._trains_path, self.trains)

    def run(self) -> None:
        """Load the data, serve the main menu, and save when the user quits."""
        try:
            self.trains = load_trains(self._trains_path)
            self.tickets = load_tickets(self._tickets_path)
        except DataFileError as err:
            self._say("HIBA: ", err)
        self.show_logo()
        while True:
            self.show()
            choice = self.read_choice()
            if choice == 1:
                self.show_train()
            elif choice == 2:
                self.book_between()
            elif choice == 3:
                try:
                    self.admin_loop()
                except ValueError as err:
                    self._say(err)
            elif choice == 4:
                self._save()
                return
            else:
                raise ValueError("Nem letezo funkciot szeretne hasznalni")

    def admin_loop(self) -> None:
        """Serve the administrator menu until the user steps back."""
        self.clear()
        self._say("Admin felulet")
        while True:
            self.show_admin()
            choice = self.read_choice()
            if choice == 1:
                self.add_train()
            elif choice == 2:
                self.delete_train()
            elif choice == 3:
                self.set_delay()
            elif choice == 4:
                return
            else:
                raise ValueError("Nem letezo funkciot akar hasznalni!")

    def show(self) -> None:
        self._say("[1] Vonat adatainak keresese")
        self._say("[2] Jegy vasarlas")
        self._say("[3] Admin felulet")
        self._say("[4] Kilepes es mentes")

    def show_admin(self) -> None:
        self._say("[1] Uj vonat hozzaadasa")
        self._say("[2] Vonat torlese")
        self._say("[3] Keses beallitasa")
        self._say("[4] Visszalepes")

    def show_logo(self) -> None:
        for line in _LOGO:
            self._say(line)

    def read_choice(self) -> int:
        """Read a menu choice; raise ValueError unless it is between 0 and 4."""
        pick = self._input.integer()
        if not 0 <= pick < 5:
            raise ValueError("Nem letezo funkciot szeretne hasznalni")
        return pick

    @staticmethod
    def _read_time_check(hour: int, minute: int) -> Time:
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise ValueError("Hibas ido!")
        return Time(hour, minute)

    def add_train(self) -> None:
        """Ask for the data of a new train and add it unless its number exists."""
        self.clear()
        self._say("Kerem adja meg a vonatszamot!")
        number = self._input.word()
        self._input.skip()
        if any(train.number == number for train in self.trains):
            self._say("Ez a vonatszam mar a rendszerben van!")
            return
        self._say("Honnan? ")
        departure_station = self._input.line()
        self._say("Hova? ")
        arrival_station = self._input.line()
        self._say("Kerem adja meg az indulas idopontjat (ora perc alakban) !")
        departure = self._read_time_check(self._input.integer(), self._input.integer())
        self._say("Kerem adja meg az erkezes idopontjat (ora perc alakban) !")
        arrival = self._read_time_check(self._input.integer(), self._input.integer())
        self._say("Kerem adja meg kocsik szamat! ")
        car_count = self._input.integer()
        self._say("Kerem adja meg hany hely van egy kocsiban!")
        seats_per_car = self._input.integer()
        self.trains.append(
            Train(
                number,
                departure_station,
                arrival_station,
                departure,
                arrival,
                0,
                car_count,
                seats_per_car,
            )
        )
        self._say(number, " vonat sikeresen letrehozva!")

    def find_train_index(self, number: str) -> int:
        """Index of the train with ``number``; raise LookupError if none."""
        for index, train in enumerate(self.trains):
            if train == number:
                return index
        raise LookupError("Nem talalhato ilyen vonatszam a rendszerben!")

    def _ask_train_index(self) -> Optional[int]:
        self._say("Kerem adja meg a vonat szamat! ")
        number = self._input.word()
        try:
            return self.find_train_index(number)
        except LookupError as err:
            self._say(err)
            return None

    def delete_train(self) -> None:
        """Delete a train and its tickets after the user confirms."""
        self.clear()
        index = self._ask_train_index()
        if index is None:
            return
        train = self.trains[index]
        self._say(train.describe())
        self._say(
            "Ha mindent rendben talal, akkor kerem irjon be 1-et, ha nem akkor 0-t!"
        )
        if self._input.word() != "1":
            self._say("Az adatok nem torlodtek!")
            return
        del self.trains[index]
        kept = [t for t in self.tickets if t.train_number != train.number]
        removed = len(self.tickets) - len(kept)
        self.tickets = kept
        self._say(
            train.number,
            " vonat torolve es a hozza tartozo ",
            removed,
            " jegy torolve!",
        )

    def set_delay(self) -> None:
        """Set the delay of a train chosen by its number."""
        self.clear()
        index = self._ask_train_index()
        if index is None:
            return
        train = self.trains[index]
        self._say("A ", train.number, " vonat aktualis kesese: ", train.delay)
        self._say("Kerem adja meg mennyire szeretne a kesest beallitani!")
        delay = self._input.integer()
        train.delay = delay
        self._say("A keses atallitva ", delay, " percre")

    def book(self, index: int) -> None:
        """Reserve a seat on the train at ``index`` and issue a ticket.

        Raises ValueError for a car or seat that does not exist or a seat
        that is already taken.
        """
        train = self.trains[index]
        self._say(
            train.car_count,
            " kocsi van a vonaton. Melyik kocsiban szeretne helyet foglalni? ",
        )
        car_number = self._input.integer()
        if not 1 <= car_number <= train.car_count:
            raise ValueError("Nem letezo kocsiban szeretne helyet foglalni!")
        car = train.car(car_number - 1)
        self._say(
            car.free_seat_count(),
            " hely van a kocsiban. Melyik helyet szeretne foglalni?",
        )
        seat_number = self._input.integer()
        if not 1 <= seat_number <= car.seat_count:
            raise ValueError("Nem letezo helyet szeretne foglalni!")
        if car.seat(seat_number - 1).reserved:
            raise ValueError("Mar foglalt a hely!")
        car.reserve(seat_number - 1)
        ticket = Ticket(
            train.departure_station,
            train.arrival_station,
            Time(train.departure.hour, train.departure.minute),
            Time(train.arrival.hour, train.arrival.minute),
            train.number,
            car_number,
            seat_number,
            self.random_ticket_id(),
        )
        self.tickets.append(ticket)
        self._say(ticket.describe())
        self._say(seat_number, " hely a ", car_number, " kocsiban lefoglalva!")

    def random_ticket_id(self) -> int:
        """A random ticket id below 100000."""
        return random.randrange(100000)

    def show_train(self) -> None:
        """Print the data of a train chosen by its number."""
        self.clear()
        self._say("Kerem adja meg a vonat szamat!")
        number = self._input.word()
        try:
            train = self.train(self.find_train_index(number))
        except LookupError as err:
            self._say(err)
            return
        self._say(train.describe())

    def book_between(self) -> None:
        """List trains between two stations and book a seat on a chosen one."""
        self.clear()
        if self._input.peek() == "\n":
            self._input.skip()
        self._say("Honnan?")
        departure_station = self._input.line()
        self._say("Hova?")
        arrival_station = self._input.line()
        self._say("Vonatok ", departure_station, " es ", arrival_station, " kozott:")
        matches = [
            train
            for train in self.trains
            if train.departure_station == departure_station
            and train.arrival_station == arrival_station
        ]
        for position, train in enumerate(matches):
            self._say(
                f"[{position}] Vonatszam: {train.number}, "
                f"indulas: {train.departure}, erkezes: {train.arrival}"
            )
        if not matches:
            self._say(
                "Nincs vonat, ami ",
                departure_station,
                " es ",
                arrival_station,
                " kozott kozlekedik!",
            )
            return
        self._say("Kerem adja meg a vonat szamat!")
        number = self._input.word()
        try:
            index = self.find_train_index(number)
        except LookupError as err:
            self._say(err)
            return
        try:
            self.book(index)
        except ValueError as err:
            self._say(err)

    def clear(self) -> None:
        """Clear the terminal when writing to an interactive console."""
        if self.stdout is not sys.stdout or not self.stdout.isatty():
            return
        try:
            if os.name == "nt":
                subprocess.run("cls", shell=True, check=False)
            else:
                subprocess.run(["clear"], check=False)
        except OSError:
            pass

    def train(self, index: int) -> Train:
        """The train at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.trains):
            raise IndexError("Rossz index")
        return self.trains[index]

    def ticket(self, index: int) -> Ticket:
        """The ticket at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.tickets):
            raise IndexError("Rossz index")
        return self.tickets[index]


def main(argv: Optional[list[str]] = None) -> int:
    """Run the booking system on the console."""
    parser = argparse.ArgumentParser(description="Vasuti jegyfoglalasi rendszer")
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=".",
        help="directory holding vonatok.txt and jegyek.txt",
    )
    args = parser.parse_args(argv)
    menu = Menu(sys.stdin, sys.stdout, args.data_dir)
    while True:
        try:
            menu.run()
            return 0
        except EOFError:
            return 0
        except ValueError as err:
            print(f"HIBA: {err}", file=sys.stdout)
        except Exception:
            print("KRITIKUS HIBA!", file=sys.stdout)


if __name__ == "__main__":
    sys.exit(main())