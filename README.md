# vasutjegy

A small interactive railway ticket booking system for the terminal.
It keeps a list of trains, each made of cars with numbered seats, and a
list of issued tickets. Both are stored in plain text files (`vonatok.txt`
and `jegyek.txt`) that are read at start-up and written back when you quit.
The prompts and messages are in Hungarian.

## Installation

```
pip install .
```

## Running

```
vasutjegy [DATA_DIR]
```

`DATA_DIR` is the directory holding `vonatok.txt` and `jegyek.txt`; it
defaults to the current directory. If a data file cannot be read, a
`HIBA: ...` line is printed and the program goes on with what it has.

### Main menu

```
[1] Vonat adatainak keresese   - look up a train by its number
[2] Jegy vasarlas              - buy a ticket between two stations
[3] Admin felulet              - administration menu
[4] Kilepes es mentes          - save and quit
```

### Administration menu

```
[1] Uj vonat hozzaadasa   - add a new train
[2] Vonat torlese         - delete a train and its tickets
[3] Keses beallitasa      - set a train's delay in minutes
[4] Visszalepes           - back to the main menu
```

When buying a ticket you give the departure and arrival stations, pick one
of the listed trains by its number, then choose a car and a seat (both
numbered from 1). A ticket with a random identifier below 100000 is issued.

A menu choice outside 0–4, a non-numeric answer where a number is expected,
or an invalid time while adding a train prints `HIBA: ...` and starts the
main menu again, reloading the data files. The data is saved only when you
choose `[4]` in the main menu; ending the input (Ctrl-D) quits without
saving. The screen is cleared between actions only when output goes to an
interactive terminal.

## Using it as a library

```python
import io
from vasutjegy.menu import Menu
from vasutjegy.models import Time, Train
from vasutjegy.storage import load_trains, save_trains

train = Train("IC512", "Budapest", "Szeged", Time(8, 0), Time(10, 30),
              car_count=3, seats_per_car=40)
train.car(0).reserve(5)                 # seats are indexed from 0 here
print(train.car(0).free_seat_count())   # 39
print(train.describe())

save_trains("vonatok.txt", [train])
trains = load_trains("vonatok.txt")

out = io.StringIO()
menu = Menu(stdin=io.StringIO("IC512\n"), stdout=out)
menu.trains = trains
menu.show_train()
print(out.getvalue())
```

- `vasutjegy.models` – `Time`, `Seat`, `Car`, `Train` and `Ticket`.
  `Car.reserve` raises `IndexError` for a seat that does not exist and
  `ValueError` for one that is already taken. Trains compare equal by
  number (also against a plain string); tickets by `ticket_id`.
- `vasutjegy.storage` – `load_trains`, `load_tickets`, `save_trains` and
  `save_tickets`. They raise `DataFileError` (a `RuntimeError`) when a file
  cannot be opened or its contents are malformed.
- `vasutjegy.menu` – `Menu`, which takes the input and output streams and
  the data directory, and `main`, the console entry point.

## Limitations

- The train file is whitespace-separated, so train numbers and station
  names must be single words to survive a save and reload.
- There is no way to cancel a single ticket or free a seat from the menu;
  tickets disappear only when their train is deleted.
- Ticket identifiers are random and are not checked for uniqueness.

## Running the tests

```
pip install .[test]
pytest
```