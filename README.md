# tddkata

A collection of small, tested building blocks and a poker league tracker
built on top of them.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The poker league

The `tddkata.poker` package records who won each game of Texas Hold'em
and keeps a league table as JSON in a file (`game.db.json` in the current
directory unless `--db` names another one). The file is created if it does
not exist.

### At the terminal

    poker-cli [--db FILE]

It prints a short introduction, asks for the number of players, schedules
blind alerts for that number (each one prints `Blind is now <amount>` when
it falls due) and then reads a line of the form `{Name} wins`. A
non-numeric player count or a badly formed winner line is reported and the
game ends without recording anything.

### On the web

    poker-webserver [--db FILE] [--port PORT] [--template PAGE]

The server listens on port 5001 by default and answers:

- `GET /league` – the league table as JSON (`[{"Name": ..., "Wins": ...}]`)
- `GET /players/{name}` – a player's number of wins (404 if none)
- `POST /players/{name}` – record a win for that player (202)
- `GET /game` – the game page, read from `--template` (default `game.html`)
- `/ws` – a websocket that takes the number of players, sends each blind
  alert as a text message, and then takes the winner's name

### In code

- `tddkata.poker.league` – `Player`, `League` (a list with `find(name)`),
  `new_league(reader)` parsing a JSON array, and the `PlayerStore` and
  `Game` protocols
- `tddkata.poker.file_store` – `FileSystemPlayerStore` (league sorted by
  wins, best first) and `player_store_from_file(path)`; both raise
  `PlayerStoreError` when the file cannot be opened or read. The store can
  be used as a context manager to close its file.
- `tddkata.poker.memory_store` – `InMemoryPlayerStore`, thread-safe
- `tddkata.poker.tape` – `Tape`, rewriting its file from the start on
  every write
- `tddkata.poker.alerts` – the `BlindAlerter` protocol, `BlindAlerterFunc`
  and `alerter`, which writes the alert from a timer thread
- `tddkata.poker.texas_holdem` – `TexasHoldem`, scheduling eleven blinds
  from 100 to 8000, `5 + players` minutes apart
- `tddkata.poker.cli` – `CLI` and `extract_winner`
- `tddkata.poker.server` – `PlayerServer`, whose `app` attribute is the
  aiohttp application, and `WebSocketWriter`
- `tddkata.poker.fakes` – `StubPlayerStore`, `SpyBlindAlerter`,
  `ScheduledAlert` and `assert_player_win` for exercising games and servers

### What it does not do

No game page comes with the package: `poker-webserver` needs an HTML file
at `game.html` in the current directory, or one named with `--template`,
and stops with an error if there is none.

## Other commands

    tddkata-hello [NAME] [LANGUAGE]   # greeting; Spanish and French are known
    tddkata-countdown                 # prints 3, 2, 1, Go! one second apart
    tddkata-clockface                 # writes an SVG document with a bezel and a
                                      # second-hand line for the current second
    tddkata-greeter                   # answers GET with "Hello, world" on port 5001
    tddkata-posts [DIRECTORY]         # parses every file in ./posts (or DIRECTORY)
                                      # and prints the posts to standard error

The line that `tddkata-clockface` draws ends at the coordinates given by
`second_hand_point`, a point on the unit circle; `second_hand` gives the
scaled tip on the 300×300 face.

## Library pieces

- `tddkata.roman` – `convert_to_roman` and `convert_to_arabic`
- `tddkata.dictionary` – `Dictionary` with `search`, `add`, `update`,
  `delete`, raising `WordNotFoundError`, `WordExistsError` or
  `WordDoesNotExistError` (all `DictionaryError`)
- `tddkata.wallet` – `Wallet` holding `Bitcoin`, raising
  `InsufficientFundsError` on overdraft
- `tddkata.stack` – a `Stack`; `pop` on an empty stack raises `IndexError`
- `tddkata.counter` – a thread-safe `Counter` with `inc()` and `value`
- `tddkata.shapes` – `Rectangle`, `Circle`, `Triangle` and `perimeter`
- `tddkata.adder`, `tddkata.repeat`, `tddkata.hello` – `add`, `repeat`,
  `hello`
- `tddkata.sums` and `tddkata.transactions` – `reduce`, `sum_of`,
  `sum_all`, `sum_all_tails`, `new_transaction`, `new_balance_for`, `find`
- `tddkata.countdown` – `countdown`, `count_down_from`,
  `ConfigurableSleeper`
- `tddkata.walk` – call a function on every string inside strings,
  mappings, dataclasses, lists, tuples, iterators and zero-argument
  functions
- `tddkata.websites` – `check_websites` runs a checker over many URLs
  concurrently
- `tddkata.racer` – `racer` returns whichever of two URLs answers a GET
  first, raising `RacerTimeoutError` after 10 seconds
  (`configurable_racer` takes the timeout)
- `tddkata.greeter` – `greet` and the `GreeterHandler` HTTP handler
- `tddkata.fetcher` – `fetch_handler(store)` gives an aiohttp handler that
  answers with what the store's `fetch` returns, or an empty body if it fails
- `tddkata.clockface` – `Point`, `seconds_in_radians`, `second_hand_point`,
  `second_hand`, `second_hand_tag`, `write_svg`
- `tddkata.blog` – `Post`, `new_post` and `new_posts_from_fs`; a post file
  holds `Title: `, `Description: ` and `Tags: ` lines, one separator line,
  then the body

Example:

```python
from tddkata.roman import convert_to_roman, convert_to_arabic

assert convert_to_roman(1984) == "MCMLXXXIV"
assert convert_to_arabic("MCMLXXXIV") == 1984
```