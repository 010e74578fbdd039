# kaleidocore

kaleidocore provides the building blocks of a virtual Arduino-style core
for keyboard firmware, in plain Python with no dependencies: a simulated
clock and the usual arithmetic helpers, C-locale character tests, a
mutable string type with the board library's semantics, an EEPROM kept in
memory, binary byte-literal names, and the command-line, scripted-input
and result-log handling of a virtual keyboard run.

## Modules

| Module | What it gives you |
| --- | --- |
| `kaleidocore.arduino` | `VirtualClock` and the shared-clock functions `millis`, `micros`, `delay`, `delay_microseconds`; helpers `constrain`, `arduino_abs`, `arduino_round`, `radians`, `degrees`, `sq`, `low_byte`, `high_byte`, `bit`, `bit_read`, `bit_set`, `bit_clear`, `bit_write`; pin, timer and mode constants such as `HIGH`, `LOW`, `LSBFIRST`, `TIMER1A` |
| `kaleidocore.wcharacter` | `is_alpha`, `is_digit`, `is_alpha_numeric`, `is_ascii`, `is_whitespace`, `is_control`, `is_graph`, `is_lower_case`, `is_upper_case`, `is_printable`, `is_punct`, `is_space`, `is_hexadecimal_digit`, `to_ascii`, `to_lower_case`, `to_upper_case`; each takes an integer code or a one-character `str` and answers in kind |
| `kaleidocore.wmath` | `random_seed`, `random`, `random_range`, `map_range`, `make_word` |
| `kaleidocore.stdlib_ext` | `itoa`, `ltoa`, `utoa`, `ultoa`, `dtostre`, `dtostrf` |
| `kaleidocore.wstring` | `WString`, a mutable string that can also be in an invalid state |
| `kaleidocore.eeprom` | `EEPROM` and `EERef`, byte storage held in memory |
| `kaleidocore.binary` | `binary_literal`, `binary_name` and the `BINARY_CONSTANTS` table |
| `kaleidocore.virtual_io` | `VirtualIO`, `VirtualInputError`, `help_text()` and `print_help()` |

## Clock and helpers

The virtual clock moves forward by one millisecond every time it is read;
`delay(ms)` simply reads it `ms` times.

```python
from kaleidocore.arduino import VirtualClock, constrain, bit_set, high_byte

clock = VirtualClock()
assert clock.millis() == 1
assert clock.micros() == 2000
clock.delay(5)
assert clock.millis() == 8

assert constrain(300, 0, 255) == 255
assert bit_set(0b0001, 2) == 0b0101
assert high_byte(0x1234) == 0x12
```

The module-level `millis()`, `micros()`, `delay()` and
`delay_microseconds()` all use one shared clock.

## Math

```python
from kaleidocore.wmath import map_range, make_word, random_range, random_seed

assert map_range(5, 0, 10, 0, 100) == 50
assert make_word(0x12, 0x34) == 0x1234

random_seed(7)          # a seed of 0 leaves the generator untouched
n = random_range(10, 20)
assert 10 <= n < 20
```

`map_range` uses integer division truncated towards zero and raises
`ZeroDivisionError` for an empty input range.

## Number to text

`itoa`, `ltoa`, `utoa` and `ultoa` wrap their argument to 32 or 64 bits
and convert it. Only radix 10 gives ordinary numerals: digits are taken
modulo the radix while the value steps down by ten, as the board library
does. `dtostre` and `dtostrf` do not format at all; they always return
`"___"`.

```python
from kaleidocore.stdlib_ext import itoa, utoa

assert itoa(-42, 10) == "-42"
assert utoa(-1, 10) == "4294967295"
```

## WString

```python
from kaleidocore.wstring import WString

s = WString("  Hello World  ")
s.trim()
assert s == "Hello World"
assert s.index_of("World") == 6
assert s.substring(0, 5) == "Hello"
s.to_upper_case()
assert str(s) == "HELLO WORLD"

assert WString("42abc").to_int() == 42
assert not WString(None)          # an invalid string is false
```

`WString` supports `+`, `+=`, comparisons with `WString` and `str`,
indexing (`char_at`, `set_char_at`), `starts_with`, `ends_with`,
`equals_ignore_case`, `last_index_of`, `replace`, `remove`, `get_bytes`,
`to_float` and `to_double`. Searches, comparisons and case changes stop at
the first NUL character. Building a `WString` from a float goes through
`dtostrf`, so it yields `"___"`.

## EEPROM

```python
from kaleidocore.eeprom import EEPROM

eeprom = EEPROM()               # 1024 cells by default
eeprom.write(0, 42)
assert eeprom.read(0) == 42
eeprom.update(0, 42)            # writes only when the value changes

cell = eeprom[1]
cell += 300                     # values wrap to a byte
assert eeprom.read(1) == 300 & 0xFF

eeprom.put(10, b"\x01\x02")
assert eeprom.get(10, 2) == b"\x01\x02"
```

Indices outside the storage raise `IndexError`.

## Binary literal names

```python
from kaleidocore.binary import binary_literal, binary_name

assert binary_literal("B0101") == 5
assert binary_name(5) == "B101"
assert binary_name(5, 8) == "B00000101"
```

## Virtual input and result logs

`VirtualIO.configure(argv)` takes the arguments of a run, without the
program name:

* a path to an input script — each line is one scan cycle;
* `-i` — read one line per cycle interactively from standard input;
* `-t` — mark that a test function was requested
  (`test_function_requested` becomes true);
* no argument, or `?` — print the help text and raise `VirtualInputError`.

A second argument other than `-q` writes a warning to standard error and
opens `USB.txt` and `LED.txt` in the results directory (`results` by
default), where `log_usb_event`, `log_usb_event_keyboard` and
`log_led_states` record events prefixed with the current cycle. Without
it, those calls write nothing.

```python
from kaleidocore.virtual_io import VirtualIO

with VirtualIO(results_dir="out") as io:
    io.configure(["script.txt", "-v"])
    line = io.get_line_of_input(anything_held=False)
    io.log_led_states("all off")
    io.next_cycle()
```

`get_line_of_input` raises `EOFError` when a script has no more lines.
The full description of the key-command script language is returned by
`help_text()` and printed by `print_help(out)`.

## What the package does not do

kaleidocore does not run sketches: there is no `setup`/`loop` driver and
no command to start one. It has no serial ports, no print or stream
classes and no USB device layer, and it does not parse the key commands
of an input script — `VirtualIO` only hands each line over as text.

## Running the tests

The test suite uses pytest; install the `test` extra to get it, then run
`pytest`.