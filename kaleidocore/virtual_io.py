"""Command-line set-up, scripted input and result logs of the virtual board."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO


class VirtualInputError(Exception):
    """The virtual board could not be set up from its arguments."""


_HELP_LINES = (
    "\nUsage:\n",
    "(Running with no arguments or with the argument '?' will print this help message and quit.)\n",
    "This program expects either one or two arguments, which must be one of:",
    "  1. An input file/script, with format given below, or",
    '  2. "-i", to run interactively, where you can interactively enter commands and see results.',
    '  3. "-t", to run a test function that is specified in the sketch file.',
    '  4. "-t -q", to run tests quietly (suppressing `results/` output streams).',
    "\nIn either case, for each scan cycle you will specify zero or more input 'commands', that is,",
    "  actions to take on the keys of the virtual keyboard.  Each line of the input file, or each",
    "  prompt (in interactive mode), represents one scan cycle; a blank line or empty prompt means",
    "  to do nothing to the inputs this scan cycle (held keys will still remain held, though).",
    "\nOutput, in terms of HID reports (packets sent to the host computer, for real hardware), is",
    "  printed to stdout as it happens, in summarized/human-readable form.  Raw HID output and",
    "  serial output (through the 'Serial' object) are collected and redirected to various files",
    '  in a subdirectory "results" of the current directory.',
    "\nSerial input is currently unsupported - sketches requesting it will still build, but will",
    "  find nothing is ever transmitted to them on the serial port.",
    "\n--- Commands ---",
    "\n1. BASICS\n",
    "In any given scan cycle, you can 'tap' a virtual key simply by entering its name.",
    "To 'tap' multiple keys in one cycle, enter each of their names separated by a space.",
    'Keys can be identified either by their (row,col) coordinate, or by their "physical" names.',
    "Keys' coordinate names are simply of the form (row,col).  E.g. (0,1) or (2,10) or (1,0).",
    "  (Don't put any extra whitespace inside the coordinate name.)",
    'A key\'s "physical" name is the (unshifted) text printed on the key on the standard QWERTY',
    "  Model 01.  The key always has the same name regardless of what the keymap in the current",
    "  Kaleidoscope sketch may or may not be doing.  As an exception to the printed-name rule, we",
    "  distinguish physical keys with the same text (ctrl, shift, and fn) with 'l' or 'r' indicating the hand.",
    'Here is a list of all the valid key "physical" names:',
    "  prog 1 2 3 4 5 led any 6 7 8 9 0 num ` q w e r t y u i o p = pgup a s d f g tab enter h j k l ; '",
    "  pgdn z x c v b esc fly n m , . / - lctrl bksp cmd lshift lfn rshift alt space rctrl rfn",
    "The comment character '#' instructs the program to ignore the rest of the line (either in the",
    "  script, or in interactive mode).",
    "\nExample script:",
    "  t             # first scan cycle: tap the physical T key",
    "  esc           # next scan cycle: tap the physcial esc key",
    "                # take no action for a scan cycle",
    "  (2,1)         # tap the key in row 2, column 1",
    "  lshift e      # tap the lshift and e keys simultaneously",
    "  s (1,3) (3,8) # tap the s key, the key at (1,3), and the key at (3,8) simultaneously",
    "  p q lfn fly   # tap the p, q, lfn, and fly keys simultaneously",
    "\n2. ADVANCED\n",
    "In addition to key names and the comment command '#', there are various other commands available.",
    "Key names are always in all lowercase (defined as symbols that appear in the unshifted positions",
    "  on the standard QWERTY Model 01); uppercase/shifted symbols denote commands.",
    "Commands can be inserted anywhere in the input line, and affect the handling of keys following.",
    "The default command, which we used above, is 'tap' (where the key is 'down' for just this cycle).",
    "'tap' can also be explicitly specified by 'T', as in \"T b\" to 'tap' the physical B key.",
    "You can hold virtual keys down using the 'D' (down) command.  The key will remain held until you",
    "  say otherwise. In interactive mode, while keys are held, the prompt changes from '>' to '+>'.",
    "You can release a previously held virtual key using the 'U' command.",
    'Commands affect all following keys within the line unless overridden. So, "D lshift u" holds',
    '  both lshift and u. To hold lshift and tap u, either enter "D lshift T u", or "u D lshift".',
    "An exception to the above rule is the command 'C', which releases all currently held keys.",
    "One final command, 'Q', will quit the program.  In non-interactive mode (i.e. with an input",
    "  script), the end of the script also implicitly indicates the end of the program.",
    "\nAdvanced script example:",
    "  h            # tap the physical H key",
    "  D lshift     # hold the physical lshift key down",
    "  c (0,3)      # tap both c and the key at (0,3) (with lshift held)",
    "  D alt        # hold alt (in addition to lshift)",
    "  U lshift T e # Release lshift, and tap e in the same cycle",
    "               # Do nothing for a scan cycle (but keep alt held)",
    "  C            # Release all held keys (in this case, just alt)",
    "  enter D (1,12) # Tap the physical enter key, and hold the key at (1,12)",
    "  fly          # Tap the fly key (with (1,12) held)",
    "  Q            # Quit the program",
    "",
)


def help_text() -> str:
    """The usage and command reference of the virtual board."""
    return "".join(line + "\n" for line in _HELP_LINES)


def print_help(out: TextIO | None = None) -> None:
    """Write the usage and command reference to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(help_text())


class VirtualIO:
    """Scan-cycle counter, key-command input and result logs of one run."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        results_dir: str | Path = "results",
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self._results_dir = Path(results_dir)
        self.interactive = False
        self.test_function_requested = False
        self._input: TextIO | None = None
        self._owns_input = False
        self._usb: TextIO | None = None
        self._led: TextIO | None = None
        self._cycle = 0

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def _err(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def current_cycle(self) -> int:
        """The current scan cycle; the first is 0."""
        return self._cycle

    def configure(self, argv: list[str]) -> None:
        """Set up input and logs from the arguments (program name excluded)."""
        args = list(argv)
        if not args or args[0] == "?":
            print_help(self._out)
            raise VirtualInputError("no input source given")

        first = args[0]
        if first == "-i":
            self.interactive = True
            self._input = self._stdin if self._stdin is not None else sys.stdin
        elif first == "-t":
            self.test_function_requested = True
        else:
            self.interactive = False
            try:
                self._input = open(first, encoding="utf-8")
            except OSError as exc:
                self._err.write(f'Error opening input file "{first}"\n')
                raise VirtualInputError(f'cannot open input file "{first}"') from exc
            self._owns_input = True

        if len(args) > 1 and args[1] != "-q":
            self._err.write(f"Error: ignoring unknown argument '{args[1]}'\n")
            try:
                self._results_dir.mkdir(exist_ok=True)
            except OSError as exc:
                self._err.write(
                    f"Error creating directory '{self._results_dir}', errno {exc.errno}\n"
                )
                raise VirtualInputError(
                    f"cannot create directory '{self._results_dir}'"
                ) from exc
            self._usb = open(self._results_dir / "USB.txt", "w", encoding="utf-8")
            self._led = open(self._results_dir / "LED.txt", "w", encoding="utf-8")

    def next_cycle(self) -> None:
        """Move on to the next scan cycle."""
        self._cycle += 1

    def log_usb_event(self, descrip: str, data: bytes) -> None:
        """Record a raw USB report with its hex dump."""
        if self._usb is not None:
            self._usb.write(f"Cycle {self._cycle}: {descrip}: 0x{bytes(data).hex()}\n")

    def log_usb_event_keyboard(self, descrip: str) -> None:
        """Record a keyboard report by its description alone."""
        if self._usb is not None:
            self._usb.write(f"Cycle {self._cycle}: {descrip}\n")

    def log_led_states(self, descrip: str) -> None:
        """Record the LED states of this cycle."""
        if self._led is not None:
            self._led.write(f"Cycle {self._cycle}: {descrip}\n")

    def get_line_of_input(self, anything_held: bool) -> str:
        """Read the commands for one scan cycle.

        Raises EOFError when a script has run out of lines.
        """
        if self._input is None:
            raise VirtualInputError("no input source configured")
        if self.interactive:
            self._out.write(
                "Enter a command for this scan cycle, or ? or 'help' for help.\n"
            )
            self._out.write("+> " if anything_held else "> ")
            self._out.flush()
        line = self._input.readline()
        if not self.interactive and line == "":
            raise EOFError("end of input script")
        return line[:-1] if line.endswith("\n") else line

    def close(self) -> None:
        """Close every file this object opened."""
        for stream in (self._usb, self._led):
            if stream is not None:
                stream.close()
        self._usb = self._led = None
        if self._owns_input and self._input is not None:
            self._input.close()
        self._input = None
        self._owns_input = False

    def __enter__(self) -> VirtualIO:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()