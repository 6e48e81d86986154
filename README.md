# glasstty

Building blocks for emulating early video terminals ("glass teletypes"):
a phosphor-glow blur for glyph rasters, a keyboard mapper, a host that
runs a command on a pseudo-terminal, a shared command-line parser, and
the character generator contents of several terminals.

It uses only the standard library. `glasstty.host` needs a POSIX system.

## Installing

    pip install glasstty

## Modules

### `glasstty.fonts_vt`, `fonts_dp`, `fonts_dm`, `fonts_ge`

Character ROMs. Every glyph is a tuple of row strings, top row first,
with `*` for a lit dot and a space for a dark one. A code outside a
ROM's range raises `ValueError`.

| Function                      | Terminal                 | Cell  | Codes        |
|-------------------------------|--------------------------|-------|--------------|
| `vt05_glyph(code)`            | DEC VT05                 | 5x7   | 0o40–0o137   |
| `vt50_glyph(code)`            | DEC VT50                 | 5x8   | 0o40–0o137   |
| `vt52_glyph(code)`            | DEC VT52                 | 7x8   | 0–0o177      |
| `dp_glyph(code, alternate)`   | Datapoint 3300           | 5x7   | 0–0o142 / 0–0o142 |
| `dm_glyph(code)`              | Datamedia Elite 2500     | 5x9   | 0–0o200      |
| `ge_glyph(code)`              | GE Datanet 760           | 12x16 | 0–0o140      |

`dp_glyph` uses the TMS 4151 ROM by default and the TMS 4100 ROM with
`alternate=True`. The Datapoint, Datamedia and GE tables are blank below
0o40 and carry a cursor glyph (`DP_CURSOR`, `DM_CURSOR`, `GE_CURSOR`).

```python
from glasstty.fonts_vt import vt05_glyph

for row in vt05_glyph(ord("A")):
    print(row)
```

### `glasstty.glow`

`make_kernel(sigma)` returns the 9x9 Gaussian weight matrix
(`BLUR_RADIUS` is 4). `Glow(sigma, bright, dim, gamma=1/2.2)` turns a
sharp raster of `Color` values (a named tuple `r, g, b, a`, with
`from_word` / `to_word` for RGBA8888 integers) into a glowing image:
pixels lit in the source become `bright`, their surroundings a halo of
`dim` scaled by the gamma-corrected blur. `Glow.pixel(raster, width,
height, x, y)` computes one pixel; `Glow.blur(raster, width, height)`
the whole raster, fully opaque, and raises `ValueError` if the raster is
not `width * height` long.

### `glasstty.keyboard`

`Keyboard(keymap, send, on_fullscreen=None)` turns key names into the
bytes a terminal sends and passes them to `send`. Two keymaps are
provided: `KEYMAP_BOTH` (lower and upper case) and `KEYMAP_UPPER`
(upper case only). Shift picks the shifted character, Caps Lock and
Ctrl act as Control (masking to the low five bits), Alt sends an Escape
before the key, a held GUI key suppresses input, and F11 (not repeated)
calls `on_fullscreen`. `key_down` returns the bytes sent, or `None`.

```python
from glasstty.keyboard import KEYMAP_UPPER, Keyboard

sent = []
kb = Keyboard(KEYMAP_UPPER, sent.append)
kb.key_down("a")        # b"A"
kb.key_down("lctrl")
kb.key_down("c")        # b"\x03"
```

### `glasstty.host`

`PtyHost(command, rows, cols, xpixel=0, ypixel=0, term="dumb")` opens a
pseudo-terminal with the given window size. `spawn()` starts the command
on it with `TERM` set; `write(data)` sends input; `read_byte()` returns
one byte of output or raises `EOFError`; `pump(sink, baud=0,
rerun=False)` feeds every byte to `sink`, optionally paced at a baud
rate (11 bits per character) and restarting the command two seconds
after it ends; `close()` releases the pty. It is also a context manager.

```python
from glasstty.host import PtyHost

with PtyHost(["echo", "hello"], rows=24, cols=80) as host:
    host.spawn()
    out = bytearray()
    host.pump(out.append)
```

### `glasstty.options`

`parse_args(prog, argv=None, extra="")` reads the options every terminal
shares and returns an `Options`:

- `-2` adds one to `scale` (repeatable)
- `-f` sets `fullscreen`
- `-b baud` sets `baud`
- `-B` sets `backspace_is_rubout`
- `-r` sets `rerun`
- any letter in `extra` is collected in `flags`

Everything after the options is `command`. A missing command, an unknown
flag or a missing baud value raises `UsageError` carrying the usage line.

```python
from glasstty.options import parse_args

opts = parse_args("vt52", ["-2", "-b", "1200", "/bin/sh"])
# opts.scale == 2, opts.baud == 1200, opts.command == ["/bin/sh"]
```

## What the package does not do

There is no window, no screen drawing and no terminal model here: no
class interprets the control codes of any of these terminals, and the
package installs no command to run. The modules above are the parts
such an emulator is built from.

## Tests

    pip install glasstty[test]
    pytest