"""Parts for emulating early glass teletypes: glow, keyboard, pty host, options and character ROMs."""

__version__ = "0.1.0"