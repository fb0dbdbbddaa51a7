"""Terminal message helpers for the sqlquirks CLI.

Render user-visible status lines with emoji→ASCII fallbacks. Messages write to
stderr so stdout stays machine-readable.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow warning line to **stderr** (``⚠️`` or ``[!]``)."""
    click.secho(f"{_glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green success line to **stderr** (``✅`` or ``[OK]``)."""
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red error line to **stderr** (``❌`` or ``[X]``)."""
    click.secho(f"{_glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
