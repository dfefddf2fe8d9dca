"""fretchart CLI entry point."""

import logging
from pathlib import Path

import click

from fretchart import __version__, render_fretboard
from fretchart.theme import THEMES
from fretchart.tunings import TUNINGS, get_tuning, note_at
from fretchart.types import Marker, RenderOptions, Tuning

DEFAULT_FILL = "white"


def _parse_marker(text: str, tuning: Tuning) -> Marker:
    """Parse STRING:FRET[:LABEL[:FILL]] into a Marker.

    The label defaults to the note sounding at that position.
    """
    parts = text.split(":")
    if not 2 <= len(parts) <= 4:
        raise click.BadParameter(
            f"{text!r} is not STRING:FRET[:LABEL[:FILL]]", param_hint="--marker"
        )
    try:
        string, fret = int(parts[0]), int(parts[1])
    except ValueError:
        raise click.BadParameter(
            f"{text!r}: string and fret must be integers", param_hint="--marker"
        ) from None
    if not 0 <= string < tuning.string_count:
        raise click.BadParameter(
            f"{text!r}: string must be 0-{tuning.string_count - 1}", param_hint="--marker"
        )

    try:
        note = note_at(tuning.notes[string], fret)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--notes") from None
    label = parts[2] if len(parts) > 2 and parts[2] else note
    fill = parts[3] if len(parts) > 3 and parts[3] else DEFAULT_FILL
    try:
        return Marker(string=string, fret=fret, label=label, note=note, fill=fill)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--marker") from None


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="fretchart")
def main() -> None:
    """fretchart: fretted-instrument diagrams as SVG."""


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--tuning",
    "tuning_name",
    type=click.Choice(sorted(TUNINGS)),
    default="guitar-standard",
    show_default=True,
    help="Tuning preset. Ignored when --notes is given.",
)
@click.option(
    "--instrument",
    default="guitar",
    show_default=True,
    help="Instrument kind for a custom --notes tuning (guitar, banjo, ...).",
)
@click.option(
    "--notes",
    default=None,
    metavar="NOTES",
    help="Custom tuning as comma-separated open-string notes, e.g. G4,D3,G3,B3,D4.",
)
@click.option("--frets", type=click.IntRange(min=1), default=12, show_default=True)
@click.option("--width", type=click.FloatRange(min=0, min_open=True), default=300, show_default=True)
@click.option("--height", type=click.FloatRange(min=0, min_open=True), default=600, show_default=True)
@click.option(
    "--marker",
    "-m",
    "marker_specs",
    multiple=True,
    metavar="STRING:FRET[:LABEL[:FILL]]",
    help="Marker to draw; repeat for more. Strings count from 0 (leftmost).",
)
@click.option("--theme", type=click.Choice(sorted(THEMES)), default=None)
@click.option("--transparent", is_flag=True, help="Leave the background transparent.")
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination SVG file. Defaults to stdout.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log layout details to stderr.")
def render(
    tuning_name: str,
    instrument: str,
    notes: str | None,
    frets: int,
    width: float,
    height: float,
    marker_specs: tuple[str, ...],
    theme: str | None,
    transparent: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """
    Render a fretboard diagram to SVG.

    \b
    Examples:
      fretchart render --frets 12 -m 0:3 -m 1:2 -m 4:1 -o c_major.svg
      fretchart render --tuning banjo-open-g --frets 17 -m 0:7:D:gold
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if notes:
        try:
            tuning = Tuning(instrument, tuple(n.strip() for n in notes.split(",") if n.strip()))
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--notes") from None
    else:
        tuning = get_tuning(tuning_name)

    markers = [_parse_marker(spec, tuning) for spec in marker_specs]
    options = RenderOptions(theme=theme, transparent=transparent)

    try:
        svg = render_fretboard(tuning, frets, markers, width, height, options)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    if output is None:
        click.echo(svg)
    else:
        Path(output).write_text(svg + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)


# ── tunings subcommand ─────────────────────────────────────────────────────────

@main.command()
def tunings() -> None:
    """List the built-in tuning presets."""
    for name in sorted(TUNINGS):
        tuning = TUNINGS[name]
        click.echo(f"{name:<18} {tuning.instrument:<7} {' '.join(tuning.notes)}")
