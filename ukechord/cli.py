"""ukechord CLI entry point."""

import logging
import sys
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ukechord import __version__
from ukechord.chord import Chord, ChordSequence
from ukechord.chord_chart import ChordChart
from ukechord.chord_type import ChordType
from ukechord.config import MAX_FRET_ID, MAX_SPAN, VoicingConfig
from ukechord.errors import UkechordError
from ukechord.midi_exporter import MidiExporter
from ukechord.tuning import Tuning
from ukechord.voicing import FretPattern, Voicing
from ukechord.voicing_graph import VoicingGraph

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_CONFIG = VoicingConfig()
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def _parse_with(parser: Callable[[str], Any]) -> Callable[[click.Context, click.Parameter, str], Any]:
    """Wrap a core parser as a click callback that reports failures as bad parameters."""

    def callback(ctx: click.Context, param: click.Parameter, value: str) -> Any:
        try:
            return parser(value)
        except UkechordError as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc

    return callback


def voicing_options(func: F) -> F:
    """Options shared by every command that generates voicings."""
    options = [
        click.option(
            "--min-fret",
            type=click.IntRange(0, MAX_FRET_ID),
            default=DEFAULT_CONFIG.min_fret,
            show_default=True,
            metavar="FRET_ID",
            help="Minimal fret (= minimal position) from which to play the chord.",
        ),
        click.option(
            "--max-fret",
            type=click.IntRange(0, MAX_FRET_ID),
            default=DEFAULT_CONFIG.max_fret,
            show_default=True,
            metavar="FRET_ID",
            help="Maximal fret up to which to play the chord.",
        ),
        click.option(
            "--max-span",
            type=click.IntRange(0, MAX_SPAN),
            default=DEFAULT_CONFIG.max_span,
            show_default=True,
            metavar="FRET_COUNT",
            help="Maximal span between the first and the last fret pressed down.",
        ),
        click.option(
            "--transpose",
            type=int,
            default=0,
            show_default=True,
            metavar="SEMITONES",
            help="Number of semitones to add (e.g. 1) or to subtract (e.g. -1).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(ctx: click.Context, tuning: Tuning, min_fret: int, max_fret: int, max_span: int) -> VoicingConfig:
    config = VoicingConfig(tuning=tuning, min_fret=min_fret, max_fret=max_fret, max_span=max_span)
    try:
        config.validate()
    except UkechordError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    return config


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="ukechord")
@click.option(
    "--tuning",
    "-t",
    type=click.Choice([t.name for t in Tuning], case_sensitive=False),
    default=DEFAULT_CONFIG.tuning.name,
    show_default=True,
    help="Type of tuning to be used.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of diagnostic output on stderr.",
)
@click.pass_context
def main(ctx: click.Context, tuning: str, log_level: str) -> None:
    """ukechord: ukulele chord charts, chord names and voice leading."""
    configure_logging(log_level.upper())
    ctx.obj = Tuning.parse(tuning)


# ── chords subcommand ──────────────────────────────────────────────────────────

@main.command()
def chords() -> None:
    """List all supported chord types and symbols."""
    click.echo("Supported chord types and symbols\n")
    click.echo("The root note C is used as an example.\n")

    for chord_type in ChordType:
        symbols = ", ".join(f"C{symbol}" for symbol in chord_type.symbols)
        click.echo(f"C {chord_type} - {symbols}")


# ── chart subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("chord", callback=_parse_with(Chord.parse))
@click.option(
    "--all",
    "-a",
    "show_all",
    is_flag=True,
    help="Print out all voicings of CHORD that fulfill the given conditions.",
)
@voicing_options
@click.pass_context
def chart(
    ctx: click.Context,
    chord: Chord,
    show_all: bool,
    min_fret: int,
    max_fret: int,
    max_span: int,
    transpose: int,
) -> None:
    """
    Chord chart lookup.

    Enter note names as capital letters A - G.
    Add '#' for sharp notes, e.g. D#.
    Add 'b' for flat notes, e.g. Eb.

    Run "ukechord chords" to get a list of the chord types and symbols currently supported.

    \b
    Examples:
      ukechord chart C
      ukechord chart Am7 --all --max-span 3
      ukechord -t D chart F#m --min-fret 5
    """
    config = _build_config(ctx, ctx.obj, min_fret, max_fret, max_span)
    chord = chord.transpose(transpose)

    voicings = list(chord.voicings(config))
    if not voicings:
        click.echo("No matching chord voicing was found")
        return

    click.echo(f"[{chord}]\n")
    for voicing in voicings if show_all else voicings[:1]:
        click.echo(ChordChart(voicing, max_span).render())


# ── name subcommand ────────────────────────────────────────────────────────────

@main.command()
@click.argument("fret_pattern", callback=_parse_with(FretPattern.parse))
@click.pass_context
def name(ctx: click.Context, fret_pattern: tuple[int, ...]) -> None:
    """
    Chord name lookup.

    FRET_PATTERN is a compact chart of the frets pressed on every string,
    e.g. 0003 or "10 12 12 10".
    """
    voicing = Voicing.from_frets(fret_pattern, ctx.obj)
    found = voicing.get_chords()

    if not found:
        click.echo("No matching chord was found")

    for chord in found:
        click.echo(str(chord))


# ── voice-lead subcommand ──────────────────────────────────────────────────────

@main.command("voice-lead")
@click.argument("chord_seq", metavar="CHORD_SEQUENCE", callback=_parse_with(ChordSequence.parse))
@voicing_options
@click.option(
    "--midi",
    "midi_path",
    default=None,
    metavar="PATH",
    help="Also write the chosen voicings to a MIDI file.",
)
@click.option(
    "--tempo",
    type=click.IntRange(20, 300),
    default=MidiExporter.DEFAULT_TEMPO,
    show_default=True,
    help="Playback tempo in BPM for --midi.",
)
@click.pass_context
def voice_lead(
    ctx: click.Context,
    chord_seq: ChordSequence,
    min_fret: int,
    max_fret: int,
    max_span: int,
    transpose: int,
    midi_path: str | None,
    tempo: int,
) -> None:
    """
    Voice leading for a sequence of chords.

    CHORD_SEQUENCE is a list of chord names separated by spaces
    (wrap it in quotes).

    \b
    Examples:
      ukechord voice-lead "C Am F G"
      ukechord voice-lead "Dm7 G7 Cmaj7" --max-span 3 --midi ii-V-I.mid
    """
    config = _build_config(ctx, ctx.obj, min_fret, max_fret, max_span)
    chord_seq = chord_seq.transpose(transpose)

    graph = VoicingGraph.build(chord_seq, config)
    paths = graph.paths(1)

    if not paths:
        click.echo("No matching chord voicing sequence was found")
        return

    path, cost = paths[0]
    for chord, voicing in zip(chord_seq, path):
        click.echo(f"[{chord}]\n")
        click.echo(ChordChart(voicing, max_span).render())
    click.echo(f"Total movement: {cost} fret(s)")

    if midi_path is not None:
        exporter = MidiExporter(tuning=config.tuning, tempo=tempo)
        try:
            exporter.export(list(path), midi_path)
        except OSError as exc:
            click.echo(f"  ERROR: Could not write MIDI file — {exc}", err=True)
            sys.exit(1)
        click.echo(f"Wrote MIDI file → '{midi_path}'")
