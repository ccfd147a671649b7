"""See the docstring to main()."""

from __future__ import annotations
from typing import *

import configparser
import logging
from pathlib import Path
import sys
import time

import click
import miniaudio
import structlog

from .audiofile import duration_str, write_wav
from .melody import Melody, MelodyError, Mode, melody_from_beats
from .songs import songs
from .stream import MelodySource, playback_stream


CURRENT_DIR = Path(__file__).parent
CONFIG = CURRENT_DIR / "toneroll.ini"
OUTPUTS = ("file", "speaker")


# For clarity we're aliasing `next` because we are using it as an initializer of
# the playback generator to execute until its first `yield` expression.  Now the
# generator is ready to accept `.send(value)` from miniaudio.
init = next


def configure_logging(debug: bool) -> None:
    if not debug:
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO)
        )
    if not sys.stdout.isatty():
        structlog.configure(
            [
                structlog.processors.TimeStamper(),
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        )


def require_section(cfg: configparser.ConfigParser, section: str, path: str) -> None:
    if not cfg.has_section(section):
        raise click.UsageError(f"Config file {path} has no [{section}] section")


def play(melody: Melody, cfg: configparser.SectionProxy) -> None:
    log = structlog.get_logger()
    backends = None
    backend_name = cfg.get("backend")
    if backend_name:
        try:
            backends = [getattr(miniaudio.Backend, backend_name.upper())]
        except AttributeError:
            raise click.UsageError(f"Unknown miniaudio backend {backend_name}")

    device_id = None
    audio_out = cfg.get("out-name")
    if audio_out:
        devices = miniaudio.Devices(backends)
        for playback in devices.get_playbacks():
            if playback["name"] == audio_out:
                device_id = playback["id"]
                break
        else:
            raise click.UsageError(f"No audio out available called {audio_out}")

    source = MelodySource.from_melody(melody)
    with miniaudio.PlaybackDevice(
        device_id=device_id,
        nchannels=source.channels,
        sample_rate=source.sample_rate,
        output_format=miniaudio.SampleFormat.FLOAT32,
        buffersize_msec=cfg.getint("buffer-msec", 200),
        backends=backends,
    ) as dev:
        stream = playback_stream(source)
        init(stream)
        dev.start(stream)
        log.info(
            "Playing",
            device=audio_out or "default",
            length=duration_str(melody.duration),
        )
        # The device pulls from its own thread; stay alive until it's done.
        time.sleep(melody.duration + 1)


@click.command()
@click.option(
    "--config",
    help="Read configuration from this file",
    default=str(CONFIG),
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    show_default=True,
)
@click.option(
    "--make-config",
    help="Write a new configuration file to standard output",
    is_flag=True,
)
@click.option(
    "--out",
    help="WAV file to write when OUTPUT is `file` (overrides the config)",
    type=click.Path(dir_okay=False),
)
@click.option(
    "--mode",
    help="Synthesis mode for all notes (overrides the config)",
    type=click.Choice([m.value for m in Mode]),
)
@click.option("--debug", is_flag=True, help="Log debug messages")
@click.argument("output", type=click.Choice(OUTPUTS), required=False)
@click.argument("tempo", type=float, required=False)
def main(
    config: str,
    make_config: bool,
    out: Optional[str],
    mode: Optional[str],
    debug: bool,
    output: Optional[str],
    tempo: Optional[float],
) -> None:
    """
    Renders a melody with additive synthesis and either saves it as a 16-bit mono
    WAV file or plays it on the speakers.

    OUTPUT is `file` or `speaker`, TEMPO is in beats per minute.  Both default to
    what the configuration file says.  Use `--make-config` to output a new config
    to stdout.
    """
    if make_config:
        print(CONFIG.read_text(), end="")
        return

    configure_logging(debug)
    log = structlog.get_logger()

    cfg = configparser.ConfigParser()
    cfg.read(config)
    require_section(cfg, "render", config)
    render_cfg = cfg["render"]
    output = output or render_cfg.get("output", "file")
    if output not in OUTPUTS:
        raise click.UsageError(f"render/output must be one of {', '.join(OUTPUTS)}")

    require_section(cfg, "audio-out" if output == "speaker" else "file-out", config)

    song_name = render_cfg.get("song", "risen")
    try:
        song = songs[song_name]
    except KeyError:
        raise click.UsageError(f"Unknown song {song_name!r}")

    try:
        melody = melody_from_beats(
            song(),
            tempo=tempo if tempo is not None else render_cfg.getfloat("tempo", 90.0),
            mode=Mode(mode or render_cfg.get("mode", "complex")),
            sample_rate=render_cfg.getint("sample-rate", 44100),
            fade_fraction=render_cfg.getfloat("fade-fraction", 0.02),
        )
    except (MelodyError, ValueError) as e:
        raise click.UsageError(str(e))

    log.info(
        "Rendering",
        song=song_name,
        tones=len(melody.tones),
        length=duration_str(melody.duration),
    )
    if output == "speaker":
        play(melody, cfg["audio-out"])
    else:
        path = Path(out or cfg["file-out"].get("path", "out/risen.wav"))
        write_wav(path, melody.render(), melody.sample_rate)


if __name__ == "__main__":
    main()
