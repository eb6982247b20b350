"""Morse shell: type a message, hear it keyed in Morse code.

Run with: python -m morse_shell.main [MESSAGE] [--wav PATH] [--debug]

Features:
  - Without MESSAGE, a REPL that re-prompts after each message
  - Shows the dot/dash rendering before playing
  - Spinner while audio plays
  - Commands: quit/exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text

from morse_engine.encoder import render
from morse_engine.errors import MorseError
from morse_engine.timing import to_code_string
from morse_engine.types import EncodingConfig

from .config import settings
from .playback import PlaybackError, play, write_wav

log = logging.getLogger("shell")

console = Console()


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)-14s %(levelname)-7s %(message)s",
        datefmt="%H:%M:%S",
    )


def send(message: str, config: EncodingConfig, wav_path: Optional[str] = None,
         play_audio: bool = True, workers: int = 1) -> bool:
    """Encode one message, then save and/or play it. Returns True on success.

    Errors are reported on the console; nothing is played for a message
    that fails to encode.
    """
    try:
        code = to_code_string(message)
        chunk = render(message, config, max_workers=workers)
    except MorseError as e:
        console.print(f"[red]Error: {e}[/]")
        return False

    console.print(Text(code, style="cyan"))

    if wav_path:
        try:
            path = write_wav(wav_path, chunk)
        except OSError as e:
            console.print(f"[red]Could not write {wav_path}: {e}[/]")
            return False
        console.print(f"[dim]Saved {path} ({chunk.duration_seconds:.2f}s)[/]")

    if play_audio:
        with console.status("[dim]Playing...[/]", spinner="dots"):
            try:
                play(chunk)
            except (PlaybackError, OSError) as e:
                console.print(f"[red]Playback failed: {e}[/]")
                return False
        console.print("[dim]Stopped.[/]")

    return True


def _run_repl(config: EncodingConfig, wav_path: Optional[str],
              play_audio: bool, workers: int) -> None:
    console.print(
        f"[bold]Morse Shell[/] [dim]({config.tone_frequency_hz:g} Hz, "
        f"{config.time_unit_seconds:g}s unit)[/]"
    )
    console.print("[dim]Type 'quit' to exit.[/]\n")

    while True:
        try:
            user_input = console.input("[bold green]Enter your message:[/] ")
        except (EOFError, KeyboardInterrupt):
            console.print("\n[dim]Goodbye![/]")
            break

        if not user_input:
            console.print("[yellow]Please enter something![/]")
            continue
        if user_input.strip().lower() in ("quit", "exit"):
            console.print("[dim]Goodbye![/]")
            break

        send(user_input, config, wav_path=wav_path, play_audio=play_audio, workers=workers)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Text to Morse code audio")
    parser.add_argument("message", nargs="?", help="Message to send (omit for interactive mode)")
    parser.add_argument("--wav", help="Also write the audio to this WAV file")
    parser.add_argument("--no-play", action="store_true", help="Do not use the sound device")
    parser.add_argument("--frequency", type=float, help="Tone pitch in Hz")
    parser.add_argument("--unit", type=float, help="Dot length in seconds")
    parser.add_argument("--volume", type=int, help="Volume 0-100")
    parser.add_argument("--rate", type=int, help="Sample rate in Hz")
    parser.add_argument("--workers", type=int, default=settings.workers,
                        help="Synthesis threads")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    _setup_logging(args.debug)

    try:
        config = settings.encoding_config(
            tone_frequency_hz=args.frequency,
            time_unit_seconds=args.unit,
            volume_percent=args.volume,
            sample_rate_hz=args.rate,
        )
    except MorseError as e:
        console.print(f"[red]Invalid configuration: {e}[/]")
        return 2

    log.debug("Config: %s", config)
    play_audio = not args.no_play

    if args.message is not None:
        ok = send(args.message, config, wav_path=args.wav,
                  play_audio=play_audio, workers=args.workers)
        return 0 if ok else 1

    _run_repl(config, args.wav, play_audio, args.workers)
    return 0


if __name__ == "__main__":
    sys.exit(main())
