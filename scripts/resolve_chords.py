#!/usr/bin/env python3
"""Resolve chord names from the command line.

Examples
--------
    python scripts/resolve_chords.py Am G7 Bb "C 13" Amz
    python scripts/resolve_chords.py --json --dictionary my_chords.json Cmaj7
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from chord_resolver import GUITAR_CHORDS, ChordResolver, LookupResult, ResolverConfig, load_dictionary_json


def _format_frets(frets: tuple[int | None, ...]) -> str:
    return " ".join("x" if f is None else str(f) for f in frets)


def format_result(result: LookupResult) -> str:
    """One human-readable line per result."""
    line = f"{result.display_name or '<empty>'}: {result.status}"
    if result.chord is not None:
        line += f"  notes={' '.join(result.notes)}"
        voicing = result.chord.default_voicing
        if voicing is not None:
            line += f"  frets={_format_frets(voicing.frets)} ({voicing.name})"
    if result.suggestions:
        line += f"  did you mean: {', '.join(result.suggestions)}?"
    if result.warning:
        line += f"  [{result.warning}]"
    return line


def main() -> None:
    """Run the chord resolution script."""
    parser = argparse.ArgumentParser(description="Resolve chord names to notes and guitar voicings")
    parser.add_argument("chords", nargs="*", help="Chord names; read from stdin, one per line, if omitted")
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=None,
        help="JSON chord dictionary to use instead of the bundled guitar chords",
    )
    parser.add_argument(
        "--max-voicings",
        type=int,
        default=ResolverConfig.max_voicings,
        help="Voicings generated per chord",
    )
    parser.add_argument(
        "--max-tones",
        type=int,
        default=ResolverConfig.max_chord_tones,
        help="Tone cap before a generated chord is simplified",
    )
    parser.add_argument(
        "--max-suggestions",
        type=int,
        default=ResolverConfig.max_suggestions,
        help="Did-you-mean suggestions for unrecognized chords",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log resolution steps")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    dictionary = GUITAR_CHORDS
    if args.dictionary is not None:
        try:
            dictionary = load_dictionary_json(args.dictionary)
        except (OSError, ValueError) as e:
            print(f"Error: cannot load dictionary {args.dictionary}: {e}", file=sys.stderr)
            sys.exit(1)

    try:
        config = ResolverConfig(
            max_voicings=args.max_voicings,
            max_chord_tones=args.max_tones,
            max_suggestions=args.max_suggestions,
        )
    except ValueError as e:
        parser.error(str(e))

    names = args.chords or [line.strip() for line in sys.stdin if line.strip()]
    results = ChordResolver(dictionary, config).lookup_many(names)

    if args.json:
        print(json.dumps([asdict(result) for result in results], indent=2, ensure_ascii=False))
    else:
        for result in results:
            print(format_result(result))


if __name__ == "__main__":
    main()
