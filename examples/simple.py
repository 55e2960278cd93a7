import sys

from chord_resolver import default_voicing, lookup_chords

for result in lookup_chords(["Am", "Bb", "C13", "Amz", "XYZ"]):
    sys.stdout.write(f"{result.display_name}: {result.status}\n")

    if result.chord is not None:
        sys.stdout.write(f"  notes: {' '.join(result.notes)}\n")
        voicing = default_voicing(result)
        if voicing is not None:
            frets = " ".join("x" if f is None else str(f) for f in voicing.frets)
            sys.stdout.write(f"  {voicing.name}: {frets}\n")

    if result.warning:
        sys.stdout.write(f"  {result.warning}\n")

    if result.suggestions:
        sys.stdout.write(f"  did you mean {', '.join(result.suggestions)}?\n")
