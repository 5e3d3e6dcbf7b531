"""
Synthetic catalog generator for the Brickset catalog queries.

Writes a deterministic pseudo-random Brickset JSON export. A share of the
generated sets lack tags, a subtheme or a piece count so that every query's
handling of absent values is exercised on larger inputs.
"""

from __future__ import annotations

import json
import random
import sys
import tempfile
import time
from pathlib import Path
from typing import Any, Dict, List

import typer

from brickset.domain.models import PackagingType

app = typer.Typer(help="Generate a synthetic Brickset JSON export.")

THEMES: Dict[str, List[str]] = {
    "City": ["Police", "Fire", "Space", "Trains"],
    "Star Wars": ["Microfighters", "Ultimate Collector Series", "The Mandalorian"],
    "Technic": [],
    "Creator": ["3 in 1", "Expert"],
    "Art": ["Marvel", "Disney"],
    "Ideas": [],
    "Architecture": ["Landmark Series", "Skyline"],
}
TAGS = [
    "Microscale",
    "Car",
    "Spaceship",
    "Minifig Scale",
    "Display Stand",
    "Mosaic",
    "Police",
    "Rocket",
    "Train",
    "Castle",
]
WORDS = ["Rocket", "Tower", "Galaxy", "Harbor", "Dragon", "Station", "Cruiser", "Outpost"]


def _generate_sets(count: int, seed: int) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    sets: List[Dict[str, Any]] = []
    for i in range(count):
        theme = rng.choice(list(THEMES))
        subthemes = THEMES[theme]
        subtheme = rng.choice(subthemes) if subthemes and rng.random() > 0.2 else None
        tags = rng.sample(TAGS, k=rng.randint(0, 4)) if rng.random() > 0.15 else None
        pieces = rng.randint(20, 7500) if rng.random() > 0.05 else None
        number = f"{10000 + i}-1"
        sets.append(
            {
                "number": number,
                "name": f"{rng.choice(WORDS)} {rng.choice(WORDS)}",
                "year": rng.randint(1990, 2024),
                "theme": theme,
                "subtheme": subtheme,
                "category": "Normal",
                "packagingType": rng.choice(list(PackagingType)).value,
                "availability": rng.choice(["Retail", "LEGO exclusive", "Promotional"]),
                "tags": tags,
                "pieces": pieces,
                "minifigs": rng.randint(0, 10),
                "url": f"https://brickset.com/sets/{number}",
            }
        )
    return sets


def _write_json(json_path: Path, sets: List[Dict[str, Any]]) -> None:
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(sets, f, indent=2)


@app.command()
def main(
    count: int = typer.Option(
        1_000,
        "--count",
        "-c",
        help="Number of sets to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional JSON output path (if omitted, a temp file will be used).",
    ),
) -> None:
    """
    Generate a synthetic Brickset catalog as JSON.
    """
    start = time.perf_counter()
    if output:
        json_path = output
        json_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="brickset_json_"))
        json_path = tmpdir / "brickset.json"

    typer.echo(f"Generating {count:,} sets -> {json_path} (seed={seed})")
    _write_json(json_path, _generate_sets(count, seed))
    duration = time.perf_counter() - start
    typer.echo(f"Generation completed in {duration:.2f}s")
    typer.echo(f"Run queries with: BRICKSET_DATA_FILE={json_path} brickset run")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
