#!/usr/bin/env python3
"""Batch render all example scenarios to SVG diagrams.

Outputs go to /tmp/popup_position_renders/.

Usage:
    python scripts/render_examples.py [--theme light]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from popup_position.layout.engine import TIER_FALLBACK  # noqa: E402
from popup_position.parser.scenario import parse_scenario  # noqa: E402
from popup_position.render.svg import render_svg  # noqa: E402
from popup_position.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/popup_position_renders")
EXAMPLES_DIR = project_root / "examples"


def render_file(
    path: Path, output_dir: Path, theme_name: str
) -> tuple[str, list[str]]:
    """Parse and render a scenario file to SVG.

    Returns (name, list_of_issues).
    """
    name = path.stem
    issues: list[str] = []

    try:
        scenario = parse_scenario(path.read_text())
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    explanation = scenario.explain()
    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(render_svg(scenario, THEMES[theme_name]) + "\n")

    if explanation.selection.tier == TIER_FALLBACK:
        issues.append("no side had room; used the safe top-left")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render placement scenarios")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="dark", help="Visual theme"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    any_errors = False

    for path in all_files:
        name, issues = render_file(path, OUTPUT_DIR, args.theme)
        status = "OK" if not issues else "NOTE"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
