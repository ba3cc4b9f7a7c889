#!/usr/bin/env python3
"""Batch render the JSON test fixtures and examples to HTML.

Outputs go to /tmp/merkle_graph_renders/.

Usage:
    python scripts/render_fixtures.py [--orientation vertical]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from merkle_graph.errors import MerkleGraphError  # noqa: E402
from merkle_graph.graph import draw_graph  # noqa: E402
from merkle_graph.parser import Orientation, parse_tree_json  # noqa: E402
from merkle_graph.render import Container, Page  # noqa: E402

OUTPUT_DIR = Path("/tmp/merkle_graph_renders")
FIXTURES_DIR = project_root / "tests" / "fixtures"
EXAMPLES_DIR = project_root / "examples"


def render_file(
    json_path: Path, output_dir: Path, orientation: Orientation
) -> tuple[str, list[str]]:
    """Parse, lay out and render one tree file.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        root = parse_tree_json(json_path.read_text())
    except MerkleGraphError as e:
        return name, [f"PARSE ERROR: {e}"]

    page = Page([Container()])
    result = draw_graph(page["merkle_graph_holder"], root, orientation=orientation)
    if result.overflow is not None:
        issues.append(result.overflow.message)

    (output_dir / f"{name}.html").write_text(page.to_html(title=name))
    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render tree fixtures")
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=Orientation.HORIZONTAL.value,
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(FIXTURES_DIR.glob("*.json")) + sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    for json_path in all_files:
        name, issues = render_file(json_path, OUTPUT_DIR, Orientation(args.orientation))
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")


if __name__ == "__main__":
    main()
