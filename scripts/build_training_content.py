#!/usr/bin/env python3
"""
Pre-render training manual units to JSON.

Parses every unit of every module found in the manual directory and writes
``module_<m>_unit_<u>.json`` files holding the same payload the training API
returns, so the site can serve them statically.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from backoffice.dal.local_store import LocalManualStore  # noqa: E402
from backoffice.logic.training_service import TrainingService  # noqa: E402
from backoffice.models.output import GetUnitOutput  # noqa: E402


def build_training_content(
    modules_dir: Path,
    output_dir: Path,
    max_module: int = 5,
    max_unit: int = 6,
    default_trainer: str = "Demetri",
) -> List[Path]:
    """
    Write one JSON file per unit found in ``modules_dir``.

    Returns:
        Paths of the files written
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    service = TrainingService(
        manual_store=LocalManualStore(modules_dir),
        max_module=max_module,
        max_unit=max_unit,
        default_trainer=default_trainer,
    )

    written = []
    for module_number, unit_number, unit in service.iter_all_units():
        output_path = output_dir / f"module_{module_number}_unit_{unit_number}.json"
        payload = GetUnitOutput(unit=unit).model_dump(mode="json")
        output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        written.append(output_path)

        print(
            f"Unit {module_number}.{unit_number}: {unit.title} "
            f"({len(unit.content_sections)} sections, {len(unit.activities)} activities)"
        )

    return written


def main(argv: Optional[List[str]] = None) -> int:
    """Main build function"""
    parser = argparse.ArgumentParser(description="Pre-render training manual units to JSON")
    parser.add_argument(
        "--modules-dir",
        default=str(project_root / "training" / "modules"),
        help="Directory containing MODULE_<n>_*.md files",
    )
    parser.add_argument(
        "--out-destination",
        default=str(project_root / "training" / "processed"),
        help="Directory the JSON files are written to",
    )
    parser.add_argument("--max-module", type=int, default=5, help="Highest module number")
    parser.add_argument("--max-unit", type=int, default=6, help="Highest unit number per module")
    parser.add_argument("--default-trainer", default="Demetri", help="Trainer used when a unit names none")
    args = parser.parse_args(argv)

    modules_dir = Path(args.modules_dir)
    if not modules_dir.is_dir():
        print(f"Error: modules directory not found: {modules_dir}")
        return 1

    print("Building training content...")
    written = build_training_content(
        modules_dir=modules_dir,
        output_dir=Path(args.out_destination),
        max_module=args.max_module,
        max_unit=args.max_unit,
        default_trainer=args.default_trainer,
    )
    print(f"Build complete! {len(written)} units written to {args.out_destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
