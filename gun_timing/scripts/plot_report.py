from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from gun_timing.report import DEFAULT_OUTPUT_NAME, read_report  # noqa: E402
from gun_timing.report.timestamps import ValidTime, time_to_seconds  # noqa: E402


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Grafica el tiempo transcurrido entre registros de un output.csv."
    )
    parser.add_argument(
        "--directory",
        default=".",
        help="Directorio que contiene el reporte (default: directorio actual).",
    )
    parser.add_argument(
        "--report",
        help=f"Ruta explicita del reporte (default: <directory>/{DEFAULT_OUTPUT_NAME}).",
    )
    parser.add_argument("--output", help="Ruta del PNG a generar.")
    return parser.parse_args(argv)


def elapsed_series(rows: List[dict[str, Any]]) -> tuple[list[str], list[int]]:
    labels: list[str] = []
    values: list[int] = []
    for row in rows:
        elapsed = time_to_seconds(row["elapsed"])
        labels.append(f"{row['field1']} @ {row['time_of_day']}")
        values.append(elapsed.seconds if isinstance(elapsed, ValidTime) else 0)
    return labels, values


def elapsed_chart(rows: List[dict[str, Any]], title: str, output: Path) -> None:
    labels, values = elapsed_series(rows)
    fig, ax = plt.subplots(figsize=(10, max(2.5, len(labels) * 0.35)))
    if not labels:
        ax.axis("off")
        ax.text(0.5, 0.5, "Sin registros en el reporte.", ha="center", va="center")
    else:
        positions = range(len(labels))
        ax.barh(positions, values, height=0.5, color="#1f77b4")
        ax.set_yticks(list(positions))
        ax.set_yticklabels(labels)
        ax.invert_yaxis()
        ax.set_xlabel("Tiempo transcurrido (s)")
        ax.grid(True, axis="x", alpha=0.3, linestyle="--")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(output, dpi=150)
    plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    report = Path(args.report) if args.report else Path(args.directory) / DEFAULT_OUTPUT_NAME
    try:
        rows = read_report(report)
    except (FileNotFoundError, ValueError) as err:
        print(err, file=sys.stderr)
        sys.exit(1)

    output = Path(args.output) if args.output else report.with_name(f"elapsed_{report.stem}.png")
    elapsed_chart(rows, title=f"Tiempo entre registros ({report.name})", output=output)
    print("Grafica guardada en", output)


if __name__ == "__main__":
    main()
