#!/usr/bin/env python
"""
Reporte consolidado de tiempos a partir de los archivos `.lif` de un directorio.

El script:
  1. Pide la ruta del directorio (o la toma de --directory)
  2. Lee la primera linea de cada archivo `.lif` y extrae campos y hora
  3. Ordena por hora y calcula el tiempo transcurrido entre registros
  4. Escribe `output.csv` dentro del mismo directorio
"""

from __future__ import annotations

import sys
import argparse
from pathlib import Path
from typing import Optional, Sequence

#
# Ajustar PYTHONPATH automáticamente cuando se ejecuta el script via ruta absoluta.
#
_THIS_FILE = Path(__file__).resolve()
_PACKAGE_ROOT = _THIS_FILE.parent.parent  # .../gun_timing
_PROJECT_PARENT = _PACKAGE_ROOT.parent

if str(_PROJECT_PARENT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_PARENT))

from gun_timing import ReportConfig, run_report, setup_logger  # noqa: E402
from gun_timing.report import InvalidDirectoryError, validate_directory  # noqa: E402


PROMPT = "Enter the directory path: "


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Ordena por hora la primera linea de los archivos .lif y calcula tiempos transcurridos."
    )
    parser.add_argument(
        "--directory",
        help="Directorio a procesar (si se omite se solicita de forma interactiva).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Nivel de logging (DEBUG, INFO, WARNING...).",
    )
    return parser.parse_args(argv)


def prompt_directory() -> str:
    return input(PROMPT).strip()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    raw_directory = args.directory.strip() if args.directory else prompt_directory()

    try:
        if not raw_directory:
            # Path("") resolveria al directorio actual
            raise InvalidDirectoryError(raw_directory)
        directory = validate_directory(raw_directory)
    except InvalidDirectoryError:
        print("Invalid directory path!", file=sys.stderr)
        sys.exit(1)

    cfg = ReportConfig(directory=directory, log_level=args.log_level)
    logger = setup_logger(cfg.log_level)
    result = run_report(cfg, logger=logger)
    if not result.found_files:
        print(f"No {cfg.extension} files found in the directory.")
        sys.exit(0)

    print(f"Sorted output saved to: {result.output_path}")


if __name__ == "__main__":
    main()
