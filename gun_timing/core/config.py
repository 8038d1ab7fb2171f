"""
Configuracion del reporte de tiempos a partir de archivos `.lif`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ReportConfig:
    """
    Parametros de una corrida del reporte.

    Solo `directory` es obligatorio; el resto conserva el formato fijo de los
    archivos de cronometraje.
    """

    # Entrada
    directory: Path | str
    extension: str = ".lif"
    min_fields: int = 11
    time_field_index: int = 10
    encoding: str = "utf-8"

    # Diferencias
    carry_unparsable_baseline: bool = True  # False: no mover la base con horas invalidas

    # Salida
    output_name: str = "output.csv"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)
        if self.time_field_index >= self.min_fields:
            raise ValueError(
                f"time_field_index={self.time_field_index} debe ser menor que min_fields={self.min_fields}."
            )

    @property
    def output_path(self) -> Path:
        return Path(self.directory) / self.output_name


if __name__ == "__main__":
    cfg = ReportConfig(directory=".")
    print("Config de prueba:", cfg)
