# bottles/domain/models.py
"""
Modelos (dataclasses) do domínio.

Observação importante:
- Os objetos são criados pelo chamador e entregues ao inventário;
  apenas o inventário atribui ``id`` às cervejas.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from bottles.domain.policies import fl_oz_to_ml, format_timestamp, size_label


@dataclass
class ContainerSize:
    """Tamanho da garrafa: ml (métrico) ou fl oz (não métrico)."""
    is_metric: bool
    size: int

    @property
    def size_in_ml(self) -> int:
        return self.size if self.is_metric else fl_oz_to_ml(self.size)

    def size_with_units(self) -> str:
        return size_label(self.size, self.is_metric)

    def set_is_metric(self, metric: bool) -> None:
        self.is_metric = bool(metric)

    def set_size(self, new_size: int, convert_to_metric: bool = False) -> None:
        """Troca o tamanho; com ``convert_to_metric`` converte fl oz -> ml e vira métrico."""
        self.size = new_size
        if convert_to_metric and not self.is_metric:
            self.size = fl_oz_to_ml(self.size)
            self.is_metric = True

    def copy(self) -> "ContainerSize":
        return replace(self)

    def __str__(self) -> str:
        return self.size_with_units()


@dataclass
class Barcode:
    """Código de barras (12 dígitos quando digitado; aqui só o inteiro)."""
    value: int

    def set_value(self, new_value: int) -> None:
        self.value = new_value

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Beer:
    """Cerveja em estoque."""
    style: str
    name: str
    alcohol_content: float           # % ABV
    container_size: ContainerSize
    quantity: int
    barcode: Union[Barcode, int]
    id: Optional[int] = None         # atribuído pelo inventário
    updated_date: str = field(default_factory=format_timestamp)

    def __post_init__(self) -> None:
        if not isinstance(self.barcode, Barcode):
            self.barcode = Barcode(int(self.barcode))

    def update_date(self) -> None:
        self.updated_date = format_timestamp()


@dataclass
class BreakageCounter:
    """Total acumulado de unidades registradas como quebradas."""
    total_breakage: int = 0

    def set_total_breakage(self, new_total: int) -> None:
        self.total_breakage = new_total

    def increment_total_breakage(self, amount: int) -> None:
        self.total_breakage += amount
