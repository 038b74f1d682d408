"""
Utilidades de parsing para os valores digitados no terminal.

Este módulo converte as strings coletadas pelos prompts (TUI/CLI) nos
tipos que o inventário espera: tamanho com unidade, código de barras,
teor alcoólico e quantidades. Entradas malformadas
levantam ``ValueError`` com uma mensagem pronta para exibição.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from bottles.domain.policies import normalize_str

_NUM_RE = re.compile(r"[-+]?\d+(?:[.,]\d+)?")
_BARCODE_RE = re.compile(r"^\d{12}$")

_METRIC_UNITS = {"ML", "MILLILITER", "MILLILITERS", "MILLILITRE", "MILLILITRES"}
_NON_METRIC_UNITS = {"OZ", "FLOZ", "FL.OZ", "FL OZ", "OUNCE", "OUNCES"}


def parse_size_raw(txt: str, default_metric: bool = True) -> Tuple[Optional[int], Optional[bool]]:
    """Interpreta um tamanho de garrafa com unidade opcional.

    Exemplos:
        "355 ml"     → (355, True)
        "12 fl oz"   → (12, False)
        "12oz"       → (12, False)
        "500"        → (500, default_metric)

    Args:
        txt: Texto a ser interpretado.
        default_metric: Unidade assumida quando nenhuma é informada.

    Returns:
        Uma tupla (tamanho, is_metric); (None, None) para texto vazio.

    Raises:
        ValueError: se não houver número, se for negativo ou a unidade for desconhecida.
    """
    if txt is None:
        return None, None
    s = str(txt).strip()
    if not s:
        return None, None
    m = _NUM_RE.search(s)
    if not m or m.start() != 0:
        raise ValueError(f"Invalid container size: {s!r}")
    size = int(float(m.group(0).replace(",", ".")))
    if size < 0:
        raise ValueError("Container size cannot be negative.")
    unit = " ".join(s[m.end():].split()).upper()
    if not unit:
        return size, default_metric
    if unit in _METRIC_UNITS:
        return size, True
    if unit in _NON_METRIC_UNITS or unit.replace(" ", "") in _NON_METRIC_UNITS:
        return size, False
    raise ValueError(f"Unknown unit {unit!r}. Use 'ml' or 'fl oz'.")


def parse_barcode(txt: str) -> int:
    """Exige exatamente 12 dígitos decimais."""
    s = normalize_str(txt) or ""
    if not _BARCODE_RE.match(s):
        raise ValueError("Invalid barcode. Please enter a 12-digit barcode.")
    return int(s)


def parse_quantity(txt: str) -> int:
    s = normalize_str(txt)
    if s is None:
        raise ValueError("Quantity is required.")
    try:
        return int(s)
    except ValueError:
        raise ValueError(f"Invalid quantity: {s!r}") from None


def parse_strength(txt: str) -> float:
    """Teor alcoólico em %, aceita vírgula decimal e sufixo '%'."""
    s = normalize_str(txt)
    if s is None:
        raise ValueError("Alcohol content is required.")
    s = s.rstrip("%").strip().replace(",", ".")
    try:
        value = float(s)
    except ValueError:
        raise ValueError(f"Invalid alcohol content: {txt!r}") from None
    if not 0.0 <= value <= 100.0:
        raise ValueError("Alcohol content must be between 0 and 100.")
    return value
