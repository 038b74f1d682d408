# bottles/usecases/reports.py
"""
Relatórios do inventário (linhas prontas para tabela):
- cervejas cadastradas
- cervejas registradas como breakage
- contagem por tipo (nomes + Total)
- resumo geral
"""

from __future__ import annotations

from typing import Any, Dict, List

from bottles.domain.errors import NotFound
from bottles.usecases.inventory import BottleInventory
from bottles.infra.logger import log_system_event


def report_beers(inventory: BottleInventory) -> List[Dict[str, Any]]:
    """Uma linha por cerveja ativa, na ordem de inserção."""
    out: List[Dict[str, Any]] = []
    for beer in inventory.list_beers():
        out.append({
            "Id": beer.id,
            "Name": beer.name,
            "Style": beer.style,
            "Alcohol Content": f"{beer.alcohol_content:g}%",
            "Container Size": beer.container_size.size_with_units(),
            "Quantity": f"{beer.quantity} bottles",
            "Barcode": str(beer.barcode),
            "Updated Date": beer.updated_date,
        })
    log_system_event("report_beers", {"rows": len(out)})
    return out


def report_flagged_breakage(inventory: BottleInventory) -> List[Dict[str, Any]]:
    return [
        {"Name": name, "Quantity": f"{quantity} bottles"}
        for name, quantity in inventory.list_flagged_breakage()
    ]


def report_counts(inventory: BottleInventory) -> List[Dict[str, Any]]:
    """Contagem por nome, em ordem alfabética das chaves (inclui Total)."""
    counts = inventory.counts_by_type()
    return [{"Type": name, "Bottles": counts[name]} for name in sorted(counts)]


def summary(inventory: BottleInventory) -> Dict[str, Any]:
    """Resumo geral; total 0 quando nada foi adicionado ainda."""
    try:
        total = inventory.total_count()
    except NotFound:
        total = 0
    return {
        "total": total,
        "types": len(inventory.list_beers()),
        "breakage_flagged": inventory.is_breakage_flagged,
        "total_breakage": inventory.total_breakage(),
    }
