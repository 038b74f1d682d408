# bottles/adapters/cli.py
"""
CLI do inventário de garrafas (Typer).

Comandos principais:
- tui                     -> inicia o menu interativo
- demo                    -> executa o cenário de referência (IPA + Stout) e exibe as tabelas
- convert <tamanho>       -> mostra o rótulo de um tamanho em ml

Opções globais: --log grava os arquivos de log; --verbose mostra as mensagens
do inventário a cada operação.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bottles.adapters.parsers import parse_size_raw
from bottles.domain.errors import InventoryError
from bottles.domain.models import Beer, ContainerSize
from bottles.infra import logger
from bottles.usecases.inventory import BottleInventory
from bottles.usecases.reports import (
    report_beers, report_counts, report_flagged_breakage, summary
)


app = typer.Typer(help="Bottle Inventory — CLI")
console = Console()


@app.callback()
def main_callback(
    log: bool = typer.Option(False, "--log", help="Grava logs em bottles/logs (ou BOTTLES_LOG_DIR)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Mostra as mensagens do inventário a cada operação"),
):
    """Opções globais."""
    logger.ENABLE_LOGGING = log
    logger.ENABLE_OUTPUT = verbose


# -----------------------
# util
# -----------------------

def _print_json(obj) -> None:
    """Fallback para impressão de JSON quando necessário."""
    typer.echo(json.dumps(obj, ensure_ascii=False, indent=2))


def _display_table(data: Dict[str, Any] | List[Dict[str, Any]], title: str = "Resultado") -> None:
    """Exibe os dados em tabelas formatadas usando Rich."""
    if not data:
        console.print(Panel("Nenhum dado encontrado", title=title, border_style="yellow"))
        return

    if isinstance(data, list) and isinstance(data[0], dict):
        table = Table(title=title, box=box.ROUNDED)
        columns = data[0].keys()
        for column in columns:
            if column.lower() in ["bottles", "quantity", "id"]:
                table.add_column(column, justify="right")
            else:
                table.add_column(column)
        for row in data:
            table.add_row(*[str(row.get(col, "")) for col in columns])
        console.print(table)
        return

    if isinstance(data, dict) and "total" in data:
        panel_content = [
            f"Total beer count in stock: {data['total']} bottles",
            f"Beers in stock: {data.get('types', 0)}",
            f"Breakage flagged: {'yes' if data.get('breakage_flagged') else 'no'}",
            f"Total breakage: {data.get('total_breakage', 0)} bottles",
        ]
        console.print(Panel("\n".join(panel_content), title=title))
        return

    _print_json(data)


def build_demo_inventory(flag_breakage: bool = True) -> BottleInventory:
    """Monta o inventário do cenário de referência."""
    inventory = BottleInventory()
    if flag_breakage:
        inventory.flag_breakage()
    inventory.add_beer(Beer("IPA", "Example IPA", 6.5, ContainerSize(True, 355), 24, 123456))
    inventory.add_beer(Beer("Stout", "Sample Stout", 7.0, ContainerSize(False, 12), 12, 789012))
    return inventory


# -----------------------
# comandos
# -----------------------

@app.command("tui")
def cmd_tui():
    """Inicia o menu interativo do inventário."""
    from bottles.adapters.tui import main_tui
    try:
        main_tui()
    except KeyboardInterrupt:
        typer.echo("\nSaindo...")
        raise typer.Exit(0)


@app.command("demo")
def cmd_demo(
    breakage: bool = typer.Option(True, "--breakage/--no-breakage", help="Liga o modo breakage antes das entradas"),
):
    """Executa o cenário de referência e exibe cervejas, breakage e contagens."""
    try:
        inventory = build_demo_inventory(flag_breakage=breakage)
    except InventoryError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1)

    _display_table(report_beers(inventory), title="List of added beers")
    flagged = report_flagged_breakage(inventory)
    if flagged:
        _display_table(flagged, title="List of flagged beers for breakage")
    else:
        typer.echo("No beers flagged for breakage.")
    _display_table(report_counts(inventory), title="Total counts of each beer type")
    _display_table(summary(inventory), title="Resumo")


@app.command("convert")
def cmd_convert(
    size: str = typer.Argument(..., help="Ex.: '355 ml', '12 fl oz' ou '12'"),
    metric: bool = typer.Option(True, "--metric/--no-metric", help="Unidade assumida quando não informada"),
):
    """Mostra o tamanho em ml (fl oz são convertidos com truncamento)."""
    try:
        value, is_metric = parse_size_raw(size, default_metric=metric)
    except ValueError as e:
        typer.echo(str(e))
        raise typer.Exit(code=1)
    if value is None:
        typer.echo("Nada a converter. Informe um tamanho.")
        raise typer.Exit(code=1)
    typer.echo(ContainerSize(is_metric, value).size_with_units())


# Entry point opcional:
def main():
    app()


if __name__ == "__main__":
    main()
