# bottles/adapters/tui.py
"""
TUI (Text User Interface) do inventário de garrafas usando Rich.

Interface interativa baseada em menu para as operações do inventário:
- Adicionar / remover / editar cervejas
- Visualizar cervejas, breakage e contagens
- Ligar o modo breakage e consultar o total
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from bottles.adapters.parsers import (
    normalize_str, parse_barcode, parse_quantity, parse_size_raw, parse_strength
)
from bottles.domain.errors import InventoryError
from bottles.domain.models import Beer, ContainerSize
from bottles.infra.logger import log_system_event
from bottles.usecases.inventory import BottleInventory
from bottles.usecases.reports import report_beers, report_counts, report_flagged_breakage


MENU_CHOICES = ["0", "1", "2", "3", "4", "5", "6", "7", "8"]


class BottleTUI:
    """Text User Interface para o inventário de garrafas."""

    def __init__(self, inventory: Optional[BottleInventory] = None, console: Optional[Console] = None):
        self.console = console or Console()
        self.inventory = inventory if inventory is not None else BottleInventory()
        self.actions: Dict[str, Callable[[], None]] = {
            "1": self.adicionar_cerveja,
            "2": self.remover_cerveja,
            "3": self.mostrar_cervejas,
            "4": self.mostrar_breakage,
            "5": self.mostrar_contagens,
            "6": self.editar_cerveja,
            "7": self.sinalizar_breakage,
            "8": self.mostrar_total,
        }

    def run(self) -> None:
        """Inicia a interface principal."""
        self.show_banner()
        log_system_event("tui_start")

        while True:
            try:
                choice = self.show_main_menu()
                if choice == "0":
                    self.console.print("\n[green]Exiting the program.[/green]")
                    break
                self.actions[choice]()
            except InventoryError as e:
                self.console.print(f"[red]{e.message}[/red]")
            except KeyboardInterrupt:
                self.console.print("\n[red]Saindo...[/red]")
                break

        log_system_event("tui_stop")

    def show_banner(self) -> None:
        """Exibe banner do sistema."""
        banner = Panel.fit(
            "[bold blue]BOTTLE INVENTORY[/bold blue]\n"
            "[cyan]Interface Terminal Interativa (TUI)[/cyan]",
            border_style="blue"
        )
        self.console.print("\n")
        self.console.print(Align.center(banner))
        self.console.print("\n")

    def show_main_menu(self) -> str:
        """Exibe menu principal e retorna escolha do usuário."""
        menu = Panel(
            "[bold]MENU[/bold]\n\n"
            "[yellow]1.[/yellow] Add Beer\n"
            "[yellow]2.[/yellow] Remove Beer\n"
            "[yellow]3.[/yellow] Display Added Beers\n"
            "[yellow]4.[/yellow] Display Flagged Beers\n"
            "[yellow]5.[/yellow] Display Total Counts\n"
            "[yellow]6.[/yellow] Edit Beer\n"
            "[yellow]7.[/yellow] Flag Breakage\n"
            "[yellow]8.[/yellow] Total Bottle Count\n"
            "[yellow]0.[/yellow] Exit\n",
            title="Opções",
            border_style="green"
        )
        self.console.print(menu)
        return Prompt.ask("Enter your choice", choices=MENU_CHOICES, console=self.console)

    # -----------------------
    # util
    # -----------------------

    def _ask(self, label: str, parser: Callable[[str], Any], default: Optional[str] = None) -> Any:
        """Pergunta até o parser aceitar o valor digitado."""
        while True:
            if default is None:
                raw = Prompt.ask(label, console=self.console)
            else:
                raw = Prompt.ask(label, default=default, console=self.console)
            try:
                return parser(raw)
            except ValueError as e:
                self.console.print(f"[red]{e}[/red]")

    def mostrar_linhas(self, titulo: str, linhas: List[Dict[str, Any]], vazio: str) -> None:
        """Mostra linhas de relatório em formato de tabela."""
        if not linhas:
            self.console.print(f"[yellow]{vazio}[/yellow]")
            return

        table = Table(title=titulo, show_header=True, header_style="bold magenta")
        for coluna in linhas[0].keys():
            table.add_column(coluna, style="cyan")
        for linha in linhas:
            table.add_row(*[str(v) if v is not None else "" for v in linha.values()])
        self.console.print(table)

    # -----------------------
    # ações
    # -----------------------

    def adicionar_cerveja(self) -> None:
        """Coleta os campos e adiciona uma cerveja."""
        self.console.print("[bold]Add Beer[/bold]")
        name = self._ask("Beer name", _required("Beer name"))
        style = self._ask("Beer style", _required("Beer style"))
        strength = self._ask("Alcohol content (%)", parse_strength)
        size, is_metric = self._ask("Container size (e.g. '355 ml' or '12 fl oz')", _required_size)
        quantity = self._ask("Quantity", parse_quantity)
        barcode = self._ask("Barcode (12 digits)", parse_barcode)

        beer = Beer(style, name, strength, ContainerSize(is_metric, size), quantity, barcode)
        result = self.inventory.add_beer(beer)
        self.console.print(
            f"[green]✓ {result['quantity']} bottles of {result['name']} added to stock "
            f"(ID {result['id']}).[/green]"
        )
        if result["breakage_flagged"]:
            self.console.print("[yellow]Breakage has been flagged while adding beer.[/yellow]")

    def remover_cerveja(self) -> None:
        """Remove uma cerveja pelo id."""
        self.mostrar_cervejas()
        beer_id = IntPrompt.ask("Enter the ID of the beer to remove", console=self.console)
        result = self.inventory.remove_by_id(beer_id)
        self.console.print(
            f"[green]✓ {result['quantity']} bottles of {result['name']} removed from stock.[/green]"
        )

    def mostrar_cervejas(self) -> None:
        self.mostrar_linhas("List of added beers", report_beers(self.inventory), "No beers in stock.")

    def mostrar_breakage(self) -> None:
        self.mostrar_linhas(
            "List of flagged beers for breakage",
            report_flagged_breakage(self.inventory),
            "No beers flagged for breakage.",
        )

    def mostrar_contagens(self) -> None:
        self.mostrar_linhas(
            "Total counts of each beer type", report_counts(self.inventory), "No beers in stock."
        )

    def editar_cerveja(self) -> None:
        """Edita uma cerveja; Enter mantém o valor atual."""
        name = self._ask("Enter the name of the beer to edit", _required("Beer name"))
        beer = self.inventory.find_by_name(name)
        size = beer.container_size

        new_name = normalize_str(Prompt.ask("New name", default="", show_default=False, console=self.console))
        style = normalize_str(Prompt.ask("New style", default="", show_default=False, console=self.console))
        strength = self._ask("New alcohol content (%)", parse_strength, default=f"{beer.alcohol_content:g}")
        unit = "ml" if size.is_metric else "fl oz"
        new_size, is_metric = self._ask(
            "New container size", _required_size, default=f"{size.size} {unit}"
        )
        quantity = self._ask("New quantity", parse_quantity, default=str(beer.quantity))
        current = str(beer.barcode)
        barcode = self._ask(
            "New barcode (12 digits)",
            lambda raw: beer.barcode.value if raw == current else parse_barcode(raw),
            default=current,
        )

        self.inventory.edit_beer(
            name,
            new_name=new_name,
            style=style,
            alcohol_content=strength,
            size=new_size,
            is_metric=is_metric,
            quantity=quantity,
            barcode=barcode,
        )
        self.console.print("[green]✓ Beer details updated.[/green]")

    def sinalizar_breakage(self) -> None:
        self.inventory.flag_breakage()
        self.console.print("[yellow]Breakage flagged. Every new addition is recorded as breakage.[/yellow]")

    def mostrar_total(self) -> None:
        total = self.inventory.total_count()
        self.console.print(f"Total beer count in stock: [bold]{total}[/bold] bottles.")


def _required(label: str) -> Callable[[str], str]:
    def parse(raw: str) -> str:
        value = normalize_str(raw)
        if value is None:
            raise ValueError(f"{label} is required.")
        return value
    return parse


def _required_size(raw: str):
    size, is_metric = parse_size_raw(raw)
    if size is None:
        raise ValueError("Container size is required.")
    return size, is_metric


def main_tui():
    """Ponto de entrada principal da TUI."""
    tui = BottleTUI()
    tui.run()


if __name__ == "__main__":
    main_tui()
