# bottles/usecases/inventory.py
"""
UC: Inventário de garrafas em memória.

- add_beer(beer): entrada de uma cerveja nova (id sequencial, agregados, breakage).
- remove_by_id(id): remove a cerveja e desconta seus agregados.
- edit_beer(name, ...): altera campos no lugar, mantendo os agregados coerentes.
- consultas: total_count, exists, list_beers, list_flagged_breakage, counts_by_type.

Obs.:
- ``beer_counts`` nunca perde chaves: a remoção apenas decrementa. Por isso
  ``exists(nome)`` continua True depois que a última cerveja do nome sai.
- Não existe remoção parcial por quantidade; estoque sai removendo o registro
  ou editando sua quantidade.
- Erros sobem como ``InventoryError`` e o estado fica inalterado.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from bottles.config import DEFAULTS
from bottles.domain.errors import Conflict, DuplicateName, InvalidQuantity, NotFound
from bottles.domain.models import Barcode, Beer, BreakageCounter
from bottles.domain.policies import normalize_str
from bottles.infra.logger import (
    log_breakage, log_stock, log_system_event, log_transaction, print_system
)


class BottleInventory:
    """Estoque de cervejas com contagens por nome e total."""

    def __init__(self):
        self.is_breakage_flagged = False
        self.beers: List[Beer] = []
        self.beer_counts: Dict[str, int] = {}
        self.flagged_beers: List[Tuple[str, int]] = []
        self.breakage = BreakageCounter()
        self.next_id = 1

    # -----------------------
    # util
    # -----------------------

    def _find_live(self, name: str) -> Optional[Beer]:
        for beer in self.beers:
            if beer.name == name:
                return beer
        return None

    def _bump(self, name: str, delta: int) -> None:
        total_key = DEFAULTS.total_key
        self.beer_counts[name] = self.beer_counts.get(name, 0) + delta
        self.beer_counts[total_key] = self.beer_counts.get(total_key, 0) + delta

    # -----------------------
    # movimentação
    # -----------------------

    def add_beer(self, beer: Beer) -> Dict[str, Any]:
        """Adiciona ``beer`` ao estoque e devolve a confirmação."""
        data = {"name": beer.name, "quantity": beer.quantity}
        log_system_event("add_beer_start", data)

        if beer.quantity <= 0:
            msg = "Invalid quantity. Please enter a positive value."
            log_transaction("add_beer", data, error=msg)
            raise InvalidQuantity(msg)

        name = normalize_str(beer.name) or beer.name
        if name == DEFAULTS.total_key or self._find_live(name) is not None:
            msg = f"Beer '{name}' already exists."
            log_transaction("add_beer", data, error=msg)
            raise DuplicateName(msg)

        beer.name = name
        beer.id = self.next_id
        self.next_id += 1
        self.beers.append(beer)
        self._bump(beer.name, beer.quantity)
        beer.update_date()

        log_stock("add", beer.name, beer.quantity, beer.id, style=beer.style)
        print_system(f"{beer.quantity} bottles of {beer.name} added to stock.")

        if self.is_breakage_flagged:
            self.flagged_beers.append((beer.name, beer.quantity))
            self.breakage.increment_total_breakage(beer.quantity)
            log_breakage(beer.name, beer.quantity, self.breakage.total_breakage)
            print_system("Breakage has been flagged while adding beer.")

        result = {
            "id": beer.id,
            "name": beer.name,
            "quantity": beer.quantity,
            "breakage_flagged": self.is_breakage_flagged,
        }
        log_transaction("add_beer", data, result=result)
        return result

    def remove_by_id(self, beer_id: int) -> Dict[str, Any]:
        """Remove a cerveja ``beer_id`` e desconta nome e Total."""
        log_system_event("remove_beer_start", {"id": beer_id})

        for index, beer in enumerate(self.beers):
            if beer.id == beer_id:
                self._bump(beer.name, -beer.quantity)
                del self.beers[index]
                result = {"id": beer.id, "name": beer.name, "quantity": beer.quantity}
                log_stock("remove", beer.name, beer.quantity, beer.id)
                log_transaction("remove_beer", {"id": beer_id}, result=result)
                print_system(f"{beer.quantity} bottles of {beer.name} removed from stock.")
                return result

        msg = f"Beer with ID {beer_id} not found."
        log_transaction("remove_beer", {"id": beer_id}, error=msg)
        raise NotFound(msg)

    def edit_beer(
        self,
        name: str,
        new_name: Optional[str] = None,
        style: Optional[str] = None,
        alcohol_content: Optional[float] = None,
        size: Optional[int] = None,
        is_metric: Optional[bool] = None,
        quantity: Optional[int] = None,
        barcode: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Edita a cerveja ``name``.

        Campos texto vazios/None mantêm o valor atual; campos numéricos
        informados sobrescrevem. O tamanho é copiado, alterado e substituído.
        Toda validação ocorre antes de qualquer mutação.
        """
        data = {"name": name, "new_name": new_name, "quantity": quantity}
        log_system_event("edit_beer_start", data)

        beer = self._find_live(normalize_str(name) or name)
        if beer is None:
            msg = f"Beer with name '{name}' not found."
            log_transaction("edit_beer", data, error=msg)
            raise NotFound(msg)

        target_name = normalize_str(new_name) or beer.name
        if target_name == DEFAULTS.total_key:
            msg = f"Cannot rename '{beer.name}': '{target_name}' is reserved."
            log_transaction("edit_beer", data, error=msg)
            raise Conflict(msg)
        if target_name != beer.name:
            other = self._find_live(target_name)
            if other is not None and other is not beer:
                msg = f"Cannot rename '{beer.name}': beer '{target_name}' already exists."
                log_transaction("edit_beer", data, error=msg)
                raise Conflict(msg)

        if quantity is not None and quantity < 0:
            msg = "Invalid quantity. Quantity cannot be negative."
            log_transaction("edit_beer", data, error=msg)
            raise InvalidQuantity(msg)

        previous_name = beer.name
        previous_quantity = beer.quantity
        new_quantity = previous_quantity if quantity is None else quantity

        # agregados: retira do nome antigo, aplica no novo
        self._bump(previous_name, -previous_quantity)
        self._bump(target_name, new_quantity)

        beer.name = target_name
        beer.style = normalize_str(style) or beer.style
        if alcohol_content is not None:
            beer.alcohol_content = alcohol_content
        if size is not None or is_metric is not None:
            new_size = beer.container_size.copy()
            if size is not None:
                new_size.set_size(size)
            if is_metric is not None:
                new_size.set_is_metric(is_metric)
            beer.container_size = new_size
        beer.quantity = new_quantity
        if barcode is not None:
            beer.barcode = Barcode(barcode)
        beer.update_date()

        result = {
            "id": beer.id,
            "name": beer.name,
            "previous_name": previous_name,
            "quantity": beer.quantity,
        }
        log_stock("edit", beer.name, beer.quantity, beer.id, previous_name=previous_name,
                  previous_quantity=previous_quantity)
        log_transaction("edit_beer", data, result=result)
        print_system("Beer details updated.")
        return result

    def flag_breakage(self) -> None:
        """Liga o modo breakage (permanente)."""
        if not self.is_breakage_flagged:
            log_system_event("breakage_flagged", level="warning")
        self.is_breakage_flagged = True

    # -----------------------
    # consultas
    # -----------------------

    def total_count(self) -> int:
        try:
            return self.beer_counts[DEFAULTS.total_key]
        except KeyError:
            raise NotFound("No beers have been added yet.") from None

    def exists(self, name: str) -> bool:
        return name in self.beer_counts

    def get_by_id(self, beer_id: int) -> Beer:
        for beer in self.beers:
            if beer.id == beer_id:
                return beer
        raise NotFound(f"Beer with ID {beer_id} not found.")

    def find_by_name(self, name: str) -> Beer:
        beer = self._find_live(name)
        if beer is None:
            raise NotFound(f"Beer with name '{name}' not found.")
        return beer

    def list_beers(self) -> List[Beer]:
        return list(self.beers)

    def list_flagged_breakage(self) -> List[Tuple[str, int]]:
        return list(self.flagged_beers)

    def counts_by_type(self) -> Dict[str, int]:
        return dict(self.beer_counts)

    def total_breakage(self) -> int:
        return self.breakage.total_breakage
