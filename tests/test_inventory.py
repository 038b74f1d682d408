"""
Testes do inventário de garrafas em memória.
"""

import pytest
from unittest.mock import patch

from bottles.domain.errors import Conflict, DuplicateName, InvalidQuantity, NotFound
from bottles.domain.models import Beer, ContainerSize
from bottles.usecases.inventory import BottleInventory


def _ipa(quantity=24, name="Example IPA"):
    return Beer("IPA", name, 6.5, ContainerSize(True, 355), quantity, 123456)


def _stout(quantity=12, name="Sample Stout"):
    return Beer("Stout", name, 7.0, ContainerSize(False, 12), quantity, 789012)


@pytest.fixture
def inventory():
    return BottleInventory()


@pytest.fixture
def stocked(inventory):
    inventory.add_beer(_ipa())
    inventory.add_beer(_stout())
    return inventory


class TestAddBeer:
    """Entrada de cervejas."""

    def test_reference_scenario(self, stocked):
        assert stocked.total_count() == 36
        assert stocked.counts_by_type()["Example IPA"] == 24
        assert stocked.counts_by_type()["Sample Stout"] == 12

    def test_total_is_sum_of_quantities(self, inventory):
        quantities = [3, 7, 11, 1, 40]
        for i, q in enumerate(quantities):
            inventory.add_beer(_ipa(quantity=q, name=f"Beer {i}"))
        assert inventory.counts_by_type()["Total"] == sum(quantities)

    def test_assigns_sequential_ids(self, stocked):
        assert [b.id for b in stocked.list_beers()] == [1, 2]

    def test_returns_confirmation(self, inventory):
        result = inventory.add_beer(_ipa())
        assert result == {"id": 1, "name": "Example IPA", "quantity": 24, "breakage_flagged": False}

    @pytest.mark.parametrize("quantity", [0, -1, -24])
    def test_rejects_non_positive_quantity(self, stocked, quantity):
        counts = stocked.counts_by_type()
        beers = stocked.list_beers()
        with pytest.raises(InvalidQuantity):
            stocked.add_beer(_ipa(quantity=quantity, name="Other"))
        assert stocked.counts_by_type() == counts
        assert stocked.list_beers() == beers
        assert stocked.next_id == 3

    def test_rejects_duplicate_name(self, stocked):
        counts = stocked.counts_by_type()
        with pytest.raises(DuplicateName):
            stocked.add_beer(_ipa(quantity=5))
        assert stocked.counts_by_type() == counts
        assert len(stocked.list_beers()) == 2

    def test_rejects_reserved_total_name(self, stocked):
        counts = stocked.counts_by_type()
        with pytest.raises(DuplicateName):
            stocked.add_beer(Beer("Lager", "Total", 5.0, ContainerSize(True, 355), 5, 1))
        assert stocked.counts_by_type() == counts
        assert stocked.total_count() == 36
        assert len(stocked.list_beers()) == 2
        assert stocked.next_id == 3

    def test_name_is_stripped(self, stocked):
        with pytest.raises(DuplicateName):
            stocked.add_beer(_ipa(name="  Example IPA "))
        result = stocked.add_beer(_ipa(quantity=2, name=" Pilsner "))
        assert result["name"] == "Pilsner"
        assert stocked.counts_by_type()["Pilsner"] == 2
        assert " Pilsner " not in stocked.counts_by_type()

    def test_refreshes_updated_date(self, inventory):
        beer = _ipa()
        beer.updated_date = "2000-01-01 00:00:00"
        with patch("bottles.domain.models.format_timestamp", return_value="2026-10-16 12:00:00"):
            inventory.add_beer(beer)
        assert beer.updated_date == "2026-10-16 12:00:00"


class TestBreakage:
    """Modo breakage e contabilização."""

    def test_add_before_flag_records_nothing(self, inventory):
        inventory.add_beer(_ipa())
        assert inventory.list_flagged_breakage() == []
        assert inventory.total_breakage() == 0

    def test_add_after_flag_records_entry(self, inventory):
        inventory.add_beer(_ipa())
        inventory.flag_breakage()
        result = inventory.add_beer(_stout())
        assert result["breakage_flagged"] is True
        assert inventory.list_flagged_breakage() == [("Sample Stout", 12)]
        assert inventory.total_breakage() == 12
        # a entrada não é bloqueada
        assert inventory.total_count() == 36

    def test_flag_is_idempotent_and_sticky(self, inventory):
        inventory.flag_breakage()
        inventory.flag_breakage()
        inventory.add_beer(_ipa())
        inventory.add_beer(_stout())
        assert inventory.is_breakage_flagged is True
        assert inventory.list_flagged_breakage() == [("Example IPA", 24), ("Sample Stout", 12)]
        assert inventory.total_breakage() == 36

    def test_rejected_add_records_no_breakage(self, inventory):
        inventory.flag_breakage()
        with pytest.raises(InvalidQuantity):
            inventory.add_beer(_ipa(quantity=0))
        assert inventory.list_flagged_breakage() == []
        assert inventory.total_breakage() == 0


class TestRemoveById:
    """Remoção por id."""

    def test_remove_decrements_counts(self, stocked):
        result = stocked.remove_by_id(1)
        assert result == {"id": 1, "name": "Example IPA", "quantity": 24}
        counts = stocked.counts_by_type()
        assert counts["Example IPA"] == 0
        assert counts["Total"] == 12
        assert [b.name for b in stocked.list_beers()] == ["Sample Stout"]

    def test_remove_unknown_id(self, stocked):
        counts = stocked.counts_by_type()
        with pytest.raises(NotFound):
            stocked.remove_by_id(99)
        assert stocked.counts_by_type() == counts
        assert len(stocked.list_beers()) == 2

    def test_ids_are_not_reused(self, stocked):
        stocked.remove_by_id(2)
        stocked.add_beer(_stout(name="Another Stout"))
        assert [b.id for b in stocked.list_beers()] == [1, 3]

    def test_exists_stays_true_after_last_removal(self, stocked):
        # chave do agregado é decrementada, não apagada
        stocked.remove_by_id(1)
        assert stocked.exists("Example IPA") is True
        assert stocked.counts_by_type()["Example IPA"] == 0

    def test_removed_name_can_be_added_again(self, stocked):
        stocked.remove_by_id(1)
        result = stocked.add_beer(_ipa(quantity=6))
        assert result["id"] == 3
        assert stocked.counts_by_type()["Example IPA"] == 6
        assert stocked.total_count() == 18


class TestEditBeer:
    """Edição no lugar."""

    def test_edit_unknown_name(self, stocked):
        beers = [(b.id, b.name, b.quantity) for b in stocked.list_beers()]
        with pytest.raises(NotFound):
            stocked.edit_beer("Nope", new_name="Other", quantity=1)
        assert [(b.id, b.name, b.quantity) for b in stocked.list_beers()] == beers

    def test_blank_strings_keep_current_values(self, stocked):
        stocked.edit_beer("Example IPA", new_name="  ", style="")
        beer = stocked.find_by_name("Example IPA")
        assert beer.style == "IPA"

    def test_numeric_fields_overwrite(self, stocked):
        stocked.edit_beer("Example IPA", alcohol_content=5.0, barcode=111111111111)
        beer = stocked.find_by_name("Example IPA")
        assert beer.alcohol_content == 5.0
        assert beer.barcode.value == 111111111111

    def test_quantity_change_updates_aggregates(self, stocked):
        result = stocked.edit_beer("Example IPA", quantity=30)
        assert result["quantity"] == 30
        counts = stocked.counts_by_type()
        assert counts["Example IPA"] == 30
        assert counts["Total"] == 42

    def test_quantity_zero_is_allowed(self, stocked):
        stocked.edit_beer("Sample Stout", quantity=0)
        assert stocked.total_count() == 24

    def test_negative_quantity_rejected(self, stocked):
        with pytest.raises(InvalidQuantity):
            stocked.edit_beer("Example IPA", new_name="Renamed", quantity=-1)
        assert stocked.find_by_name("Example IPA").quantity == 24
        assert stocked.total_count() == 36

    def test_rename_moves_counts(self, stocked):
        result = stocked.edit_beer("Example IPA", new_name="West Coast IPA")
        assert result["previous_name"] == "Example IPA"
        beer = stocked.get_by_id(1)
        assert beer.name == "West Coast IPA"
        counts = stocked.counts_by_type()
        assert counts["West Coast IPA"] == 24
        assert counts["Example IPA"] == 0
        assert counts["Total"] == 36

    def test_rename_into_existing_name_conflicts(self, stocked):
        counts = stocked.counts_by_type()
        with pytest.raises(Conflict):
            stocked.edit_beer("Example IPA", new_name="Sample Stout", quantity=1)
        assert stocked.counts_by_type() == counts
        assert stocked.get_by_id(1).name == "Example IPA"
        assert stocked.get_by_id(1).quantity == 24

    def test_rename_into_reserved_total_conflicts(self, stocked):
        counts = stocked.counts_by_type()
        with pytest.raises(Conflict):
            stocked.edit_beer("Example IPA", new_name="Total")
        assert stocked.counts_by_type() == counts
        assert stocked.total_count() == 36
        assert stocked.get_by_id(1).name == "Example IPA"

    def test_lookup_and_rename_are_stripped(self, stocked):
        stocked.edit_beer(" Example IPA ", new_name="  Hazy IPA ")
        assert stocked.get_by_id(1).name == "Hazy IPA"
        assert stocked.counts_by_type()["Hazy IPA"] == 24

    def test_size_is_replaced_without_conversion(self, stocked):
        original = stocked.find_by_name("Sample Stout").container_size
        stocked.edit_beer("Sample Stout", size=16, is_metric=False)
        beer = stocked.find_by_name("Sample Stout")
        assert beer.container_size == ContainerSize(False, 16)
        assert beer.container_size is not original
        assert original == ContainerSize(False, 12)

        stocked.edit_beer("Sample Stout", is_metric=True)
        assert beer.container_size == ContainerSize(True, 16)

    def test_edit_keeps_id_and_refreshes_date(self, stocked):
        beer = stocked.find_by_name("Example IPA")
        beer.updated_date = "2000-01-01 00:00:00"
        stocked.edit_beer("Example IPA", style="Hazy IPA")
        assert beer.id == 1
        assert beer.style == "Hazy IPA"
        assert beer.updated_date != "2000-01-01 00:00:00"


class TestQueries:
    """Consultas (somente leitura)."""

    def test_total_count_before_any_add(self, inventory):
        with pytest.raises(NotFound):
            inventory.total_count()

    def test_total_count_after_removing_everything(self, stocked):
        stocked.remove_by_id(1)
        stocked.remove_by_id(2)
        assert stocked.total_count() == 0

    def test_exists(self, stocked):
        assert stocked.exists("Sample Stout")
        assert stocked.exists("Total")
        assert not stocked.exists("Pilsner")

    def test_lookups(self, stocked):
        assert stocked.get_by_id(2).name == "Sample Stout"
        assert stocked.find_by_name("Example IPA").id == 1
        with pytest.raises(NotFound):
            stocked.get_by_id(3)
        with pytest.raises(NotFound):
            stocked.find_by_name("Pilsner")

    def test_queries_return_copies(self, stocked):
        stocked.list_beers().clear()
        stocked.counts_by_type()["Total"] = 0
        stocked.list_flagged_breakage().append(("x", 1))
        assert len(stocked.list_beers()) == 2
        assert stocked.total_count() == 36
        assert stocked.list_flagged_breakage() == []
