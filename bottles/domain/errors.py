# bottles/domain/errors.py
"""
Erros de domínio do inventário.

Todos são recuperáveis: a operação é rejeitada, o estado permanece
inalterado e a mensagem é exibida pelo chamador (CLI/TUI).
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base para erros de operações do inventário."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidQuantity(InventoryError):
    """Quantidade inválida (add com quantidade <= 0, edit com quantidade negativa)."""


class DuplicateName(InventoryError):
    """Já existe uma cerveja ativa com o mesmo nome."""


class NotFound(InventoryError):
    """Nome ou id não encontrado no inventário."""


class Conflict(InventoryError):
    """Renomear colidiria com outra cerveja ativa."""
