# bottles/infra/logger.py
"""
Sistema de logging para as operações do inventário.

Este módulo configura e fornece loggers para registrar as operações
do inventário: movimentações de estoque, breakage e eventos do sistema.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional

from bottles.config import LOGS_DIR


# Flag global para habilitar/desabilitar logging
ENABLE_LOGGING = False
# Flag global para habilitar/desabilitar prints/output
ENABLE_OUTPUT = False

def print_system(*args, **kwargs):
    """Print controlado pelo ENABLE_OUTPUT."""
    if ENABLE_OUTPUT:
        print(*args, **kwargs)

# Configuração base dos loggers
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logger(name: str, log_file: str, level: int = logging.INFO) -> logging.Logger:
    """
    Configura um logger específico com arquivo de saída.

    O arquivo só é aberto na primeira mensagem emitida (``delay=True``).

    Args:
        name: Nome do logger
        log_file: Caminho do arquivo de log
        level: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Logger configurado
    """
    log_path = Path(log_file)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Remove todos os handlers existentes
    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    file_handler = _LazyDirFileHandler(log_path, encoding='utf-8', delay=True)
    file_handler.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    file_handler.setFormatter(formatter)

    logger.addHandler(file_handler)

    return logger


class _LazyDirFileHandler(logging.FileHandler):
    """FileHandler que cria o diretório de logs apenas ao abrir o arquivo."""

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


# Loggers específicos para cada operação
transaction_logger = setup_logger(
    'bottles.transactions',
    str(LOGS_DIR / 'transactions.log')
)

stock_logger = setup_logger(
    'bottles.stock',
    str(LOGS_DIR / 'stock.log')
)

breakage_logger = setup_logger(
    'bottles.breakage',
    str(LOGS_DIR / 'breakage.log')
)

system_logger = setup_logger(
    'bottles.system',
    str(LOGS_DIR / 'system.log')
)

def log_transaction(operation: str, data: Dict[str, Any], result: Optional[Any] = None, error: Optional[str] = None) -> None:
    """
    Registra uma transação completa no log.

    Args:
        operation: Tipo de operação (add_beer, remove_beer, edit_beer)
        data: Dados da transação
        result: Resultado da operação (opcional)
        error: Mensagem de erro (opcional)
    """
    if not ENABLE_LOGGING:
        return
    if error:
        transaction_logger.error(f"TRANSACTION_FAILED: {operation} - {error} - Data: {data}")
    else:
        transaction_logger.info(f"TRANSACTION_SUCCESS: {operation} - Result: {result} - Data: {data}")

def log_stock(action: str, name: str, quantity: int, beer_id: Optional[int] = None, **kwargs) -> None:
    """
    Log específico para movimentações de estoque.

    Args:
        action: Ação realizada (add, remove, edit)
        name: Nome da cerveja
        quantity: Quantidade movimentada
        beer_id: Id atribuído pelo inventário (opcional)
        **kwargs: Dados adicionais
    """
    if not ENABLE_LOGGING:
        return
    log_data = {
        "action": action,
        "name": name,
        "quantity": quantity,
        "id": beer_id,
        **kwargs
    }
    stock_logger.info(f"STOCK_{action.upper()}: {log_data}")

def log_breakage(name: str, quantity: int, total_breakage: int) -> None:
    """
    Log de unidades registradas como breakage.

    Args:
        name: Nome da cerveja
        quantity: Quantidade registrada nesta operação
        total_breakage: Total acumulado após a operação
    """
    if not ENABLE_LOGGING:
        return
    breakage_logger.warning(
        f"BREAKAGE: {{'name': {name!r}, 'quantity': {quantity}, 'total_breakage': {total_breakage}}}"
    )

def log_system_event(event: str, details: Dict[str, Any] = None, level: str = "info") -> None:
    """
    Log para eventos do sistema.

    Args:
        event: Descrição do evento
        details: Detalhes adicionais (opcional)
        level: Nível do log (info, warning, error)
    """
    if not ENABLE_LOGGING:
        return
    log_data = {
        "event": event,
        "details": details or {},
        "timestamp": datetime.now().isoformat(),
    }
    log_method = getattr(system_logger, level.lower(), system_logger.info)
    log_method(f"SYSTEM_EVENT: {event} - {log_data}")

def get_log_summary(log_type: str = "transactions", lines: int = 100) -> Optional[str]:
    """
    Obtém um resumo dos logs recentes.

    Args:
        log_type: Tipo de log (transactions, stock, breakage, system)
        lines: Número de linhas a retornar

    Returns:
        Conteúdo do log como string
    """
    if not ENABLE_LOGGING:
        return None

    log_files = {
        "transactions": LOGS_DIR / "transactions.log",
        "stock": LOGS_DIR / "stock.log",
        "breakage": LOGS_DIR / "breakage.log",
        "system": LOGS_DIR / "system.log",
    }

    log_file = log_files.get(log_type)
    if not log_file or not log_file.exists():
        return f"Log {log_type} não encontrado."

    try:
        with open(log_file, 'r', encoding='utf-8') as f:
            all_lines = f.readlines()
            recent_lines = all_lines[-lines:] if len(all_lines) > lines else all_lines
            return ''.join(recent_lines)
    except OSError as e:
        return f"Erro ao ler log {log_type}: {str(e)}"
