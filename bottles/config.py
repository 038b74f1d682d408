# bottles/config.py
"""
Configurações globais e valores padrão do inventário de garrafas.
"""

import os
from dataclasses import dataclass
from pathlib import Path


# Diretório padrão dos logs (pode ser sobrescrito via BOTTLES_LOG_DIR)
LOGS_DIR = Path(os.environ.get("BOTTLES_LOG_DIR", Path(__file__).parent / "logs"))


@dataclass
class DefaultConfig:
    """Valores padrão para parâmetros do sistema."""
    ml_per_fl_oz: float = 29.5735  # 1 fl oz = 29.5735 ml
    total_key: str = "Total"  # Chave reservada do agregado geral
    date_format: str = "%Y-%m-%d %H:%M:%S"


# Instância global dos valores padrão
DEFAULTS = DefaultConfig()
