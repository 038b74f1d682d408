# app.py
"""
Entrypoint da aplicação.

Uso:
  python app.py tui
  python app.py demo
  python app.py demo --no-breakage
  python app.py convert "12 fl oz"
  python app.py --log tui
  python app.py --verbose demo
"""

from bottles.adapters.cli import main

if __name__ == "__main__":
    main()
