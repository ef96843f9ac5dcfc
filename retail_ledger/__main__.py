"""Run the retail ledger console: python -m retail_ledger"""

from .console import main


if __name__ == "__main__":
    main()
