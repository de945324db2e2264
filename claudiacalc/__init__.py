"""ClaudiaCalc — a four-register calculator for numbers and strings.

Registers A-D each hold a number or a piece of text. The operators + - * /
work on any two registers, with meanings that depend on the operand types:
numbers do arithmetic, strings concatenate, subtract a substring or repeat.

Usage:
    python -m claudiacalc run               # Interactive session
    python -m claudiacalc apply '*' 3 ab    # One-shot: prints ababab
    python -m claudiacalc menu              # Show the command menu
"""

__version__ = "2.0"
