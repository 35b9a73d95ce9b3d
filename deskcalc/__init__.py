"""deskcalc: a key-press desk calculator.

A small state machine turns digit, decimal-point, operator and command key
presses into a running display value. Operators chain left to right with no
precedence (3 + 4 × 2 = 14), the way a basic desk calculator behaves.

Usage:
    python -m deskcalc press 3 + 4 x 2 =     # Print the final display
    python -m deskcalc repl                   # Interactive session
    python -m deskcalc keys                   # Show the keypad
"""
