"""TrimSheet: weight and balance index charts and radioactive cargo clearance.

Calculation entry points live in the subpackages:

    trimsheet.reference    dry-operating lookup, water index, reference tables
    trimsheet.balance      zone contributions and trim line projection
    trimsheet.radioactive  Transport Index ladder and clearance check
"""

__version__ = "0.3.0"
