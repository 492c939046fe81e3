"""
Grove Weather Station

Polls the Grove Starter Kit sensors on an Intel Galileo / Edison board:
- Temperature - LCD text, backlight tint, running min/max
- Light - LCD text
- Air quality - warm-up, classification, LCD text
"""

__version__ = "1.0.0"
