"""
tdm - terminal session launcher
-------------------------------
Reads named commands from tdm.conf, draws them as a centered box on the
terminal and launches the selected one.

Run it with:
    tdm
or:
    python3 -m tdm
"""

__version__ = "1.0.0"
