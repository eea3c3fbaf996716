#!/usr/bin/env python
"""CLI for Pulse Report.

Allows running from a checkout with ``python main.py``; delegates to
``pulse_report.cli.main``.
"""

from pulse_report.cli import main

if __name__ == "__main__":
    main()
