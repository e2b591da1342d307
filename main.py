#!/usr/bin/env python3
"""RadialClock entry point.

Run with:
    python main.py
    python -m radialclock
"""

from radialclock.__main__ import main


if __name__ == "__main__":
    main()
