"""Repo entrypoint.

Keep this file tiny so `python main.py` runs the soak simulation, while the
real implementation lives in the `fault_throttle` package.
"""

from fault_throttle.main import main


if __name__ == "__main__":
    raise SystemExit(main())
