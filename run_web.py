#!/usr/bin/env python
"""Development server entrypoint for Budget Planner."""

from budgetplanner.cli import main

if __name__ == "__main__":
    main()
