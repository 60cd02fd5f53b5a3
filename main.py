#!/usr/bin/env python3
"""StudyPlanner — entry point.

Run with:
    python main.py
    python -m studyplanner
"""

from studyplanner.__main__ import main


if __name__ == "__main__":
    main()
