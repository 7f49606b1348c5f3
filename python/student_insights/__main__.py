"""
Entry point for student_insights.
Run with: python -m student_insights
"""
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
