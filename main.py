#!/usr/bin/env python
"""CLI for Fakenewsdle dataset builders and the daily headline game."""

from fakenewsdle.cli import main

if __name__ == "__main__":
    main()
