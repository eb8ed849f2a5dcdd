"""
CLI entry point for the geohash-grid command.

This provides a user-friendly command-line interface for the geohash codec.
"""
from geohash_grid.runner import main

# Re-export main for the console_scripts entry point
__all__ = ['main']

if __name__ == '__main__':
    main()
