#!/usr/bin/env python3
"""
Print the recent public GitHub activity of a user.

Usage:
  python scripts/github_activity.py <username>

The last 30 events reported by https://api.github.com/users/<username>/events
are listed oldest-first, one line per push, opened issue, star, fork,
created or deleted repository, and opened pull request.
"""

from activity_cli.controller import run

if __name__ == "__main__":
    run()
