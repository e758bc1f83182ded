"""
Command Line Interface Package

Entry point (csvsplit) and the interactive post command.

Command Structure:
- csvsplit: Main entry point with utility commands (version, config)
- csvsplit post: Select budget, account and CSV rows, then post one split transaction
"""
