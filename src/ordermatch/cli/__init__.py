"""
Command Line Interface Package

Command-line front end for the order matching engine.

Command Structure:
- ordermatch: Main entry point with utility commands (version, config)
- ordermatch match: Aggregate an order sheet and export the CSV result
- ordermatch rules: Inspect and edit rule groups, backups and restores
- ordermatch categories: Manage the target name list
"""
