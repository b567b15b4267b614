"""Routing — path template compiler, route table and best-match selection.

Routes are registered during setup and matched per request. Matching
never writes to the table.
"""
