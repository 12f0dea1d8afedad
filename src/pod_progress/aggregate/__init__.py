"""Progress aggregation helpers.

This package derives display-ready numbers from goal, milestone and check-in
snapshots: scope filters, completion rates, weekly milestone breakdowns,
member rankings and pandas tables built from them.
"""
