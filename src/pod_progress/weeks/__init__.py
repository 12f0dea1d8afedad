"""Quarter-week calendar.

Converts between quarter-relative week numbers and calendar date ranges for a
configurable week-start day, and enumerates the weeks that have begun.
"""
