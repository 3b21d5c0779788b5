"""Test package for the sliding window counter.

The tests drive time through ``FakeClock`` wherever exact timing matters
and only use the real clock for the threaded checks.  To run them,
execute ``pytest`` from the project root.
"""
