"""
Pydantic data models for datehelper: calendar components, computation results
and date-time intervals.
"""
