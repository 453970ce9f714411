"""
Utility functions module.

Common helpers shared across the engine.

Time Semantics:
- The engine never reads the wall clock; "today" is always passed in
- Timestamps from request history are reduced to calendar dates
- Weeks start on Monday
"""
