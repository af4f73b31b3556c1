"""
db/ - Database Layer
====================
Handles PostgreSQL connections, schema initialization, the generic table
contract, and the error raised for unexpected database failures.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
