"""
repositories/ - Table Accessors
===============================
One accessor class per table. Each accessor owns the SQL for its table,
runs it over a caller-supplied DB-API connection and maps rows to models.
"""
