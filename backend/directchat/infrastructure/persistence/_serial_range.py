"""
Serial ids are Postgres INT columns; values outside their range can never
match a row, and Prisma rejects them outright. Repositories check first and
answer "not found" instead.
"""

PG_INT_MAX = 2**31 - 1


def storable(*values: int) -> bool:
    return all(1 <= value <= PG_INT_MAX for value in values)
