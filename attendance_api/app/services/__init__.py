"""
Service layer abstraction.

Services hold the business logic and work against an explicit storage
handle, keeping the API handlers thin adapters between HTTP and the
record operations.
"""
