"""
Service layer abstraction.

Each service encapsulates the business logic for one resource and is
the only code allowed to write to that resource's collection.  API
handlers call services and never touch the store directly.
"""
