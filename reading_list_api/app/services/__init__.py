"""
Service layer abstraction.

Each service encapsulates the business logic for a domain and works
on a store handed to it, so API handlers never touch the underlying
collection directly.
"""
