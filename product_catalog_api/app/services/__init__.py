"""
Service layer abstraction.

Each service sits between the HTTP endpoints and a repository.  The
endpoints only see ``ProductServiceInterface``, so tests can swap the
service (or the repository underneath it) for an in‑memory double.
"""
