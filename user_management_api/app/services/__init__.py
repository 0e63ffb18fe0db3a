"""
Service layer abstraction.

Services hold the business rules of a domain and talk to storage only
through a repository object passed in at construction time.  That
keeps the rules independent of whether users live in SQLite or in
memory.
"""
