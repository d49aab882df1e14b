"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- Domain says: "I need to look up messages by title"
- Infrastructure implements: "I'll use PostgreSQL" (or an in-memory dict)

Subfolders:
- repositories/  → Data persistence interfaces
"""
