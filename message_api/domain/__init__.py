"""
DOMAIN LAYER - Messages and their business rules

This layer contains:
- Entities: Business objects with identity (Message)
- Value Objects: Immutable types (OrganizationId, MessageId)
- Ports: Interfaces that infrastructure implements (MessageRepository)
- Services: Pure domain logic (no I/O), e.g. field validation rules

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
