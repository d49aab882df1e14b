"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): create, update, delete
- queries/   → Read operations (CQRS): list, get
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes) and Result variants

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Handlers return Result variants; they never raise for business outcomes
"""
