"""
DOMAIN LAYER - The Heart of Your Application

This layer contains:
- Entities: Business objects with identity (User, Conversation, Message, File)
- Value Objects: Immutable types (UserId, ConversationId, FileLocator)
- Ports: Interfaces/abstractions that infrastructure implements
- Services: Pure domain logic (no I/O), e.g. the authorization policy
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
