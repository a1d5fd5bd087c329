"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): register, login, create conversation,
               send message, upload file
- queries/   → Read operations (CQRS): list users, list conversations,
               list messages, file info and download
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, the authorization policy
"""
