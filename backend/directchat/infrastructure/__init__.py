"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- security/: Password hashing (bcrypt) and session tokens (JWT)
- storage/: File system operations (FileStorageService)
"""
