"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- users/         → list_users
- conversations/ → list_conversations
- chat/          → get_messages
- files/         → get_file (info + download)
"""
