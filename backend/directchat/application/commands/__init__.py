"""
COMMANDS - Write operations (CQRS)

Subfolders:
- auth/          → register_user, login_user
- conversations/ → create_conversation
- chat/          → send_message
- files/         → upload_file
"""
