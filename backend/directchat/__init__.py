"""directchat - backend for a two-party direct messaging application."""
